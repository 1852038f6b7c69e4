"""
Factory for instantiating toolpath generators by strategy name.

Provides a registry of available strategies, a lookup by name, and a
dispatcher that picks the generator matching a configuration's type.
"""

import logging
from typing import Dict, Type

from layerpath.core.config import SlicingConfig
from layerpath.core.exceptions import ConfigurationError
from layerpath.model.solid import SolidModel
from layerpath.slicing.additive import AdditiveGenerator
from layerpath.slicing.generator import ToolpathGenerator
from layerpath.slicing.subtractive import SubtractiveGenerator
from layerpath.slicing.toolpath import ToolpathSet

logger = logging.getLogger(__name__)

# Strategy name -> generator class mapping
GENERATOR_REGISTRY: Dict[str, Type[ToolpathGenerator]] = {
    "additive": AdditiveGenerator,
    "subtractive": SubtractiveGenerator,
}


def get_generator(strategy: str) -> ToolpathGenerator:
    """
    Create a generator instance for the given strategy.

    Args:
        strategy: Name of the strategy; one of the keys in
            ``GENERATOR_REGISTRY`` ('additive', 'subtractive').

    Returns:
        An instance of the requested generator class.

    Raises:
        ConfigurationError: If *strategy* is not found in the registry.

    Examples:
        >>> gen = get_generator("additive")
        >>> gen = get_generator(" Subtractive ")
    """
    strategy_lower = strategy.strip().lower()

    if strategy_lower not in GENERATOR_REGISTRY:
        available = ", ".join(sorted(GENERATOR_REGISTRY.keys()))
        raise ConfigurationError(
            f"Unknown slicing strategy '{strategy}'. "
            f"Available strategies: {available}"
        )

    generator_cls = GENERATOR_REGISTRY[strategy_lower]
    logger.debug("Creating generator: strategy='%s', class=%s", strategy_lower, generator_cls.__name__)
    return generator_cls()


def generate_toolpaths(model: SolidModel, config: SlicingConfig) -> ToolpathSet:
    """
    Run the generator whose config type matches ``config``.

    Raises:
        ConfigurationError: If no registered strategy accepts this config type
    """
    for generator_cls in GENERATOR_REGISTRY.values():
        if type(config) is generator_cls.config_type:
            return generator_cls().generate(model, config)

    raise ConfigurationError(
        f"No strategy accepts {type(config).__name__}",
        details={"available": sorted(GENERATOR_REGISTRY)},
    )
