"""
Core module - Shared utilities, configuration, and base types.
"""

from layerpath.core.config import (
    AdditiveConfig,
    ConfigManager,
    SlicingConfig,
    StrategyProfile,
    SubtractiveConfig,
    build_config,
    load_config,
)
from layerpath.core.exceptions import (
    LayerPathError,
    ConfigurationError,
    GeometryError,
    DegenerateModelError,
    SlicingError,
)
from layerpath.core.geometry import BoundaryCurve, ZBounds

__all__ = [
    # Config
    "AdditiveConfig",
    "ConfigManager",
    "SlicingConfig",
    "StrategyProfile",
    "SubtractiveConfig",
    "build_config",
    "load_config",
    # Exceptions
    "LayerPathError",
    "ConfigurationError",
    "GeometryError",
    "DegenerateModelError",
    "SlicingError",
    # Geometry
    "BoundaryCurve",
    "ZBounds",
]
