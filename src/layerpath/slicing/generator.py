"""
Toolpath generator abstraction.

A generator turns a solid model and its strategy-specific configuration into
a ToolpathSet. Concrete strategies differ only in their sweep direction,
their configuration type and the metadata they attach; validation, stepping
and per-layer slicing are shared here.

New strategies are added by subclassing ToolpathGenerator with their own
config type, never by editing existing strategies.
"""

import logging
from abc import ABC
from concurrent.futures import ThreadPoolExecutor
from typing import ClassVar, Generic, List, TypeVar

from layerpath.core.config import SlicingConfig
from layerpath.core.exceptions import ConfigurationError
from layerpath.core.geometry import ZBounds
from layerpath.model.solid import SolidModel, validate_bounds
from layerpath.slicing.layers import slice_layer
from layerpath.slicing.stepping import StepDirection, z_levels
from layerpath.slicing.toolpath import ToolpathSegment, ToolpathSet

logger = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT", bound=SlicingConfig)


class ToolpathGenerator(ABC, Generic[ConfigT]):
    """
    Abstract base class for layer-sweeping toolpath generators.

    Subclasses set the class attributes below. Generators hold no state
    between calls; one instance may serve any number of concurrent
    ``generate`` calls.

    Attributes:
        name: Strategy name recorded on the produced ToolpathSet
        config_type: Configuration class accepted by ``generate``
        direction: Sweep direction through the model
    """

    name: ClassVar[str] = "base"
    config_type: ClassVar[type[SlicingConfig]] = SlicingConfig
    direction: ClassVar[StepDirection] = StepDirection.ASCENDING

    def generate(self, model: SolidModel, config: ConfigT) -> ToolpathSet:
        """
        Slice ``model`` into one segment per plane.

        Args:
            model: Solid to slice; never modified
            config: Strategy configuration (must be ``config_type``)

        Returns:
            ToolpathSet with segments in this strategy's sweep order

        Raises:
            ConfigurationError: Wrong config type, non-positive layer height,
                or an empty z range override
            DegenerateModelError: Empty model or invalid bounds
            SlicingError: The model's section query failed
        """
        self.validate_config(config)
        bounds = self.resolve_bounds(model, config)
        levels = z_levels(bounds.min_z, bounds.max_z, config.layer_height, self.direction)

        logger.info(
            "Generating %s toolpaths: %d layers from z=%.4f to z=%.4f (layer height %.4f)",
            self.name,
            len(levels),
            levels[0],
            levels[-1],
            config.layer_height,
        )

        toolpath = ToolpathSet(
            strategy=self.name,
            layer_height=config.layer_height,
            metadata={
                "direction": self.direction.value,
                "min_z": bounds.min_z,
                "max_z": bounds.max_z,
                **self.toolpath_metadata(config),
            },
        )
        for segment in self._slice_levels(model, levels, config):
            toolpath.add_segment(segment)

        logger.info(
            "%s toolpaths complete: %d segments, %d empty",
            self.name.capitalize(),
            len(toolpath),
            len(toolpath.empty_layers()),
        )
        return toolpath

    def validate_config(self, config: ConfigT) -> None:
        """Fail fast on a config that cannot drive this strategy."""
        if not isinstance(config, self.config_type):
            raise ConfigurationError(
                f"{type(self).__name__} requires {self.config_type.__name__}",
                details={"got": type(config).__name__},
            )
        if not config.layer_height > 0:
            raise ConfigurationError(
                "layer_height must be a positive number",
                details={"layer_height": config.layer_height},
            )
        if config.min_z is not None and config.max_z is not None and config.min_z > config.max_z:
            raise ConfigurationError(
                "Configured min_z is above max_z",
                details={"min_z": config.min_z, "max_z": config.max_z},
            )

    def resolve_bounds(self, model: SolidModel, config: ConfigT) -> ZBounds:
        """Model bounds, clipped by the config's optional z range."""
        bounds = validate_bounds(model)
        min_z = bounds.min_z if config.min_z is None else max(bounds.min_z, config.min_z)
        max_z = bounds.max_z if config.max_z is None else min(bounds.max_z, config.max_z)
        if min_z > max_z:
            raise ConfigurationError(
                "Configured z range does not overlap the model",
                details={
                    "model": (bounds.min_z, bounds.max_z),
                    "config": (config.min_z, config.max_z),
                },
            )
        return ZBounds(min_z, max_z)

    def segment_metadata(self, config: ConfigT) -> dict:
        """Metadata attached to every segment. Override in subclasses."""
        return {}

    def toolpath_metadata(self, config: ConfigT) -> dict:
        """Metadata attached to the ToolpathSet. Override in subclasses."""
        return {}

    def _slice_levels(
        self, model: SolidModel, levels: List[float], config: ConfigT
    ) -> List[ToolpathSegment]:
        metadata = self.segment_metadata(config)

        if config.max_workers <= 1 or len(levels) < 2:
            return [
                slice_layer(model, z, index, metadata)
                for index, z in enumerate(levels)
            ]

        # map() yields results in submission order
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            return list(
                pool.map(
                    lambda item: slice_layer(model, item[1], item[0], metadata),
                    enumerate(levels),
                )
            )
