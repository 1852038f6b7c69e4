"""
Additive (layer deposition) toolpath generation.

Sweeps bottom-up from the model's lowest point to its highest, one plane per
layer, matching the order in which material is deposited.
"""

from layerpath.core.config import AdditiveConfig
from layerpath.slicing.generator import ToolpathGenerator
from layerpath.slicing.stepping import StepDirection


class AdditiveGenerator(ToolpathGenerator[AdditiveConfig]):
    """
    Bottom-up planar slicer.

    Usage::

        gen = AdditiveGenerator()
        toolpath = gen.generate(solid, AdditiveConfig(layer_height=0.2))
        # toolpath.z_levels() is ascending
    """

    name = "additive"
    config_type = AdditiveConfig
    direction = StepDirection.ASCENDING

    def segment_metadata(self, config: AdditiveConfig) -> dict:
        return {"operation": "deposition"}
