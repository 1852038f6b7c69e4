"""
Subtractive (z-level) toolpath generation.

Sweeps top-down from the model's highest point to its lowest, matching the
order in which material is removed. Every level re-slices the original
model; no stock or removal state is tracked between levels.

The curves are the raw part boundary at each level. A tool-radius offset
pass must be applied before they can be used for physical machining, which
is why every segment is flagged with ``requires_offset``.
"""

from layerpath.core.config import SubtractiveConfig
from layerpath.slicing.generator import ToolpathGenerator
from layerpath.slicing.stepping import StepDirection


class SubtractiveGenerator(ToolpathGenerator[SubtractiveConfig]):
    """
    Top-down contour slicer.

    Usage::

        gen = SubtractiveGenerator()
        toolpath = gen.generate(solid, SubtractiveConfig(step_down=2.0))
        # toolpath.z_levels() is descending
    """

    name = "subtractive"
    config_type = SubtractiveConfig
    direction = StepDirection.DESCENDING

    def segment_metadata(self, config: SubtractiveConfig) -> dict:
        return {"operation": "contour", "requires_offset": True}

    def toolpath_metadata(self, config: SubtractiveConfig) -> dict:
        return {"requires_offset": True}
