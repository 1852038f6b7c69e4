"""
Slicing module - Layered toolpath generation.

- AdditiveGenerator: bottom-up planar layers (deposition order)
- SubtractiveGenerator: top-down z-level contours (removal order)
- z_levels: shared stepping used by both strategies
- get_generator / generate_toolpaths: dispatch by strategy name or config type
"""

from layerpath.slicing.additive import AdditiveGenerator
from layerpath.slicing.generator import ToolpathGenerator
from layerpath.slicing.generator_factory import (
    GENERATOR_REGISTRY,
    generate_toolpaths,
    get_generator,
)
from layerpath.slicing.layers import CANONICAL_PLANE_Z, slice_direct, slice_layer
from layerpath.slicing.stepping import StepDirection, Z_TOLERANCE, layer_count, z_levels
from layerpath.slicing.subtractive import SubtractiveGenerator
from layerpath.slicing.toolpath import ToolpathSegment, ToolpathSet

__all__ = [
    "AdditiveGenerator",
    "SubtractiveGenerator",
    "ToolpathGenerator",
    "GENERATOR_REGISTRY",
    "generate_toolpaths",
    "get_generator",
    "CANONICAL_PLANE_Z",
    "slice_direct",
    "slice_layer",
    "StepDirection",
    "Z_TOLERANCE",
    "layer_count",
    "z_levels",
    "ToolpathSegment",
    "ToolpathSet",
]
