"""
LayerPath - Layered cross-sectioning and toolpath assembly.

Slices solid models into ordered planar layers for additive (bottom-up)
and subtractive (top-down) manufacturing.
"""

__version__ = "0.1.0"
__author__ = "LayerPath Contributors"

from layerpath.core.config import AdditiveConfig, SubtractiveConfig
from layerpath.slicing.additive import AdditiveGenerator
from layerpath.slicing.subtractive import SubtractiveGenerator
from layerpath.slicing.toolpath import ToolpathSegment, ToolpathSet

__all__ = [
    "__version__",
    "AdditiveConfig",
    "SubtractiveConfig",
    "AdditiveGenerator",
    "SubtractiveGenerator",
    "ToolpathSegment",
    "ToolpathSet",
]
