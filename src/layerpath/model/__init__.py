"""
Model module - Solid model boundary and bundled adapters.
"""

from layerpath.model.mesh_solid import MeshSolid
from layerpath.model.prism_solid import PrismSolid, SolidAssembly
from layerpath.model.solid import SolidModel, validate_bounds

__all__ = [
    "MeshSolid",
    "PrismSolid",
    "SolidAssembly",
    "SolidModel",
    "validate_bounds",
]
