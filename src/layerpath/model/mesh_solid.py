"""
Triangle-mesh solid adapter backed by trimesh.

Wraps a closed ``trimesh.Trimesh`` so it satisfies the SolidModel protocol.
Sections are computed with ``Trimesh.section`` and each discrete polyline of
the resulting path becomes one BoundaryCurve.
"""

import logging
from pathlib import Path
from typing import Any, Sequence

import numpy as np
import trimesh

from layerpath.core.exceptions import DegenerateModelError, GeometryError
from layerpath.core.geometry import Z_TOLERANCE, BoundaryCurve, ZBounds

logger = logging.getLogger(__name__)

_Z_AXIS = np.array([0.0, 0.0, 1.0])


class MeshSolid:
    """
    SolidModel implementation for triangle meshes.

    The wrapped mesh is treated as immutable: ``translate`` returns a new
    MeshSolid around a translated copy.

    Usage::

        solid = MeshSolid.box(extents=(10, 10, 10), origin=(0, 0, 0))
        curves = solid.slice_at(5.0)
    """

    SUPPORTED_FORMATS = {".stl", ".obj", ".ply", ".off", ".glb", ".gltf"}

    def __init__(self, mesh: trimesh.Trimesh):
        if not isinstance(mesh, trimesh.Trimesh):
            raise GeometryError(
                f"Expected a trimesh.Trimesh, got {type(mesh).__name__}"
            )
        self.mesh = mesh

    @classmethod
    def box(
        cls,
        extents: Sequence[float] = (10.0, 10.0, 10.0),
        origin: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> "MeshSolid":
        """
        Axis-aligned box with its minimum corner at ``origin``.

        Args:
            extents: Box size along x, y, z (mm)
            origin: Minimum corner (mm)
        """
        extents_arr = np.asarray(extents, dtype=float)
        mesh = trimesh.creation.box(extents=extents_arr)
        mesh.apply_translation(np.asarray(origin, dtype=float) + extents_arr / 2.0)
        return cls(mesh)

    @classmethod
    def load(cls, file_path: str | Path, **kwargs: Any) -> "MeshSolid":
        """
        Load a mesh file (STL, OBJ, PLY, ...).

        Scenes are flattened into a single mesh.

        Raises:
            GeometryError: If the file is missing, unsupported or unreadable
        """
        path = Path(file_path)

        if not path.exists():
            raise GeometryError(f"File not found: {path}")

        if path.suffix.lower() not in cls.SUPPORTED_FORMATS:
            raise GeometryError(
                f"Unsupported format: {path.suffix}. "
                f"Supported formats: {sorted(cls.SUPPORTED_FORMATS)}"
            )

        try:
            loaded = trimesh.load(str(path), **kwargs)
        except Exception as e:
            raise GeometryError(f"Failed to load geometry from {path}: {e}") from e

        if isinstance(loaded, trimesh.Scene):
            meshes = [
                geom for geom in loaded.geometry.values()
                if isinstance(geom, trimesh.Trimesh)
            ]
            if not meshes:
                raise GeometryError(f"Scene contains no triangle meshes: {path}")
            mesh = trimesh.util.concatenate(meshes)
        elif isinstance(loaded, trimesh.Trimesh):
            mesh = loaded
        else:
            raise GeometryError(f"Unexpected geometry type: {type(loaded)}")

        logger.debug(
            "Loaded mesh %s: %d vertices, %d faces",
            path, len(mesh.vertices), len(mesh.faces),
        )
        return cls(mesh)

    @property
    def is_empty(self) -> bool:
        return bool(self.mesh.is_empty)

    def bounds(self) -> ZBounds:
        if self.is_empty:
            raise DegenerateModelError("Mesh has no geometry")
        box = self.mesh.bounds  # [[x_min, y_min, z_min], [x_max, y_max, z_max]]
        return ZBounds(float(box[0][2]), float(box[1][2]))

    def _section_height(self, plane_z: float) -> float:
        """
        Height actually passed to ``Trimesh.section``.

        A plane lying on a horizontal top or bottom face is moved inside the
        solid by ``Z_TOLERANCE``; trimesh drops coplanar faces, which would
        otherwise turn a touching plane into an empty section.
        """
        min_z, max_z = self.bounds()
        if max_z - min_z <= 2 * Z_TOLERANCE:
            return (min_z + max_z) / 2.0
        if abs(plane_z - max_z) <= Z_TOLERANCE:
            return max_z - Z_TOLERANCE
        if abs(plane_z - min_z) <= Z_TOLERANCE:
            return min_z + Z_TOLERANCE
        return plane_z

    def slice_at(self, plane_z: float) -> list[BoundaryCurve]:
        if self.is_empty:
            return []

        section = self.mesh.section(
            plane_origin=np.array([0.0, 0.0, self._section_height(plane_z)]),
            plane_normal=_Z_AXIS,
        )
        if section is None:
            return []

        curves = []
        for polyline in section.discrete:
            if len(polyline) < 2:
                continue
            curves.append(BoundaryCurve.from_xy(polyline))
        return curves

    def translate(self, dz: float) -> "MeshSolid":
        moved = self.mesh.copy()
        moved.apply_translation([0.0, 0.0, dz])
        return MeshSolid(moved)
