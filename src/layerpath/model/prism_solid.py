"""
Extruded-polygon solids backed by shapely.

A PrismSolid is a planar footprint swept straight up between two heights.
Its sections are exact (the footprint's rings at any z inside the extrusion),
which makes it useful for fixtures, plate-like parts and tests.
"""

from typing import Iterable, Sequence

import numpy as np
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.polygon import orient

from layerpath.core.exceptions import DegenerateModelError, GeometryError
from layerpath.core.geometry import BoundaryCurve, ZBounds


class PrismSolid:
    """
    Vertical extrusion of a shapely (Multi)Polygon.

    Attributes:
        footprint: Cross-section shared by every plane inside the prism
        z_min: Bottom of the extrusion (mm)
        z_max: Top of the extrusion (mm)
    """

    def __init__(self, footprint: Polygon | MultiPolygon, z_min: float, z_max: float):
        if not isinstance(footprint, (Polygon, MultiPolygon)):
            raise GeometryError(
                f"Footprint must be a Polygon or MultiPolygon, got {type(footprint).__name__}"
            )
        self.footprint = footprint
        self.z_min = float(z_min)
        self.z_max = float(z_max)

    @classmethod
    def rectangle(
        cls,
        width: float,
        depth: float,
        z_min: float,
        z_max: float,
        origin: Sequence[float] = (0.0, 0.0),
    ) -> "PrismSolid":
        """Rectangular block with its minimum xy corner at ``origin``."""
        x0, y0 = origin
        footprint = Polygon(
            [(x0, y0), (x0 + width, y0), (x0 + width, y0 + depth), (x0, y0 + depth)]
        )
        return cls(footprint, z_min, z_max)

    @property
    def is_empty(self) -> bool:
        return bool(self.footprint.is_empty)

    def _polygons(self) -> Iterable[Polygon]:
        if isinstance(self.footprint, MultiPolygon):
            return self.footprint.geoms
        return [self.footprint]

    def bounds(self) -> ZBounds:
        return ZBounds(self.z_min, self.z_max)

    def slice_at(self, plane_z: float) -> list[BoundaryCurve]:
        if self.is_empty or not (self.z_min <= plane_z <= self.z_max):
            return []

        curves = []
        for poly in self._polygons():
            # Exterior counter-clockwise, holes clockwise
            poly = orient(poly, sign=1.0)
            curves.append(BoundaryCurve.from_xy(np.asarray(poly.exterior.coords), closed=True))
            for ring in poly.interiors:
                curves.append(BoundaryCurve.from_xy(np.asarray(ring.coords), closed=True))
        return curves

    def translate(self, dz: float) -> "PrismSolid":
        return PrismSolid(self.footprint, self.z_min + dz, self.z_max + dz)


class SolidAssembly:
    """
    Several solids sliced as one model.

    Sections are the concatenation of every part's section, in part order.
    Parts are not merged, so overlapping parts yield overlapping curves.
    """

    def __init__(self, parts: Sequence):
        self.parts = list(parts)

    @property
    def is_empty(self) -> bool:
        return all(getattr(part, "is_empty", False) for part in self.parts)

    def bounds(self) -> ZBounds:
        """
        Z extent over the non-empty parts.

        Raises:
            DegenerateModelError: If every part is empty
        """
        extents = [
            part.bounds() for part in self.parts
            if not getattr(part, "is_empty", False)
        ]
        if not extents:
            raise DegenerateModelError("Assembly has no non-empty parts")
        return ZBounds(
            min(b.min_z for b in extents),
            max(b.max_z for b in extents),
        )

    def slice_at(self, plane_z: float) -> list[BoundaryCurve]:
        curves = []
        for part in self.parts:
            curves.extend(part.slice_at(plane_z))
        return curves

    def translate(self, dz: float) -> "SolidAssembly":
        return SolidAssembly([part.translate(dz) for part in self.parts])
