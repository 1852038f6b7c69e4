"""
Geometry primitives shared by solid models and toolpaths.

Cross-sections are exchanged as BoundaryCurve values: ordered 2D vertex
sequences produced fresh by each slice call. Toolpaths lift them into 3D
using COMPAS points.
"""

from dataclasses import dataclass
from typing import NamedTuple, Sequence

import numpy as np
from compas.geometry import Point

# Heights closer than this are treated as the same plane
Z_TOLERANCE = 1e-7


class ZBounds(NamedTuple):
    """Vertical extent of a solid model."""

    min_z: float
    max_z: float

    @property
    def span(self) -> float:
        return self.max_z - self.min_z

    def contains(self, z: float) -> bool:
        return self.min_z <= z <= self.max_z


@dataclass(frozen=True)
class BoundaryCurve:
    """
    One loop (or open chain) of a planar cross-section.

    Attributes:
        points: Ordered (x, y) vertices. For closed curves the closing
                vertex is implicit and not repeated.
        closed: Whether the last vertex connects back to the first
    """

    points: tuple[tuple[float, float], ...]
    closed: bool = True

    @classmethod
    def from_xy(
        cls, coords: Sequence[Sequence[float]] | np.ndarray, closed: bool | None = None
    ) -> "BoundaryCurve":
        """
        Build a curve from an (n, 2) or (n, 3) coordinate array.

        Only the first two columns are kept. When ``closed`` is None, the
        curve is closed if its first and last vertices coincide; the
        duplicate closing vertex is dropped in either case.
        """
        xy = np.asarray(coords, dtype=float)
        if xy.ndim != 2 or xy.shape[1] < 2:
            raise ValueError(f"Expected (n, 2) coordinates, got shape {xy.shape}")
        xy = xy[:, :2]

        repeats_start = len(xy) > 2 and np.array_equal(xy[0], xy[-1])
        if closed is None:
            closed = bool(repeats_start)
        if repeats_start:
            xy = xy[:-1]

        return cls(
            points=tuple((float(x), float(y)) for x, y in xy),
            closed=closed,
        )

    def __len__(self) -> int:
        return len(self.points)

    def lift(self, z: float) -> list[Point]:
        """Tag every vertex with ``z``, producing 3D points."""
        return [Point(x, y, z) for x, y in self.points]

    def get_length(self) -> float:
        """Perimeter (closed) or polyline length (open)."""
        if len(self.points) < 2:
            return 0.0
        xy = np.asarray(self.points)
        if self.closed:
            xy = np.vstack([xy, xy[:1]])
        return float(np.linalg.norm(np.diff(xy, axis=0), axis=1).sum())
