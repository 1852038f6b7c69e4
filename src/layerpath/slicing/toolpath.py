"""
Toolpath data structures produced by the layer generators.

A ToolpathSet is an append-only, ordered list of ToolpathSegment objects,
one per slicing plane, in the order the generator produced them. Every
point of a segment carries that segment's z.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

import numpy as np
from compas.geometry import Point

from layerpath.core.geometry import BoundaryCurve


@dataclass
class ToolpathSegment:
    """
    One manufacturing pass at a fixed height.

    Attributes:
        z: Absolute height of the pass in model space (mm)
        layer_index: Position of the pass in generation order
        curves: Cross-section loops lifted to ``z``; may be empty
        closed: Closure flag for each entry of ``curves``
        metadata: Additional strategy-specific data
    """

    z: float
    layer_index: int
    curves: List[List[Point]] = field(default_factory=list)
    closed: List[bool] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    @classmethod
    def from_boundary_curves(
        cls,
        z: float,
        layer_index: int,
        curves: List[BoundaryCurve],
        metadata: dict | None = None,
    ) -> "ToolpathSegment":
        """Lift planar boundary curves to height ``z``."""
        return cls(
            z=z,
            layer_index=layer_index,
            curves=[curve.lift(z) for curve in curves],
            closed=[curve.closed for curve in curves],
            metadata=dict(metadata or {}),
        )

    @property
    def is_empty(self) -> bool:
        """True when the plane produced no cross-section."""
        return not self.curves

    @property
    def point_count(self) -> int:
        return sum(len(curve) for curve in self.curves)

    def get_length(self) -> float:
        """Total length of all curves, including closing edges."""
        total_length = 0.0
        for points, closed in zip(self.curves, self.closed):
            if len(points) < 2:
                continue
            xyz = np.array([[p.x, p.y, p.z] for p in points])
            if closed:
                xyz = np.vstack([xyz, xyz[:1]])
            total_length += float(np.linalg.norm(np.diff(xyz, axis=0), axis=1).sum())
        return total_length


@dataclass
class ToolpathSet:
    """
    Ordered result of one ``generate`` call.

    Attributes:
        segments: Segments in generation order (ascending z for additive,
                  descending z for subtractive)
        strategy: Name of the strategy that produced the set
        layer_height: Nominal distance between planes (mm)
        metadata: Additional toolpath metadata
    """

    segments: List[ToolpathSegment] = field(default_factory=list)
    strategy: str = "additive"
    layer_height: float = 1.0
    metadata: dict = field(default_factory=dict)

    def add_segment(self, segment: ToolpathSegment) -> None:
        """Append a segment. Segments are never removed or reordered."""
        self.segments.append(segment)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[ToolpathSegment]:
        return iter(self.segments)

    def z_levels(self) -> List[float]:
        """Heights of all segments in generation order."""
        return [seg.z for seg in self.segments]

    def empty_layers(self) -> List[ToolpathSegment]:
        """Segments whose plane did not intersect the model."""
        return [seg for seg in self.segments if seg.is_empty]

    def get_total_length(self) -> float:
        """Calculate total toolpath length."""
        return sum(seg.get_length() for seg in self.segments)

    def get_bounds(self) -> tuple[Point, Point]:
        """
        Get bounding box of all toolpath points.

        Returns:
            Tuple of (min_point, max_point)

        Raises:
            ValueError: If the set contains no points
        """
        all_points = [p for seg in self.segments for curve in seg.curves for p in curve]
        if not all_points:
            raise ValueError("Toolpath set has no points")

        xs = [p.x for p in all_points]
        ys = [p.y for p in all_points]
        zs = [p.z for p in all_points]

        return Point(min(xs), min(ys), min(zs)), Point(max(xs), max(ys), max(zs))
