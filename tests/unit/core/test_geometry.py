"""
Tests for geometry module.
"""

import numpy as np
import pytest
from compas.geometry import Point

from layerpath.core.exceptions import ConfigurationError, DegenerateModelError, GeometryError, LayerPathError, SlicingError
from layerpath.core.geometry import BoundaryCurve, ZBounds


class TestZBounds:
    """Tests for ZBounds."""

    def test_span(self):
        assert ZBounds(-2.0, 3.0).span == 5.0

    def test_contains(self):
        bounds = ZBounds(0.0, 10.0)
        assert bounds.contains(0.0)
        assert bounds.contains(10.0)
        assert not bounds.contains(10.5)

    def test_unpacks(self):
        min_z, max_z = ZBounds(1.0, 2.0)
        assert (min_z, max_z) == (1.0, 2.0)


class TestBoundaryCurve:
    """Tests for BoundaryCurve."""

    def test_from_xy_detects_closure(self):
        curve = BoundaryCurve.from_xy([[0, 0], [1, 0], [1, 1], [0, 0]])
        assert curve.closed
        assert curve.points == ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))

    def test_from_xy_open(self):
        curve = BoundaryCurve.from_xy([[0, 0], [1, 0], [1, 1]])
        assert not curve.closed
        assert len(curve) == 3

    def test_from_xy_drops_z_column(self):
        curve = BoundaryCurve.from_xy(np.array([[0, 0, 5], [2, 0, 5], [2, 2, 5]]), closed=True)
        assert curve.points == ((0.0, 0.0), (2.0, 0.0), (2.0, 2.0))
        assert curve.closed

    def test_from_xy_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            BoundaryCurve.from_xy([1.0, 2.0, 3.0])

    def test_lift(self):
        curve = BoundaryCurve(points=((1.0, 2.0), (3.0, 4.0)), closed=False)
        points = curve.lift(7.5)
        assert all(isinstance(p, Point) for p in points)
        assert [(p.x, p.y, p.z) for p in points] == [(1.0, 2.0, 7.5), (3.0, 4.0, 7.5)]

    def test_length(self):
        square = BoundaryCurve(points=((0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)))
        assert square.get_length() == pytest.approx(8.0)
        assert BoundaryCurve(points=((0.0, 0.0),)).get_length() == 0.0


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_details_in_message(self):
        error = ConfigurationError("bad layer height", details={"layer_height": 0})
        assert str(error) == "bad layer height - Details: {'layer_height': 0}"

    def test_plain_message(self):
        assert str(GeometryError("no mesh")) == "no mesh"

    def test_hierarchy(self):
        assert issubclass(DegenerateModelError, GeometryError)
        assert issubclass(GeometryError, LayerPathError)
        assert issubclass(SlicingError, LayerPathError)

    def test_slicing_error_carries_z(self):
        error = SlicingError("failed", z=2.5)
        assert error.z == 2.5
        assert error.details == {}
