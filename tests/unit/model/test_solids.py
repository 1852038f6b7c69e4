"""Tests for the bundled solid model adapters."""

import math

import pytest
import trimesh
from shapely.geometry import MultiPolygon, Polygon

from layerpath.core.exceptions import DegenerateModelError, GeometryError
from layerpath.core.geometry import ZBounds
from layerpath.model.mesh_solid import MeshSolid
from layerpath.model.prism_solid import PrismSolid, SolidAssembly
from layerpath.model.solid import SolidModel, validate_bounds


class TestValidateBounds:
    """Tests for validate_bounds."""

    def test_valid(self, block):
        assert validate_bounds(block) == ZBounds(0.0, 10.0)

    def test_flat(self):
        flat = PrismSolid.rectangle(1.0, 1.0, 3.0, 3.0)
        assert validate_bounds(flat) == ZBounds(3.0, 3.0)

    def test_inverted(self):
        with pytest.raises(DegenerateModelError, match="inverted"):
            validate_bounds(PrismSolid.rectangle(1.0, 1.0, 3.0, 1.0))

    def test_non_finite(self):
        with pytest.raises(DegenerateModelError, match="not finite"):
            validate_bounds(PrismSolid.rectangle(1.0, 1.0, 0.0, math.inf))

    def test_empty(self):
        with pytest.raises(DegenerateModelError, match="empty"):
            validate_bounds(PrismSolid(Polygon(), 0.0, 1.0))

    def test_protocol(self, block, cube_mesh, gapped_assembly):
        for model in (block, cube_mesh, gapped_assembly):
            assert isinstance(model, SolidModel)


class TestPrismSolid:
    """Tests for PrismSolid."""

    def test_slice_inside(self, block):
        curves = block.slice_at(5.0)
        assert len(curves) == 1
        assert curves[0].closed
        assert len(curves[0]) == 4

    def test_slice_at_bounds_inclusive(self, block):
        assert len(block.slice_at(0.0)) == 1
        assert len(block.slice_at(10.0)) == 1

    def test_slice_outside_is_empty(self, block):
        assert block.slice_at(-0.1) == []
        assert block.slice_at(10.1) == []

    def test_holes_become_curves(self):
        outer = [(0, 0), (10, 0), (10, 10), (0, 10)]
        hole = [(4, 4), (6, 4), (6, 6), (4, 6)]
        ring = PrismSolid(Polygon(outer, [hole]), 0.0, 2.0)

        curves = ring.slice_at(1.0)

        assert len(curves) == 2
        assert {len(c) for c in curves} == {4}

    def test_multipolygon(self):
        parts = MultiPolygon(
            [
                Polygon([(0, 0), (1, 0), (1, 1)]),
                Polygon([(5, 5), (6, 5), (6, 6)]),
            ]
        )
        assert len(PrismSolid(parts, 0.0, 1.0).slice_at(0.5)) == 2

    def test_translate_returns_new_solid(self, block):
        moved = block.translate(-4.0)
        assert moved.bounds() == ZBounds(-4.0, 6.0)
        assert block.bounds() == ZBounds(0.0, 10.0)

    def test_rejects_non_polygon(self):
        with pytest.raises(GeometryError):
            PrismSolid("square", 0.0, 1.0)


class TestSolidAssembly:
    """Tests for SolidAssembly."""

    def test_bounds_cover_all_parts(self, gapped_assembly):
        assert gapped_assembly.bounds() == ZBounds(0.0, 10.0)

    def test_gap_slices_empty(self, gapped_assembly):
        assert gapped_assembly.slice_at(5.0) == []
        assert len(gapped_assembly.slice_at(2.0)) == 1

    def test_translate(self, gapped_assembly):
        assert gapped_assembly.translate(1.0).bounds() == ZBounds(1.0, 11.0)

    def test_empty_assembly(self):
        assert SolidAssembly([]).is_empty
        with pytest.raises(DegenerateModelError):
            SolidAssembly([]).bounds()

    def test_bounds_skip_empty_parts(self):
        assembly = SolidAssembly(
            [MeshSolid(trimesh.Trimesh()), PrismSolid.rectangle(1.0, 1.0, 0.0, 2.0)]
        )

        assert not assembly.is_empty
        assert assembly.bounds() == ZBounds(0.0, 2.0)
        assert validate_bounds(assembly) == ZBounds(0.0, 2.0)
        assert len(assembly.slice_at(1.0)) == 1


class TestMeshSolid:
    """Tests for MeshSolid."""

    def test_box_bounds(self, cube_mesh):
        assert cube_mesh.bounds() == pytest.approx(ZBounds(0.0, 10.0))

    def test_box_origin(self):
        solid = MeshSolid.box(extents=(2.0, 2.0, 4.0), origin=(0.0, 0.0, 5.0))
        assert solid.bounds() == pytest.approx(ZBounds(5.0, 9.0))

    def test_slice_inside(self, cube_mesh):
        curves = cube_mesh.slice_at(5.0)
        assert len(curves) == 1
        assert curves[0].closed

    def test_slice_on_bottom_and_top_faces(self, cube_mesh):
        for plane_z in (0.0, 10.0):
            curves = cube_mesh.slice_at(plane_z)
            assert len(curves) == 1
            assert curves[0].closed
            xs = [x for x, _ in curves[0].points]
            ys = [y for _, y in curves[0].points]
            assert (min(xs), max(xs)) == pytest.approx((0.0, 10.0))
            assert (min(ys), max(ys)) == pytest.approx((0.0, 10.0))

    def test_slice_just_outside_faces_is_empty(self, cube_mesh):
        assert cube_mesh.slice_at(10.001) == []
        assert cube_mesh.slice_at(-0.001) == []

    def test_slice_miss_is_empty(self, cube_mesh):
        assert cube_mesh.slice_at(25.0) == []
        assert cube_mesh.slice_at(-3.0) == []

    def test_translate_does_not_mutate(self, cube_mesh):
        moved = cube_mesh.translate(-5.0)
        assert moved.bounds() == pytest.approx(ZBounds(-5.0, 5.0))
        assert cube_mesh.bounds() == pytest.approx(ZBounds(0.0, 10.0))
        assert moved.mesh is not cube_mesh.mesh

    def test_empty_mesh(self):
        empty = MeshSolid(trimesh.Trimesh())
        assert empty.is_empty
        assert empty.slice_at(0.0) == []
        with pytest.raises(DegenerateModelError):
            empty.bounds()

    def test_rejects_non_mesh(self):
        with pytest.raises(GeometryError):
            MeshSolid("cube.stl")

    def test_load_round_trip(self, temp_dir):
        path = temp_dir / "part.stl"
        trimesh.creation.box(extents=[4.0, 4.0, 6.0]).export(str(path))

        solid = MeshSolid.load(path)

        assert solid.bounds() == pytest.approx(ZBounds(-3.0, 3.0))

    def test_load_missing(self, temp_dir):
        with pytest.raises(GeometryError, match="File not found"):
            MeshSolid.load(temp_dir / "missing.stl")

    def test_load_unsupported(self, temp_dir):
        path = temp_dir / "part.step"
        path.write_text("ISO-10303-21;")
        with pytest.raises(GeometryError, match="Unsupported format"):
            MeshSolid.load(path)
