"""
Tests for roof triangulation, wall generation and build_surface.
"""

import pytest

from separation3d.generators import build_surface, generate_flat_roof, generate_walls
from separation3d.models import Point2D, TriangleMesh
from separation3d.processing.footprint import normalize_footprint
from separation3d.utils import (
    TriangulationError,
    point_in_polygon,
    triangulate_polygon,
    validate_triangulation,
)


def _ring(coords):
    return [Point2D(x, y) for x, y in coords]


def _centroid(tri):
    return Point2D(
        (tri.v0.x + tri.v1.x + tri.v2.x) / 3,
        (tri.v0.y + tri.v1.y + tri.v2.y) / 3,
    )


class TestTriangulatePolygon:
    """Tests for ear clipping."""

    def test_triangle(self):
        assert triangulate_polygon(_ring([(0, 0), (1, 0), (0, 1)])) == [(0, 1, 2)]

    def test_square(self, unit_square):
        ring = _ring(unit_square)
        triangles = triangulate_polygon(ring)
        assert len(triangles) == 2
        assert validate_triangulation(ring, triangles, expected_area=1.0) == []

    def test_concave(self, l_shape):
        ring = _ring(l_shape)
        triangles = triangulate_polygon(ring)
        assert len(triangles) == 4
        assert validate_triangulation(ring, triangles, expected_area=3.0) == []

    def test_too_few_vertices(self):
        with pytest.raises(TriangulationError):
            triangulate_polygon(_ring([(0, 0), (1, 0)]))

    def test_validate_reports_area_mismatch(self, unit_square):
        ring = _ring(unit_square)
        errors = validate_triangulation(ring, [(0, 1, 2)], expected_area=1.0)
        assert any("differs" in e for e in errors)


class TestGenerateFlatRoof:
    """Tests for generate_flat_roof."""

    def test_all_vertices_at_height(self, l_shape):
        roof = generate_flat_roof(_ring(l_shape), 7.25)
        assert all(v.z == 7.25 for tri in roof for v in tri.vertices)

    def test_upward_winding(self, l_shape):
        roof = generate_flat_roof(_ring(l_shape), 1.0)
        assert all(tri.projected_area() > 0 for tri in roof)
        assert all(tri.normal().z > 0 for tri in roof)

    def test_triangles_inside_footprint(self, l_shape):
        ring = _ring(l_shape)
        roof = generate_flat_roof(ring, 1.0)
        assert all(point_in_polygon(_centroid(tri), ring) for tri in roof)

    def test_area_matches_footprint(self, l_shape):
        roof = generate_flat_roof(_ring(l_shape), 1.0)
        assert sum(tri.projected_area() for tri in roof) == pytest.approx(3.0)


class TestGenerateWalls:
    """Tests for generate_walls."""

    def test_two_triangles_per_edge(self, l_shape):
        walls = generate_walls(_ring(l_shape), 0.0, 3.0)
        assert len(walls) == 2 * len(l_shape)

    def test_edge_split(self, unit_square):
        walls = generate_walls(_ring(unit_square), 0.0, 2.0)
        first, second = walls[0], walls[1]

        a, b = Point2D(0, 0), Point2D(1, 0)
        assert first.vertices == (a.at_z(0.0), b.at_z(0.0), b.at_z(2.0))
        assert second.vertices == (a.at_z(0.0), b.at_z(2.0), a.at_z(2.0))

    def test_closing_edge_present(self, unit_square):
        walls = generate_walls(_ring(unit_square), 0.0, 2.0)
        last = walls[-1]
        assert last.v0 == Point2D(0, 1).at_z(0.0)
        assert last.v1 == Point2D(0, 0).at_z(2.0)

    def test_outward_normals(self, l_shape):
        ring = _ring(l_shape)
        walls = generate_walls(ring, 0.0, 3.0)

        for tri in walls:
            n = tri.normal()
            assert n.z == pytest.approx(0.0)
            center = _centroid(tri)
            probe = Point2D(center.x + 1e-3 * n.x, center.y + 1e-3 * n.y)
            assert not point_in_polygon(probe, ring)

    def test_base_and_top(self, unit_square):
        walls = generate_walls(_ring(unit_square), -1.5, 4.0)
        zs = {v.z for tri in walls for v in tri.vertices}
        assert zs == {-1.5, 4.0}


class TestBuildSurface:
    """Tests for build_surface."""

    def test_unit_square(self, unit_square):
        mesh = build_surface(normalize_footprint(unit_square), 11.6)

        assert isinstance(mesh, TriangleMesh)
        assert mesh.roof_count() == 2
        assert mesh.wall_count() == 8
        assert mesh.validate(11.6, 0.0) == []

        roof_vertices = {v for tri in mesh.roof for v in tri.vertices}
        assert len(roof_vertices) == 4

    def test_base_elevation(self, fence_strip):
        mesh = build_surface(normalize_footprint(fence_strip), 2.0, base_z=1.0)
        assert mesh.validate(2.0, 1.0) == []
        assert mesh.compute_bounds() == ((0.0, 0.0, 1.0), (10.0, 0.2, 2.0))

    def test_height_below_base_still_builds(self, unit_square):
        mesh = build_surface(normalize_footprint(unit_square), -1.0, base_z=0.0)
        assert mesh.wall_count() == 8

    def test_to_indexed(self, unit_square):
        mesh = build_surface(normalize_footprint(unit_square), 3.0)
        vertices, faces = mesh.to_indexed()

        assert len(vertices) == 8
        assert len(faces) == 10
        assert min(min(f) for f in faces) == 1
        assert max(max(f) for f in faces) == 8
