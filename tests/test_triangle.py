"""Tests for Triangle and TriangleMesh."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from delaunay_voronoi.edge import Edge
from delaunay_voronoi.geometry import tri_area2
from delaunay_voronoi.triangle import Triangle, TriangleMesh


class TestTriangle:
    def test_cw_input_is_reordered(self):
        tri = Triangle((0, 0), (0, 1), (1, 0))
        assert tri_area2(tri.v1, tri.v2, tri.v3) > 0

    def test_edges_follow_vertices(self):
        tri = Triangle((0, 0), (1, 0), (0, 1))
        assert tri.edges[0] == Edge((0, 0), (1, 0))
        assert tri.edges[1] == Edge((1, 0), (0, 1))
        assert tri.edges[2] == Edge((0, 1), (0, 0))

    def test_circumcenter_cached(self):
        tri = Triangle((0, 0), (1, 0), (0, 1))
        cx, cy = tri.circumcenter
        assert abs(cx - 0.5) < 1e-9 and abs(cy - 0.5) < 1e-9
        assert not tri.is_degenerate

    def test_collinear_falls_back_to_centroid(self):
        tri = Triangle((0.2, 0.5), (0.5, 0.5), (0.8, 0.5))
        assert tri.is_degenerate
        cx, cy = tri.circumcenter
        assert abs(cx - 0.5) < 1e-9 and abs(cy - 0.5) < 1e-9
        assert not tri.in_circumcircle((0.5, 0.5))

    def test_in_circumcircle(self):
        tri = Triangle((0, 0), (1, 0), (0, 1))
        assert tri.in_circumcircle((0.9, 0.9))
        assert not tri.in_circumcircle((1, 1))

    def test_border_flags(self):
        tri = Triangle((0, 0), (1, 0), (0, 1))
        assert tri.is_border
        assert len(tri.border_edges) == 3

    def test_opposite_vertex(self):
        tri = Triangle((0, 0), (1, 0), (0, 1))
        vertex, index = tri.opposite_vertex(Edge((1, 0), (0, 0)))
        assert vertex == (0, 1)
        assert index == 2

    def test_edge_index(self):
        tri = Triangle((0, 0), (1, 0), (0, 1))
        assert tri.edge_index(Edge((0, 1), (1, 0))) == 1
        assert tri.edge_index(Edge((5, 5), (6, 6))) is None

    def test_contains_point(self):
        tri = Triangle((0, 0), (1, 0), (0, 1))
        assert tri.contains_point((0.2, 0.2))
        assert tri.contains_point((0.5, 0))
        assert not tri.contains_point((1, 1))


class TestTriangleMesh:
    def _pair(self):
        mesh = TriangleMesh()
        a = mesh.add((0, 0), (1, 0), (1, 1))
        b = mesh.add((0, 0), (1, 1), (0, 1))
        mesh.set_neighbour(a, 2, b)
        return mesh, a, b

    def test_reciprocal_assignment(self):
        mesh, a, b = self._pair()
        assert mesh.get(a).neighbours[2] == b
        assert mesh.get(b).neighbours[0] == a
        assert mesh.neighbour(a, 2) is mesh.get(b)

    def test_remove_clears_back_links(self):
        mesh, a, b = self._pair()
        mesh.remove(b)
        assert len(mesh) == 1
        assert b not in mesh
        assert mesh.get(a).neighbours == [None, None, None]

    def test_handles_are_not_reused(self):
        mesh, a, b = self._pair()
        mesh.remove(a)
        c = mesh.add((2, 2), (3, 2), (2, 3))
        assert c not in (a, b)
        assert [t.id for t in mesh.live()] == [b, c]

    def test_remove_twice_is_harmless(self):
        mesh, a, _ = self._pair()
        mesh.remove(a)
        mesh.remove(a)
        assert len(mesh) == 1

    def test_removed_triangles_are_released(self):
        mesh, a, b = self._pair()
        removed = mesh.get(a)
        mesh.remove(a)
        assert not removed.alive
        with pytest.raises(KeyError):
            mesh.get(a)
        assert mesh.live() == [mesh.get(b)]

    def test_size_follows_live_triangles(self):
        mesh = TriangleMesh()
        tid = None
        for i in range(50):
            if tid is not None:
                mesh.remove(tid)
            tid = mesh.add((i, 0), (i + 1, 0), (i, 1))
        assert len(mesh) == 1
        assert len(mesh.live()) == 1
        assert mesh.live()[0].id == tid
