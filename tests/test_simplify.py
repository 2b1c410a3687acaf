"""Tests for cross-region vertex simplification."""

import math
import random
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from delaunay_voronoi.polygon import Polygon
from delaunay_voronoi.simplify import simplify_vertices
from delaunay_voronoi.voronoi import Voronoi


def _all_vertices(polygons):
    return {v for p in polygons for v in p.vertices}


class TestSimplifyVertices:
    def test_close_vertices_merge(self):
        a = Polygon([(0, 0), (1, 0), (0.5, 1)], seed=(0.5, 0.3))
        b = Polygon([(1.004, 0), (2, 0), (1.5, 1)], seed=(1.5, 0.3))
        result = simplify_vertices([a, b], radius=0.01)
        shared = result[0].vertices[1]
        assert shared == result[1].vertices[0]
        assert abs(shared[0] - 1.002) < 1e-9
        assert result[0].seed == (0.5, 0.3)

    def test_far_vertices_untouched(self):
        a = Polygon([(0, 0), (1, 0), (0.5, 1)])
        result = simplify_vertices([a], radius=0.01)
        assert result[0].vertices == a.vertices

    def test_transitive_chain(self):
        poly = Polygon([(0, 0), (0.006, 0), (0.012, 0), (0.5, 0.5), (0, 1)])
        result = simplify_vertices([poly], radius=0.01)
        assert len(result[0].vertices) == 3
        assert math.dist(result[0].vertices[0], (0.006, 0)) < 1e-9

    def test_consecutive_duplicates_dropped(self):
        poly = Polygon([(0, 0), (0.001, 0), (1, 0), (1, 1), (0, 1), (0, 0.001)])
        result = simplify_vertices([poly], radius=0.01)
        vertices = result[0].vertices
        assert len(vertices) == 4
        for i in range(len(vertices)):
            assert vertices[i] != vertices[(i + 1) % len(vertices)]

    def test_idempotent(self):
        rng = random.Random(3)
        seeds = [(rng.random(), rng.random()) for _ in range(40)]
        polygons = Voronoi(seeds).generate()
        once = simplify_vertices(polygons, radius=0.03)
        twice = simplify_vertices(once, radius=0.03)
        assert [p.vertices for p in once] == [p.vertices for p in twice]

    def test_merged_vertices_are_spread(self):
        rng = random.Random(5)
        seeds = [(rng.random(), rng.random()) for _ in range(40)]
        once = simplify_vertices(Voronoi(seeds).generate(), radius=0.03)
        vertices = sorted(_all_vertices(once))
        for i, a in enumerate(vertices):
            for b in vertices[i + 1:]:
                assert math.dist(a, b) >= 0.03

    def test_zero_radius(self):
        poly = Polygon([(0, 0), (1, 0), (0.5, 1)])
        assert simplify_vertices([poly], radius=0)[0].vertices == poly.vertices
