"""Performance tests for the triangulation and Voronoi pipeline."""

import time
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from delaunay_voronoi.seed_generator import generate_seeds
from delaunay_voronoi.voronoi import Voronoi


def test_200_seeds_completes_in_10_seconds():
    """Full pipeline with 200 seeds should complete within 10 seconds."""
    seeds = generate_seeds(200, random_seed=42)
    assert len(seeds) > 150

    start = time.time()
    voronoi = Voronoi(seeds)
    polygons = voronoi.generate()
    voronoi.simplify_vertices()
    elapsed = time.time() - start

    assert elapsed < 10.0, f"Pipeline took {elapsed:.1f}s (limit: 10s)"
    assert len(polygons) == len(seeds)
    total = sum(p.area for p in polygons)
    assert abs(total - 1.0) < 1e-6


def test_100_seeds_completes_in_3_seconds():
    """Full pipeline with 100 seeds should complete within 3 seconds."""
    seeds = generate_seeds(100, random_seed=42)

    start = time.time()
    polygons = Voronoi(seeds).generate()
    elapsed = time.time() - start

    assert elapsed < 3.0, f"Pipeline took {elapsed:.1f}s (limit: 3s)"
    non_empty = [p for p in polygons if not p.is_empty]
    assert len(non_empty) == len(seeds)
