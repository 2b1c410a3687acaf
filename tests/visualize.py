"""
Development visualization tool for triangulation and Voronoi preview.

Usage:
    pip install -e .[viz]
    python tests/visualize.py
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from delaunay_voronoi.log import configure_logging
from delaunay_voronoi.seed_generator import SeedDistribution, generate_seeds
from delaunay_voronoi.voronoi import Voronoi


def visualize_diagram(seed_count=40, random_seed=42,
                      distribution=SeedDistribution.RANDOM, simplify_radius=0.0):
    """Generate and plot the Delaunay triangulation and Voronoi regions."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib is required: pip install matplotlib")
        return

    seeds = generate_seeds(seed_count, random_seed=random_seed,
                           distribution=distribution)
    print(f"Generated {len(seeds)} seed points")

    voronoi = Voronoi(seeds)
    polygons = voronoi.generate()
    if simplify_radius > 0:
        polygons = voronoi.simplify_vertices(simplify_radius)
    triangles = voronoi.delaunay.triangles
    print(f"{len(triangles)} triangles, {len(polygons)} regions")

    fig, axes = plt.subplots(1, 2, figsize=(16, 8))

    # Left plot: seeds and triangulation
    ax1 = axes[0]
    ax1.set_title("Delaunay Triangulation")
    for tri in triangles:
        xs = [v[0] for v in tri.vertices] + [tri.v1[0]]
        ys = [v[1] for v in tri.vertices] + [tri.v1[1]]
        ax1.plot(xs, ys, 'k-', linewidth=0.5)
    for border in voronoi.delaunay.borders:
        ax1.plot([border.edge.begin[0], border.edge.end[0]],
                 [border.edge.begin[1], border.edge.end[1]], 'b-', linewidth=1.5)

    # Right plot: Voronoi regions
    ax2 = axes[1]
    ax2.set_title("Voronoi Regions")
    for polygon in polygons:
        if polygon.is_empty:
            continue
        xs = [v[0] for v in polygon.vertices] + [polygon.vertices[0][0]]
        ys = [v[1] for v in polygon.vertices] + [polygon.vertices[0][1]]
        ax2.fill(xs, ys, alpha=0.3)
        ax2.plot(xs, ys, 'k-', linewidth=0.8)

    sx = [s[0] for s in seeds]
    sy = [s[1] for s in seeds]
    for ax in axes:
        ax.plot(sx, sy, 'r.', markersize=4)
        ax.set_aspect('equal')
        ax.set_xlim(-0.05, 1.05)
        ax.set_ylim(-0.05, 1.05)

    plt.tight_layout()
    plt.savefig('voronoi_preview.png', dpi=150)
    print("Saved to voronoi_preview.png")
    plt.show()


if __name__ == '__main__':
    configure_logging()
    visualize_diagram(seed_count=60, random_seed=42,
                      distribution=SeedDistribution.REGULAR)
