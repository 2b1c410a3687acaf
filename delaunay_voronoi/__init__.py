"""Incremental Delaunay triangulation and bounded Voronoi diagrams."""

from .aabb import AABB, Side
from .config import Settings, settings
from .delaunay import Border, Delaunay, TriangulationObserver
from .edge import Edge
from .errors import TopologyError
from .log import configure_logging
from .polygon import Polygon
from .seed_generator import SeedDistribution, generate_seeds, move_seed
from .simplify import simplify_vertices
from .triangle import Triangle, TriangleMesh
from .voronoi import Voronoi

__all__ = [
    "AABB",
    "Border",
    "Delaunay",
    "Edge",
    "Polygon",
    "SeedDistribution",
    "Settings",
    "Side",
    "TopologyError",
    "Triangle",
    "TriangleMesh",
    "TriangulationObserver",
    "Voronoi",
    "configure_logging",
    "generate_seeds",
    "move_seed",
    "settings",
    "simplify_vertices",
]
