"""
Voronoi diagram derived from a Delaunay triangulation.

Each seed's region is the loop of circumcenters of the triangles around
it. Seeds on the hull get two extra vertices far along the outward
perpendiculars of their hull edges before the loop is cropped to the
bounding box.
"""

import math

import structlog

from .aabb import AABB
from .config import settings as default_settings
from .delaunay import Delaunay
from .errors import TopologyError
from .geometry import EPS, centroid_of_points, points_equal, sort_by_angle
from .polygon import Polygon, clip_polygon_by_bisector, remove_collinear, remove_duplicates
from .simplify import simplify_vertices

logger = structlog.get_logger()


def seed_in_border(seed, triangles):
    """Hull edges that end at `seed`.

    Args:
        seed: (x, y) vertex.
        triangles: Triangles incident to seed.

    Returns:
        Empty list for an interior seed, the two hull edges otherwise.

    Raises:
        TopologyError: if any other number of hull edges touches the seed.
    """
    edges = []
    for tri in triangles:
        for edge in tri.border_edges:
            if edge.contains_vertex(seed) and edge not in edges:
                edges.append(edge)
    if len(edges) not in (0, 2):
        raise TopologyError(seed, len(edges))
    return edges


class Voronoi:
    """Voronoi regions of a seed list, clipped to `bounds`.

    Args:
        seeds: Points in [0, 1]^2.
        delaunay: Triangulation to reuse; built from seeds if omitted.
        bounds: Clipping box, the unit square by default.
        settings: Settings instance, defaults to the module settings.
    """

    def __init__(self, seeds, delaunay=None, bounds=None, settings=None):
        self.settings = settings or default_settings
        self._seeds = [(float(p[0]), float(p[1])) for p in seeds]
        self.bounds = bounds or AABB.normalized()
        self.delaunay = delaunay or Delaunay(self._seeds, settings=self.settings)
        self._polygons = []

    @property
    def seeds(self):
        return list(self._seeds)

    @seeds.setter
    def seeds(self, points):
        self._seeds = [(float(p[0]), float(p[1])) for p in points]
        self.reset()

    @property
    def polygons(self):
        return list(self._polygons)

    @property
    def ended(self):
        return len(self._polygons) == len(self._seeds)

    def reset(self):
        """Drop the regions and rebuild the triangulation from the seeds."""
        self._polygons = []
        self.delaunay.seeds = self._seeds

    def generate(self):
        """Build every region, in seed order."""
        self._ensure_triangulated()
        self._polygons = [self._region_polygon(seed) for seed in self._seeds]
        logger.debug("Voronoi generated", regions=len(self._polygons))
        return self.polygons

    def run_one_iteration(self):
        """Build the region of the next seed."""
        if self.ended:
            return None
        self._ensure_triangulated()
        polygon = self._region_polygon(self._seeds[len(self._polygons)])
        self._polygons.append(polygon)
        return polygon

    def _ensure_triangulated(self):
        if not self.delaunay.ended:
            self.delaunay.triangulate()

    # ------------------------------------------------------------------
    # Region construction
    # ------------------------------------------------------------------

    def _region_polygon(self, seed):
        triangles = self.delaunay.find_triangles_around_vertex(seed)
        if not triangles:
            return self._bisector_region(seed)

        vertices = [tri.circumcenter for tri in triangles]

        border_edges = seed_in_border(seed, triangles)
        if border_edges:
            far = self.bounds.expanded(self.settings.extension_margin)
            for edge in border_edges:
                hits = far.intersections_ray(edge.median, edge.mediatrix_right)
                if hits:
                    vertices.append(hits[0])

        vertices = sort_by_angle(vertices, seed)
        vertices = remove_duplicates(self.bounds.crop_polygon(vertices))
        if len(vertices) < 3:
            return Polygon(vertices if len(vertices) == 2 else [], seed=seed)

        if border_edges:
            vertices = self._repair_corners(vertices, seed)

        vertices = sort_by_angle(vertices, centroid_of_points(vertices))
        vertices = remove_collinear(vertices)
        return Polygon(vertices, seed=seed)

    def _repair_corners(self, vertices, seed):
        """Insert the box corners a cropped border region skipped.

        An edge running between two different box sides, neither end a
        corner, gets the corner shared by those sides when the seed owns
        it. Otherwise every corner the seed owns is inserted.
        """
        repaired = list(vertices)
        n = len(vertices)
        for i in range(n):
            a = vertices[i]
            b = vertices[(i + 1) % n]
            side_a = self.bounds.point_on_border(a)
            side_b = self.bounds.point_on_border(b)
            if side_a is None or side_b is None or side_a == side_b:
                continue
            if self.bounds.is_corner(a) or self.bounds.is_corner(b):
                continue
            corner = self.bounds.get_corner(side_a, side_b)
            if corner is not None and self._owns(seed, corner):
                candidates = [corner]
            else:
                candidates = self.bounds.corners
            for candidate in candidates:
                if any(points_equal(candidate, v) for v in repaired):
                    continue
                if self._owns(seed, candidate):
                    repaired.append(candidate)
        return repaired

    def _owns(self, seed, point):
        """True if no other seed is strictly closer to point."""
        own = math.dist(seed, point)
        return all(math.dist(other, point) >= own - EPS for other in self._seeds)

    def _bisector_region(self, seed):
        """Region of a seed the triangulation does not reach.

        Cuts the box by the perpendicular bisector against every other
        seed.
        """
        vertices = list(self.bounds.corners)
        for other in self._seeds:
            if points_equal(other, seed):
                continue
            vertices = clip_polygon_by_bisector(vertices, seed, other)
            if not vertices:
                break
        vertices = remove_duplicates(vertices)
        if len(vertices) >= 3:
            vertices = remove_collinear(vertices)
        return Polygon(vertices, seed=seed)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_region_index(self, point):
        """Index of the region containing point, -1 if none.

        The region of a point is the one whose seed is nearest.
        """
        if not self._polygons or self.bounds.out_of_bounds(point):
            return -1
        count = len(self._polygons)
        return min(range(count), key=lambda i: math.dist(self._seeds[i], point))

    def get_region(self, point):
        index = self.get_region_index(point)
        if index < 0:
            return None
        return self._polygons[index]

    def simplify_vertices(self, radius=None):
        """Merge region vertices closer than radius across all regions."""
        if radius is None:
            radius = self.settings.collision_radius
        self._polygons = simplify_vertices(self._polygons, radius)
        return self.polygons
