"""
Polygon operations for Voronoi regions.

Vertices are (x, y) tuples in CCW order without a closing duplicate.
"""

from .edge import Edge
from .geometry import EPS, is_collinear, is_convex_polygon, points_equal, tri_area2


def polygon_area(polygon):
    """Calculate polygon area using the Shoelace formula.

    Args:
        polygon: List of (x, y) tuples.

    Returns:
        Signed area (positive = CCW, negative = CW).
    """
    n = len(polygon)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        x1, y1 = polygon[i]
        x2, y2 = polygon[(i + 1) % n]
        area += x1 * y2 - x2 * y1
    return area / 2.0


def polygon_centroid(polygon):
    """Calculate polygon centroid.

    Falls back to the vertex mean for fewer than three vertices or a
    zero-area loop.

    Args:
        polygon: List of (x, y) tuples.

    Returns:
        (cx, cy) tuple.
    """
    n = len(polygon)
    if n == 0:
        return (0.0, 0.0)

    area = polygon_area(polygon)
    if n <= 2 or abs(area) < EPS * EPS:
        return (sum(p[0] for p in polygon) / n, sum(p[1] for p in polygon) / n)

    cx = 0.0
    cy = 0.0
    for i in range(n):
        x1, y1 = polygon[i]
        x2, y2 = polygon[(i + 1) % n]
        cross = x1 * y2 - x2 * y1
        cx += (x1 + x2) * cross
        cy += (y1 + y2) * cross
    factor = 1.0 / (6.0 * area)
    return (cx * factor, cy * factor)


def point_in_polygon(point, polygon):
    """Test if a point is inside a polygon using ray casting.

    Args:
        point: (x, y) tuple.
        polygon: List of (x, y) tuples.

    Returns:
        True if point is inside the polygon.
    """
    x, y = point
    n = len(polygon)
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside


def clip_polygon_by_edge(polygon, x1, y1, x2, y2):
    """Clip polygon by a single half-plane using Sutherland-Hodgman.

    The half-plane is bounded by the line through (x1, y1) and (x2, y2).
    Points on the left side (looking from (x1, y1) to (x2, y2)) are kept.
    """
    if not polygon:
        return []

    def inside(px, py):
        return (x2 - x1) * (py - y1) - (y2 - y1) * (px - x1) >= 0

    def intersect(px1, py1, px2, py2):
        dx_edge = x2 - x1
        dy_edge = y2 - y1
        dx_seg = px2 - px1
        dy_seg = py2 - py1
        denom = dx_edge * dy_seg - dy_edge * dx_seg
        if abs(denom) < 1e-12:
            return (px2, py2)
        t = ((px1 - x1) * dy_seg - (py1 - y1) * dx_seg) / denom
        return (x1 + t * dx_edge, y1 + t * dy_edge)

    output = []
    n = len(polygon)
    for i in range(n):
        curr_x, curr_y = polygon[i]
        next_x, next_y = polygon[(i + 1) % n]
        curr_inside = inside(curr_x, curr_y)
        next_inside = inside(next_x, next_y)

        if curr_inside:
            output.append((curr_x, curr_y))
            if not next_inside:
                output.append(intersect(curr_x, curr_y, next_x, next_y))
        elif next_inside:
            output.append(intersect(curr_x, curr_y, next_x, next_y))

    return output


def clip_polygon_by_bisector(polygon, keep, other):
    """Keep the part of polygon closer to `keep` than to `other`."""
    mx = (keep[0] + other[0]) / 2.0
    my = (keep[1] + other[1]) / 2.0
    dx = other[0] - keep[0]
    dy = other[1] - keep[1]
    return clip_polygon_by_edge(polygon, mx, my, mx - dy, my + dx)


def remove_duplicates(points):
    """Drop vertices within EPS of an earlier one, keeping order."""
    unique = []
    for p in points:
        if not any(points_equal(p, u) for u in unique):
            unique.append(p)
    return unique


def remove_collinear(points):
    """Drop vertices lying on the line through their two neighbours."""
    result = list(points)
    changed = True
    while changed and len(result) > 3:
        changed = False
        n = len(result)
        for i in range(n):
            if is_collinear(result[i - 1], result[i], result[(i + 1) % n]):
                del result[i]
                changed = True
                break
    return result


class Polygon:
    """A Voronoi region: CCW vertices plus the seed that owns them."""

    def __init__(self, vertices, seed=None):
        self.vertices = [tuple(v) for v in vertices]
        self.seed = tuple(seed) if seed is not None else None
        self._centroid = None

    def __repr__(self):
        return f'Polygon(seed={self.seed}, vertices={len(self.vertices)})'

    def __len__(self):
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    @property
    def centroid(self):
        if self._centroid is None:
            self._centroid = polygon_centroid(self.vertices)
        return self._centroid

    @property
    def area(self):
        return abs(polygon_area(self.vertices))

    @property
    def is_empty(self):
        return len(self.vertices) < 3

    @property
    def is_convex(self):
        return is_convex_polygon(self.vertices)

    @property
    def edges(self):
        n = len(self.vertices)
        if n < 2:
            return []
        if n == 2:
            return [Edge(self.vertices[0], self.vertices[1])]
        return [Edge(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]

    def contains(self, point):
        """Inclusive point test.

        Convex regions use the cross-product test so that boundary points
        count as inside; anything else falls back to ray casting.
        """
        if self.is_empty:
            return False
        if self.is_convex:
            n = len(self.vertices)
            return all(tri_area2(self.vertices[i], self.vertices[(i + 1) % n], point) >= -EPS
                       for i in range(n))
        return point_in_polygon(point, self.vertices)
