"""
Geometric predicates shared by the Delaunay and Voronoi engines.

Pure functions over (x, y) tuples. Every tolerance comparison goes
through EPS so that all predicates break ties the same way.
"""

import math


# Tolerance for floating point comparisons
EPS = 1e-8


def points_equal(a, b):
    """True if two points are closer than EPS."""
    return math.hypot(a[0] - b[0], a[1] - b[1]) < EPS


def tri_area2(a, b, p):
    """Doubled signed area of triangle (a, b, p).

    Returns:
        Positive if p is left of a->b, negative if right, ~0 if collinear.
    """
    return (b[0] - a[0]) * (p[1] - a[1]) - (b[1] - a[1]) * (p[0] - a[0])


def orientation(a, b, p):
    """Classify p against the directed line a->b.

    Returns:
        1 if p is left (CCW), -1 if right (CW), 0 if collinear.
    """
    area = tri_area2(a, b, p)
    if area > EPS:
        return 1
    if area < -EPS:
        return -1
    return 0


def is_left(a, b, p):
    return orientation(a, b, p) == 1


def is_right(a, b, p):
    return orientation(a, b, p) == -1


def is_collinear(a, b, p):
    return orientation(a, b, p) == 0


# ---------------------------------------------------------------------------
# Circles
# ---------------------------------------------------------------------------

def circumcenter(a, b, c):
    """Center of the circle through a, b and c.

    Intersects the perpendicular bisectors of ab and bc.

    Returns:
        (x, y) or None if the points are collinear.
    """
    ab_len = math.hypot(b[0] - a[0], b[1] - a[1])
    bc_len = math.hypot(c[0] - b[0], c[1] - b[1])
    if ab_len < EPS or bc_len < EPS:
        return None

    # Unit perpendiculars of ab and bc
    ab_perp = (-(b[1] - a[1]) / ab_len, (b[0] - a[0]) / ab_len)
    bc_perp = (-(c[1] - b[1]) / bc_len, (c[0] - b[0]) / bc_len)

    ab_mid = ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)
    bc_mid = ((b[0] + c[0]) / 2.0, (b[1] + c[1]) / 2.0)

    return line_line(
        ab_mid, (ab_mid[0] + ab_perp[0], ab_mid[1] + ab_perp[1]),
        bc_mid, (bc_mid[0] + bc_perp[0], bc_mid[1] + bc_perp[1]),
    )


def point_in_circumcircle(p, a, b, c):
    """Test if p lies strictly inside the circle through a, b and c.

    Compares distances to the circumcenter instead of evaluating the
    in-circle determinant. Points on the circle count as outside.

    Returns:
        False if outside, on the circle, or if a, b, c are collinear.
    """
    center = circumcenter(a, b, c)
    if center is None:
        return False
    radius = math.hypot(a[0] - center[0], a[1] - center[1])
    dist = math.hypot(p[0] - center[0], p[1] - center[1])
    return radius - dist > EPS


# ---------------------------------------------------------------------------
# Intersections
# ---------------------------------------------------------------------------

def _cross_params(a, b, c, d):
    """Parameters (t, s) of the crossing of a + t*ab and c + s*cd.

    Returns:
        (t, s) or None if the lines are parallel.
    """
    abx, aby = b[0] - a[0], b[1] - a[1]
    cdx, cdy = d[0] - c[0], d[1] - c[1]
    acx, acy = c[0] - a[0], c[1] - a[1]

    denom = cdx * aby - abx * cdy
    if abs(denom) < EPS:
        return None

    t = (cdx * acy - acx * cdy) / denom
    s = (abx * acy - acx * aby) / denom
    return t, s


def line_line(a, b, c, d):
    """Intersection of the lines through (a, b) and (c, d)."""
    params = _cross_params(a, b, c, d)
    if params is None:
        return None
    t, _ = params
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def line_segment(a, b, c, d):
    """Intersection of the line through (a, b) with the segment c-d."""
    params = _cross_params(a, b, c, d)
    if params is None:
        return None
    _, s = params
    if s < 0.0 or s > 1.0:
        return None
    return (c[0] + (d[0] - c[0]) * s, c[1] + (d[1] - c[1]) * s)


def segment_segment(a, b, c, d):
    """Intersection of segments a-b and c-d."""
    params = _cross_params(a, b, c, d)
    if params is None:
        return None
    t, s = params
    if t < 0.0 or t > 1.0 or s < 0.0 or s > 1.0:
        return None
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def ray_line(p, direction, c, d):
    """Intersection of the ray p + t*direction (t >= 0) with line c-d."""
    params = _cross_params(p, (p[0] + direction[0], p[1] + direction[1]), c, d)
    if params is None:
        return None
    t, _ = params
    if t < 0.0:
        return None
    return (p[0] + direction[0] * t, p[1] + direction[1] * t)


def ray_segment(p, direction, c, d):
    """Intersection of the ray p + t*direction (t >= 0) with segment c-d."""
    params = _cross_params(p, (p[0] + direction[0], p[1] + direction[1]), c, d)
    if params is None:
        return None
    t, s = params
    if t < 0.0 or s < 0.0 or s > 1.0:
        return None
    return (p[0] + direction[0] * t, p[1] + direction[1] * t)


# ---------------------------------------------------------------------------
# Angles and ordering
# ---------------------------------------------------------------------------

def polar_angle(p, center):
    return math.atan2(p[1] - center[1], p[0] - center[0])


def sort_by_angle(points, center):
    """Sort points CCW by their polar angle around center."""
    return sorted(points, key=lambda p: polar_angle(p, center))


def centroid_of_points(points):
    """Arithmetic mean of a point list, (0, 0) when empty."""
    n = len(points)
    if n == 0:
        return (0.0, 0.0)
    return (sum(p[0] for p in points) / n, sum(p[1] for p in points) / n)


def is_convex_polygon(points):
    """True if the CCW vertex loop never turns right.

    Collinear vertices are tolerated.
    """
    n = len(points)
    if n < 3:
        return False
    for i in range(n):
        if is_right(points[i], points[(i + 1) % n], points[(i + 2) % n]):
            return False
    return True
