"""
Axis-aligned bounding box and the polygon cropper built on it.
"""

import enum
import math

from .geometry import (
    EPS, centroid_of_points, line_segment, points_equal, ray_segment,
    segment_segment, sort_by_angle,
)
from .polygon import point_in_polygon


class Side(enum.Enum):
    LEFT = 'left'
    RIGHT = 'right'
    BOTTOM = 'bottom'
    TOP = 'top'


class AABB:
    """Box spanning min=(min_x, min_y) to max=(max_x, max_y)."""

    def __init__(self, min_point=(0.0, 0.0), max_point=(1.0, 1.0)):
        min_point = (float(min_point[0]), float(min_point[1]))
        max_point = (float(max_point[0]), float(max_point[1]))
        if min_point[0] > max_point[0] or min_point[1] > max_point[1]:
            raise ValueError(f'AABB min {min_point} exceeds max {max_point}')
        self.min = min_point
        self.max = max_point

    def __repr__(self):
        return f'AABB(min={self.min}, max={self.max})'

    def __eq__(self, other):
        if not isinstance(other, AABB):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    @classmethod
    def normalized(cls):
        """The unit square [0, 1]^2."""
        return cls((0.0, 0.0), (1.0, 1.0))

    @classmethod
    def from_points(cls, points):
        points = list(points)
        if not points:
            raise ValueError('AABB.from_points needs at least one point')
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return cls((min(xs), min(ys)), (max(xs), max(ys)))

    def expanded(self, margin):
        return AABB((self.min[0] - margin, self.min[1] - margin),
                    (self.max[0] + margin, self.max[1] + margin))

    # Measures

    @property
    def width(self):
        return self.max[0] - self.min[0]

    @property
    def height(self):
        return self.max[1] - self.min[1]

    @property
    def size(self):
        return (self.width, self.height)

    @property
    def center(self):
        return ((self.min[0] + self.max[0]) / 2.0,
                (self.min[1] + self.max[1]) / 2.0)

    @property
    def bl(self):
        return self.min

    @property
    def br(self):
        return (self.max[0], self.min[1])

    @property
    def tr(self):
        return self.max

    @property
    def tl(self):
        return (self.min[0], self.max[1])

    @property
    def corners(self):
        """Corners in CCW order starting at bottom-left."""
        return [self.bl, self.br, self.tr, self.tl]

    @property
    def sides(self):
        """(Side, begin, end) for each side, CCW."""
        return [
            (Side.BOTTOM, self.bl, self.br),
            (Side.RIGHT, self.br, self.tr),
            (Side.TOP, self.tr, self.tl),
            (Side.LEFT, self.tl, self.bl),
        ]

    # Coordinate spaces

    def normalize(self, point):
        """Map a point in this box to [0, 1]^2."""
        w = self.width or 1.0
        h = self.height or 1.0
        return ((point[0] - self.min[0]) / w, (point[1] - self.min[1]) / h)

    def to_bounds_space(self, point):
        """Map a point in [0, 1]^2 to this box."""
        return (self.min[0] + point[0] * self.width,
                self.min[1] + point[1] * self.height)

    # Point queries

    def contains(self, point):
        """Inclusive containment, with EPS slack."""
        return (self.min[0] - EPS <= point[0] <= self.max[0] + EPS and
                self.min[1] - EPS <= point[1] <= self.max[1] + EPS)

    def out_of_bounds(self, point):
        return not self.contains(point)

    def point_on_border(self, point):
        """Side the point lies on, or None.

        Corners report the first matching side in LEFT, RIGHT, BOTTOM,
        TOP order.
        """
        if not self.contains(point):
            return None
        x, y = point
        if abs(x - self.min[0]) < EPS:
            return Side.LEFT
        if abs(x - self.max[0]) < EPS:
            return Side.RIGHT
        if abs(y - self.min[1]) < EPS:
            return Side.BOTTOM
        if abs(y - self.max[1]) < EPS:
            return Side.TOP
        return None

    def get_corner(self, side0, side1):
        """Corner shared by two perpendicular sides, or None."""
        pair = {side0, side1}
        if pair == {Side.LEFT, Side.BOTTOM}:
            return self.bl
        if pair == {Side.RIGHT, Side.BOTTOM}:
            return self.br
        if pair == {Side.RIGHT, Side.TOP}:
            return self.tr
        if pair == {Side.LEFT, Side.TOP}:
            return self.tl
        return None

    def is_corner(self, point):
        return any(points_equal(point, c) for c in self.corners)

    # Intersections

    def _sorted_hits(self, origin, hits):
        unique = []
        for hit in hits:
            if hit is not None and not any(points_equal(hit, u) for u in unique):
                unique.append(hit)
        unique.sort(key=lambda p: math.dist(origin, p))
        return unique

    def intersections_segment(self, a, b):
        """Crossings of segment a-b with the box outline, nearest to a first."""
        return self._sorted_hits(
            a, [segment_segment(a, b, s, e) for _, s, e in self.sides])

    def intersections_ray(self, origin, direction):
        """Crossings of a ray with the box outline, nearest first."""
        return self._sorted_hits(
            origin, [ray_segment(origin, direction, s, e) for _, s, e in self.sides])

    def intersections_line(self, a, b):
        """Crossings of the infinite line a-b with the box outline."""
        return self._sorted_hits(
            a, [line_segment(a, b, s, e) for _, s, e in self.sides])

    # Cropping

    def crop_polygon(self, points):
        """Crop a convex polygon to the box.

        Keeps box corners inside the polygon, polygon vertices inside the
        box, and every crossing of a polygon edge with the box outline,
        then orders the result by angle about its centroid.

        Args:
            points: List of (x, y) tuples, any winding.

        Returns:
            Cropped vertices in CCW order. Empty if nothing is inside.
        """
        n = len(points)
        if n == 0:
            return []

        cropped = []
        if n >= 3:
            cropped.extend(c for c in self.corners if point_in_polygon(c, points))
        cropped.extend(p for p in points if self.contains(p))

        edge_count = n if n >= 3 else n - 1
        for i in range(edge_count):
            cropped.extend(self.intersections_segment(points[i], points[(i + 1) % n]))

        unique = []
        for p in cropped:
            p = self._snap(p)
            if not any(points_equal(p, u) for u in unique):
                unique.append(p)
        if len(unique) < 3:
            return unique
        return sort_by_angle(unique, centroid_of_points(unique))

    def _snap(self, point):
        """Clamp a point that overshoots the box by rounding noise."""
        x = min(max(point[0], self.min[0]), self.max[0])
        y = min(max(point[1], self.min[1]), self.max[1])
        return (x, y)
