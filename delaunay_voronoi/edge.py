"""
Undirected edge between two 2D points.
"""

import math

from .geometry import EPS, is_left, is_right, points_equal, segment_segment


class Edge:
    """Pair of points with direction-insensitive equality.

    begin/end keep the orientation they were built with, so the
    mediatrix directions are relative to begin -> end.
    """

    __slots__ = ('begin', 'end')

    def __init__(self, begin, end):
        self.begin = tuple(begin)
        self.end = tuple(end)

    def __repr__(self):
        return f'Edge({self.begin}, {self.end})'

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return ((self.begin == other.begin and self.end == other.end) or
                (self.begin == other.end and self.end == other.begin))

    def __hash__(self):
        return hash(frozenset((self.begin, self.end)))

    @property
    def median(self):
        return ((self.begin[0] + self.end[0]) / 2.0,
                (self.begin[1] + self.end[1]) / 2.0)

    @property
    def vector(self):
        return (self.end[0] - self.begin[0], self.end[1] - self.begin[1])

    @property
    def length(self):
        return math.hypot(*self.vector)

    @property
    def direction(self):
        """Unit vector begin -> end, (0, 0) for a degenerate edge."""
        vx, vy = self.vector
        length = math.hypot(vx, vy)
        if length < EPS:
            return (0.0, 0.0)
        return (vx / length, vy / length)

    @property
    def is_valid(self):
        return not points_equal(self.begin, self.end)

    # Mediatrix (perpendicular bisector) directions

    @property
    def mediatrix_left(self):
        """Direction rotated 90 degrees CCW: (-y, x)."""
        dx, dy = self.direction
        return (-dy, dx)

    @property
    def mediatrix_right(self):
        """Direction rotated 90 degrees CW: (y, -x)."""
        dx, dy = self.direction
        return (dy, -dx)

    def contains_vertex(self, point):
        return self.begin == point or self.end == point

    # Derived edges

    def parallel_left(self, distance):
        nx, ny = self.mediatrix_left
        return Edge((self.begin[0] + nx * distance, self.begin[1] + ny * distance),
                    (self.end[0] + nx * distance, self.end[1] + ny * distance))

    def parallel_right(self, distance):
        return self.parallel_left(-distance)

    def shorten(self, padding):
        """Pull both endpoints toward each other by `padding`."""
        dx, dy = self.direction
        return Edge((self.begin[0] + dx * padding, self.begin[1] + dy * padding),
                    (self.end[0] - dx * padding, self.end[1] - dy * padding))

    def shorten_proportional(self, t):
        """Remove a fraction t of the length, half at each end."""
        vx, vy = self.vector
        half = t / 2.0
        return Edge((self.begin[0] + vx * half, self.begin[1] + vy * half),
                    (self.end[0] - vx * half, self.end[1] - vy * half))

    def intersection(self, other):
        """Segment-segment intersection point with another edge, or None."""
        return segment_segment(self.begin, self.end, other.begin, other.end)

    # Convexity of two consecutive edges (e1.end == e2.begin)

    @staticmethod
    def is_concave(e1, e2):
        """The shared vertex lies left of the chord e1.begin -> e2.end."""
        return is_left(e1.begin, e2.end, e1.end)

    @staticmethod
    def is_convex(e1, e2):
        return is_right(e1.begin, e2.end, e1.end)
