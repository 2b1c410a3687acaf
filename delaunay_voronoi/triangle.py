"""
Triangles and the mesh that owns their adjacency.

Triangles reference their neighbours by integer handle into a
TriangleMesh; a removed triangle leaves the mesh with alive=False.
"""

import math

from .edge import Edge
from .geometry import EPS, circumcenter, tri_area2


class Triangle:
    """Three CCW vertices, three edges and three neighbour slots.

    neighbours[i] is the handle of the triangle across edges[i], where
    edges[i] = (vertices[i], vertices[(i + 1) % 3]), or None on a border.
    """

    __slots__ = ('id', 'v1', 'v2', 'v3', 'edges', 'neighbours', 'alive',
                 '_circumcenter', '_radius')

    def __init__(self, v1, v2, v3, tid=None):
        v1, v2, v3 = tuple(v1), tuple(v2), tuple(v3)
        if tri_area2(v1, v2, v3) < 0:
            v2, v3 = v3, v2
        self.id = tid
        self.v1 = v1
        self.v2 = v2
        self.v3 = v3
        self.edges = (Edge(v1, v2), Edge(v2, v3), Edge(v3, v1))
        self.neighbours = [None, None, None]
        self.alive = True

        # Circumcircle is cached: vertices never move once created
        center = circumcenter(v1, v2, v3)
        if center is None:
            self._circumcenter = ((v1[0] + v2[0] + v3[0]) / 3.0,
                                  (v1[1] + v2[1] + v3[1]) / 3.0)
            self._radius = None
        else:
            self._circumcenter = center
            self._radius = math.dist(center, v1)

    def __repr__(self):
        return f'Triangle(id={self.id}, {self.v1}, {self.v2}, {self.v3})'

    @property
    def vertices(self):
        return (self.v1, self.v2, self.v3)

    @property
    def is_border(self):
        return any(n is None for n in self.neighbours)

    @property
    def border_edges(self):
        return [e for e, n in zip(self.edges, self.neighbours) if n is None]

    @property
    def is_degenerate(self):
        return self._radius is None

    @property
    def circumcenter(self):
        """Circumcenter, or the centroid when the vertices are collinear."""
        return self._circumcenter

    @property
    def circumradius(self):
        return self._radius

    def in_circumcircle(self, point):
        """Strict containment in the cached circumcircle.

        Same rule as geometry.point_in_circumcircle: points on the circle
        and degenerate triangles give False.
        """
        if self._radius is None:
            return False
        return self._radius - math.dist(point, self._circumcenter) > EPS

    def has_vertex(self, point):
        return point == self.v1 or point == self.v2 or point == self.v3

    def contains_point(self, point):
        """Inclusive point-in-triangle test."""
        return all(tri_area2(e.begin, e.end, point) >= -EPS for e in self.edges)

    def edge_index(self, edge):
        """Slot of `edge` in this triangle, or None."""
        for i, e in enumerate(self.edges):
            if e == edge:
                return i
        return None

    def opposite_vertex(self, edge):
        """Vertex not on `edge` and its index in vertices."""
        for i, v in enumerate(self.vertices):
            if v != edge.begin and v != edge.end:
                return v, i
        return self.v1, 0


class TriangleMesh:
    """Live triangles addressed by stable integer handles.

    Handles are never reused. A removed triangle is dropped from the mesh
    and flagged alive=False, so stale handles fail the `in` test.
    """

    def __init__(self):
        self._triangles = {}
        self._next_id = 0

    def __len__(self):
        return len(self._triangles)

    def __contains__(self, tid):
        return tid in self._triangles

    def add(self, v1, v2, v3):
        """Create a triangle and return its handle."""
        tid = self._next_id
        self._next_id += 1
        self._triangles[tid] = Triangle(v1, v2, v3, tid)
        return tid

    def get(self, tid):
        return self._triangles[tid]

    def remove(self, tid):
        """Drop a triangle, clearing every slot that points back to it."""
        tri = self._triangles.pop(tid, None)
        if tri is None:
            return
        for nid in tri.neighbours:
            other = self._triangles.get(nid)
            if other is None:
                continue
            for i in range(3):
                if other.neighbours[i] == tid:
                    other.neighbours[i] = None
        tri.alive = False

    def live(self):
        """Live triangles in creation order."""
        return list(self._triangles.values())

    def neighbour(self, tid, index):
        """Neighbour triangle object across slot `index`, or None."""
        nid = self._triangles[tid].neighbours[index]
        return None if nid is None else self._triangles.get(nid)

    def set_neighbour(self, tid, index, nid):
        """Assign neighbours[index] and the matching slot in `nid`.

        The reciprocal slot is the one holding the edge equal to
        edges[index] of `tid`.
        """
        tri = self._triangles[tid]
        tri.neighbours[index] = nid
        if nid is None:
            return
        other = self._triangles[nid]
        j = other.edge_index(tri.edges[index])
        if j is not None:
            other.neighbours[j] = tid
