"""
Incremental Delaunay triangulation (Bowyer-Watson).

Seeds are expected in [0, 1]^2. The mesh starts as two triangles
covering a bounding square [-m, 1 + m]^2; every insertion carves the
cavity of triangles whose circumcircle contains the new point and
refills it with a fan around that point. finalize() removes the
bounding square and repairs the concave dents it leaves on the hull.
"""

import structlog

from .config import settings as default_settings
from .edge import Edge
from .geometry import points_equal, polar_angle
from .triangle import TriangleMesh

logger = structlog.get_logger()

DOMAIN_CENTER = (0.5, 0.5)


class TriangulationObserver:
    """Receives mesh changes as they happen. All hooks are no-ops."""

    def on_triangles_removed(self, triangles):
        pass

    def on_triangles_added(self, triangles):
        pass

    def on_hole_polygon(self, edges):
        pass


class Border:
    """Hull edge oriented with the mesh on its left.

    `tid` is a hint: flips replace triangles, so Delaunay resolves the
    owner again whenever the hint is stale.
    """

    __slots__ = ('edge', 'tid')

    def __init__(self, edge, tid=None):
        self.edge = edge
        self.tid = tid

    def __repr__(self):
        return f'Border({self.edge.begin}, {self.edge.end}, tid={self.tid})'


class Delaunay:
    """Bowyer-Watson triangulator with a progressive stepping mode.

    Args:
        seeds: Points in [0, 1]^2, inserted in order.
        settings: Settings instance, defaults to the module settings.
        observer: TriangulationObserver notified of every mesh change.
    """

    def __init__(self, seeds=None, settings=None, observer=None):
        self.settings = settings or default_settings
        self.observer = observer or TriangulationObserver()
        self._seeds = [(float(p[0]), float(p[1])) for p in (seeds or [])]
        self.reset()

    def reset(self):
        self._mesh = TriangleMesh()
        self._vertices = []
        self._bounding_vertices = []
        self._borders = []
        self._finalized = False
        self.iterations = 0
        self.ended = False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def seeds(self):
        return list(self._seeds)

    @seeds.setter
    def seeds(self, points):
        self._seeds = [(float(p[0]), float(p[1])) for p in points]
        self.reset()

    @property
    def mesh(self):
        return self._mesh

    @property
    def triangles(self):
        return self._mesh.live()

    @property
    def vertices(self):
        """Inserted seeds, bounding vertices excluded."""
        return list(self._vertices)

    @property
    def bounding_vertices(self):
        return list(self._bounding_vertices)

    @property
    def borders(self):
        """Hull edges after finalize(), in chain order."""
        for border in self._borders:
            self._resolve(border)
        return list(self._borders)

    @property
    def seed_count(self):
        return len(self._seeds)

    @property
    def triangle_count(self):
        return len(self._mesh)

    @property
    def vertex_count(self):
        return len(self._vertices)

    @property
    def not_generated(self):
        return len(self._mesh) == 0

    def find_triangles_around_vertex(self, vertex):
        vertex = tuple(vertex)
        return [t for t in self._mesh.live() if t.has_vertex(vertex)]

    def borders_around(self, vertex):
        """Border entries having `vertex` as an endpoint."""
        vertex = tuple(vertex)
        return [b for b in self.borders if b.edge.contains_vertex(vertex)]

    # ------------------------------------------------------------------
    # Drivers
    # ------------------------------------------------------------------

    def triangulate(self, points=None):
        """Triangulate all seeds and remove the bounding square.

        Args:
            points: Replaces the seeds when given.

        Returns:
            List of live triangles.
        """
        if points is not None:
            self._seeds = [(float(p[0]), float(p[1])) for p in points]
        self.reset()
        for point in self._seeds:
            self.insert(point)
        self.finalize()
        self.iterations = len(self._seeds) + 1
        self.ended = True
        logger.debug("Triangulation complete", seeds=len(self._seeds),
                     vertices=len(self._vertices), triangles=len(self._mesh))
        return self.triangles

    def run_one_point(self):
        """Insert the next seed, or finalize once every seed is in."""
        if self.ended:
            return
        if self.iterations < len(self._seeds):
            self.insert(self._seeds[self.iterations])
        else:
            self.finalize()
        self.iterations += 1
        if self.iterations > len(self._seeds):
            self.ended = True

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def _init_bounding(self):
        m = self.settings.bounding_margin
        bl, br, tr, tl = (-m, -m), (1 + m, -m), (1 + m, 1 + m), (-m, 1 + m)
        self._bounding_vertices = [bl, br, tr, tl]
        first = self._mesh.add(bl, br, tr)
        second = self._mesh.add(bl, tr, tl)
        self._connect(first, second)
        self.observer.on_triangles_added(
            [self._mesh.get(first), self._mesh.get(second)])

    def _in_bounding_region(self, point):
        lo = -self.settings.bounding_margin
        hi = 1 + self.settings.bounding_margin
        return lo < point[0] < hi and lo < point[1] < hi

    def insert(self, point):
        """Add one point to the triangulation.

        Returns:
            True if the point was inserted, False if it duplicates a
            vertex, falls outside the bounding square or arrives after
            finalize().
        """
        point = (float(point[0]), float(point[1]))

        if self._finalized:
            logger.warning("Insertion after finalize skipped", point=point)
            return False
        if any(points_equal(point, v) for v in self._vertices):
            logger.debug("Duplicate point skipped", point=point)
            return False
        if not self._in_bounding_region(point):
            logger.warning("Point outside bounding region skipped", point=point)
            return False

        if not self._bounding_vertices:
            self._init_bounding()

        live = self._mesh.live()
        bad = [t.id for t in live if t.in_circumcircle(point)]
        if not bad:
            # Rounding can leave the point on every circle it touches
            bad = [t.id for t in live if t.contains_point(point)][:1]
        if not bad:
            logger.warning("No triangle contains point", point=point)
            return False

        bad_set = set(bad)
        cavity = []
        for tid in bad:
            tri = self._mesh.get(tid)
            for i, edge in enumerate(tri.edges):
                nid = tri.neighbours[i]
                if nid is None or nid not in bad_set:
                    cavity.append((edge, nid))

        removed = [self._mesh.get(tid) for tid in bad]
        for tid in bad:
            self._mesh.remove(tid)
        self.observer.on_triangles_removed(removed)

        fan = []
        for edge, outside in cavity:
            tid = self._mesh.add(edge.begin, edge.end, point)
            self._connect(tid, outside)
            fan.append(tid)

        # Consecutive fan triangles share the spoke (end, point)
        fan.sort(key=lambda t: polar_angle(self._mesh.get(t).v1, point))
        count = len(fan)
        for i, tid in enumerate(fan):
            self._connect(tid, fan[(i + 1) % count])
            self._connect(tid, fan[i - 1])

        self._vertices.append(point)
        self.observer.on_triangles_added([self._mesh.get(t) for t in fan])

        if self.settings.legalize_insertions:
            for tid in fan:
                if tid in self._mesh:
                    self.legalize(tid)

        logger.debug("Point inserted", point=point, removed=len(bad),
                     vertices=len(self._vertices), triangles=len(self._mesh))
        return True

    def _connect(self, tid, other):
        """Link two triangles across their shared edge, if they have one."""
        if other is None or other == tid:
            return False
        tri = self._mesh.get(tid)
        neighbour = self._mesh.get(other)
        for i, edge in enumerate(tri.edges):
            j = neighbour.edge_index(edge)
            if j is not None:
                tri.neighbours[i] = other
                neighbour.neighbours[j] = tid
                return True
        return False

    # ------------------------------------------------------------------
    # Legalization
    # ------------------------------------------------------------------

    def legalize(self, tid):
        """Flip illegal edges starting at one triangle.

        A side is illegal when the neighbour's vertex opposite the shared
        edge lies inside this triangle's circumcircle. Each flip queues
        the outer neighbours of the new pair. Propagation stops once
        settings.max_legalize_calls triangles have been examined.

        Returns:
            The (tid, tid) pair created by the first flip, or None if the
            triangle was already legal.
        """
        budget = self.settings.max_legalize_calls
        first = None
        pending = [tid]
        calls = 0
        while pending:
            if calls >= budget:
                logger.debug("Legalization budget exhausted", start=tid,
                             pending=len(pending))
                break
            current = pending.pop()
            if current not in self._mesh:
                continue
            calls += 1
            pair = self._flip_first_illegal(current)
            if pair is None:
                continue
            if first is None:
                first = pair
            for new_tid in pair:
                for nid in self._mesh.get(new_tid).neighbours:
                    if nid is not None and nid not in pair:
                        pending.append(nid)
        return first

    def _flip_first_illegal(self, tid):
        tri = self._mesh.get(tid)
        for side in range(3):
            nid = tri.neighbours[side]
            if nid is None:
                continue
            neighbour = self._mesh.get(nid)
            opposite, _ = neighbour.opposite_vertex(tri.edges[side])
            if tri.in_circumcircle(opposite):
                return self._flip(tid, side, nid)
        return None

    def _flip(self, tid, side, nid):
        """Swap the diagonal shared by triangle `tid` (slot `side`) and `nid`."""
        tri = self._mesh.get(tid)
        neighbour = self._mesh.get(nid)
        edge = tri.edges[side]
        opp1 = tri.vertices[(side + 2) % 3]
        opp2, k = neighbour.opposite_vertex(edge)

        outer_first = [tri.neighbours[(side + 1) % 3], neighbour.neighbours[k]]
        outer_second = [tri.neighbours[(side + 2) % 3],
                        neighbour.neighbours[(k + 2) % 3]]

        self._mesh.remove(tid)
        self._mesh.remove(nid)
        new_first = self._mesh.add(opp1, opp2, edge.end)
        new_second = self._mesh.add(opp2, opp1, edge.begin)

        self._connect(new_first, new_second)
        for other in outer_first:
            self._connect(new_first, other)
        for other in outer_second:
            self._connect(new_second, other)

        self.observer.on_triangles_removed([tri, neighbour])
        self.observer.on_triangles_added(
            [self._mesh.get(new_first), self._mesh.get(new_second)])
        return (new_first, new_second)

    # ------------------------------------------------------------------
    # Bounding square removal and hull repair
    # ------------------------------------------------------------------

    def finalize(self):
        """Remove the bounding square and fill concave dents on the hull."""
        if self._finalized:
            return
        self._finalized = True
        if not self._bounding_vertices:
            return

        bounding = set(self._bounding_vertices)
        doomed = [t for t in self._mesh.live()
                  if any(v in bounding for v in t.vertices)]
        for tri in doomed:
            self._mesh.remove(tri.id)
        self.observer.on_triangles_removed(doomed)

        self._borders = self._chain_borders(self._collect_borders())
        filled = self._repair_borders()
        logger.debug("Bounding square removed", removed=len(doomed),
                     filled=filled, borders=len(self._borders),
                     triangles=len(self._mesh))

    def _collect_borders(self):
        borders = []
        for tri in self._mesh.live():
            for i, edge in enumerate(tri.edges):
                if tri.neighbours[i] is None:
                    borders.append(Border(edge, tri.id))
        borders.sort(key=lambda b: polar_angle(b.edge.begin, DOMAIN_CENTER))
        return borders

    @staticmethod
    def _chain_borders(borders):
        """Reorder borders so each one starts where the previous ends."""
        by_begin = {}
        for border in borders:
            by_begin.setdefault(border.edge.begin, []).append(border)

        chained = []
        used = set()
        for start in borders:
            current = start
            while current is not None and id(current) not in used:
                used.add(id(current))
                chained.append(current)
                current = next((b for b in by_begin.get(current.edge.end, [])
                                if id(b) not in used), None)
        return chained

    def _repair_borders(self):
        """Fill concave border pairs until a full pass finds none."""
        filled = 0
        changed = True
        while changed and len(self._borders) >= 3:
            changed = False
            count = len(self._borders)
            for i in range(count):
                first = self._borders[i]
                second = self._borders[(i + 1) % count]
                if first.edge.end != second.edge.begin:
                    continue
                if not Edge.is_concave(first.edge, second.edge):
                    continue
                replacement = self._fill_dent(first, second)
                if (i + 1) % count == 0:
                    self._borders = [replacement] + self._borders[1:count - 1]
                else:
                    self._borders[i:i + 2] = [replacement]
                filled += 1
                changed = True
                break
        return filled

    def _fill_dent(self, first, second):
        v1 = first.edge.begin
        v2 = first.edge.end
        v3 = second.edge.end

        first_tid = self._resolve(first)
        second_tid = self._resolve(second)

        tid = self._mesh.add(v3, v2, v1)
        self._connect(tid, second_tid)
        self._connect(tid, first_tid)
        self.observer.on_hole_polygon([first.edge, second.edge])
        self.observer.on_triangles_added([self._mesh.get(tid)])

        self.legalize(tid)

        border = Border(Edge(v1, v3))
        self._resolve(border)
        return border

    def _resolve(self, border):
        """Make border.tid point at the live triangle owning the edge."""
        if border.tid in self._mesh:
            tri = self._mesh.get(border.tid)
            i = tri.edge_index(border.edge)
            if i is not None and tri.neighbours[i] is None:
                return border.tid
        border.tid = None
        for tri in self._mesh.live():
            i = tri.edge_index(border.edge)
            if i is not None and tri.neighbours[i] is None:
                border.tid = tri.id
                break
        return border.tid
