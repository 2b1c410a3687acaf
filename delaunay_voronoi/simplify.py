"""
Vertex simplification across a set of polygons.

Vertices from different regions that nearly coincide are snapped to a
shared position so that neighbouring regions keep identical corners.
"""

import math

from .geometry import centroid_of_points
from .polygon import Polygon


def _find(parent, i):
    while parent[i] != i:
        parent[i] = parent[parent[i]]
        i = parent[i]
    return i


def _cluster(points, radius):
    """Group point indices transitively linked by distances < radius."""
    parent = list(range(len(points)))
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            if math.dist(points[i], points[j]) < radius:
                ri, rj = _find(parent, i), _find(parent, j)
                if ri != rj:
                    parent[rj] = ri

    groups = {}
    for i in range(len(points)):
        groups.setdefault(_find(parent, i), []).append(i)
    return list(groups.values())


def _merge_map(points, radius):
    """Map every point to the centroid of its final cluster.

    Clusters are merged again while any two centroids are closer than
    radius, so the output positions are pairwise at least radius apart.
    """
    clusters = [[p] for p in points]
    while True:
        centroids = [centroid_of_points(members) for members in clusters]
        groups = _cluster(centroids, radius)
        if len(groups) == len(clusters):
            break
        clusters = [[m for g in group for m in clusters[g]] for group in groups]

    mapping = {}
    for members, center in zip(clusters, centroids):
        for p in members:
            mapping[p] = center
    return mapping


def _drop_repeats(vertices):
    """Remove consecutive duplicates, including the wrap-around pair."""
    result = []
    for v in vertices:
        if not result or result[-1] != v:
            result.append(v)
    while len(result) > 1 and result[0] == result[-1]:
        result.pop()
    return result


def simplify_vertices(polygons, radius=0.01):
    """Merge vertices closer than radius across all polygons.

    Args:
        polygons: List of Polygon.
        radius: Merge distance.

    Returns:
        New list of Polygon with merged vertices. Running it again on
        its own output changes nothing.
    """
    distinct = []
    seen = set()
    for polygon in polygons:
        for v in polygon.vertices:
            if v not in seen:
                seen.add(v)
                distinct.append(v)

    if radius <= 0 or not distinct:
        return [Polygon(p.vertices, seed=p.seed) for p in polygons]

    mapping = _merge_map(distinct, radius)
    return [Polygon(_drop_repeats([mapping[v] for v in p.vertices]), seed=p.seed)
            for p in polygons]
