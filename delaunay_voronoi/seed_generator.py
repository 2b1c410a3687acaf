"""
Seed point generation for Voronoi diagrams.

Generates seed points in the unit square [0, 1]^2 with a choice of
distributions. Reproducible through `random_seed`.
"""

import enum
import math
import random

from .config import settings


class SeedDistribution(enum.Enum):
    RANDOM = 'random'
    REGULAR = 'regular'
    SIN_WAVE = 'sin_wave'


def generate_seeds(count, random_seed=1, distribution=SeedDistribution.RANDOM,
                   min_distance=None):
    """Generate seed points in the unit square.

    Args:
        count: Number of points to generate before redundant ones are
               dropped.
        random_seed: Random seed for reproducibility.
        distribution: RANDOM (uniform), REGULAR (one jittered point per
                      cell of a floor(sqrt(count)) grid) or SIN_WAVE
                      (one point per cell, height following sin(i)).
        min_distance: Points closer than this to another are dropped,
                      defaults to settings.min_seed_distance.

    Returns:
        List of (x, y) seed points.
    """
    if count < 0:
        raise ValueError(f"Seed count must be non-negative, got {count}")
    if count == 0:
        return []

    if min_distance is None:
        min_distance = settings.min_seed_distance

    rng = random.Random(random_seed)
    distribution = SeedDistribution(distribution)

    if distribution is SeedDistribution.RANDOM:
        seeds = [(rng.random(), rng.random()) for _ in range(count)]
    elif distribution is SeedDistribution.REGULAR:
        seeds = [_cell_point(i, count, rng.random(), rng.random())
                 for i in range(count)]
    else:
        seeds = [_cell_point(i, count, 0.5, (math.sin(i) + 1) / 2.0)
                 for i in range(count)]

    return delete_redundant(seeds, min_distance)


def _cell_point(index, count, u, v):
    """Point at (u, v) inside the grid cell assigned to index.

    Cells are walked row by row; indices beyond rows * rows wrap
    around to the first cell.
    """
    rows = int(math.floor(math.sqrt(count)))
    cell_size = 1.0 / rows
    col = index % rows
    row = (index // rows) % rows
    return ((col + u) * cell_size, (row + v) * cell_size)


def delete_redundant(seeds, min_distance=0.01):
    """Drop every seed that has another seed within min_distance."""
    kept = []
    for i, s1 in enumerate(seeds):
        if all(math.dist(s1, s2) > min_distance
               for j, s2 in enumerate(seeds) if j != i):
            kept.append(s1)
    return kept


def move_seed(seeds, index, new_pos, min_distance=0.02):
    """Move one seed in place.

    The new position is clamped to [0, 1]^2. The move is refused if it
    changes nothing or lands within min_distance of another seed.

    Returns:
        True if the seed was moved.
    """
    new_pos = (min(max(float(new_pos[0]), 0.0), 1.0),
               min(max(float(new_pos[1]), 0.0), 1.0))
    if new_pos == tuple(seeds[index]):
        return False

    for i, other in enumerate(seeds):
        if i != index and math.dist(other, new_pos) < min_distance:
            return False

    seeds[index] = new_pos
    return True
