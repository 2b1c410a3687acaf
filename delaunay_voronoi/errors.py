"""Exceptions raised by the triangulation and Voronoi engines."""


class TopologyError(RuntimeError):
    """Border bookkeeping no longer describes a valid triangulation."""

    def __init__(self, seed, edge_count):
        self.seed = seed
        self.edge_count = edge_count
        super().__init__(
            f"Seed {seed} touches {edge_count} border edges, expected 0 or 2"
        )
