"""Core graph structures: adjacency graph and union-find."""

from socialgraph.graph.adjacency import AdjacencyGraph
from socialgraph.graph.union_find import UnionFind

__all__ = ["AdjacencyGraph", "UnionFind"]
