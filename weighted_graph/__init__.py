"""
Weighted graph: a generic adjacency-list store with spanning tree and
shortest path algorithms.

The store keeps vertices in ascending key order and behaves as a
multigraph. Algorithms read it without mutating it and own all of their
working state (heaps, union-find, distance maps), so each call is isolated.

Components:
- Graph for storage and mutation
- mst_prim, mst_kruskal, mst_boruvka for minimum spanning trees/forests
- shortest_path / compute_path for Dijkstra
- connected_components for weak connectivity

Example Usage:
    >>> from weighted_graph import Graph, mst_kruskal, shortest_path
    >>> g = Graph[int]()
    >>> g.add_edge(1, 2, 2)
    >>> g.add_edge(2, 3, 1)
    >>> g.add_edge(1, 3, 3)
    >>> mst_kruskal(g).weight
    3
    >>> shortest_path(g, 1, 3)
    PathResult(path=[1, 3], distance=3)
"""

from weighted_graph.components import connected_components, is_connected
from weighted_graph.shortest_path import compute_path, shortest_path
from weighted_graph.spanning_tree import (
    MSTMethod,
    minimum_spanning_tree,
    mst_boruvka,
    mst_kruskal,
    mst_prim,
)
from weighted_graph.store import Graph, UnknownVertexError

__all__ = [
    "Graph",
    "MSTMethod",
    "UnknownVertexError",
    "compute_path",
    "connected_components",
    "is_connected",
    "minimum_spanning_tree",
    "mst_boruvka",
    "mst_kruskal",
    "mst_prim",
    "shortest_path",
]
