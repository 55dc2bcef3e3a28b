"""
Connectivity queries over the graph store, ignoring edge direction.
"""

from localtypes import V
from utils.graph import nodes_to_connected_components

from .store import Graph


def connected_components(graph: Graph[V]) -> frozenset[frozenset[V]]:
    """Weakly connected components: an edge links its endpoints both ways."""
    linked: dict[V, set[V]] = {v: set() for v in graph}
    for u, neighbors in graph.adjacency().items():
        for v, _ in neighbors:
            linked[u].add(v)
            linked[v].add(u)
    return nodes_to_connected_components(set(linked), linked.__getitem__)


def is_connected(graph: Graph[V]) -> bool:
    """True for a single component. The empty graph counts as connected."""
    return len(connected_components(graph)) <= 1
