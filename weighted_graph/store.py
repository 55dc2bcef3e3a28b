"""
Adjacency-list graph store over ordered vertex keys.

The store is a multigraph: parallel edges are kept as separate entries and
never deduplicated on insert. Iteration is always in ascending key order,
which the spanning tree algorithms rely on for their starting vertex and
tie-breaking.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Generic

from constants import DEFAULT_WEIGHT
from localtypes import V, Neighbor, Weight


class UnknownVertexError(LookupError):
    """Raised when a query names a vertex that is not in the graph."""

    def __init__(self, vertex: object) -> None:
        super().__init__(f"Unknown vertex: {vertex!r}")
        self.vertex = vertex


class Graph(Generic[V]):
    """
    Weighted graph, directed or undirected (fixed at construction).

    Example:
        >>> g = Graph[int]()
        >>> g.add_edge(2, 1, 5)
        >>> dict(g.adjacency())
        {1: ((2, 5),), 2: ((1, 5),)}
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._adjacency: dict[V, list[Neighbor[V]]] = {}
        self._order: list[V] | None = []

    @property
    def directed(self) -> bool:
        return self._directed

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, v: V) -> None:
        """Registers v as an isolated vertex. No-op if already present."""
        if v not in self._adjacency:
            self._adjacency[v] = []
            self._order = None

    def remove_vertex(self, v: V) -> None:
        """
        Removes v and every edge pointing at it.

        All neighbor lists are cleaned whatever the directedness, since a
        directed edge into v can start anywhere. No-op if v is absent.
        """
        if v not in self._adjacency:
            return
        del self._adjacency[v]
        self._order = None
        for vertex, neighbors in self._adjacency.items():
            self._adjacency[vertex] = [edge for edge in neighbors if edge[0] != v]

    def add_edge(self, u: V, v: V, weight: Weight = DEFAULT_WEIGHT) -> None:
        """
        Adds u -> v, registering missing endpoints.

        Undirected graphs also get the mirror v -> u, except for self-loops
        which are stored once.
        """
        self.add_vertex(u)
        self.add_vertex(v)

        self._adjacency[u].append((v, weight))
        if not self._directed and u != v:
            self._adjacency[v].append((u, weight))

    def remove_edge(self, u: V, v: V) -> None:
        """
        Removes all edges u -> v (every parallel copy).

        Undirected graphs also lose all v -> u copies. Missing vertices are
        ignored.
        """
        if u in self._adjacency:
            self._adjacency[u] = [edge for edge in self._adjacency[u] if edge[0] != v]

        if not self._directed and u != v and v in self._adjacency:
            self._adjacency[v] = [edge for edge in self._adjacency[v] if edge[0] != u]

    # =========================================================================
    # Queries
    # =========================================================================

    def vertices(self) -> tuple[V, ...]:
        """Vertices in ascending key order."""
        if self._order is None:
            self._order = sorted(self._adjacency)
        return tuple(self._order)

    def adjacency(self) -> Mapping[V, tuple[Neighbor[V], ...]]:
        """Read-only view of vertex -> (neighbor, weight) entries, keys ascending."""
        return MappingProxyType(
            {v: tuple(self._adjacency[v]) for v in self.vertices()}
        )

    def neighbors(self, v: V) -> tuple[Neighbor[V], ...]:
        if v not in self._adjacency:
            raise UnknownVertexError(v)
        return tuple(self._adjacency[v])

    def edge_weight(self, u: V, v: V) -> Weight:
        """Weight of the cheapest edge u -> v."""
        weights = [w for to, w in self.neighbors(u) if to == v]
        if not weights:
            raise ValueError(f"No edge from {u!r} to {v!r}")
        return min(weights)

    def edge_count(self) -> int:
        """Number of stored edges, counting each undirected edge once."""
        entries = sum(len(neighbors) for neighbors in self._adjacency.values())
        if self._directed:
            return entries
        loops = sum(
            1 for u, neighbors in self._adjacency.items() for v, _ in neighbors if u == v
        )
        return (entries - loops) // 2 + loops

    def require(self, *vertices: V) -> None:
        """Raises UnknownVertexError for the first vertex not in the graph."""
        for v in vertices:
            if v not in self._adjacency:
                raise UnknownVertexError(v)

    def __contains__(self, v: object) -> bool:
        return v in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[V]:
        return iter(self.vertices())

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, {len(self)} vertices, {self.edge_count()} edges)"

    def print(self) -> None:
        """Diagnostic dump, one line per vertex."""
        for vertex, neighbors in self.adjacency().items():
            edges = " ".join(f"({to}, {w})" for to, w in neighbors)
            print(f"{vertex} -> {edges}")
