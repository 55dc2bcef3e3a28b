"""
Functions related to graphs
"""

from collections import deque
from collections.abc import Iterable, Mapping, Sequence, Set
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class DenseIndex(Generic[T]):
    """
    Bidirectional lookup between vertex keys and the range 0..n-1.

    Indices follow the order in which `vertices` is given, so building it
    from the ascending vertex order reproduces that order.
    """

    def __init__(self, vertices: Iterable[T]) -> None:
        self.vertex_at: list[T] = list(vertices)
        self.index_of: dict[T, int] = {
            vertex: i for i, vertex in enumerate(self.vertex_at)
        }

    def __len__(self) -> int:
        return len(self.vertex_at)


def undirected_edges(
    adjacency: Mapping[T, Sequence[tuple[T, int]]],
) -> list[tuple[int, T, T]]:
    """
    Collect every undirected edge once, as (weight, u, v) triples.

    An entry u -> v is kept unless its mirror v -> u was already recorded,
    which happens when v was scanned before u. Parallel edges seen from the
    same endpoint are all kept. Self-loops are dropped.

    Args:
        adjacency: vertex -> sequence of (neighbor, weight), iterated in
            the order the triples should be discovered.

    Returns:
        list of (weight, u, v) in discovery order.
    """
    edges: list[tuple[int, T, T]] = []
    recorded: set[tuple[T, T]] = set()
    for u, neighbors in adjacency.items():
        for v, weight in neighbors:
            if u == v or (v, u) in recorded:
                continue
            edges.append((weight, u, v))
            recorded.add((u, v))
    return edges


def nodes_to_connected_components(
    nodes: Set[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> frozenset[frozenset[T]]:
    """
    Extract connected components from an undirected graph structure.

    Args:
        nodes: set of nodes in the graph.
        node_to_neighbours: Function returning the nodes a given node is linked to,
            in either direction.

    Returns:
        frozenset[frozenset[T]]: set of connected components of the graph
    """

    seen: set[T] = set()
    components = set()

    for node in nodes:
        if node in seen:
            continue

        component = set()
        queue = deque([node])
        seen.add(node)
        while queue:
            current = queue.popleft()
            component.add(current)
            for neighbour in node_to_neighbours(current):
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)

        components.add(frozenset(component))
    return frozenset(components)
