"""
Type definitions for the weighted graph and its consumers.

This module contains the custom types used throughout the library,
organized by their primary use cases.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Protocol, TypeAlias, TypeVar


class Comparable(Protocol):
    """Anything with a total order, usable as a mapping key."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __hash__(self) -> int: ...


# Vertex keys: any hashable, totally ordered value (ints, strings, tuples...)
V = TypeVar("V", bound=Comparable)

# Weights are integers; distances are tracked as floats internally
Weight: TypeAlias = int
Distance: TypeAlias = float

# Adjacency
K = TypeVar("K")
Neighbor: TypeAlias = tuple[K, Weight]  # (neighbor, weight)
Arc: TypeAlias = tuple[K, K]  # (from, to)
WeightedEdge: TypeAlias = tuple[Weight, K, K]  # (weight, u, v), sortable by weight


class MSTResult(NamedTuple):
    """Edges admitted into the spanning tree/forest and their total weight."""

    edges: list[Arc[Any]]
    weight: Weight


class PathResult(NamedTuple):
    """
    Vertices from start to end and the total cost.

    An empty path with distance -1 means the end is unreachable.
    """

    path: list[Any]
    distance: int

    @property
    def found(self) -> bool:
        return bool(self.path)
