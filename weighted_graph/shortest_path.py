"""
Single-source shortest paths (Dijkstra).

Weights are assumed non-negative; this is not checked. Works on directed and
undirected graphs alike.
"""

import heapq
import logging
import math

from constants import NO_PATH_DISTANCE
from localtypes import V, Distance, PathResult

from .store import Graph

logger = logging.getLogger(__name__)


def shortest_path(
    graph: Graph[V], start: V, end: V, verbose: bool = False
) -> PathResult:
    """
    Returns the cheapest path from start to end and its cost.

    The heap uses lazy deletion: an entry whose distance is worse than the
    current best for its vertex is stale and skipped when popped. The cost
    is accumulated as a float and truncated to an int on return.

    Args:
        graph: Graph to search. It is not modified.
        start: Source vertex.
        end: Target vertex.
        verbose: Log the resulting path at INFO.

    Returns:
        PathResult(path, distance), or PathResult([], -1) if end is unreachable.

    Raises:
        UnknownVertexError: If start or end is not in the graph.
    """
    graph.require(start, end)
    adjacency = graph.adjacency()

    dist: dict[V, Distance] = {v: math.inf for v in adjacency}
    parent: dict[V, V] = {start: start}
    dist[start] = 0.0

    heap: list[tuple[Distance, V]] = [(0.0, start)]
    pops = 0
    while heap:
        d, u = heapq.heappop(heap)
        pops += 1
        if d > dist[u]:
            continue

        for v, w in adjacency[u]:
            candidate = dist[u] + w
            if candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u
                heapq.heappush(heap, (candidate, v))

    logger.debug(f"Dijkstra from {start}: {pops} heap pops")

    if dist[end] == math.inf:
        if verbose:
            logger.info(f"No path from {start} to {end}")
        return PathResult([], NO_PATH_DISTANCE)

    path = [end]
    while path[-1] != start:
        path.append(parent[path[-1]])
    path.reverse()

    total = int(dist[end])
    if verbose:
        logger.info(f"Shortest path: {' '.join(str(v) for v in path)}")
        logger.info(f"Total distance: {total}")

    return PathResult(path, total)


def compute_path(graph: Graph[V], start: V, end: V) -> PathResult:
    """Path between two graph nodes, as consumed by the environment layer."""
    return shortest_path(graph, start, end)
