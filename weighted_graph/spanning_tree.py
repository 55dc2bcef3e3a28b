"""
Minimum spanning tree algorithms.

Functions:
    mst_prim(graph)     - Lazy-deletion Prim from the first vertex in key order
    mst_kruskal(graph)  - Sorted edge scan with union-find cycle rejection
    mst_boruvka(graph)  - Cheapest-outgoing-edge rounds with union-find contraction
    minimum_spanning_tree(graph, method) - Dispatch by MSTMethod

All three return MSTResult(edges, weight) and only apply to undirected,
non-empty graphs: anything else yields MSTResult([], 0).

Ties between equal-weight candidates are broken by discovery order (vertices
ascending, then neighbor insertion order), so results are reproducible.
"""

import heapq
import logging
from enum import StrEnum

from localtypes import V, Arc, MSTResult, Weight, WeightedEdge
from utils.graph import DenseIndex, undirected_edges
from utils.union_find import DisjointSetUnion

from .store import Graph

logger = logging.getLogger(__name__)


class MSTMethod(StrEnum):
    """Available minimum spanning tree algorithms."""

    PRIM = "prim"
    KRUSKAL = "kruskal"
    BORUVKA = "boruvka"


def _not_applicable(graph: Graph[V], name: str, verbose: bool) -> bool:
    if len(graph) == 0:
        if verbose:
            logger.info("Graph is empty.")
        return True
    if graph.directed:
        if verbose:
            logger.info(f"{name}'s algorithm works only for undirected graphs.")
        return True
    return False


def _report(name: str, edges: list[Arc[V]], total: Weight, verbose: bool) -> None:
    if not verbose:
        return
    logger.info(f"{name} MST edges:")
    for u, v in edges:
        logger.info(f"  {u} - {v}")
    logger.info(f"Total weight = {total}")


def mst_prim(graph: Graph[V], verbose: bool = False) -> MSTResult:
    """
    Prim's algorithm with a lazily pruned min-heap.

    Grows a single tree from the first vertex in key order, so on a
    disconnected graph only that vertex's component is spanned.

    Stale heap entries (whose destination already joined the tree) are
    discarded when popped rather than removed on insertion.
    """
    if _not_applicable(graph, "Prim", verbose):
        return MSTResult([], 0)

    adjacency = graph.adjacency()
    start = graph.vertices()[0]
    in_tree: set[V] = {start}
    edges: list[Arc[V]] = []
    total = 0

    heap: list[tuple[Weight, Arc[V]]] = []
    for to, w in adjacency[start]:
        if to != start:
            heapq.heappush(heap, (w, (start, to)))

    while heap:
        weight, (u, v) = heapq.heappop(heap)
        if v in in_tree:
            continue

        in_tree.add(v)
        total += weight
        edges.append((u, v))

        for to, w in adjacency[v]:
            if to not in in_tree:
                heapq.heappush(heap, (w, (v, to)))

    _report("Prim", edges, total, verbose)
    return MSTResult(edges, total)


def mst_kruskal(graph: Graph[V], verbose: bool = False) -> MSTResult:
    """
    Kruskal's algorithm.

    Candidates are sorted by weight only; the sort is stable so equal
    weights keep their discovery order. Produces V - C edges for C connected
    components.
    """
    if _not_applicable(graph, "Kruskal", verbose):
        return MSTResult([], 0)

    candidates = sorted(undirected_edges(graph.adjacency()), key=lambda e: e[0])
    index = DenseIndex(graph.vertices())
    dsu = DisjointSetUnion(len(index))
    logger.debug(f"Kruskal: {len(candidates)} candidate edges over {len(index)} vertices")

    edges: list[Arc[V]] = []
    total = 0
    for w, u, v in candidates:
        set_u = dsu.find_set(index.index_of[u])
        set_v = dsu.find_set(index.index_of[v])
        if set_u != set_v:
            dsu.union_sets(set_u, set_v)
            edges.append((u, v))
            total += w

    _report("Kruskal", edges, total, verbose)
    return MSTResult(edges, total)


def mst_boruvka(graph: Graph[V], verbose: bool = False) -> MSTResult:
    """
    Borůvka's algorithm.

    Each round records, for every component, its cheapest edge leaving it
    (the first one found wins ties), then merges along those edges. A round
    with no merge means the remaining components are disconnected, and the
    loop stops with a spanning forest.
    """
    if _not_applicable(graph, "Boruvka", verbose):
        return MSTResult([], 0)

    candidates: list[WeightedEdge[V]] = undirected_edges(graph.adjacency())
    index = DenseIndex(graph.vertices())
    dsu = DisjointSetUnion(len(index))

    edges: list[Arc[V]] = []
    total = 0
    trees = len(index)
    rounds = 0

    while trees > 1:
        rounds += 1
        cheapest: list[int | None] = [None] * len(index)

        for i, (w, u, v) in enumerate(candidates):
            set_u = dsu.find_set(index.index_of[u])
            set_v = dsu.find_set(index.index_of[v])
            if set_u == set_v:
                continue

            for component in (set_u, set_v):
                best = cheapest[component]
                if best is None or candidates[best][0] > w:
                    cheapest[component] = i

        merged = False
        for edge_index in cheapest:
            if edge_index is None:
                continue
            w, u, v = candidates[edge_index]
            # An earlier merge this round may already have joined both ends
            if dsu.union_sets(index.index_of[u], index.index_of[v]):
                edges.append((u, v))
                total += w
                trees -= 1
                merged = True

        logger.debug(f"Boruvka round {rounds}: {trees} trees left")
        if not merged:
            break

    _report("Boruvka", edges, total, verbose)
    return MSTResult(edges, total)


_ALGORITHMS = {
    MSTMethod.PRIM: mst_prim,
    MSTMethod.KRUSKAL: mst_kruskal,
    MSTMethod.BORUVKA: mst_boruvka,
}


def minimum_spanning_tree(
    graph: Graph[V], method: MSTMethod | str = MSTMethod.PRIM, verbose: bool = False
) -> MSTResult:
    """
    Runs the requested algorithm.

    Raises:
        ValueError: If method is not one of MSTMethod's values.
    """
    return _ALGORITHMS[MSTMethod(method)](graph, verbose=verbose)
