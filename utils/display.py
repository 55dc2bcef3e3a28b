from collections.abc import Sequence

from environment import Environment, render_route
from localtypes import MSTResult, PathResult
from transport import Transport
from weighted_graph import Graph


def display_graph(graph: Graph, title: str = "Graph"):
    kind = "directed" if graph.directed else "undirected"
    print(f"{title} ({kind}, {len(graph)} vertices, {graph.edge_count()} edges)")
    graph.print()


def display_mst(result: MSTResult, method: str = ""):
    print(f"\n{method.capitalize()} MST edges:" if method else "\nMST edges:")
    for u, v in result.edges:
        print(f"{u} - {v}")
    print(f"Total weight = {result.weight}")


def display_path(result: PathResult, start: object, end: object):
    if not result.found:
        print(f"No path from {start} to {end}")
        return
    print(f"Shortest path: {render_route(result.path)}")
    print(f"Total distance: {result.distance}")


def display_environment(environment: Environment):
    print(environment.describe())
    print()


def display_transports(transports: Sequence[Transport]):
    for transport in transports:
        print(transport.info())
        print()
