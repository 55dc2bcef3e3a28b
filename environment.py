"""
The world model: named points, routes between them and obstacles.

The environment only consumes the graph through two operations, computing
a path between two nodes and rendering a sequence of nodes.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from constants import (
    DEMO_OBSTACLES,
    DEMO_POINTS,
    DEMO_ROUTES,
    EMPTY_ROUTE,
    PATH_SEPARATOR,
)
from localtypes import V
from transport import Transport
from weighted_graph import Graph, compute_path

logger = logging.getLogger(__name__)


class MapObject(ABC):
    """Anything located on the 2D map, at (x, y) km."""

    x: float
    y: float

    @abstractmethod
    def info(self) -> str: ...


@dataclass(frozen=True)
class Point(MapObject):
    name: str
    x: float
    y: float

    def info(self) -> str:
        return f"Point: {self.name}"


@dataclass(frozen=True)
class Obstacle(MapObject):
    description: str
    x: float
    y: float

    def info(self) -> str:
        return f"Obstacle: {self.description}"


@dataclass(frozen=True)
class Route:
    """A connection from start to destination, `distance` km long."""

    start: Point
    destination: Point
    distance: float

    def describe(self) -> str:
        return (
            f"Route from {self.start.name} to {self.destination.name} "
            f"({self.distance} km)"
        )


def render_route(route: Sequence[object]) -> str:
    """Renders a node sequence as 'a -> b -> c'."""
    if not route:
        return EMPTY_ROUTE
    return PATH_SEPARATOR.join(str(node) for node in route)


class Environment:
    """Holds every route and obstacle, and moves transports along paths."""

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._obstacles: list[Obstacle] = []

    @property
    def routes(self) -> tuple[Route, ...]:
        return tuple(self._routes)

    @property
    def obstacles(self) -> tuple[Obstacle, ...]:
        return tuple(self._obstacles)

    def add_route(self, route: Route) -> None:
        self._routes.append(route)

    def add_obstacle(self, obstacle: Obstacle) -> None:
        self._obstacles.append(obstacle)

    def clear_routes(self) -> None:
        self._routes.clear()

    def clear_obstacles(self) -> None:
        self._obstacles.clear()

    def obstacles_on(self, route: Route) -> tuple[Obstacle, ...]:
        """Obstacles inside the box spanned by the route's endpoints."""
        a, b = route.start, route.destination
        return tuple(
            o
            for o in self._obstacles
            if min(a.x, b.x) <= o.x <= max(a.x, b.x)
            and min(a.y, b.y) <= o.y <= max(a.y, b.y)
        )

    def describe(self) -> str:
        lines = ["Environment overview", "", "Routes:"]
        lines.extend(route.describe() for route in self._routes)
        lines.extend(["", "Obstacles:"])
        lines.extend(
            f"- {o.description} at ({o.x}, {o.y})" for o in self._obstacles
        )
        return "\n".join(lines)

    def to_graph(self, directed: bool = False) -> Graph[str]:
        """
        Builds a graph keyed by point name.

        Each route becomes one edge weighted by its distance rounded to an
        integer. Parallel routes stay parallel edges.
        """
        graph = Graph[str](directed=directed)
        for route in self._routes:
            graph.add_edge(
                route.start.name, route.destination.name, round(route.distance)
            )
        return graph

    def find_optimal_route(
        self, graph: Graph[V], start: V, end: V, transport: Transport
    ) -> list[V]:
        """
        Cheapest node sequence from start to end, empty if unreachable.

        Raises:
            UnknownVertexError: If start or end is not in the graph.
        """
        logger.info(f"Finding optimal route for {transport.name}...")
        path, distance = compute_path(graph, start, end)
        if path:
            logger.info(f"Optimal route: {render_route(path)} ({distance} km)")
        else:
            logger.info(f"No route from {start} to {end}")
        return path

    def move_transport(
        self, transport: Transport, route: Sequence[V], graph: Graph[V]
    ) -> float:
        """
        Moves the transport hop by hop along route.

        Each hop costs the cheapest edge between its two nodes. Movement stops
        at the first hop the transport cannot complete.

        Returns:
            Total distance travelled.
        """
        logger.info(f"{transport.name} moves along the route: {render_route(route)}")
        travelled = 0.0
        for u, v in zip(route, route[1:]):
            hop = graph.edge_weight(u, v)
            moved = transport.move(hop)
            travelled += moved
            if moved < hop:
                logger.warning(f"{transport.name} stopped between {u} and {v}")
                break
        return travelled


def demo_environment() -> Environment:
    """The sample network from constants.py."""
    points = {name: Point(name, x, y) for name, (x, y) in DEMO_POINTS.items()}
    environment = Environment()
    for start, destination, distance in DEMO_ROUTES:
        environment.add_route(Route(points[start], points[destination], distance))
    for description, x, y in DEMO_OBSTACLES:
        environment.add_obstacle(Obstacle(description, x, y))
    return environment
