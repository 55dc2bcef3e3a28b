"""
Plan and drive transports over a weighted route network.

Builds the demo environment, dumps its graph, computes minimum spanning
trees with the selected algorithm(s), then plans the shortest route between
two points and moves a transport along it.
"""

import logging

from constants import LOG_FORMAT
from environment import Environment, demo_environment
from transport import Car, Helicopter, Train, Transport, Yacht
from utils.display import (
    display_environment,
    display_graph,
    display_mst,
    display_path,
    display_transports,
)
from weighted_graph import (
    MSTMethod,
    UnknownVertexError,
    minimum_spanning_tree,
    shortest_path,
)

logger = logging.getLogger(__name__)

TRANSPORTS = {
    "car": lambda: Car("Sedan", 90.0, 4, "petrol", 50.0, 0.07),
    "train": lambda: Train("Intercity", 160.0, 48, 8, 4000.0, 3.5),
    "yacht": lambda: Yacht("Seabird", 30.0, "diesel", 4, 800.0, 1.2),
    "helicopter": lambda: Helicopter("Rotor", 220.0, 1500.0, 5, 600.0, 0.9),
}


def run(
    environment: Environment,
    algorithms: list[MSTMethod],
    start: str,
    end: str,
    transport: Transport,
    directed: bool = False,
) -> float:
    """
    Runs the whole demo on an environment.

    Returns:
        Distance the transport travelled.
    """
    display_environment(environment)
    graph = environment.to_graph(directed=directed)
    display_graph(graph, "Route network")

    for method in algorithms:
        result = minimum_spanning_tree(graph, method, verbose=True)
        display_mst(result, method.value)

    print()
    display_path(shortest_path(graph, start, end), start, end)
    print()

    display_transports([transport])
    route = environment.find_optimal_route(graph, start, end, transport)
    travelled = environment.move_transport(transport, route, graph)
    logger.info(f"{transport.name} travelled {travelled} km, now at {transport.position} km")
    return travelled


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Route planning over a weighted graph")
    parser.add_argument(
        "--algorithm",
        choices=[m.value for m in MSTMethod] + ["all"],
        default="all",
        help="Minimum spanning tree algorithm to run",
    )
    parser.add_argument("--start", default="Airport", help="Start point name")
    parser.add_argument("--end", default="Stadium", help="Destination point name")
    parser.add_argument(
        "--transport",
        choices=sorted(TRANSPORTS),
        default="car",
        help="Vehicle to move along the route",
    )
    parser.add_argument(
        "--directed", action="store_true", help="Treat routes as one-way"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--explore", action="store_true", help="Open the route explorer TUI"
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.explore:
        from utils.io.route_explorer import main as explore

        explore()
    else:
        algorithms = (
            list(MSTMethod) if args.algorithm == "all" else [MSTMethod(args.algorithm)]
        )
        try:
            run(
                demo_environment(),
                algorithms,
                args.start,
                args.end,
                TRANSPORTS[args.transport](),
                directed=args.directed,
            )
        except UnknownVertexError as error:
            parser.error(str(error))
