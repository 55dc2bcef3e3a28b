"""
TUI for exploring an environment's routes.

Usage:
    python -m utils.io.route_explorer
    python main.py --explore
"""

from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import ScrollableContainer
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Label, Static

from environment import Environment, Route, demo_environment
from weighted_graph import Graph, MSTMethod, minimum_spanning_tree, shortest_path


def path_to_rich_text(path: list[str]) -> Text:
    """Render a node sequence with highlighted endpoints."""
    text = Text()
    if not path:
        text.append("(no route)", style="italic red")
        return text
    for i, node in enumerate(path):
        if i:
            text.append(" -> ", style="dim")
        style = "bold green" if i in (0, len(path) - 1) else "bold"
        text.append(node, style=style)
    return text


class RouteDetailScreen(Screen):
    """Screen showing the shortest path between a route's endpoints."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
        Binding("q", "app.pop_screen", "Back"),
    ]

    CSS = """
    RouteDetailScreen {
        background: $surface;
    }

    .route-title {
        text-align: center;
        text-style: bold;
        padding: 1;
        background: $primary;
        color: $text;
        width: 100%;
    }

    .section-title {
        text-style: bold;
        padding: 1 0;
        color: $secondary;
    }

    #content {
        height: 100%;
        padding: 1 2;
    }
    """

    def __init__(self, route: Route, graph: Graph[str], **kwargs) -> None:
        super().__init__(**kwargs)
        self.route = route
        self.graph = graph

    def compose(self) -> ComposeResult:
        yield Header()
        yield ScrollableContainer(id="content")
        yield Footer()

    def on_mount(self) -> None:
        """Compute and display the shortest path."""
        container = self.query_one("#content")
        start, end = self.route.start.name, self.route.destination.name

        container.mount(Label(self.route.describe(), classes="route-title"))

        result = shortest_path(self.graph, start, end)
        container.mount(Label("Shortest path", classes="section-title"))
        container.mount(Static(path_to_rich_text(result.path)))
        if result.found:
            container.mount(Label(f"Total distance: {result.distance} km"))
            hops = len(result.path) - 1
            container.mount(Label(f"Hops: {hops}"))


class SpanningTreeScreen(Screen):
    """Screen comparing the three spanning tree algorithms."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
        Binding("q", "app.pop_screen", "Back"),
    ]

    def __init__(self, graph: Graph[str], **kwargs) -> None:
        super().__init__(**kwargs)
        self.graph = graph

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(id="mst-table")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.add_columns("Method", "Edges", "Total weight", "Tree")
        for method in MSTMethod:
            result = minimum_spanning_tree(self.graph, method)
            tree = ", ".join(f"{u}-{v}" for u, v in result.edges)
            table.add_row(
                method.value, str(len(result.edges)), str(result.weight), tree
            )


class RouteListScreen(Screen):
    """Main screen showing the list of routes."""

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("enter", "select_route", "View Route"),
        Binding("m", "show_mst", "Spanning Tree"),
    ]

    CSS = """
    RouteListScreen {
        background: $surface;
    }

    DataTable {
        height: 100%;
    }

    DataTable > .datatable--header {
        text-style: bold;
        background: $primary;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(id="route-table")
        yield Footer()

    def on_mount(self) -> None:
        """Populate the route table."""
        app = cast("RouteExplorerApp", self.app)
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.add_columns("Start", "Destination", "Distance (km)", "Obstacles")

        for i, route in enumerate(app.environment.routes):
            table.add_row(
                route.start.name,
                route.destination.name,
                f"{route.distance:.1f}",
                str(len(app.environment.obstacles_on(route))),
                key=str(i),
            )

    def get_selected_route(self) -> Route | None:
        """Get the currently highlighted route."""
        table = self.query_one(DataTable)
        routes = cast("RouteExplorerApp", self.app).environment.routes
        if table.cursor_row is not None and table.cursor_row < len(routes):
            return routes[table.cursor_row]
        return None

    def open_route(self, route: Route) -> None:
        graph = cast("RouteExplorerApp", self.app).graph
        self.app.push_screen(RouteDetailScreen(route, graph))

    def action_select_route(self) -> None:
        """Open the selected route."""
        route = self.get_selected_route()
        if route is not None:
            self.open_route(route)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Handle click on a row."""
        if event.row_key.value is not None:
            routes = cast("RouteExplorerApp", self.app).environment.routes
            self.open_route(routes[int(event.row_key.value)])

    def action_show_mst(self) -> None:
        graph = cast("RouteExplorerApp", self.app).graph
        self.app.push_screen(SpanningTreeScreen(graph))


class RouteExplorerApp(App):
    """TUI application for exploring routes of an environment."""

    TITLE = "Route Explorer"
    SUB_TITLE = "Browse routes, shortest paths and spanning trees"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(self, environment: Environment, **kwargs) -> None:
        super().__init__(**kwargs)
        self.environment = environment
        self.graph = environment.to_graph()

    def on_mount(self) -> None:
        """Push the main screen."""
        self.push_screen(RouteListScreen())

    def action_toggle_dark(self) -> None:
        """Toggle dark mode."""
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"


def main(environment: Environment | None = None):
    """Run the route explorer."""
    app = RouteExplorerApp(environment or demo_environment())
    app.run()


if __name__ == "__main__":
    main()
