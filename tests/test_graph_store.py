"""
Tests for the weighted_graph store.

Covers mutation semantics (multigraph, mirroring, bulk removal), the
ordered read-only view and connectivity helpers.
"""

import pytest

from utils.graph import DenseIndex, undirected_edges
from weighted_graph import Graph, UnknownVertexError, connected_components, is_connected


class TestMutation:
    def test_add_and_remove_vertices_and_edges(self):
        g = Graph[int]()
        g.add_vertex(1)
        g.add_vertex(2)
        g.add_edge(1, 2, 5)

        adj = g.adjacency()
        assert len(adj) == 2
        assert adj[1] == ((2, 5),)

        g.remove_edge(1, 2)
        assert g.adjacency()[1] == ()

        g.remove_vertex(1)
        assert 1 not in g.adjacency()

    def test_add_edge_registers_vertices_with_default_weight(self):
        g = Graph[str]()
        g.add_edge("a", "b")
        assert "a" in g and "b" in g
        assert g.adjacency()["a"] == (("b", 1),)

    def test_undirected_mirrors_edges(self):
        g = Graph[int]()
        g.add_edge(1, 2, 7)
        assert g.neighbors(2) == ((1, 7),)

    def test_directed_does_not_mirror(self):
        g = Graph[int](directed=True)
        g.add_edge(1, 2, 7)
        assert g.neighbors(1) == ((2, 7),)
        assert g.neighbors(2) == ()

    def test_self_loop_stored_once(self):
        g = Graph[int]()
        g.add_edge(1, 1, 3)
        assert g.neighbors(1) == ((1, 3),)

    def test_parallel_edges_are_kept(self):
        g = Graph[int]()
        g.add_edge(1, 2, 5)
        g.add_edge(1, 2, 2)
        assert g.neighbors(1) == ((2, 5), (2, 2))
        assert g.neighbors(2) == ((1, 5), (1, 2))

    def test_remove_edge_removes_all_parallel_copies(self):
        g = Graph[int]()
        g.add_edge(1, 2, 5)
        g.add_edge(1, 2, 2)
        g.add_edge(2, 1, 9)
        g.add_edge(1, 3, 1)

        g.remove_edge(1, 2)

        assert g.neighbors(1) == ((3, 1),)
        assert g.neighbors(2) == ()

    def test_remove_edge_directed_keeps_reverse(self):
        g = Graph[int](directed=True)
        g.add_edge(1, 2, 5)
        g.add_edge(2, 1, 4)
        g.remove_edge(1, 2)
        assert g.neighbors(1) == ()
        assert g.neighbors(2) == ((1, 4),)

    def test_remove_edge_missing_is_noop(self):
        g = Graph[int]()
        g.add_edge(1, 2)
        g.remove_edge(8, 9)
        g.remove_edge(1, 9)
        assert g.neighbors(1) == ((2, 1),)
        assert len(g) == 2

    def test_remove_vertex_strips_incoming_directed_edges(self):
        g = Graph[int](directed=True)
        g.add_edge(1, 3)
        g.add_edge(2, 3)
        g.add_edge(3, 1)

        g.remove_vertex(3)

        assert g.vertices() == (1, 2)
        assert g.neighbors(1) == ()
        assert g.neighbors(2) == ()

    def test_remove_missing_vertex_is_noop(self):
        g = Graph[int]()
        g.add_edge(1, 2)
        g.remove_vertex(5)
        assert g.vertices() == (1, 2)


class TestQueries:
    def test_keys_in_ascending_order(self):
        g = Graph[int]()
        for v in (3, 1, 2):
            g.add_vertex(v)
        assert list(g.adjacency()) == [1, 2, 3]
        assert list(g) == [1, 2, 3]

        g.add_vertex(0)
        assert g.vertices() == (0, 1, 2, 3)

    def test_adjacency_is_read_only(self):
        g = Graph[int]()
        g.add_edge(1, 2)
        with pytest.raises(TypeError):
            g.adjacency()[3] = ()  # type: ignore[index]

    def test_isolated_vertex(self):
        g = Graph[int]()
        g.add_vertex(4)
        assert g.adjacency()[4] == ()
        assert len(g) == 1

    def test_directed_is_fixed(self):
        g = Graph[int](directed=True)
        assert g.directed
        with pytest.raises(AttributeError):
            g.directed = False  # type: ignore[misc]

    def test_edge_weight_takes_cheapest_parallel(self):
        g = Graph[int]()
        g.add_edge(1, 2, 5)
        g.add_edge(2, 1, 3)
        assert g.edge_weight(1, 2) == 3

    def test_edge_weight_errors(self):
        g = Graph[int]()
        g.add_edge(1, 2)
        g.add_vertex(3)
        with pytest.raises(ValueError, match="No edge"):
            g.edge_weight(1, 3)
        with pytest.raises(UnknownVertexError, match="Unknown vertex: 7"):
            g.edge_weight(7, 1)

    def test_edge_count(self):
        g = Graph[int]()
        g.add_edge(1, 2)
        g.add_edge(2, 3)
        g.add_edge(1, 1)
        assert g.edge_count() == 3

        d = Graph[int](directed=True)
        d.add_edge(1, 2)
        d.add_edge(2, 1)
        assert d.edge_count() == 2

    def test_require(self):
        g = Graph[int]()
        g.add_vertex(1)
        g.require(1)
        with pytest.raises(UnknownVertexError) as error:
            g.require(1, 2)
        assert error.value.vertex == 2

    def test_print(self, capsys):
        g = Graph[int]()
        g.add_edge(1, 2, 5)
        g.add_vertex(3)
        g.print()
        assert capsys.readouterr().out == "1 -> (2, 5)\n2 -> (1, 5)\n3 -> \n"

    def test_repr(self):
        g = Graph[int](directed=True)
        g.add_edge(1, 2)
        assert repr(g) == "Graph(directed, 2 vertices, 1 edges)"


class TestConnectivity:
    def test_components_ignore_direction(self):
        g = Graph[int](directed=True)
        g.add_edge(1, 2)
        g.add_edge(3, 2)
        g.add_vertex(4)
        assert connected_components(g) == frozenset(
            [frozenset({1, 2, 3}), frozenset({4})]
        )
        assert not is_connected(g)

    def test_empty_graph_is_connected(self):
        assert connected_components(Graph[int]()) == frozenset()
        assert is_connected(Graph[int]())

    def test_connected(self):
        g = Graph[str]()
        g.add_edge("a", "b")
        g.add_edge("b", "c")
        assert is_connected(g)


class TestEdgeHelpers:
    def test_dense_index_round_trip(self):
        index = DenseIndex(["a", "b", "c"])
        assert len(index) == 3
        assert index.index_of["c"] == 2
        assert index.vertex_at[1] == "b"

    def test_undirected_edges_deduplicates_mirrors(self):
        g = Graph[int]()
        g.add_edge(1, 2, 2)
        g.add_edge(2, 3, 1)
        g.add_edge(3, 3, 9)
        assert undirected_edges(g.adjacency()) == [(2, 1, 2), (1, 2, 3)]

    def test_undirected_edges_keeps_parallels(self):
        g = Graph[int]()
        g.add_edge(1, 2, 5)
        g.add_edge(1, 2, 1)
        assert undirected_edges(g.adjacency()) == [(5, 1, 2), (1, 1, 2)]
