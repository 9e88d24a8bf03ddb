"""Tests for Graph, DiGraph and their shared storage."""

import pytest

from nxgraph import BaseGraph, DiGraph, Graph, GraphInvariantError


class TestGraphConstruction:
    """Tests for building undirected graphs."""

    def test_empty_graph(self) -> None:
        g: Graph[int] = Graph()
        assert g.nodes(set) == set()
        assert len(g) == 0

    def test_add_nodes(self) -> None:
        g: Graph[int] = Graph()
        g.add_node(1)
        g.add_node(2)
        g.add_node(3)
        assert g.nodes(set) == {1, 2, 3}

    def test_add_node_is_idempotent(self) -> None:
        g: Graph[int] = Graph()
        g.add_edge(1, 2)
        g.add_node(1)
        assert g.nodes(set) == {1, 2}
        assert g.adjacent(1) == frozenset({2})

    def test_add_edge_creates_both_nodes(self) -> None:
        g: Graph[int] = Graph()
        g.add_edge(1, 2)
        assert g.nodes(set) == {1, 2}
        assert g.adjacent(1) == frozenset({2})
        assert g.adjacent(2) == frozenset({1})

    def test_edge_symmetry(self) -> None:
        g: Graph[str] = Graph()
        g.add_edges_from([("a", "b"), ("b", "c"), ("c", "a"), ("a", "d")])
        for u, v in g.edges():
            assert v in g.adjacent(u)
            assert u in g.adjacent(v)

    def test_parallel_edges_collapse(self) -> None:
        g: Graph[int] = Graph()
        g.add_edges_from([(1, 2), (1, 2), (2, 1)])
        assert g.edges(sorted) == [(1, 2), (2, 1)]

    def test_self_edge(self) -> None:
        g: Graph[int] = Graph()
        g.add_edge(1, 1)
        assert g.adjacent(1) == frozenset({1})
        assert g.edges(list) == [(1, 1)]

    def test_isolated_node_has_empty_adjacency(self) -> None:
        g: Graph[int] = Graph()
        g.add_node(6)
        assert g.adjacent(6) == frozenset()

    def test_is_directed(self) -> None:
        assert Graph.is_directed() is False
        assert Graph().is_directed() is False


class TestGraphQueries:
    """Tests for node, edge and adjacency queries."""

    @pytest.fixture
    def g(self) -> Graph[int]:
        g: Graph[int] = Graph()
        g.add_edges_from([(1, 2), (2, 3), (3, 5), (1, 4), (4, 5)])
        g.add_node(6)
        return g

    def test_nodes_container(self, g: Graph[int]) -> None:
        assert g.nodes() == frozenset({1, 2, 3, 4, 5, 6})
        assert isinstance(g.nodes(), frozenset)
        assert g.nodes(sorted) == [1, 2, 3, 4, 5, 6]

    def test_edges_are_reported_in_both_directions(self, g: Graph[int]) -> None:
        edges = g.edges(set)
        assert (1, 2) in edges
        assert (2, 1) in edges
        assert len(edges) == 10

    def test_edges_as_list(self, g: Graph[int]) -> None:
        assert sorted(g.edges(list)) == sorted(g.edges(set))

    def test_adjacent_missing_node(self) -> None:
        g: Graph[int] = Graph()
        assert g.adjacent(2) is None

    def test_adjacent_returns_copy(self, g: Graph[int]) -> None:
        neighbours = g.adjacent(1)
        assert isinstance(neighbours, frozenset)
        g.add_edge(1, 6)
        assert neighbours == frozenset({2, 4})

    def test_require_adjacent_missing_node(self, g: Graph[int]) -> None:
        with pytest.raises(GraphInvariantError, match="no adjacency entry"):
            g.require_adjacent(42)

    def test_iter_contains_len(self, g: Graph[int]) -> None:
        assert sorted(g) == [1, 2, 3, 4, 5, 6]
        assert 6 in g
        assert 7 not in g
        assert len(g) == 6


class TestDiGraph:
    """Tests for directed graphs and in-degree tracking."""

    @pytest.fixture
    def g(self) -> DiGraph[int]:
        g: DiGraph[int] = DiGraph()
        g.add_edges_from([(1, 2), (2, 3), (3, 4), (1, 5), (5, 4), (4, 6)])
        g.add_node(7)
        return g

    def test_is_directed(self) -> None:
        assert DiGraph.is_directed() is True

    def test_add_edge_is_one_way(self) -> None:
        g: DiGraph[str] = DiGraph()
        g.add_edge("a", "b")
        assert g.adjacent("a") == frozenset({"b"})
        assert g.adjacent("b") == frozenset()
        assert g.edges(list) == [("a", "b")]

    def test_add_edge_updates_in_degree(self) -> None:
        g: DiGraph[str] = DiGraph()
        g.add_edge("a", "c")
        before_a = g.in_degree("a")
        before_c = g.in_degree("c")
        g.add_edge("b", "c")
        assert g.in_degree("c") == before_c + 1
        assert g.in_degree("a") == before_a

    def test_predecessors_track_adjacency(self, g: DiGraph[int]) -> None:
        for u, v in g.edges():
            assert u in g.predecessors(v)
        for v in g:
            for u in g.predecessors(v):
                assert v in g.adjacent(u)

    def test_every_node_has_predecessor_entry(self, g: DiGraph[int]) -> None:
        for node in g:
            assert g.predecessors(node) is not None

    def test_predecessors_missing_node(self, g: DiGraph[int]) -> None:
        assert g.predecessors(42) is None

    def test_in_degree(self, g: DiGraph[int]) -> None:
        assert g.in_degree(1) == 0
        assert g.in_degree(4) == 2
        assert g.in_degree(7) == 0

    def test_in_degree_missing_node(self, g: DiGraph[int]) -> None:
        assert g.in_degree(42) == 0

    def test_in_degree_map(self, g: DiGraph[int]) -> None:
        assert g.in_degree_map() == {1: 0, 2: 1, 3: 1, 4: 2, 5: 1, 6: 1, 7: 0}

    def test_add_node_is_idempotent(self, g: DiGraph[int]) -> None:
        g.add_node(4)
        assert g.in_degree(4) == 2
        assert g.adjacent(4) == frozenset({6})

    def test_self_edge(self) -> None:
        g: DiGraph[int] = DiGraph()
        g.add_edge(1, 1)
        assert g.adjacent(1) == frozenset({1})
        assert g.in_degree(1) == 1


class TestBaseGraph:
    """Tests for the abstract base."""

    def test_cannot_instantiate(self) -> None:
        with pytest.raises(TypeError):
            BaseGraph()  # type: ignore[abstract]

    def test_graphs_compare_by_storage(self) -> None:
        a: Graph[int] = Graph()
        b: Graph[int] = Graph()
        a.add_edge(1, 2)
        b.add_edge(2, 1)
        assert a == b
