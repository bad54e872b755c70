"""Tests for DirectedGraph."""
from __future__ import annotations

from graph_family.domain.edge import Edge
from graph_family.domain.vertex import Vertex
from graph_family.graph.directed import DirectedGraph


class TestDirectedGraphMutation:
    def test_add_always_succeeds(self, a: Vertex, b: Vertex, c: Vertex) -> None:
        g = DirectedGraph()
        assert g.add(a)
        assert g.add(b)
        assert g.add(c)
        assert g.vertex_count() == 3
        assert g.edge_count() == 0

    def test_add_preserves_order(self, a: Vertex, b: Vertex) -> None:
        g = DirectedGraph()
        g.add(a)
        g.add(b)
        adj = g.get_adjacency_list()
        assert [e.source for e in adj] == [a, b]
        assert all(e.dest is None for e in adj)

    def test_add_same_vertex_twice(self, a: Vertex) -> None:
        g = DirectedGraph()
        g.add(a)
        g.add(a)
        assert len(g.get_adjacency_list()) == 2
        assert g.vertex_count() == 1

    def test_add_edge_unrestricted(self, a: Vertex, b: Vertex) -> None:
        g = DirectedGraph()
        assert g.add_edge(a, b)
        assert g.add_edge(b, a)
        assert g.add_edge(a, a)
        assert g.add_edge(a, b)
        assert g.edge_count() == 4

    def test_add_edge_with_payload(self, a: Vertex, b: Vertex) -> None:
        g = DirectedGraph()
        g.add_edge(a, b, ("w", 5))
        assert g.get_adjacency_list()[0].value == ("w", 5)

    def test_append_edge_verbatim(self, a: Vertex, b: Vertex, c: Vertex) -> None:
        g = DirectedGraph()
        g.add_edge(a, b)
        g.add_edge(a, c)
        assert g.append_edge(Edge(a, b, ("dummy", 0)))
        assert g.edge_count() == 3
        adj = g.get_adjacency_list()
        assert adj == [Edge(a, b), Edge(a, c), Edge(a, b)]
        assert adj[2].value == ("dummy", 0)

    def test_append_placeholder_edge(self, a: Vertex) -> None:
        g = DirectedGraph()
        g.append_edge(Edge(a))
        assert g.vertex_count() == 1
        assert g.edge_count() == 0

    def test_remove_placeholder(self, a: Vertex, b: Vertex, c: Vertex) -> None:
        g = DirectedGraph()
        for v in (a, b, c):
            g.add(v)
        g.remove(a)
        assert g.vertex_count() == 2
        assert [e.source for e in g.get_adjacency_list()] == [b, c]

    def test_remove_only_scans_source_side(
        self, a: Vertex, b: Vertex, c: Vertex
    ) -> None:
        g = DirectedGraph()
        g.add_edge(a, b)
        g.add_edge(c, b)
        g.add_edge(b, c)
        g.remove(b)
        # b -> c is gone, a -> b and c -> b survive
        assert g.get_adjacency_list() == [Edge(a, b), Edge(c, b)]
        assert g.contains(b)

    def test_remove_absent_vertex(self, a: Vertex, b: Vertex) -> None:
        g = DirectedGraph()
        g.add(a)
        g.remove(b)
        assert g.vertex_count() == 1

    def test_constructor_prepopulates(self, a: Vertex, b: Vertex, c: Vertex) -> None:
        g = DirectedGraph(vertices=[a], edges=[Edge(b, c), Edge(c, b)])
        assert g.vertex_count() == 3
        assert g.edge_count() == 2


class TestDirectedGraphQueries:
    def test_scenario_counts(self, triangle_dg: DirectedGraph, a: Vertex, c: Vertex) -> None:
        assert triangle_dg.edge_count() == 3
        assert len(triangle_dg.get_neighbors(a)) == 2
        assert len(triangle_dg.get_neighbors(c)) == 0

    def test_adjacent_is_directional(
        self, triangle_dg: DirectedGraph, a: Vertex, b: Vertex, c: Vertex
    ) -> None:
        assert triangle_dg.are_adjacent(a, b)
        assert triangle_dg.are_adjacent(a, c)
        assert triangle_dg.are_adjacent(b, c)
        assert not triangle_dg.are_adjacent(b, a)
        assert not triangle_dg.are_adjacent(c, a)

    def test_placeholders_are_not_adjacent(self, a: Vertex, b: Vertex) -> None:
        g = DirectedGraph()
        g.add(a)
        g.add(b)
        assert not g.are_adjacent(a, b)
        assert not g.are_adjacent(b, a)
        assert g.get_neighbors(a) == []

    def test_neighbors_order(self, triangle_dg: DirectedGraph, a: Vertex, b: Vertex, c: Vertex) -> None:
        assert triangle_dg.get_neighbors(a) == [b, c]
        assert triangle_dg.get_neighbors(b) == [c]

    def test_neighbors_are_copies(self, triangle_dg: DirectedGraph, a: Vertex, b: Vertex) -> None:
        triangle_dg.get_neighbors(a)[0].set_value(("mutated", 0))
        assert triangle_dg.get_neighbors(a)[0] == b

    def test_adjacency_list_is_copy(self, triangle_dg: DirectedGraph, a: Vertex) -> None:
        adj = triangle_dg.get_adjacency_list()
        adj[0].source.set_value(("mutated", 0))
        adj.clear()
        assert triangle_dg.get_adjacency_list()[0].source == a

    def test_top_first_placeholder(self, a: Vertex, b: Vertex, c: Vertex) -> None:
        g = DirectedGraph()
        for v in (a, b, c):
            g.add(v)
        assert g.top() == a

    def test_top_skips_vertices_with_parents(self, a: Vertex, b: Vertex, c: Vertex) -> None:
        g = DirectedGraph()
        g.add_edge(b, c)
        g.add_edge(a, b)
        assert g.top() == a

    def test_top_empty(self) -> None:
        assert DirectedGraph().top() is None

    def test_contains_and_len(self, triangle_dg: DirectedGraph, a: Vertex) -> None:
        assert a in triangle_dg
        assert Vertex(("Z", 0)) not in triangle_dg
        assert len(triangle_dg) == 3

    def test_repr(self, triangle_dg: DirectedGraph) -> None:
        assert repr(triangle_dg) == "DirectedGraph(vertices=3, edges=3)"


class TestDirectedGraphRendering:
    def test_placeholders(self, a: Vertex, b: Vertex, c: Vertex) -> None:
        g = DirectedGraph()
        for v in (a, b, c):
            g.add(v)
        assert g.to_string() == (
            "Graph (# vertices = 3):\n"
            "(A, 1) -> NULL\n\n"
            "(B, 2) -> NULL\n\n"
            "(C, 3) -> NULL\n\n"
        )

    def test_str_matches_to_string(self, triangle_dg: DirectedGraph) -> None:
        assert str(triangle_dg) == triangle_dg.to_string()

    def test_empty(self) -> None:
        assert DirectedGraph().to_string() == "Graph (# vertices = 0):\n"
