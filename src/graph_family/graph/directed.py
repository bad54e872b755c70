"""DirectedGraph -- no structural restrictions at all.

Every insertion succeeds: self-loops, duplicate edges and cycles are all
stored as given.  remove(v) only looks at the source side of each entry,
so an edge u -> v survives remove(v).
"""
from __future__ import annotations

from typing import Iterable

from graph_family.domain.edge import Edge
from graph_family.domain.types import Value
from graph_family.domain.vertex import Vertex
from graph_family.graph.edge_list import EdgeList


class DirectedGraph:
    """General directed graph over an ordered edge list."""

    __slots__ = ("_edges",)

    def __init__(
        self,
        vertices: Iterable[Vertex] | None = None,
        edges: Iterable[Edge] | None = None,
    ) -> None:
        self._edges = EdgeList()
        for v in vertices or ():
            self.add(v)
        for e in edges or ():
            self.append_edge(e)

    # ---- mutation --------------------------------------------------------

    def add(self, vertex: Vertex) -> bool:
        self._edges.append(vertex)
        return True

    def add_edge(self, source: Vertex, dest: Vertex, value: Value | None = None) -> bool:
        self._edges.append(source, dest, value)
        return True

    def append_edge(self, edge: Edge) -> bool:
        self._edges.append_edge(edge)
        return True

    def remove(self, vertex: Vertex) -> None:
        self._edges.remove_source(vertex)

    # ---- queries ---------------------------------------------------------

    def are_adjacent(self, source: Vertex, dest: Vertex) -> bool:
        return self._edges.has_edge(source, dest)

    def get_neighbors(self, vertex: Vertex) -> list[Vertex]:
        return self._edges.successors(vertex)

    def vertex_count(self) -> int:
        return self._edges.vertex_count

    def edge_count(self) -> int:
        return self._edges.edge_count

    def contains(self, vertex: Vertex) -> bool:
        return self._edges.contains(vertex)

    def top(self) -> Vertex | None:
        return self._edges.top()

    def get_adjacency_list(self) -> list[Edge]:
        return self._edges.edges()

    def to_string(self) -> str:
        return self._edges.to_string()

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: Vertex) -> bool:
        return self.contains(vertex)

    def __len__(self) -> int:
        return self.vertex_count()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.vertex_count()}, edges={self.edge_count()})"
