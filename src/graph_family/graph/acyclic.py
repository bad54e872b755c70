"""DirectedAcyclicGraph -- a directed graph that never holds a cycle.

Before storing u -> v we ask whether u is already reachable from v.  If
it is, the new edge would close a loop, so the insertion is refused and
the graph is left exactly as it was.  A self-loop is the zero-length
case of the same rule.

Everything else (placeholders, removal, queries) matches DirectedGraph.
"""
from __future__ import annotations

import logging
from typing import Iterable

from graph_family.domain.edge import Edge
from graph_family.domain.types import Value
from graph_family.domain.vertex import Vertex
from graph_family.graph.edge_list import EdgeList
from graph_family.graph.reachability import can_reach

log = logging.getLogger(__name__)


class DirectedAcyclicGraph:
    """Directed graph that refuses cycle-closing edges."""

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
        """Insert source -> dest unless dest already reaches source."""
        if can_reach(self._edges, dest, source):
            log.debug("Refused %s -> %s: would close a cycle", source, dest)
            return False
        self._edges.append(source, dest, value)
        return True

    def append_edge(self, edge: Edge) -> bool:
        if edge.dest is None:
            return self.add(edge.source)
        return self.add_edge(edge.source, edge.dest, edge.value)

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
        return (
            f"DirectedAcyclicGraph(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )
