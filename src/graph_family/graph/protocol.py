"""The structural contract every graph variant satisfies.

There is no shared base class.  A type is usable by graph_lib when it
has these methods; isinstance(g, GraphLike) checks the shape at run time.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from graph_family.domain.edge import Edge
from graph_family.domain.types import Value
from graph_family.domain.vertex import Vertex


@runtime_checkable
class GraphLike(Protocol):
    """Operations graph_lib forwards to."""

    def add(self, vertex: Vertex) -> bool:
        """Register a standalone vertex.  False if refused."""
        ...

    def add_edge(self, source: Vertex, dest: Vertex, value: Value | None = None) -> bool:
        """Insert source -> dest.  False if refused."""
        ...

    def append_edge(self, edge: Edge) -> bool:
        """Insert a pre-built edge, payload included.  False if refused."""
        ...

    def remove(self, vertex: Vertex) -> None:
        ...

    def are_adjacent(self, source: Vertex, dest: Vertex) -> bool:
        ...

    def get_neighbors(self, vertex: Vertex) -> list[Vertex]:
        ...

    def vertex_count(self) -> int:
        ...

    def edge_count(self) -> int:
        ...

    def contains(self, vertex: Vertex) -> bool:
        ...

    def top(self) -> Vertex | None:
        ...

    def get_adjacency_list(self) -> list[Edge]:
        ...

    def to_string(self) -> str:
        ...
