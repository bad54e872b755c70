"""Free functions over any graph variant.

Each function forwards to the method of the same meaning on whatever it
is given, so call sites need not know whether they hold a DirectedGraph,
a DirectedAcyclicGraph or a Tree.  Mutations return the variant's bool
result unchanged.
"""
from __future__ import annotations

import sys
from typing import TextIO

from graph_family.domain.edge import Edge
from graph_family.domain.types import Value
from graph_family.domain.vertex import Vertex
from graph_family.graph.protocol import GraphLike


def add(g: GraphLike, vertex: Vertex) -> bool:
    return g.add(vertex)


def add_edge(
    g: GraphLike,
    source: Vertex | Edge,
    dest: Vertex | None = None,
    value: Value | None = None,
) -> bool:
    """add_edge(g, u, v[, value]) or add_edge(g, edge).

    The one-argument form takes a pre-built Edge and stores it with its
    payload.
    """
    if dest is None:
        if not isinstance(source, Edge):
            raise TypeError(
                f"add_edge() needs a destination vertex or an Edge, got {source!r}"
            )
        return g.append_edge(source)
    return g.add_edge(source, dest, value)  # type: ignore[arg-type]


def remove(g: GraphLike, vertex: Vertex) -> None:
    g.remove(vertex)


def adjacent(g: GraphLike, source: Vertex, dest: Vertex) -> bool:
    return g.are_adjacent(source, dest)


def neighbors(g: GraphLike, vertex: Vertex) -> list[Vertex]:
    return g.get_neighbors(vertex)


def count_vertices(g: GraphLike) -> int:
    return g.vertex_count()


def count_edges(g: GraphLike) -> int:
    return g.edge_count()


def value(x: Vertex | Edge) -> Value | None:
    """Payload of a vertex or an edge."""
    return x.value


def set_value(x: Vertex | Edge, new_value: Value) -> None:
    x.set_value(new_value)


def top(g: GraphLike) -> Vertex | None:
    return g.top()


def adjacency_list(g: GraphLike) -> list[Edge]:
    return g.get_adjacency_list()


def print(g: GraphLike, out: TextIO | None = None) -> None:  # noqa: A001
    """Write g.to_string() to *out* (stdout by default)."""
    (out or sys.stdout).write(g.to_string())
