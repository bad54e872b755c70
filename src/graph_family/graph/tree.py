"""Tree -- a rooted directed graph with one parent per vertex.

Insertion rules:
  add(v)           the first vertex becomes the root; later calls only
                   succeed for a vertex that is already in the tree
                   (nothing new is stored in that case).
  add_edge(u, v)   u must already be in the tree (or the tree must be
                   empty, making u the root) and v must be new.  A new
                   child cannot already have a parent, cannot be an
                   ancestor of u, and cannot be a floating root, so the
                   structure stays connected and acyclic by construction.

A refused call returns False and changes nothing.

remove(v) prunes v together with its whole subtree and the edge from
its parent, so what remains is still one connected tree.
"""
from __future__ import annotations

import logging
from typing import Iterable

from graph_family.domain.edge import Edge
from graph_family.domain.types import Value
from graph_family.domain.vertex import Vertex
from graph_family.graph.edge_list import EdgeList
from graph_family.graph.reachability import descendants

log = logging.getLogger(__name__)


class Tree:
    """Single-rooted tree stored as an ordered edge list."""

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
        if self._edges.is_empty():
            self._edges.append(vertex)
            return True
        if self._edges.contains(vertex):
            return True
        log.debug("Refused add(%s): not connected to the tree", vertex)
        return False

    def add_edge(self, source: Vertex, dest: Vertex, value: Value | None = None) -> bool:
        reason = self._refusal(source, dest)
        if reason is not None:
            log.debug("Refused %s -> %s: %s", source, dest, reason)
            return False
        self._edges.append(source, dest, value)
        return True

    def _refusal(self, source: Vertex, dest: Vertex) -> str | None:
        """Why source -> dest may not be inserted, or None if it may."""
        if source == dest:
            return "self-loop"
        if self._edges.in_degree(dest) > 0:
            return "destination already has a parent"
        if self._edges.contains(dest):
            return "destination is already in the tree"
        if not self._edges.is_empty() and not self._edges.contains(source):
            return "source is not in the tree"
        return None

    def append_edge(self, edge: Edge) -> bool:
        if edge.dest is None:
            return self.add(edge.source)
        return self.add_edge(edge.source, edge.dest, edge.value)

    def remove(self, vertex: Vertex) -> None:
        """Remove *vertex*, its subtree and the edge from its parent."""
        handle = self._edges.handle_of(vertex)
        if handle is None:
            return
        parent = self._edges.parent_of(vertex)
        removed = self._edges.remove_touching(descendants(self._edges, handle))
        # the root's last edge may have gone with the subtree
        if parent is not None and not self._edges.contains(parent):
            self._edges.append(parent)
        log.debug("Pruned subtree at %s (%d entries)", vertex, removed)

    # ---- queries ---------------------------------------------------------

    def are_adjacent(self, source: Vertex, dest: Vertex) -> bool:
        return self._edges.has_edge(source, dest)

    def get_neighbors(self, vertex: Vertex) -> list[Vertex]:
        """Children of *vertex*, in insertion order."""
        return self._edges.successors(vertex)

    def vertex_count(self) -> int:
        return self._edges.vertex_count

    def edge_count(self) -> int:
        return self._edges.edge_count

    def contains(self, vertex: Vertex) -> bool:
        return self._edges.contains(vertex)

    def top(self) -> Vertex | None:
        """The root, or None for an empty tree."""
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
        return f"Tree(vertices={self.vertex_count()}, edges={self.edge_count()})"
