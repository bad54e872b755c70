"""Edge-list storage shared by every graph variant.

Vertices live in an arena: one record per distinct payload, addressed by
an integer handle.  Edges are entries in an ordered list that refer to
vertices by handle.  An entry with no destination is a placeholder that
registers a standalone vertex, so "vertex added" and "edge added" keep a
single, observable insertion order.

Handles are never reused.  When the last entry referring to a vertex
goes away, its arena record is dropped.

Nothing outside this module ever sees a handle-backed record directly:
queries build fresh Vertex / Edge objects, so callers can mutate what
they get back without touching the graph.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from graph_family.domain.edge import Edge
from graph_family.domain.types import Handle, Value
from graph_family.domain.vertex import Vertex

HEADER = "Graph (# vertices = {count}):\n"


@dataclass(slots=True)
class Entry:
    """One stored edge.  dest is None for a placeholder."""
    source: Handle
    dest: Handle | None = None
    value: Value | None = None

    @property
    def is_true_edge(self) -> bool:
        return self.dest is not None


class EdgeList:
    """Arena of vertex records plus an ordered list of entries."""

    __slots__ = ("_values", "_handles", "_entries", "_next_handle")

    def __init__(self) -> None:
        self._values: dict[Handle, Value] = {}
        self._handles: dict[Value, Handle] = {}
        self._entries: list[Entry] = []
        self._next_handle: Handle = 0

    # ---- arena -----------------------------------------------------------

    def _intern(self, vertex: Vertex) -> Handle:
        handle = self._handles.get(vertex.value)
        if handle is None:
            handle = self._next_handle
            self._next_handle += 1
            self._handles[vertex.value] = handle
            self._values[handle] = vertex.value
        return handle

    def _collect(self) -> None:
        """Drop arena records that no entry refers to any more."""
        live = set(self.handles())
        for handle in [h for h in self._values if h not in live]:
            del self._handles[self._values.pop(handle)]

    def handle_of(self, vertex: Vertex) -> Handle | None:
        return self._handles.get(vertex.value)

    def vertex_at(self, handle: Handle) -> Vertex:
        """Fresh Vertex for *handle*."""
        return Vertex(self._values[handle])

    def handles(self) -> Iterator[Handle]:
        """Handles in first-appearance order (source before dest)."""
        seen: set[Handle] = set()
        for entry in self._entries:
            for handle in (entry.source, entry.dest):
                if handle is not None and handle not in seen:
                    seen.add(handle)
                    yield handle

    # ---- mutation --------------------------------------------------------

    def append(
        self,
        source: Vertex,
        dest: Vertex | None = None,
        value: Value | None = None,
    ) -> None:
        """Store an entry.  Never refuses; rule checks belong to callers."""
        src = self._intern(source)
        dst = self._intern(dest) if dest is not None else None
        self._entries.append(Entry(src, dst, value))

    def append_edge(self, edge: Edge) -> None:
        self.append(edge.source, edge.dest, edge.value)

    def remove_if(self, predicate: Callable[[Entry], bool]) -> int:
        """Delete every entry matching *predicate*.  Returns how many went."""
        before = len(self._entries)
        self._entries = [e for e in self._entries if not predicate(e)]
        removed = before - len(self._entries)
        if removed:
            self._collect()
        return removed

    def remove_source(self, vertex: Vertex) -> int:
        """Delete every entry whose source is *vertex*.

        Entries where *vertex* is only the destination stay.
        """
        handle = self.handle_of(vertex)
        if handle is None:
            return 0
        return self.remove_if(lambda e: e.source == handle)

    def remove_touching(self, handles: Iterable[Handle]) -> int:
        """Delete every entry with either endpoint in *handles*."""
        doomed = set(handles)
        if not doomed:
            return 0
        return self.remove_if(lambda e: e.source in doomed or e.dest in doomed)

    # ---- queries ---------------------------------------------------------

    def is_empty(self) -> bool:
        return not self._entries

    def contains(self, vertex: Vertex) -> bool:
        return self.handle_of(vertex) is not None

    def has_edge(self, source: Vertex, dest: Vertex) -> bool:
        src = self.handle_of(source)
        dst = self.handle_of(dest)
        if src is None or dst is None:
            return False
        return any(e.source == src and e.dest == dst for e in self._entries)

    def in_degree(self, vertex: Vertex) -> int:
        handle = self.handle_of(vertex)
        if handle is None:
            return 0
        return sum(1 for e in self._entries if e.dest == handle)

    def parent_of(self, vertex: Vertex) -> Vertex | None:
        """Source of the first true edge into *vertex*, if any."""
        handle = self.handle_of(vertex)
        if handle is None:
            return None
        for e in self._entries:
            if e.dest == handle:
                return self.vertex_at(e.source)
        return None

    def successors(self, vertex: Vertex) -> list[Vertex]:
        """Destinations of true edges leaving *vertex*, in entry order."""
        handle = self.handle_of(vertex)
        if handle is None:
            return []
        return [
            self.vertex_at(e.dest)
            for e in self._entries
            if e.source == handle and e.dest is not None
        ]

    def successor_map(self) -> dict[Handle, list[Handle]]:
        """handle -> list of successor handles, built in one pass."""
        fwd: dict[Handle, list[Handle]] = {}
        for entry in self._entries:
            if entry.dest is not None:
                fwd.setdefault(entry.source, []).append(entry.dest)
        return fwd

    def top(self) -> Vertex | None:
        """First vertex, in entry order, that no true edge points at."""
        targets = {e.dest for e in self._entries if e.dest is not None}
        for handle in self.handles():
            if handle not in targets:
                return self.vertex_at(handle)
        return None

    @property
    def vertex_count(self) -> int:
        return sum(1 for _ in self.handles())

    @property
    def edge_count(self) -> int:
        return sum(1 for e in self._entries if e.is_true_edge)

    def edges(self) -> list[Edge]:
        """Every stored entry as a fresh Edge, in insertion order."""
        return [
            Edge(
                self.vertex_at(e.source),
                self.vertex_at(e.dest) if e.dest is not None else None,
                e.value,
            )
            for e in self._entries
        ]

    def to_string(self) -> str:
        out = HEADER.format(count=self.vertex_count)
        for edge in self.edges():
            out += edge.to_string() + "\n"
        return out

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"EdgeList(entries={len(self._entries)}, vertices={self.vertex_count})"
