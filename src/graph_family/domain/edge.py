"""Edge -- the caller-facing unit handed to and returned from graphs.

An edge with both endpoints is a true edge.  An edge with only a source
is a placeholder that registers a standalone vertex.  An edge without a
source is meaningless and cannot be constructed.

Equality looks at (source, dest) only; the optional payload rides along
but is not part of the edge's identity.
"""
from __future__ import annotations

from dataclasses import dataclass

from graph_family.domain.types import Value, check_value
from graph_family.domain.vertex import Vertex

NULL = "NULL"


@dataclass(slots=True, eq=False)
class Edge:
    source: Vertex
    dest: Vertex | None = None
    value: Value | None = None

    def __post_init__(self) -> None:
        if self.source is None:
            raise ValueError("Edge requires a source vertex")
        if self.value is not None:
            check_value(self.value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        return self.source == other.source and self.dest == other.dest

    __hash__ = None  # type: ignore[assignment]

    def is_true_edge(self) -> bool:
        return self.dest is not None

    def set_value(self, value: Value | None) -> None:
        self.value = None if value is None else check_value(value)

    def copy(self) -> Edge:
        """Deep copy: both endpoints are duplicated."""
        return Edge(
            self.source.copy(),
            self.dest.copy() if self.dest is not None else None,
            self.value,
        )

    def to_string(self) -> str:
        dst = self.dest.to_string() if self.dest is not None else NULL
        return f"{self.source.to_string()} -> {dst}\n"

    def __str__(self) -> str:
        return self.to_string()
