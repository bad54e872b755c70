"""Vertex -- a node identified by its payload.

Two vertices are equal when their (label, number) payloads are equal.
The payload can be replaced in place, so vertices are deliberately
unhashable: graphs key their internal records on the payload tuple,
never on the Vertex object.
"""
from __future__ import annotations

from dataclasses import dataclass

from graph_family.domain.types import Value, check_value


@dataclass(slots=True, eq=False)
class Vertex:
    value: Value

    def __post_init__(self) -> None:
        check_value(self.value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def number(self) -> int:
        return self.value[1]

    def set_value(self, value: Value) -> None:
        self.value = check_value(value)

    def copy(self) -> Vertex:
        return Vertex(self.value)

    def to_string(self) -> str:
        return f"({self.value[0]}, {self.value[1]})"

    def __str__(self) -> str:
        return self.to_string()
