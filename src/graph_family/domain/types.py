"""Shared type aliases used across the graph family."""
from __future__ import annotations

from typing import TypeAlias

Value: TypeAlias = tuple[str, int]  # (label, number)
Handle: TypeAlias = int  # index of a vertex record inside an EdgeList


def check_value(value: object) -> Value:
    """Return *value* unchanged if it is a (str, int) pair.

    Raises ValueError otherwise.  bool is rejected even though it is an
    int subclass; a payload of (label, True) is almost always a bug.
    """
    if (
        not isinstance(value, tuple)
        or len(value) != 2
        or not isinstance(value[0], str)
        or not isinstance(value[1], int)
        or isinstance(value[1], bool)
    ):
        raise ValueError(f"Payload must be a (str, int) pair, got {value!r}")
    return value
