"""Vertex and Edge primitives shared by every graph variant."""

from graph_family.domain.edge import Edge
from graph_family.domain.types import Handle, Value
from graph_family.domain.vertex import Vertex

__all__ = [
    "Edge",
    "Handle",
    "Value",
    "Vertex",
]
