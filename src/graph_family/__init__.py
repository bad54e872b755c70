"""In-memory directed graph, DAG and tree types with a shared contract."""

from graph_family import graph_lib
from graph_family.domain import Edge, Value, Vertex
from graph_family.graph import (
    DirectedAcyclicGraph,
    DirectedGraph,
    GraphLike,
    Tree,
)

__all__ = [
    "DirectedAcyclicGraph",
    "DirectedGraph",
    "Edge",
    "GraphLike",
    "Tree",
    "Value",
    "Vertex",
    "graph_lib",
]
