"""Graph variants sharing one structural contract."""

from graph_family.graph.acyclic import DirectedAcyclicGraph
from graph_family.graph.directed import DirectedGraph
from graph_family.graph.edge_list import EdgeList, Entry
from graph_family.graph.protocol import GraphLike
from graph_family.graph.reachability import can_reach, descendants
from graph_family.graph.tree import Tree

__all__ = [
    "DirectedAcyclicGraph",
    "DirectedGraph",
    "EdgeList",
    "Entry",
    "GraphLike",
    "Tree",
    "can_reach",
    "descendants",
]
