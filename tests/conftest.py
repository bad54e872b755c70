"""Shared fixtures for graph family tests."""
from __future__ import annotations

import random
from typing import Callable

import pytest

from graph_family.domain.vertex import Vertex
from graph_family.graph.acyclic import DirectedAcyclicGraph
from graph_family.graph.directed import DirectedGraph
from graph_family.graph.tree import Tree

SEED = 42


@pytest.fixture
def a() -> Vertex:
    return Vertex(("A", 1))


@pytest.fixture
def b() -> Vertex:
    return Vertex(("B", 2))


@pytest.fixture
def c() -> Vertex:
    return Vertex(("C", 3))


@pytest.fixture
def d() -> Vertex:
    return Vertex(("D", 4))


@pytest.fixture
def e() -> Vertex:
    return Vertex(("E", 5))


@pytest.fixture(params=[DirectedGraph, DirectedAcyclicGraph, Tree])
def any_graph(request: pytest.FixtureRequest):
    """One empty instance of each variant."""
    return request.param()


@pytest.fixture
def triangle_dg(a: Vertex, b: Vertex, c: Vertex) -> DirectedGraph:
    """A -> B, A -> C, B -> C"""
    g = DirectedGraph()
    for src, dst in [(a, b), (a, c), (b, c)]:
        g.add_edge(src, dst)
    return g


@pytest.fixture
def small_tree(a: Vertex, b: Vertex, c: Vertex, d: Vertex, e: Vertex) -> Tree:
    """
    A -> B -> D
    A -> C    B -> E
    """
    t = Tree()
    for src, dst in [(a, b), (a, c), (b, d), (b, e)]:
        assert t.add_edge(src, dst)
    return t


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


@pytest.fixture
def chain() -> Callable[[int], list[Vertex]]:
    """Factory: chain(n) gives n distinct vertices N0, N1, ..."""
    def _make(n: int, prefix: str = "N") -> list[Vertex]:
        return [Vertex((f"{prefix}{i}", i)) for i in range(n)]
    return _make
