"""Forward reachability over an EdgeList's true edges.

Iterative DFS with an explicit stack.  Graphs built by hand can get deep
(a long chain of add_edge calls is a linked list), and a recursive walk
would hit the interpreter's recursion limit well before memory becomes
a concern.

Two questions are answered here:
  can_reach  -- is *target* reachable from *start*?  A zero-length path
                counts, so can_reach(g, v, v) is always True when v is
                stored.  The DAG uses this to refuse cycle-closing edges.
  descendants -- every handle reachable from a start handle, start
                included.  The Tree uses this to prune a subtree.
"""
from __future__ import annotations

from graph_family.domain.types import Handle
from graph_family.domain.vertex import Vertex
from graph_family.graph.edge_list import EdgeList


def descendants(edges: EdgeList, start: Handle) -> set[Handle]:
    """All handles reachable from *start* along true edges, *start* included."""
    fwd = edges.successor_map()
    seen: set[Handle] = {start}
    stack: list[Handle] = [start]
    while stack:
        node = stack.pop()
        for succ in fwd.get(node, ()):
            if succ not in seen:
                seen.add(succ)
                stack.append(succ)
    return seen


def can_reach(edges: EdgeList, start: Vertex, target: Vertex) -> bool:
    """True if *target* is reachable from *start* (zero-length path counts).

    Vertices that are not stored reach nothing and are reached by nothing,
    except that a vertex trivially reaches itself.
    """
    if start == target:
        return True
    src = edges.handle_of(start)
    dst = edges.handle_of(target)
    if src is None or dst is None:
        return False

    fwd = edges.successor_map()
    seen: set[Handle] = {src}
    stack: list[Handle] = [src]
    while stack:
        node = stack.pop()
        for succ in fwd.get(node, ()):
            if succ == dst:
                return True
            if succ not in seen:
                seen.add(succ)
                stack.append(succ)
    return False
