"""Cycle detection — depth-first search for back edges."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dagscope.graph import build_adjacency, neighbors
from dagscope.logger import logger
from dagscope.model import CycleDetectionResult

if TYPE_CHECKING:
    from collections.abc import Iterator

    from dagscope.graph import Adjacency
    from dagscope.model import Graph


def detect_cycles_in_graph(graph: Graph) -> CycleDetectionResult:
    """Report whether *graph* has a cycle, with at most one cycle per DFS root.

    Roots are tried in node-list order. A root's search stops at its first
    back edge, so ``cycles`` is a witness list, not an enumeration.
    """
    adjacency = build_adjacency(graph)
    visited: set[str] = set()
    cycles: list[list[str]] = []

    for root in graph.nodes:
        if root in visited:
            continue
        cycle = _dfs_from(root, adjacency, visited)
        if cycle is not None:
            logger.debug("Back edge closes cycle %s", " -> ".join(cycle))
            cycles.append(cycle)

    return CycleDetectionResult(has_cycle=bool(cycles), cycles=cycles)


def _dfs_from(root: str, adjacency: Adjacency, visited: set[str]) -> list[str] | None:
    """Iterative DFS from *root*; returns the first cycle found, if any.

    Each stack frame holds a node and a cursor over its neighbors, so depth
    is bounded by memory rather than the interpreter's recursion limit.
    """
    on_stack: set[str] = set()
    path: list[str] = []
    stack: list[tuple[str, Iterator[str]]] = []

    def enter(node: str) -> None:
        visited.add(node)
        on_stack.add(node)
        path.append(node)
        stack.append((node, iter(neighbors(adjacency, node))))

    enter(root)
    while stack:
        node, cursor = stack[-1]
        neighbor = next(cursor, None)
        if neighbor is None:
            stack.pop()
            on_stack.discard(node)
            path.pop()
            continue
        if neighbor not in visited:
            enter(neighbor)
        elif neighbor in on_stack:
            return path[path.index(neighbor):]
    return None
