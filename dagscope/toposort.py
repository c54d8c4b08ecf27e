"""Topological ordering — Kahn's in-degree algorithm."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from dagscope.graph import build_adjacency, neighbors
from dagscope.logger import logger
from dagscope.model import NodeOrder, TopologicalSortResult

if TYPE_CHECKING:
    from dagscope.model import Graph


def compute_topological_sort(
    graph: Graph, seed_order: NodeOrder = NodeOrder.FIRST_SEEN
) -> TopologicalSortResult:
    """Order nodes so every edge points forward; flag a cycle if that fails.

    Nodes with zero in-degree seed the queue in *seed_order*: node-list order
    followed by undeclared edge endpoints (``first_seen``), or lexicographic
    order (``sorted``).
    """
    adjacency = build_adjacency(graph)

    in_degree: dict[str, int] = {}
    for node in graph.nodes:
        in_degree.setdefault(node, 0)
    for edge in graph.edges:
        in_degree.setdefault(edge.from_, 0)
        in_degree[edge.to] = in_degree.get(edge.to, 0) + 1

    seeds = [node for node, degree in in_degree.items() if degree == 0]
    if seed_order == NodeOrder.SORTED:
        seeds.sort()

    queue: deque[str] = deque(seeds)
    ordered: list[str] = []

    while queue:
        node = queue.popleft()
        ordered.append(node)
        for neighbor in neighbors(adjacency, node):
            in_degree[neighbor] -= 1
            if in_degree[neighbor] == 0:
                queue.append(neighbor)

    # Nodes stranded with positive in-degree sit on, or downstream of, a cycle.
    has_cycle = len(ordered) < len(in_degree)
    if has_cycle:
        logger.debug(
            "Topological sort stranded %d of %d nodes",
            len(in_degree) - len(ordered),
            len(in_degree),
        )
    return TopologicalSortResult(sorted=ordered, has_cycle=has_cycle)
