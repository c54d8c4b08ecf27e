"""Adjacency construction shared by the graph algorithms."""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from dagscope.model import Graph

Adjacency = dict[str, list[tuple[str, float | None]]]
WeightedAdjacency = dict[str, list[tuple[str, float]]]


@overload
def build_adjacency(graph: Graph, default_weight: float) -> WeightedAdjacency: ...


@overload
def build_adjacency(graph: Graph, default_weight: None = None) -> Adjacency: ...


def build_adjacency(
    graph: Graph, default_weight: float | None = None
) -> Adjacency | WeightedAdjacency:
    """Map each node to its outgoing (neighbor, weight) pairs in edge order.

    Every declared node gets an entry, even with no outgoing edges. An edge
    whose source is not declared still gets an entry for that source. Missing
    weights are replaced by *default_weight*.
    """
    adjacency: Adjacency = {}
    for node in graph.nodes:
        if node not in adjacency:
            adjacency[node] = []
    for edge in graph.edges:
        weight = edge.weight if edge.weight is not None else default_weight
        if edge.from_ not in adjacency:
            adjacency[edge.from_] = []
        adjacency[edge.from_].append((edge.to, weight))
    return adjacency


def neighbors(adjacency: Adjacency, node: str) -> list[str]:
    """Outgoing neighbor ids of *node*; unknown nodes have none."""
    return [to for to, _ in adjacency.get(node, [])]
