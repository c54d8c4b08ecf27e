"""Tests for graph.build_adjacency."""

from __future__ import annotations

from dagscope.graph import build_adjacency, neighbors
from dagscope.model import Edge, Graph


def _edge(from_id: str, to_id: str, weight: float | None = None) -> Edge:
    return Edge(from_=from_id, to=to_id, weight=weight)


class TestBuildAdjacency:
    def test_declared_nodes_get_empty_entries(self) -> None:
        graph = Graph(nodes=["a", "b"], edges=[])
        assert build_adjacency(graph) == {"a": [], "b": []}

    def test_neighbors_keep_edge_order(self) -> None:
        graph = Graph(
            nodes=["a", "b", "c"],
            edges=[_edge("a", "c"), _edge("a", "b"), _edge("a", "c")],
        )
        adjacency = build_adjacency(graph)
        assert neighbors(adjacency, "a") == ["c", "b", "c"]

    def test_undeclared_source_still_listed(self) -> None:
        graph = Graph(nodes=["a"], edges=[_edge("ghost", "a")])
        adjacency = build_adjacency(graph)
        assert neighbors(adjacency, "ghost") == ["a"]


class TestWeights:
    def test_missing_weight_left_empty_by_default(self) -> None:
        graph = Graph(nodes=["a", "b"], edges=[_edge("a", "b")])
        assert build_adjacency(graph)["a"] == [("b", None)]

    def test_zero_weight_is_not_replaced(self) -> None:
        graph = Graph(nodes=["a", "b"], edges=[_edge("a", "b", 0.0)])
        assert build_adjacency(graph, 1.0)["a"] == [("b", 0.0)]

    def test_missing_weight_uses_default(self) -> None:
        graph = Graph(nodes=["a", "b"], edges=[_edge("a", "b"), _edge("b", "a", 0.25)])
        adjacency = build_adjacency(graph, 1.0)
        assert adjacency["a"] == [("b", 1.0)]
        assert adjacency["b"] == [("a", 0.25)]


class TestNeighborsLookup:
    def test_unknown_node_has_no_neighbors(self) -> None:
        adjacency = build_adjacency(Graph(nodes=["a"], edges=[]))
        assert neighbors(adjacency, "missing") == []
