"""DAG builder — assemble a Graph from pairwise relationships."""

from __future__ import annotations

from dagscope.model import Edge, Graph, NodeOrder, Relationship


def build_dag_from_relationships(
    relationships: list[Relationship], node_order: NodeOrder = NodeOrder.FIRST_SEEN
) -> Graph:
    """One edge per relationship (duplicates kept); nodes are the distinct endpoints."""
    seen: dict[str, None] = {}
    edges: list[Edge] = []

    for rel in relationships:
        seen.setdefault(rel.from_, None)
        seen.setdefault(rel.to, None)
        edges.append(Edge(from_=rel.from_, to=rel.to, weight=rel.confidence))

    nodes = list(seen)
    if node_order == NodeOrder.SORTED:
        nodes.sort()
    return Graph(nodes=nodes, edges=edges)
