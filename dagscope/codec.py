"""JSON entry points — decode, analyze, encode, never raise on bad input.

Each entry point takes and returns JSON text with lower-camel-case keys.
Input that does not decode into the expected shape yields a fixed sentinel
payload instead of an error:

- ``topological_sort`` → ``{"sorted": [], "hasCycle": true}``
- ``detect_cycles`` → ``{"hasCycle": false, "cycles": []}``
- ``find_path`` → ``{"path": [], "exists": false, "distance": null}``
- ``build_dag`` → ``{"nodes": [], "edges": []}``
"""

from __future__ import annotations

from pydantic import BaseModel, TypeAdapter, ValidationError

from dagscope.cycles import detect_cycles_in_graph
from dagscope.dag import build_dag_from_relationships
from dagscope.logger import logger
from dagscope.model import (
    CycleDetectionResult,
    DagScopeConfig,
    Graph,
    PathResult,
    Relationship,
    TopologicalSortResult,
    empty_graph,
)
from dagscope.paths import find_path_between_nodes
from dagscope.toposort import compute_topological_sort

_RELATIONSHIPS = TypeAdapter(list[Relationship])


def topological_sort(graph_json: str | bytes, config: DagScopeConfig | None = None) -> str:
    cfg = config or DagScopeConfig()
    graph = _decode_graph(graph_json, "topological_sort")
    if graph is None:
        return _encode(TopologicalSortResult.fallback())
    return _encode(compute_topological_sort(graph, cfg.ordering.seed_order))


def detect_cycles(graph_json: str | bytes, config: DagScopeConfig | None = None) -> str:
    graph = _decode_graph(graph_json, "detect_cycles")
    if graph is None:
        return _encode(CycleDetectionResult.fallback())
    return _encode(detect_cycles_in_graph(graph))


def find_path(
    graph_json: str | bytes,
    from_id: str,
    to_id: str,
    config: DagScopeConfig | None = None,
) -> str:
    cfg = config or DagScopeConfig()
    graph = _decode_graph(graph_json, "find_path")
    if graph is None:
        return _encode(PathResult.fallback())
    return _encode(
        find_path_between_nodes(graph, from_id, to_id, cfg.paths.default_weight)
    )


def build_dag(relationships_json: str | bytes, config: DagScopeConfig | None = None) -> str:
    cfg = config or DagScopeConfig()
    try:
        relationships = _RELATIONSHIPS.validate_json(relationships_json, strict=True)
    except ValidationError as e:
        logger.warning("build_dag: malformed relationships input: %s", e)
        return _encode(empty_graph())
    return _encode(build_dag_from_relationships(relationships, cfg.ordering.dag_node_order))


def _decode_graph(graph_json: str | bytes, entry_point: str) -> Graph | None:
    try:
        return Graph.model_validate_json(graph_json, strict=True)
    except ValidationError as e:
        logger.warning("%s: malformed graph input: %s", entry_point, e)
        return None


def _encode(result: BaseModel) -> str:
    return result.model_dump_json(by_alias=True)
