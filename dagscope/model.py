"""Canonical model — graphs, relationships, analysis results, config."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Wire format is lower-camel-case JSON; Python attributes stay snake_case.
_WIRE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NodeOrder(StrEnum):
    """Tie-break for outputs whose order the algorithm itself leaves open."""

    FIRST_SEEN = "first_seen"
    SORTED = "sorted"


class Edge(BaseModel):
    model_config = _WIRE

    from_: str = Field(alias="from")
    to: str
    weight: float | None = None


class Graph(BaseModel):
    model_config = _WIRE

    nodes: list[str]
    edges: list[Edge]


class Relationship(BaseModel):
    """Loose pairwise link; confidence becomes the edge weight."""

    model_config = _WIRE

    from_: str = Field(alias="from")
    to: str
    confidence: float | None = None


class TopologicalSortResult(BaseModel):
    model_config = _WIRE

    sorted: list[str] = Field(default_factory=list)
    has_cycle: bool = False

    @classmethod
    def fallback(cls) -> TopologicalSortResult:
        return cls(sorted=[], has_cycle=True)


class CycleDetectionResult(BaseModel):
    model_config = _WIRE

    has_cycle: bool = False
    cycles: list[list[str]] = Field(default_factory=list)

    @classmethod
    def fallback(cls) -> CycleDetectionResult:
        return cls(has_cycle=False, cycles=[])


class PathResult(BaseModel):
    model_config = _WIRE

    path: list[str] = Field(default_factory=list)
    exists: bool = False
    distance: float | None = None

    @classmethod
    def fallback(cls) -> PathResult:
        return cls(path=[], exists=False, distance=None)


def empty_graph() -> Graph:
    """Fallback for relationship decoding failures."""
    return Graph(nodes=[], edges=[])


class OrderingConfig(BaseModel):
    seed_order: NodeOrder = NodeOrder.FIRST_SEEN
    dag_node_order: NodeOrder = NodeOrder.FIRST_SEEN


class PathConfig(BaseModel):
    default_weight: float = 1.0


class GatingConfig(BaseModel):
    fail_on_cycle: bool = True
    fail_on_missing_path: bool = False


class DagScopeConfig(BaseModel):
    ordering: OrderingConfig = Field(default_factory=OrderingConfig)
    paths: PathConfig = Field(default_factory=PathConfig)
    gating: GatingConfig = Field(default_factory=GatingConfig)
