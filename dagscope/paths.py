"""Path finding — breadth-first search for the fewest-hop route."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from dagscope.graph import build_adjacency
from dagscope.logger import logger
from dagscope.model import PathResult

if TYPE_CHECKING:
    from dagscope.model import Graph


def find_path_between_nodes(
    graph: Graph, from_id: str, to_id: str, default_weight: float = 1.0
) -> PathResult:
    """Return the hop-shortest path from *from_id* to *to_id*.

    ``distance`` is the sum of edge weights along that path (missing weights
    count as *default_weight*). It is not a weighted shortest distance: a
    longer route with lighter edges is never preferred over fewer hops.
    """
    if from_id == to_id:
        return PathResult(path=[from_id], exists=True, distance=0.0)

    adjacency = build_adjacency(graph, default_weight)

    visited: set[str] = {from_id}
    queue: deque[tuple[str, list[str], float]] = deque([(from_id, [from_id], 0.0)])

    while queue:
        current, path, distance = queue.popleft()
        if current == to_id:
            return PathResult(path=path, exists=True, distance=distance)

        for neighbor, weight in adjacency.get(current, []):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            queue.append((neighbor, [*path, neighbor], distance + weight))

    logger.debug("No path from %s to %s (%d nodes explored)", from_id, to_id, len(visited))
    return PathResult(path=[], exists=False, distance=None)
