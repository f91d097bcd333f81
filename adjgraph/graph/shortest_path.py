"""
Single-source single-target shortest paths (Dijkstra).

Edge costs are taken from edge payloads, optionally through a weight
function. Any type that supports +, < and == works as a cost, provided the
caller passes its additive identity as zero. Costs must be non-negative;
negative costs are not detected and give wrong answers.
"""

from __future__ import annotations

import heapq
import logging
from itertools import count
from typing import TYPE_CHECKING, Any, Callable

from adjgraph.config import DEFAULT_ZERO_COST
from adjgraph.graph.errors import CostTypeError
from adjgraph.graph.models import Cost, NodeIdentifier, ShortestPathResult

if TYPE_CHECKING:
    from adjgraph.graph.core import Graph

logger = logging.getLogger(__name__)


def _check_cost(value: Any, what: str) -> Any:
    message = f"{what} {value!r} ({type(value).__name__}) does not support + and <"
    if not isinstance(value, Cost):
        raise CostTypeError(message)
    # object defines __lt__, so only an actual comparison shows orderability
    try:
        value < value
    except TypeError as exc:
        raise CostTypeError(message) from exc
    return value


def shortest_path(
    graph: Graph,
    source: NodeIdentifier,
    target: NodeIdentifier,
    *,
    zero: Any = DEFAULT_ZERO_COST,
    weight: Callable[[Any], Any] | None = None,
) -> ShortestPathResult | None:
    """
    Find the cheapest path from source to target.

    The frontier is a min-heap of (cost, sequence, node). Entries made stale
    by a later improvement are skipped when popped. The search stops as soon
    as target is popped, since every remaining entry costs at least as much.
    A node's best cost is only replaced by a strictly cheaper one, and the
    sequence number pops equal costs in discovery order, so among equal-cost
    paths the first one discovered wins.

    Args:
        graph: Graph to search
        source: Start node
        target: End node
        zero: Additive identity of the cost type
        weight: Maps an edge payload to its cost; defaults to the payload

    Returns:
        Path and total cost, or None if target is unreachable. A path from a
        node to itself is [source] with cost zero.

    Raises:
        NodeOutOfBoundsError: If source or target is not in the graph
        CostTypeError: If zero or an edge cost does not support + and <
    """
    graph.get(source)
    graph.get(target)
    _check_cost(zero, "Zero cost")

    dist: dict[int, Any] = {source.index: zero}
    prev: dict[int, int] = {}

    sequence = count()
    heap: list[tuple[Any, int, int]] = [(zero, next(sequence), source.index)]
    popped = 0

    while heap:
        cost, _, node = heapq.heappop(heap)
        popped += 1
        if node == target.index:
            break
        if dist[node] < cost:
            continue

        for edge in graph.connections(NodeIdentifier(node)):
            edge_cost = edge.data if weight is None else weight(edge.data)
            candidate = cost + _check_cost(edge_cost, "Edge cost")
            dest = edge.dest.index
            if dest not in dist or candidate < dist[dest]:
                dist[dest] = candidate
                prev[dest] = node
                heapq.heappush(heap, (candidate, next(sequence), dest))

    if target.index not in dist:
        logger.debug(f"No path from {source} to {target} ({popped} nodes expanded)")
        return None

    path = [target.index]
    while path[-1] != source.index:
        path.append(prev[path[-1]])
    path.reverse()

    result = ShortestPathResult(
        path=tuple(NodeIdentifier(i) for i in path),
        cost=dist[target.index],
    )
    logger.debug(
        f"Shortest path {source} -> {target}: "
        f"{' -> '.join(str(i) for i in path)} (cost {result.cost!r})"
    )
    return result
