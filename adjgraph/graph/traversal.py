"""
Breadth-first traversal over a Graph.

The walk is driven by a visitor callback: returning False from the visitor
stops the walk, which is how bfs() exits as soon as it finds a match.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any, Callable

from adjgraph.graph.models import Equatable, NodeIdentifier

if TYPE_CHECKING:
    from adjgraph.graph.core import Graph

logger = logging.getLogger(__name__)


def visit_breadth_first(
    graph: Graph,
    source: NodeIdentifier,
    visitor: Callable[[NodeIdentifier, Any], bool],
) -> int:
    """
    Visit every node reachable from source, nearest first.

    Nodes one edge further away are visited only after all closer nodes;
    siblings are visited in the insertion order of the edges leading to them.
    A node is marked seen when it is enqueued, so each reachable node is
    visited exactly once and cycles terminate.

    Args:
        graph: Graph to walk
        source: Node to start from
        visitor: Called with (identifier, payload) for each node. Return True
            to continue, False to stop immediately; nodes already queued are
            then abandoned.

    Returns:
        Number of nodes passed to visitor

    Raises:
        NodeOutOfBoundsError: If source is not in the graph
    """
    graph.get(source)

    queue = deque([source])
    seen = {source}
    visited = 0

    while queue:
        current = queue.popleft()
        visited += 1
        if not visitor(current, graph.get(current)):
            logger.debug(f"Traversal from {source} stopped by visitor at {current}")
            break

        for edge in graph.connections(current):
            if edge.dest in seen:
                continue
            seen.add(edge.dest)
            queue.append(edge.dest)

    return visited


def bfs(graph: Graph, source: NodeIdentifier, wanted: Equatable) -> NodeIdentifier | None:
    """
    Find the first node, in breadth-first order from source, holding wanted.

    Only nodes reachable from source are considered; see Graph.contains()
    for a search over the whole graph.

    Returns:
        Identifier of the matching node, or None if none is reachable
    """
    found: NodeIdentifier | None = None

    def match(node: NodeIdentifier, value: object) -> bool:
        nonlocal found
        if value == wanted:
            found = node
            return False
        return True

    visited = visit_breadth_first(graph, source, match)
    if found is None:
        logger.debug(f"BFS from {source}: {wanted!r} not reachable ({visited} nodes searched)")
    return found
