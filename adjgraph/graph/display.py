"""
Diagnostic renderings of a Graph.

Meant for debugging and log output; the text layout may change at any time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from adjgraph.config import DISPLAY_MAX_NODES

if TYPE_CHECKING:
    from adjgraph.graph.core import Graph


def format_graph(graph: Graph, *, max_nodes: int = DISPLAY_MAX_NODES) -> str:
    """
    Render the node list and edge list of a graph as text.

    Args:
        graph: Graph to render
        max_nodes: Nodes (and their outgoing edges) to include before the
            listing is truncated

    Returns:
        Multi-line string, e.g.::

            Graph: 2 nodes, 1 edges
            Nodes:
              [0] 'a'
              [1] 'b'
            Edges:
              0 -> 1 (5)
    """
    total = graph.node_count()
    shown = list(graph.identifiers())[:max_nodes]

    lines = [f"Graph: {total} nodes, {graph.edge_count()} edges", "Nodes:"]
    for node in shown:
        lines.append(f"  [{node}] {graph.get(node)!r}")

    lines.append("Edges:")
    for node in shown:
        for edge in graph.connections(node):
            lines.append(f"  {node} -> {edge.dest} ({edge.data!r})")

    if total > len(shown):
        lines.append(f"... ({total - len(shown)} more nodes)")

    return "\n".join(lines)


def adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    Dense adjacency matrix of a graph.

    Entry [i, j] counts the edges from node i to node j, so parallel edges
    show up as values above one.
    """
    n = graph.node_count()
    matrix = np.zeros((n, n), dtype=np.int64)
    for node in graph.identifiers():
        for edge in graph.connections(node):
            matrix[node.index, edge.dest.index] += 1
    return matrix
