"""
adjgraph - generic in-memory directed graphs.

Nodes carry arbitrary payloads, edges carry arbitrary (weighted) payloads,
and the graph supports breadth-first traversal and Dijkstra shortest paths.
"""

from adjgraph.graph import (
    CostTypeError,
    Edge,
    Graph,
    GraphError,
    InvalidEdgeTargetError,
    NodeIdentifier,
    NodeOutOfBoundsError,
    ShortestPathResult,
)

__version__ = "0.1.0"

__all__ = [
    "CostTypeError",
    "Edge",
    "Graph",
    "GraphError",
    "InvalidEdgeTargetError",
    "NodeIdentifier",
    "NodeOutOfBoundsError",
    "ShortestPathResult",
]
