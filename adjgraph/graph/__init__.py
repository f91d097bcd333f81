"""
Graph module.

Provides the directed graph container and the algorithms that run on it:
- Graph: Node/edge storage and adjacency queries
- visit_breadth_first / bfs: Breadth-first traversal and value search
- shortest_path: Dijkstra shortest path
- format_graph / adjacency_matrix: Diagnostic renderings
"""

from adjgraph.graph.core import Graph
from adjgraph.graph.display import adjacency_matrix, format_graph
from adjgraph.graph.errors import (
    CostTypeError,
    GraphError,
    InvalidEdgeTargetError,
    NodeOutOfBoundsError,
)
from adjgraph.graph.models import (
    Cost,
    Edge,
    Equatable,
    NodeIdentifier,
    ShortestPathResult,
)
from adjgraph.graph.shortest_path import shortest_path
from adjgraph.graph.traversal import bfs, visit_breadth_first

__all__ = [
    "Graph",
    "Edge",
    "NodeIdentifier",
    "ShortestPathResult",
    "Cost",
    "Equatable",
    "GraphError",
    "NodeOutOfBoundsError",
    "InvalidEdgeTargetError",
    "CostTypeError",
    "visit_breadth_first",
    "bfs",
    "shortest_path",
    "format_graph",
    "adjacency_matrix",
]
