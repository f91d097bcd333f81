"""
Exceptions raised by graph operations.

Absent results ("value not found", "no path") are never errors; they are
returned as None.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base exception for graph errors."""

    pass


class NodeOutOfBoundsError(GraphError, IndexError):
    """A node identifier does not refer to a node of the graph."""

    def __init__(self, node: object, node_count: int) -> None:
        self.node = node
        self.node_count = node_count
        super().__init__(f"Node {node} out of range [0, {node_count})")


class InvalidEdgeTargetError(NodeOutOfBoundsError):
    """connect() was given a destination that does not exist."""

    def __init__(self, node: object, node_count: int) -> None:
        super().__init__(node, node_count)
        self.args = (f"Edge target {node} out of range [0, {node_count})",)


class CostTypeError(GraphError, TypeError):
    """An edge cost cannot be added to and compared with other costs."""

    pass
