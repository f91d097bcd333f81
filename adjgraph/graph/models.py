"""
Value types shared by the graph container and its algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
V = TypeVar("V")


@dataclass(frozen=True, order=True)
class NodeIdentifier:
    """
    Opaque handle to a node of a Graph.

    Identifiers are handed out by Graph.insert() densely from zero in
    insertion order. They wrap an int instead of being one so they cannot be
    mixed up with arbitrary integers; every Graph operation range-checks them.

    Attributes:
        index: Zero-based position of the node in insertion order
    """

    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(f"Node index must be an int, got {type(self.index).__name__}")
        if self.index < 0:
            raise ValueError(f"Node index must be non-negative, got {self.index}")

    def __repr__(self) -> str:
        return f"NodeIdentifier({self.index})"

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class Edge(Generic[V]):
    """
    Directed edge stored in its source node's adjacency list.

    Attributes:
        dest: Node the edge points to
        data: Caller payload (weight or arbitrary data)
    """

    dest: NodeIdentifier
    data: V


@dataclass(frozen=True)
class ShortestPathResult(Generic[V]):
    """
    Result of a shortest-path query.

    Attributes:
        path: Nodes from source to target, both included
        cost: Sum of the edge costs along the path
    """

    path: tuple[NodeIdentifier, ...]
    cost: V

    @property
    def source(self) -> NodeIdentifier:
        return self.path[0]

    @property
    def target(self) -> NodeIdentifier:
        return self.path[-1]

    @property
    def hops(self) -> int:
        """Number of edges on the path."""
        return len(self.path) - 1


class Equatable(Protocol):
    """Values that can be searched for by equality (type hint only)."""

    def __eq__(self, other: Any) -> bool: ...


@runtime_checkable
class Cost(Protocol):
    """Path costs: summable and totally ordered."""

    def __add__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...
