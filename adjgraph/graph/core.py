"""
In-memory directed graph container.

Usage:
    from adjgraph import Graph

    graph = Graph()
    a, b, c = graph.insert_all(["a", "b", "c"])
    graph.connect(a, b, 5)
    graph.connect(b, c, 2)

    graph.connected(a, b)           # True
    graph.bfs(a, "c")               # NodeIdentifier(2)
    graph.shortest_path(a, c).cost  # 7
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from adjgraph.config import DEFAULT_ZERO_COST
from adjgraph.graph.display import format_graph
from adjgraph.graph.errors import InvalidEdgeTargetError, NodeOutOfBoundsError
from adjgraph.graph.models import Edge, NodeIdentifier, ShortestPathResult
from adjgraph.graph.shortest_path import shortest_path
from adjgraph.graph.traversal import bfs, visit_breadth_first

T = TypeVar("T")
V = TypeVar("V")

logger = logging.getLogger(__name__)


class Graph(Generic[T, V]):
    """
    Directed graph with payload-carrying nodes and edges.

    Nodes are appended with insert() and addressed by the NodeIdentifier it
    returns. Edges are appended with connect() and live in the adjacency list
    of their source node. Nothing can be removed.

    The container is not thread-safe: mutating it while a traversal or
    shortest-path call runs on it is unsupported.

    Attributes:
        _nodes: Node payloads, indexed by identifier
        _edges: Outgoing edges per node, parallel to _nodes
    """

    __slots__ = ("_nodes", "_edges")

    def __init__(self) -> None:
        self._nodes: list[T] = []
        self._edges: list[list[Edge[V]]] = []

    # =========================================================================
    # Validation
    # =========================================================================

    def _index(
        self,
        node: NodeIdentifier,
        error: type[NodeOutOfBoundsError] = NodeOutOfBoundsError,
    ) -> int:
        """Return the list offset for node, raising if it is not in the graph."""
        if not isinstance(node, NodeIdentifier):
            raise TypeError(f"Expected NodeIdentifier, got {type(node).__name__}")
        if node.index >= len(self._nodes):
            raise error(node, len(self._nodes))
        return node.index

    # =========================================================================
    # Insertion
    # =========================================================================

    def insert(self, value: T) -> NodeIdentifier:
        """Add a node holding value and return its identifier."""
        node = NodeIdentifier(len(self._nodes))
        self._nodes.append(value)
        self._edges.append([])
        return node

    def insert_all(self, values: Iterable[T]) -> list[NodeIdentifier]:
        """Insert each value in order, returning identifiers in the same order."""
        return [self.insert(value) for value in values]

    def connect(self, source: NodeIdentifier, dest: NodeIdentifier, data: V) -> None:
        """
        Add a directed edge from source to dest carrying data.

        Parallel edges are kept as distinct edges.

        Raises:
            NodeOutOfBoundsError: If source is not in the graph
            InvalidEdgeTargetError: If dest is not in the graph
        """
        source_idx = self._index(source)
        self._index(dest, InvalidEdgeTargetError)
        self._edges[source_idx].append(Edge(dest=dest, data=data))

    def connect_all(
        self,
        connections: Iterable[tuple[NodeIdentifier, NodeIdentifier, V]],
    ) -> None:
        """
        Connect every (source, dest, data) tuple in order.

        All tuples are validated first, so an invalid tuple leaves the graph
        unchanged.
        """
        pending = list(connections)
        for source, dest, _ in pending:
            self._index(source)
            self._index(dest, InvalidEdgeTargetError)
        for source, dest, data in pending:
            self._edges[source.index].append(Edge(dest=dest, data=data))
        logger.debug(f"Connected {len(pending)} edges")

    # =========================================================================
    # Core Accessors
    # =========================================================================

    def get(self, node: NodeIdentifier) -> T:
        """Get the payload of a node."""
        return self._nodes[self._index(node)]

    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return len(self._nodes)

    def edge_count(self) -> int:
        """Number of edges in the graph, parallel edges included."""
        return sum(len(edges) for edges in self._edges)

    def iter(self) -> Iterator[T]:
        """
        Iterate over node payloads in identifier order.

        Each call returns a fresh iterator over the nodes present at call time.
        """
        nodes = self._nodes
        return (nodes[i] for i in range(len(nodes)))

    def identifiers(self) -> Iterator[NodeIdentifier]:
        """Iterate over the identifiers of all nodes present at call time."""
        return (NodeIdentifier(i) for i in range(len(self._nodes)))

    def contains(self, value: T) -> NodeIdentifier | None:
        """
        Find the first node whose payload equals value.

        Scans every node regardless of connectivity; see bfs() for a search
        limited to nodes reachable from a start node.

        Returns:
            Identifier with the lowest index holding value, or None
        """
        for i, payload in enumerate(self._nodes):
            if payload == value:
                return NodeIdentifier(i)
        return None

    # =========================================================================
    # Adjacency
    # =========================================================================

    def connections(self, node: NodeIdentifier) -> Sequence[Edge[V]]:
        """Outgoing edges of node in insertion order (read-only snapshot)."""
        return tuple(self._edges[self._index(node)])

    def connection(self, source: NodeIdentifier, dest: NodeIdentifier) -> Edge[V] | None:
        """First edge from source to dest in insertion order, or None."""
        self._index(dest)
        for edge in self._edges[self._index(source)]:
            if edge.dest == dest:
                return edge
        return None

    def connected(self, source: NodeIdentifier, dest: NodeIdentifier) -> bool:
        """Whether at least one edge leads from source to dest."""
        return self.connection(source, dest) is not None

    # =========================================================================
    # Algorithms
    # =========================================================================

    def visit_breadth_first(
        self,
        source: NodeIdentifier,
        visitor: Callable[[NodeIdentifier, T], bool],
    ) -> int:
        """Walk the graph breadth-first from source. See traversal.visit_breadth_first."""
        return visit_breadth_first(self, source, visitor)

    def bfs(self, source: NodeIdentifier, wanted: T) -> NodeIdentifier | None:
        """Find the first node reachable from source holding wanted."""
        return bfs(self, source, wanted)

    def shortest_path(
        self,
        source: NodeIdentifier,
        target: NodeIdentifier,
        *,
        zero=DEFAULT_ZERO_COST,
        weight: Callable[[V], object] | None = None,
    ) -> ShortestPathResult | None:
        """Cheapest path from source to target. See shortest_path.shortest_path."""
        return shortest_path(self, source, target, zero=zero, weight=weight)

    # =========================================================================
    # Dunder
    # =========================================================================

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __contains__(self, value: object) -> bool:
        return self.contains(value) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={self.node_count()}, edges={self.edge_count()})"

    def __str__(self) -> str:
        return format_graph(self)
