"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from adjgraph import Graph, NodeIdentifier


@pytest.fixture
def empty_graph() -> Graph:
    """Return a graph with no nodes."""
    return Graph()


@pytest.fixture
def tree_graph() -> tuple[Graph, list[NodeIdentifier]]:
    """
    Return the graph 1 -> 2 -> 3, 1 -> 4 with unit edges.

    Payloads are 1..4; identifiers are 0..3 in the same order.
    """
    graph = Graph()
    nodes = graph.insert_all([1, 2, 3, 4])
    graph.connect(nodes[0], nodes[1], None)
    graph.connect(nodes[1], nodes[2], None)
    graph.connect(nodes[0], nodes[3], None)
    return graph, nodes


@pytest.fixture
def weighted_graph() -> tuple[Graph, list[NodeIdentifier]]:
    """
    Return the example weighted graph.

    Nodes 0..3 with edges 0->1 (5), 1->2 (5), 0->3 (10), 1->3 (3).
    """
    graph = Graph()
    nodes = graph.insert_all([0, 1, 2, 3])
    graph.connect_all(
        [
            (nodes[0], nodes[1], 5),
            (nodes[1], nodes[2], 5),
            (nodes[0], nodes[3], 10),
            (nodes[1], nodes[3], 3),
        ]
    )
    return graph, nodes


@pytest.fixture
def cycle_graph() -> tuple[Graph, list[NodeIdentifier]]:
    """Return the cycle 1 -> 2 -> 3 -> 1."""
    graph = Graph()
    nodes = graph.insert_all([1, 2, 3])
    graph.connect(nodes[0], nodes[1], 1)
    graph.connect(nodes[1], nodes[2], 1)
    graph.connect(nodes[2], nodes[0], 1)
    return graph, nodes
