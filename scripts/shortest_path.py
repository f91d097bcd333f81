#!/usr/bin/env python3
"""
Shortest path CLI - Build a small weighted graph and find the cheapest path.

Usage:
    python scripts/shortest_path.py
    python scripts/shortest_path.py --source 0 --target 2 --show-graph
    python scripts/shortest_path.py --nodes 3 --edge 0:1:4 --edge 1:2:1 --edge 0:2:9 --target 2

Without --edge the example graph is used:
    nodes 0..3, edges 0->1 (5), 1->2 (5), 0->3 (10), 1->3 (3)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from adjgraph import Graph  # noqa: E402
from adjgraph.config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL  # noqa: E402

EXAMPLE_NODES = 4
EXAMPLE_EDGES = [(0, 1, 5), (1, 2, 5), (0, 3, 10), (1, 3, 3)]


def parse_edge(text: str) -> tuple[int, int, float]:
    """Parse SRC:DST:COST into a tuple."""
    try:
        src, dst, cost = text.split(":")
        return int(src), int(dst), float(cost)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected SRC:DST:COST, got '{text}'")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the shortest path in a weighted directed graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--nodes",
        type=int,
        default=None,
        help=f"Number of nodes, labelled 0..N-1 (default: {EXAMPLE_NODES}, or enough for --edge)",
    )
    parser.add_argument(
        "--edge",
        type=parse_edge,
        action="append",
        default=None,
        help="Edge as SRC:DST:COST (repeatable; default: the example graph)",
    )
    parser.add_argument(
        "--source",
        type=int,
        default=0,
        help="Start node (default: 0)",
    )
    parser.add_argument(
        "--target",
        type=int,
        default=3,
        help="End node (default: 3)",
    )
    parser.add_argument(
        "--show-graph",
        action="store_true",
        help="Print the graph before searching",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def build_graph(node_count: int, edges: list[tuple[int, int, float]]) -> Graph[int, float]:
    """Build a graph whose node payloads are their labels."""
    graph: Graph[int, float] = Graph()
    nodes = graph.insert_all(range(node_count))
    graph.connect_all((nodes[src], nodes[dst], cost) for src, dst, cost in edges)
    return graph


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    edges = args.edge if args.edge else EXAMPLE_EDGES
    node_count = args.nodes
    if node_count is None:
        node_count = max(max(src, dst) for src, dst, _ in edges) + 1
        node_count = max(node_count, args.source + 1, args.target + 1)

    # Labels must be in range before they can index the identifier list
    for label in [args.source, args.target] + [n for src, dst, _ in edges for n in (src, dst)]:
        if not 0 <= label < node_count:
            print(f"Error: node {label} out of range [0, {node_count})", file=sys.stderr)
            return 2

    graph = build_graph(node_count, edges)

    if args.show_graph:
        print(graph)
        print()

    source = graph.contains(args.source)
    target = graph.contains(args.target)
    result = graph.shortest_path(source, target)

    if result is None:
        print(f"No path from {args.source} to {args.target}")
        return 1

    labels = [str(graph.get(node)) for node in result.path]
    print(f"From {args.source} to {args.target}: {' -> '.join(labels)}")
    print(f"Cost: {result.cost:g} ({result.hops} edges)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
