#!/usr/bin/env python3
"""
graphwalk CLI - run BFS or DFS over a graph file or an inline edge list.

Usage:
    python scripts/traverse.py --graph graphs/example.msgpack --algorithm bfs --start 0
    python scripts/traverse.py --vertices 6 --edges "0-1,0-2,1-2,1-4,1-3,2-4,3-4"
    python scripts/traverse.py --vertices 5 --edges "0-1,0-2,0-3,1-4,2-4,3-4" --algorithm dfs
    python scripts/traverse.py --vertices 8 --edges "0-1,1-2,2-3,3-4,4-5,5-6,6-7" --algorithm dfs --max-vertices 8

Algorithms:
    bfs - Breadth-first search (adjacency list, bounded queue)
    dfs - Depth-first search (adjacency matrix, bounded stack)

Graph files:
    .msgpack or .json, either {"vertex": [neighbors...]} or
    {"num_vertices": N, "edges": [[u, v], ...]}
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphwalk.config import (  # noqa: E402
    MAX_LIST_VERTICES,
    MAX_MATRIX_VERTICES,
    configure_logging,
)
from graphwalk.data.loader import load_graph_data  # noqa: E402
from graphwalk.errors import GraphWalkError  # noqa: E402
from graphwalk.graph import AdjacencyListGraph, AdjacencyMatrixGraph  # noqa: E402
from graphwalk.traversal import get_traversal  # noqa: E402


def parse_edges(text: str) -> list[tuple[int, int]]:
    """Parse "0-1,0-2" into [(0, 1), (0, 2)]."""
    edges = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        src, sep, dest = part.partition("-")
        if not sep:
            raise ValueError(f"Edge '{part}' must look like 'u-v'")
        edges.append((int(src), int(dest)))
    return edges


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Traverse a graph with BFS or DFS",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--graph",
        type=Path,
        help="Graph file (.msgpack or .json)",
    )
    source.add_argument(
        "--edges",
        type=str,
        help="Inline edge list, e.g. '0-1,0-2,1-2' (requires --vertices)",
    )
    parser.add_argument(
        "--vertices",
        type=int,
        default=None,
        help="Number of vertices for --edges (default: largest id + 1)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default="bfs",
        choices=["bfs", "dfs"],
        help="Traversal to run (default: bfs)",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=0,
        help="Start vertex (default: 0)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help=(
            "Queue/stack capacity (default: vertex count for bfs, "
            "--max-vertices for dfs)"
        ),
    )
    parser.add_argument(
        "--max-vertices",
        type=int,
        default=None,
        help=(
            f"Largest graph accepted (default: {MAX_LIST_VERTICES} for bfs, "
            f"{MAX_MATRIX_VERTICES} for dfs)"
        ),
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_graph(args: argparse.Namespace) -> AdjacencyListGraph | AdjacencyMatrixGraph:
    """Build the graph type the chosen algorithm runs on."""
    if args.graph is not None:
        num_vertices, edges = load_graph_data(args.graph)
    else:
        edges = parse_edges(args.edges)
        if args.vertices is not None:
            num_vertices = args.vertices
        elif edges:
            num_vertices = max(max(u, v) for u, v in edges) + 1
        else:
            raise ValueError("--vertices is required when --edges is empty")

    if args.algorithm == "bfs":
        max_vertices = args.max_vertices or MAX_LIST_VERTICES
        return AdjacencyListGraph.from_edges(num_vertices, edges, max_vertices=max_vertices)
    max_vertices = args.max_vertices or MAX_MATRIX_VERTICES
    return AdjacencyMatrixGraph.from_edges(num_vertices, edges, max_vertices=max_vertices)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        graph = build_graph(args)
        kwargs = {}
        if args.capacity is not None:
            key = "queue_capacity" if args.algorithm == "bfs" else "stack_capacity"
            kwargs[key] = args.capacity
        traversal = get_traversal(args.algorithm, **kwargs)
        result = traversal.run(graph, args.start)
    except (GraphWalkError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print(f"{traversal.description}")
    print("=" * 60)
    print(f"  Graph:   {graph!r}")
    print(f"  Start:   {result.start}")
    print(f"  Order:   {' -> '.join(str(v) for v in result.order)}")
    print(f"  Visited: {result.visit_count} of {graph.num_vertices}")
    print(f"  Frontier peak: {result.frontier_peak}")
    print(f"  Time:    {result.total_time_ms:.3f} ms")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
