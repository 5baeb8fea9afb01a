#!/usr/bin/env python3
"""
Run the three reference scenarios: BFS, linked-list sort, and DFS.

Usage:
    python scripts/demo.py
    python scripts/demo.py --verbose
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphwalk.config import configure_logging  # noqa: E402
from graphwalk.operations import (  # noqa: E402
    add_edge,
    add_edge_dfs,
    add_vertex,
    bfs,
    create_graph,
    create_matrix_graph,
    depth_first_search,
)
from graphwalk.structures import LinkedList  # noqa: E402

# =============================================================================
# SCENARIOS
# =============================================================================

BFS_VERTICES = 6
BFS_EDGES = [(0, 1), (0, 2), (1, 2), (1, 4), (1, 3), (2, 4), (3, 4)]

SORT_VALUES = [12, 56, 2, 11, 1, 90]

DFS_VERTICES = 5
DFS_EDGES = [(0, 1), (0, 2), (0, 3), (1, 4), (2, 4), (3, 4)]


def run_bfs() -> list[int]:
    graph = create_graph(BFS_VERTICES)
    for src, dest in BFS_EDGES:
        add_edge(graph, src, dest)
    return bfs(graph, 0)


def run_sort() -> tuple[list[int], list[int]]:
    linked = LinkedList.from_values(SORT_VALUES)
    before = linked.to_list()
    linked.sort()
    return before, linked.to_list()


def run_dfs() -> list[int]:
    graph = create_matrix_graph()
    for _ in range(DFS_VERTICES):
        add_vertex(graph)
    for start, end in DFS_EDGES:
        add_edge_dfs(graph, start, end)
    return depth_first_search(graph)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the graphwalk reference scenarios")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    print("\n=== BFS (adjacency list) ===")
    print(f"  Edges: {BFS_EDGES}")
    print(f"  Order: {run_bfs()}")

    print("\n=== Linked-list sort ===")
    before, after = run_sort()
    print(f"  Before: {before}")
    print(f"  After:  {after}")

    print("\n=== DFS (adjacency matrix) ===")
    print(f"  Edges: {DFS_EDGES}")
    print(f"  Order: {run_dfs()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
