"""
Function-style entry points for building graphs, traversing them, and
sorting linked lists.

Usage:
    from graphwalk.operations import add_edge, bfs, create_graph

    graph = create_graph(6)
    add_edge(graph, 0, 1)
    add_edge(graph, 0, 2)
    bfs(graph, 0)  # [0, 2, 1]
"""

from __future__ import annotations

from graphwalk.config import (
    DFS_DEFAULT_START,
    MAX_LIST_VERTICES,
    MAX_MATRIX_VERTICES,
)
from graphwalk.graph import AdjacencyListGraph, AdjacencyMatrixGraph
from graphwalk.structures.linked_list import ListNode
from graphwalk.structures.linked_list import sort_linked_list as _sort_chain
from graphwalk.traversal import BreadthFirstSearch, DepthFirstSearch


def create_graph(vertices: int, max_vertices: int = MAX_LIST_VERTICES) -> AdjacencyListGraph:
    """
    Create an adjacency-list graph with `vertices` vertices and no edges.

    Raises:
        ValueError: If vertices <= 0 or vertices > max_vertices
    """
    return AdjacencyListGraph(vertices, max_vertices=max_vertices)


def add_edge(graph: AdjacencyListGraph, src: int, dest: int) -> None:
    """Add an undirected edge; duplicates are kept."""
    graph.add_edge(src, dest)


def bfs(
    graph: AdjacencyListGraph,
    start_vertex: int,
    queue_capacity: int | None = None,
) -> list[int]:
    """
    Breadth-first visitation order from `start_vertex`.

    The queue holds up to `queue_capacity` vertices, or the graph's vertex
    count when None.

    Reachable vertices stay marked visited on `graph` afterwards.
    """
    return BreadthFirstSearch(queue_capacity).run(graph, start_vertex).order


def create_matrix_graph(max_vertices: int = MAX_MATRIX_VERTICES) -> AdjacencyMatrixGraph:
    """Create an empty adjacency-matrix graph."""
    return AdjacencyMatrixGraph(max_vertices=max_vertices)


def add_vertex(matrix_graph: AdjacencyMatrixGraph) -> int:
    """Register the next vertex and return its id."""
    return matrix_graph.add_vertex()


def add_edge_dfs(matrix_graph: AdjacencyMatrixGraph, start: int, end: int) -> None:
    """Add an undirected edge to a matrix graph."""
    matrix_graph.add_edge(start, end)


def depth_first_search(
    matrix_graph: AdjacencyMatrixGraph,
    start: int = DFS_DEFAULT_START,
    stack_capacity: int | None = None,
) -> list[int]:
    """
    Depth-first visitation order from `start`.

    The stack holds up to `stack_capacity` vertices, or the graph's
    max_vertices when None.

    Every visited flag is cleared again before returning. An empty graph
    yields an empty order.
    """
    if matrix_graph.num_vertices == 0:
        return []
    return DepthFirstSearch(stack_capacity).run(matrix_graph, start).order


def sort_linked_list(head: ListNode | None) -> ListNode | None:
    """Sort a linked list in place by value exchange and return its head."""
    return _sort_chain(head)
