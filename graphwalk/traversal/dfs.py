"""
Depth-first search over an adjacency-matrix graph with a bounded stack.
"""

from __future__ import annotations

import logging

from graphwalk.config import DFS_DEFAULT_START
from graphwalk.graph.adjacency_matrix import AdjacencyMatrixGraph
from graphwalk.structures.bounded import BoundedStack
from graphwalk.traversal.base import Traversal
from graphwalk.traversal.state import TraversalState

logger = logging.getLogger(__name__)


class DepthFirstSearch(Traversal):
    """
    Follows the lowest-numbered unvisited neighbor as deep as possible,
    backtracking when the top of the stack has none left.

    When the traversal ends, successfully or not, every visited flag on
    the graph is cleared again so the same graph can be re-traversed.
    """

    def __init__(self, stack_capacity: int | None = None) -> None:
        """
        Initialize DFS.

        Args:
            stack_capacity: Capacity of the bounded stack created per run.
                None sizes it to the graph's max_vertices.
        """
        if stack_capacity is not None and stack_capacity <= 0:
            raise ValueError(f"stack_capacity must be positive, got {stack_capacity}")
        self._stack_capacity = stack_capacity

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        return "Depth-first search (adjacency matrix, bounded stack)"

    def default_start(self, graph: AdjacencyMatrixGraph) -> int | None:
        if graph.num_vertices == 0:
            return None
        return DFS_DEFAULT_START

    def traverse(
        self, graph: AdjacencyMatrixGraph, start: int | None, state: TraversalState
    ) -> None:
        if graph.num_vertices == 0:
            logger.info("Graph has no vertices, nothing to traverse")
            return

        start = graph.validate_vertex(start)
        stack = BoundedStack(self._stack_capacity or graph.max_vertices)

        try:
            graph.mark_visited(start)
            stack.push(start)
            state.record_visit(start)
            state.observe_frontier(len(stack))

            while not stack.is_empty():
                unvisited = graph.adjacent_unvisited(stack.peek())

                if unvisited is None:
                    backtrack = stack.pop()
                    logger.debug(f"Backtracking from {backtrack}")
                else:
                    stack.push(unvisited)
                    graph.mark_visited(unvisited)
                    state.record_visit(unvisited)
                    state.observe_frontier(len(stack))
                    logger.debug(f"Visited {unvisited}, stack {list(stack)}")
        finally:
            graph.reset_visited()
