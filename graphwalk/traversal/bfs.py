"""
Breadth-first search over an adjacency-list graph with a bounded queue.
"""

from __future__ import annotations

import logging

from graphwalk.graph.adjacency_list import AdjacencyListGraph
from graphwalk.structures.bounded import BoundedQueue
from graphwalk.traversal.base import Traversal
from graphwalk.traversal.state import TraversalState

logger = logging.getLogger(__name__)


class BreadthFirstSearch(Traversal):
    """
    Visits vertices in order of increasing edge distance from the start.

    Neighbors are scanned in the graph's stored order (most recently added
    edge first). Visited flags are left set on the graph; call
    graph.reset_visited() before traversing the same graph again.
    """

    def __init__(self, queue_capacity: int | None = None) -> None:
        """
        Initialize BFS.

        Args:
            queue_capacity: Capacity of the bounded queue created per run.
                None sizes it to the graph's vertex count, which BFS
                can never exceed.
        """
        if queue_capacity is not None and queue_capacity <= 0:
            raise ValueError(f"queue_capacity must be positive, got {queue_capacity}")
        self._queue_capacity = queue_capacity

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first search (adjacency list, bounded queue)"

    def default_start(self, graph: AdjacencyListGraph) -> int:
        return 0

    def traverse(
        self, graph: AdjacencyListGraph, start: int, state: TraversalState
    ) -> None:
        start = graph.validate_vertex(start)
        capacity = self._queue_capacity or graph.num_vertices
        queue = BoundedQueue(capacity)

        queue.enqueue(start)
        graph.mark_visited(start)
        state.observe_frontier(len(queue))

        while not queue.is_empty():
            logger.debug(f"Queue contains {list(queue)}")
            current = queue.dequeue()
            state.record_visit(current)
            logger.debug(f"Visited {current}")

            for neighbor in graph.neighbors(current):
                if not graph.is_visited(neighbor):
                    queue.enqueue(neighbor)
                    graph.mark_visited(neighbor)
            state.observe_frontier(len(queue))
