"""
Traversal base class shared by the breadth-first and depth-first engines.

Subclasses implement traverse() to fill in a TraversalState; run() wraps
it with timing and logging.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

from graphwalk.traversal.state import TraversalResult, TraversalState

logger = logging.getLogger(__name__)


class Traversal(ABC):
    """
    Abstract base class for graph traversals.

    Each traversal owns its frontier structure for the duration of a single
    call and does not share it between calls.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier (e.g., 'bfs', 'dfs')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the traversal."""
        ...

    @abstractmethod
    def default_start(self, graph: Any) -> int | None:
        """Start vertex used when run() is called without one."""
        ...

    @abstractmethod
    def traverse(self, graph: Any, start: int | None, state: TraversalState) -> None:
        """
        Visit vertices of `graph` from `start`, recording them in `state`.

        Raises:
            InvalidVertexError: If `start` is not a vertex of `graph`
            StructureOverflowError: If the frontier exceeds its capacity
        """
        ...

    def run(self, graph: Any, start: int | None = None) -> TraversalResult:
        """
        Run a complete traversal.

        Args:
            graph: Graph to traverse
            start: Start vertex (defaults to default_start(graph))

        Returns:
            TraversalResult with the visitation order
        """
        if start is None:
            start = self.default_start(graph)

        state = TraversalState(algorithm=self.name, start=start)
        state.start_time_ms = time.time() * 1000

        logger.info(f"Starting {self.name} from vertex {start} on {graph!r}")
        self.traverse(graph, start, state)

        total_time = time.time() * 1000 - state.start_time_ms
        result = state.to_result(total_time)
        logger.info(
            f"{self.name} visited {result.visit_count} vertices: "
            f"{' -> '.join(str(v) for v in result.order)}"
        )
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
