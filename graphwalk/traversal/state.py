"""
Traversal state dataclasses for tracking visitation progress.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class TraversalResult:
    """
    Complete record of a finished traversal.

    Attributes:
        algorithm: Name of the traversal that ran
        start: Start vertex (None if the graph was empty)
        order: Vertices in the order they were visited
        frontier_peak: Largest number of items held by the queue/stack
        total_time_ms: Wall time of the traversal in milliseconds
        timestamp: When the traversal ran
    """

    algorithm: str
    start: int | None
    order: list[int]
    frontier_peak: int
    total_time_ms: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def visit_count(self) -> int:
        return len(self.order)

    @property
    def visited_set(self) -> frozenset[int]:
        return frozenset(self.order)


@dataclass
class TraversalState:
    """
    Mutable state during an active traversal.

    Attributes:
        algorithm: Name of the running traversal
        start: Start vertex
        order: Vertices visited so far
        frontier_peak: Largest frontier size observed so far
        start_time_ms: Traversal start timestamp (epoch ms)
    """

    algorithm: str
    start: int | None
    order: list[int] = field(default_factory=list)
    frontier_peak: int = 0
    start_time_ms: float = 0.0

    def record_visit(self, vertex: int) -> None:
        self.order.append(vertex)

    def observe_frontier(self, size: int) -> None:
        if size > self.frontier_peak:
            self.frontier_peak = size

    def to_result(self, total_time_ms: float) -> TraversalResult:
        """Convert to a TraversalResult."""
        return TraversalResult(
            algorithm=self.algorithm,
            start=self.start,
            order=list(self.order),
            frontier_peak=self.frontier_peak,
            total_time_ms=total_time_ms,
        )
