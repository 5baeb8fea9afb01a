"""
Undirected graph stored as per-vertex neighbor lists.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable

import numpy as np

from graphwalk.config import MAX_LIST_VERTICES
from graphwalk.errors import InvalidVertexError

logger = logging.getLogger(__name__)


def check_vertex(vertex: object, num_vertices: int) -> int:
    """
    Return `vertex` as a plain int if it is an integer in [0, num_vertices).

    Anything with __index__ (including numpy integers) is accepted; bools
    and non-integers are not.
    """
    if isinstance(vertex, (bool, np.bool_)):
        raise InvalidVertexError(vertex, num_vertices)
    try:
        index = operator.index(vertex)
    except TypeError:
        raise InvalidVertexError(vertex, num_vertices) from None
    if not 0 <= index < num_vertices:
        raise InvalidVertexError(vertex, num_vertices)
    return index


class AdjacencyListGraph:
    """
    Undirected graph with dense vertex ids 0..num_vertices-1.

    Each new neighbor is placed at the front of its vertex's list, so
    neighbors are stored most-recently-added first. Adding the same edge
    twice stores it twice.

    Visited flags are set by breadth-first search and stay set until
    reset_visited() is called.

    Attributes:
        num_vertices: Number of vertices
        adjacency: Dict mapping vertex to its ordered list of neighbors
        visited: Per-vertex visited flag
    """

    def __init__(self, num_vertices: int, max_vertices: int = MAX_LIST_VERTICES) -> None:
        if num_vertices <= 0:
            raise ValueError(f"Graph needs at least one vertex, got {num_vertices}")
        if num_vertices > max_vertices:
            raise ValueError(
                f"Graph of {num_vertices} vertices exceeds maximum of {max_vertices}"
            )
        self.num_vertices = num_vertices
        self.adjacency: dict[int, list[int]] = {v: [] for v in range(num_vertices)}
        self.visited: list[bool] = [False] * num_vertices
        self._edge_count = 0

    @classmethod
    def from_edges(
        cls,
        num_vertices: int,
        edges: Iterable[tuple[int, int]],
        max_vertices: int = MAX_LIST_VERTICES,
    ) -> AdjacencyListGraph:
        """Build a graph and add `edges` in order."""
        graph = cls(num_vertices, max_vertices=max_vertices)
        for src, dest in edges:
            graph.add_edge(src, dest)
        return graph

    @property
    def edge_count(self) -> int:
        """Number of add_edge() calls (duplicates included)."""
        return self._edge_count

    def vertices(self) -> range:
        return range(self.num_vertices)

    def validate_vertex(self, vertex: object) -> int:
        return check_vertex(vertex, self.num_vertices)

    def add_edge(self, src: int, dest: int) -> None:
        """
        Add an undirected edge between src and dest.

        Raises:
            InvalidVertexError: If either endpoint is out of range
        """
        src = self.validate_vertex(src)
        dest = self.validate_vertex(dest)

        self.adjacency[src].insert(0, dest)
        self.adjacency[dest].insert(0, src)
        self._edge_count += 1
        logger.debug(f"Added edge {src} <-> {dest}")

    def neighbors(self, vertex: int) -> list[int]:
        """Neighbors of `vertex`, most recently added first."""
        return self.adjacency[self.validate_vertex(vertex)]

    def has_edge(self, src: int, dest: int) -> bool:
        return dest in self.neighbors(src)

    def degree(self, vertex: int) -> int:
        return len(self.neighbors(vertex))

    def mark_visited(self, vertex: int) -> None:
        self.visited[self.validate_vertex(vertex)] = True

    def is_visited(self, vertex: int) -> bool:
        return self.visited[self.validate_vertex(vertex)]

    def reset_visited(self) -> None:
        """Clear every visited flag so the graph can be traversed again."""
        self.visited = [False] * self.num_vertices

    def __repr__(self) -> str:
        return (
            f"AdjacencyListGraph(num_vertices={self.num_vertices}, "
            f"edges={self._edge_count})"
        )
