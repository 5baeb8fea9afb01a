"""
Undirected graph stored as a square boolean adjacency matrix.

The vertex table and matrix are sized once at construction; vertices are
registered one at a time with add_vertex().
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from graphwalk.config import MAX_MATRIX_VERTICES
from graphwalk.errors import StructureOverflowError
from graphwalk.graph.adjacency_list import check_vertex

logger = logging.getLogger(__name__)


@dataclass
class Vertex:
    """A registered vertex and its traversal flag."""

    visited: bool = False


class AdjacencyMatrixGraph:
    """
    Undirected graph with up to `max_vertices` vertices.

    Attributes:
        edges: max_vertices x max_vertices boolean matrix, always symmetric
        vertices: Registered vertices in id order
    """

    def __init__(self, max_vertices: int = MAX_MATRIX_VERTICES) -> None:
        if max_vertices <= 0:
            raise ValueError(f"max_vertices must be positive, got {max_vertices}")
        self.max_vertices = max_vertices
        self.edges = np.zeros((max_vertices, max_vertices), dtype=bool)
        self.vertices: list[Vertex] = []

    @classmethod
    def from_edges(
        cls,
        num_vertices: int,
        edges: Iterable[tuple[int, int]],
        max_vertices: int = MAX_MATRIX_VERTICES,
    ) -> AdjacencyMatrixGraph:
        """Register `num_vertices` vertices and add `edges`."""
        graph = cls(max_vertices=max_vertices)
        for _ in range(num_vertices):
            graph.add_vertex()
        for start, end in edges:
            graph.add_edge(start, end)
        return graph

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the block covering registered vertices."""
        n = self.num_vertices
        view = self.edges[:n, :n].view()
        view.flags.writeable = False
        return view

    def validate_vertex(self, vertex: object) -> int:
        return check_vertex(vertex, self.num_vertices)

    def add_vertex(self) -> int:
        """
        Register a new unvisited vertex.

        Returns:
            The new vertex id

        Raises:
            StructureOverflowError: If max_vertices are already registered
        """
        if self.num_vertices >= self.max_vertices:
            logger.warning(f"Vertex table is full ({self.max_vertices})")
            raise StructureOverflowError(self.max_vertices, "vertex table")
        self.vertices.append(Vertex())
        return self.num_vertices - 1

    def add_edge(self, start: int, end: int) -> None:
        """
        Add an undirected edge between two registered vertices.

        Raises:
            InvalidVertexError: If either endpoint is not registered
        """
        start = self.validate_vertex(start)
        end = self.validate_vertex(end)
        self.edges[start, end] = True
        self.edges[end, start] = True

    def has_edge(self, start: int, end: int) -> bool:
        start = self.validate_vertex(start)
        end = self.validate_vertex(end)
        return bool(self.edges[start, end])

    def neighbors(self, vertex: int) -> list[int]:
        """Neighbors of `vertex` in ascending order."""
        vertex = self.validate_vertex(vertex)
        row = self.edges[vertex, : self.num_vertices]
        return [int(i) for i in np.flatnonzero(row)]

    def adjacent_unvisited(self, vertex: int) -> int | None:
        """Lowest-numbered unvisited neighbor of `vertex`, or None."""
        for neighbor in self.neighbors(vertex):
            if not self.vertices[neighbor].visited:
                return neighbor
        return None

    def mark_visited(self, vertex: int) -> None:
        self.vertices[self.validate_vertex(vertex)].visited = True

    def is_visited(self, vertex: int) -> bool:
        return self.vertices[self.validate_vertex(vertex)].visited

    def visited_flags(self) -> list[bool]:
        return [v.visited for v in self.vertices]

    def reset_visited(self) -> None:
        """Clear every vertex's visited flag."""
        for vertex in self.vertices:
            vertex.visited = False

    def __repr__(self) -> str:
        edge_count = int(np.triu(self.edges).sum())
        return (
            f"AdjacencyMatrixGraph(num_vertices={self.num_vertices}, "
            f"max_vertices={self.max_vertices}, edges={edge_count})"
        )
