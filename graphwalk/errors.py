"""
Exceptions raised by graphwalk structures and traversals.
"""

from __future__ import annotations


class GraphWalkError(Exception):
    """Base class for all graphwalk errors."""


class StructureOverflowError(GraphWalkError):
    """
    A bounded structure is full.

    The rejected call has not modified the structure.
    """

    def __init__(self, capacity: int, what: str = "structure") -> None:
        self.capacity = capacity
        super().__init__(f"{what} is full (capacity {capacity})")


class StructureUnderflowError(GraphWalkError, IndexError):
    """Pop, dequeue or peek on an empty structure."""

    def __init__(self, what: str = "structure") -> None:
        super().__init__(f"{what} is empty")


class InvalidVertexError(GraphWalkError, IndexError):
    """Vertex identifier outside [0, num_vertices)."""

    def __init__(self, vertex: object, num_vertices: int) -> None:
        self.vertex = vertex
        self.num_vertices = num_vertices
        super().__init__(f"Vertex {vertex!r} out of range [0, {num_vertices})")
