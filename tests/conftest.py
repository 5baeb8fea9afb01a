"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from graphwalk.graph import AdjacencyListGraph, AdjacencyMatrixGraph


@pytest.fixture
def bfs_edges() -> list[tuple[int, int]]:
    """Edge insertion sequence for the reference BFS graph."""
    return [(0, 1), (0, 2), (1, 2), (1, 4), (1, 3), (2, 4), (3, 4)]


@pytest.fixture
def bfs_graph(bfs_edges) -> AdjacencyListGraph:
    """Six-vertex list graph; vertex 5 is isolated."""
    return AdjacencyListGraph.from_edges(6, bfs_edges)


@pytest.fixture
def dfs_edges() -> list[tuple[int, int]]:
    """Edges for the reference DFS graph."""
    return [(0, 1), (0, 2), (0, 3), (1, 4), (2, 4), (3, 4)]


@pytest.fixture
def dfs_graph(dfs_edges) -> AdjacencyMatrixGraph:
    """Five-vertex matrix graph."""
    return AdjacencyMatrixGraph.from_edges(5, dfs_edges)


@pytest.fixture
def sample_values() -> list[int]:
    """Values inserted into the reference linked list."""
    return [12, 56, 2, 11, 1, 90]
