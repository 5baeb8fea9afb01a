"""
Graph module.

Provides the two graph representations the traversals run on:
- AdjacencyListGraph: Neighbor lists, used by BFS
- AdjacencyMatrixGraph: Boolean matrix with per-vertex visited flags, used by DFS
"""

from graphwalk.graph.adjacency_list import AdjacencyListGraph
from graphwalk.graph.adjacency_matrix import AdjacencyMatrixGraph, Vertex

__all__ = [
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "Vertex",
]
