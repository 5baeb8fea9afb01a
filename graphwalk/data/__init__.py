"""
Data loading module.

Reads graph files (.msgpack or .json) into graph objects.

Usage:
    from graphwalk.data import load_list_graph, load_matrix_graph

    graph = load_list_graph("graphs/example.json")
"""

from graphwalk.data.loader import (
    edges_from_mapping,
    load_graph_data,
    load_list_graph,
    load_matrix_graph,
)

__all__ = [
    "edges_from_mapping",
    "load_graph_data",
    "load_list_graph",
    "load_matrix_graph",
]
