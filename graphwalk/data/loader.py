"""
Graph file loading for the command-line tools.

Two document shapes are accepted, stored as .msgpack or .json:

    {"0": [1, 2], "1": [0, 2], ...}              # vertex -> neighbors
    {"num_vertices": 5, "edges": [[0, 1], ...]}  # explicit edge list

Usage:
    from graphwalk.data.loader import load_list_graph

    graph = load_list_graph("graphs/example.msgpack")
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import msgpack

from graphwalk.config import MAX_LIST_VERTICES, MAX_MATRIX_VERTICES
from graphwalk.graph import AdjacencyListGraph, AdjacencyMatrixGraph

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".msgpack", ".json")


def _as_vertex(value: Any) -> int:
    """
    Convert a key or list entry to a vertex id.

    Accepts non-negative ints and strings of ASCII digits (JSON keys are
    strings). Floats, bools and anything else are rejected.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        if value >= 0:
            return value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise ValueError(f"Invalid vertex id: {value!r}")


def edges_from_mapping(
    mapping: Mapping[Any, Iterable[Any]],
) -> tuple[int, list[tuple[int, int]]]:
    """
    Convert a vertex -> neighbors mapping into an undirected edge list.

    A pair (u, v) listed under both u and v yields one edge, taken from the
    lower-numbered side. A pair listed only once still yields an edge.

    Returns:
        (num_vertices, edges), where num_vertices is one past the largest id
    """
    adjacency: dict[int, list[int]] = {
        _as_vertex(key): [_as_vertex(v) for v in neighbors]
        for key, neighbors in mapping.items()
    }
    if not adjacency:
        raise ValueError("Graph mapping is empty")

    ids = set(adjacency)
    for neighbors in adjacency.values():
        ids.update(neighbors)

    edges = []
    for u, neighbors in adjacency.items():
        for v in neighbors:
            if u <= v or u not in adjacency.get(v, ()):
                edges.append((u, v))

    return max(ids) + 1, edges


def parse_graph_document(document: Any) -> tuple[int, list[tuple[int, int]]]:
    """Interpret a decoded graph document as (num_vertices, edges)."""
    if not isinstance(document, Mapping):
        raise ValueError(f"Graph document must be a mapping, got {type(document).__name__}")

    if "edges" in document:
        try:
            edges = [(_as_vertex(u), _as_vertex(v)) for u, v in document["edges"]]
        except (TypeError, ValueError) as e:
            raise ValueError(f"Malformed edge list: {e}") from e
        if "num_vertices" in document:
            num_vertices = _as_vertex(document["num_vertices"])
        elif edges:
            num_vertices = max(max(u, v) for u, v in edges) + 1
        else:
            raise ValueError("Edge list document needs num_vertices when it has no edges")
        return num_vertices, edges

    return edges_from_mapping(document)


def read_graph_file(path: str | Path) -> Any:
    """Decode a .msgpack or .json graph file."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported graph file '{path.name}'. Expected one of: "
            f"{', '.join(SUPPORTED_SUFFIXES)}"
        )

    logger.info(f"Loading graph from {path}...")
    if suffix == ".msgpack":
        with open(path, "rb") as f:
            return msgpack.load(f, strict_map_key=False)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_graph_data(path: str | Path) -> tuple[int, list[tuple[int, int]]]:
    """
    Load (num_vertices, edges) from a graph file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file type or contents are not understood
    """
    num_vertices, edges = parse_graph_document(read_graph_file(path))
    logger.info(f"Loaded {num_vertices} vertices and {len(edges)} edges")
    return num_vertices, edges


def load_list_graph(
    path: str | Path, max_vertices: int = MAX_LIST_VERTICES
) -> AdjacencyListGraph:
    """Load a graph file as an AdjacencyListGraph."""
    num_vertices, edges = load_graph_data(path)
    return AdjacencyListGraph.from_edges(num_vertices, edges, max_vertices=max_vertices)


def load_matrix_graph(
    path: str | Path, max_vertices: int = MAX_MATRIX_VERTICES
) -> AdjacencyMatrixGraph:
    """Load a graph file as an AdjacencyMatrixGraph."""
    num_vertices, edges = load_graph_data(path)
    return AdjacencyMatrixGraph.from_edges(num_vertices, edges, max_vertices=max_vertices)
