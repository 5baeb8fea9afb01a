"""
Traversal module.

Provides the traversal engines and their result records:
- BreadthFirstSearch: BFS over AdjacencyListGraph with a bounded queue
- DepthFirstSearch: DFS over AdjacencyMatrixGraph with a bounded stack
- TraversalState: Mutable per-run state
- TraversalResult: Finished traversal record
"""

from graphwalk.traversal.base import Traversal
from graphwalk.traversal.bfs import BreadthFirstSearch
from graphwalk.traversal.dfs import DepthFirstSearch
from graphwalk.traversal.state import TraversalResult, TraversalState

__all__ = [
    "Traversal",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "TraversalResult",
    "TraversalState",
    "get_traversal",
]


def get_traversal(name: str, **kwargs) -> Traversal:
    """
    Get a traversal by name.

    Args:
        name: Traversal identifier (bfs, dfs)
        **kwargs: Passed to the traversal constructor (e.g., queue_capacity)

    Returns:
        Instantiated traversal

    Raises:
        ValueError: If traversal name is unknown
    """
    traversals = {
        "bfs": BreadthFirstSearch,
        "dfs": DepthFirstSearch,
    }

    if name not in traversals:
        available = ", ".join(traversals.keys())
        raise ValueError(f"Unknown traversal '{name}'. Available: {available}")

    return traversals[name](**kwargs)
