"""
Data structures module.

Provides the auxiliary structures used by the traversals:
- BoundedQueue: Fixed-capacity FIFO (BFS frontier)
- BoundedStack: Fixed-capacity LIFO (DFS frontier)
- LinkedList / ListNode: Singly-linked chain with in-place sort
"""

from graphwalk.structures.bounded import BoundedQueue, BoundedStack
from graphwalk.structures.linked_list import (
    LinkedList,
    ListNode,
    sort_linked_list,
    swap_values,
)

__all__ = [
    "BoundedQueue",
    "BoundedStack",
    "LinkedList",
    "ListNode",
    "sort_linked_list",
    "swap_values",
]
