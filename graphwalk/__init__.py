"""
graphwalk: graph and linked-list traversal primitives.

Breadth-first search over adjacency-list graphs with a bounded queue,
depth-first search over adjacency-matrix graphs with a bounded stack,
and an in-place value-swapping sort for singly-linked lists.
"""

__version__ = "0.1.0"
