"""
Singly-linked list of integers with an in-place bubble sort.

The sort exchanges values between nodes and never relinks them, so the
node at each position keeps its identity.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """
    One link in the chain.

    Attributes:
        value: Stored integer
        next: Following node, or None at the tail
    """

    value: int
    next: ListNode | None = field(default=None, repr=False)


def swap_values(a: ListNode, b: ListNode) -> None:
    """Exchange the values held by two nodes."""
    a.value, b.value = b.value, a.value


def sort_linked_list(head: ListNode | None) -> ListNode | None:
    """
    Sort the chain starting at `head` into non-decreasing order.

    Bubble sort: each pass walks adjacent pairs up to the node where the
    previous pass stopped, swapping values when the left one is strictly
    greater. Stops after a pass with no swap.

    Returns:
        The same head node (None for an empty list)
    """
    if head is None:
        return None

    last: ListNode | None = None
    swapped = True
    while swapped:
        swapped = False
        node = head
        while node.next is not last:
            if node.value > node.next.value:
                swap_values(node, node.next)
                swapped = True
            node = node.next
        last = node

    return head


class LinkedList:
    """Owner of a chain of ListNodes reachable from `head`."""

    def __init__(self) -> None:
        self.head: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int], prepend: bool = True) -> LinkedList:
        """
        Build a list from values.

        With prepend=True each value is inserted at the beginning, so the
        resulting order is the reverse of `values`.
        """
        linked = cls()
        for value in values:
            if prepend:
                linked.insert_at_begin(value)
            else:
                linked.append(value)
        return linked

    def is_empty(self) -> bool:
        return self.head is None

    def insert_at_begin(self, value: int) -> ListNode:
        self.head = ListNode(value, self.head)
        return self.head

    def append(self, value: int) -> ListNode:
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return node
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node
        return node

    def nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def sort(self) -> None:
        """Sort in place by value exchange."""
        self.head = sort_linked_list(self.head)

    def to_list(self) -> list[int]:
        return list(self)

    def __iter__(self) -> Iterator[int]:
        for node in self.nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()})"
