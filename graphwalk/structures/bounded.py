"""
Fixed-capacity queue and stack of vertex identifiers.

Both are backed by a preallocated numpy buffer that never grows. A full
structure rejects new items with StructureOverflowError before writing,
and an empty one raises StructureUnderflowError instead of handing back
a stale slot.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterator

import numpy as np

from graphwalk.config import (
    DEFAULT_QUEUE_CAPACITY,
    DEFAULT_STACK_CAPACITY,
    UNDERFLOW_SENTINEL,
)
from graphwalk.errors import StructureOverflowError, StructureUnderflowError

logger = logging.getLogger(__name__)


def _allocate(capacity: int) -> np.ndarray:
    if capacity <= 0:
        raise ValueError(f"Capacity must be positive, got {capacity}")
    return np.full(capacity, UNDERFLOW_SENTINEL, dtype=np.int64)


def _as_item(item: object) -> int:
    """Vertex ids must be integers; floats are not truncated."""
    if isinstance(item, (bool, np.bool_)):
        raise TypeError(f"Item must be an integer, got {item!r}")
    try:
        return operator.index(item)
    except TypeError:
        raise TypeError(f"Item must be an integer, got {item!r}") from None


class BoundedQueue:
    """
    FIFO of vertex identifiers with a fixed capacity.

    The buffer is used circularly, so the bound applies to items that have
    been enqueued but not yet dequeued. `front` and `rear` are both -1
    while the queue is empty.

    Attributes:
        front: Slot holding the next item to dequeue
        rear: Slot holding the most recently enqueued item
    """

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY) -> None:
        self._items = _allocate(capacity)
        self._capacity = capacity
        self._count = 0
        self.front = -1
        self.rear = -1

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self._capacity

    def enqueue(self, item: int) -> None:
        """
        Add an item at the rear.

        Raises:
            StructureOverflowError: If the queue already holds `capacity` items
            TypeError: If `item` is not an integer
        """
        item = _as_item(item)
        if self.is_full():
            logger.warning(f"Queue is full, rejecting {item}")
            raise StructureOverflowError(self._capacity, "queue")

        if self.is_empty():
            self.front = 0
            self.rear = 0
        else:
            self.rear = (self.rear + 1) % self._capacity
        self._items[self.rear] = item
        self._count += 1

    def dequeue(self) -> int:
        """
        Remove and return the item at the front.

        Raises:
            StructureUnderflowError: If the queue is empty
        """
        if self.is_empty():
            logger.warning("Queue is empty, nothing to dequeue")
            raise StructureUnderflowError("queue")

        item = int(self._items[self.front])
        self._count -= 1
        if self._count == 0:
            logger.debug("Resetting queue")
            self.front = self.rear = -1
        else:
            self.front = (self.front + 1) % self._capacity
        return item

    def try_dequeue(self) -> int:
        """Dequeue, or return UNDERFLOW_SENTINEL if the queue is empty."""
        if self.is_empty():
            return UNDERFLOW_SENTINEL
        return self.dequeue()

    def peek(self) -> int:
        """Return the front item without removing it."""
        if self.is_empty():
            raise StructureUnderflowError("queue")
        return int(self._items[self.front])

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        """Iterate live items from front to rear."""
        for offset in range(self._count):
            yield int(self._items[(self.front + offset) % self._capacity])

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self._capacity}, items={list(self)})"


class BoundedStack:
    """
    LIFO of vertex identifiers with a fixed capacity.

    `top` is the index of the most recently pushed item, -1 when empty.
    """

    def __init__(self, capacity: int = DEFAULT_STACK_CAPACITY) -> None:
        self._items = _allocate(capacity)
        self._capacity = capacity
        self.top = -1

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self.top == -1

    def is_full(self) -> bool:
        return self.top == self._capacity - 1

    def push(self, item: int) -> None:
        """
        Push an item.

        Raises:
            StructureOverflowError: If the stack already holds `capacity` items
            TypeError: If `item` is not an integer
        """
        item = _as_item(item)
        if self.is_full():
            logger.warning(f"Stack is full, rejecting {item}")
            raise StructureOverflowError(self._capacity, "stack")
        self.top += 1
        self._items[self.top] = item

    def pop(self) -> int:
        """
        Remove and return the top item.

        Raises:
            StructureUnderflowError: If the stack is empty
        """
        if self.is_empty():
            logger.warning("Stack is empty, nothing to pop")
            raise StructureUnderflowError("stack")
        item = int(self._items[self.top])
        self.top -= 1
        return item

    def try_pop(self) -> int:
        """Pop, or return UNDERFLOW_SENTINEL if the stack is empty."""
        if self.is_empty():
            return UNDERFLOW_SENTINEL
        return self.pop()

    def peek(self) -> int:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StructureUnderflowError("stack")
        return int(self._items[self.top])

    def __len__(self) -> int:
        return self.top + 1

    def __iter__(self) -> Iterator[int]:
        """Iterate live items from bottom to top."""
        for i in range(self.top + 1):
            yield int(self._items[i])

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self._capacity}, items={list(self)})"
