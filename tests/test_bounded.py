"""
Unit tests for BoundedQueue and BoundedStack.
"""

import numpy as np
import pytest

from graphwalk.config import DEFAULT_QUEUE_CAPACITY, DEFAULT_STACK_CAPACITY
from graphwalk.errors import StructureOverflowError, StructureUnderflowError
from graphwalk.structures import BoundedQueue, BoundedStack


class TestBoundedQueue:
    """Test FIFO behavior and capacity limits."""

    def test_default_capacity(self):
        """Default capacity comes from config."""
        assert BoundedQueue().capacity == DEFAULT_QUEUE_CAPACITY

    def test_new_queue_is_empty(self):
        """A fresh queue is empty with cursors at -1."""
        q = BoundedQueue(3)
        assert q.is_empty()
        assert len(q) == 0
        assert q.front == -1
        assert q.rear == -1

    def test_fifo_order(self):
        """Items come out in insertion order."""
        q = BoundedQueue(4)
        for item in (3, 1, 4):
            q.enqueue(item)
        assert [q.dequeue(), q.dequeue(), q.dequeue()] == [3, 1, 4]
        assert q.is_empty()

    def test_overflow_on_capacity_plus_one(self):
        """The capacity+1-th enqueue is rejected and prior contents survive."""
        q = BoundedQueue(3)
        for item in (7, 8, 9):
            q.enqueue(item)
        assert q.is_full()

        with pytest.raises(StructureOverflowError) as exc_info:
            q.enqueue(10)

        assert exc_info.value.capacity == 3
        assert list(q) == [7, 8, 9]
        assert len(q) == 3

    def test_underflow_on_empty(self):
        """Dequeue from an empty queue raises."""
        q = BoundedQueue(2)
        with pytest.raises(StructureUnderflowError):
            q.dequeue()

    def test_underflow_is_index_error(self):
        """Underflow can be caught as IndexError."""
        with pytest.raises(IndexError):
            BoundedQueue(2).peek()

    def test_try_dequeue_returns_sentinel(self):
        """try_dequeue reports underflow with -1."""
        q = BoundedQueue(2)
        assert q.try_dequeue() == -1
        q.enqueue(5)
        assert q.try_dequeue() == 5
        assert q.try_dequeue() == -1

    def test_cursors_reset_when_drained(self):
        """Removing the last item resets front and rear."""
        q = BoundedQueue(2)
        q.enqueue(1)
        q.dequeue()
        assert q.front == -1
        assert q.rear == -1

    def test_capacity_bounds_live_items(self):
        """Dequeued slots are reused, so the bound is on live items."""
        q = BoundedQueue(3)
        q.enqueue(0)
        q.enqueue(1)
        assert q.dequeue() == 0
        q.enqueue(2)
        q.enqueue(3)
        assert list(q) == [1, 2, 3]
        with pytest.raises(StructureOverflowError):
            q.enqueue(4)
        assert [q.dequeue() for _ in range(3)] == [1, 2, 3]

    def test_peek_does_not_remove(self):
        """Peek returns the front item and leaves it in place."""
        q = BoundedQueue(2)
        q.enqueue(6)
        assert q.peek() == 6
        assert len(q) == 1

    def test_invalid_capacity(self):
        """Capacity must be positive."""
        with pytest.raises(ValueError):
            BoundedQueue(0)

    def test_rejects_non_integer_items(self):
        """Floats and strings are refused, not truncated."""
        q = BoundedQueue(2)
        with pytest.raises(TypeError):
            q.enqueue(2.9)
        with pytest.raises(TypeError):
            q.enqueue("3")
        with pytest.raises(TypeError):
            q.enqueue(True)
        assert q.is_empty()
        assert q.front == q.rear == -1

    def test_accepts_numpy_integers(self):
        """numpy integers come back as plain ints."""
        q = BoundedQueue(1)
        q.enqueue(np.int64(4))
        item = q.dequeue()
        assert item == 4
        assert type(item) is int


class TestBoundedStack:
    """Test LIFO behavior and capacity limits."""

    def test_default_capacity(self):
        """Default capacity comes from config."""
        assert BoundedStack().capacity == DEFAULT_STACK_CAPACITY

    def test_lifo_order(self):
        """Items come out in reverse insertion order."""
        s = BoundedStack(3)
        for item in (1, 2, 3):
            s.push(item)
        assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
        assert s.is_empty()
        assert s.top == -1

    def test_peek(self):
        """Peek returns the top without popping."""
        s = BoundedStack(2)
        s.push(4)
        s.push(9)
        assert s.peek() == 9
        assert len(s) == 2

    def test_overflow_leaves_stack_unchanged(self):
        """Pushing onto a full stack raises without writing."""
        s = BoundedStack(2)
        s.push(1)
        s.push(2)

        with pytest.raises(StructureOverflowError):
            s.push(3)

        assert list(s) == [1, 2]
        assert s.peek() == 2

    def test_underflow(self):
        """Pop and peek on an empty stack raise."""
        s = BoundedStack(2)
        with pytest.raises(StructureUnderflowError):
            s.pop()
        with pytest.raises(StructureUnderflowError):
            s.peek()

    def test_try_pop_returns_sentinel(self):
        """try_pop reports underflow with -1."""
        s = BoundedStack(1)
        assert s.try_pop() == -1
        s.push(0)
        assert s.try_pop() == 0

    def test_independent_instances(self):
        """Two stacks do not share storage."""
        a = BoundedStack(2)
        b = BoundedStack(2)
        a.push(1)
        assert b.is_empty()

    def test_rejects_non_integer_items(self):
        """Floats and strings are refused, not truncated."""
        s = BoundedStack(2)
        with pytest.raises(TypeError):
            s.push(2.9)
        with pytest.raises(TypeError):
            s.push("3")
        assert s.is_empty()
        assert s.top == -1
        s.push(np.int32(1))
        assert s.pop() == 1
