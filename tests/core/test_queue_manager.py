"""Test suite for TraversalQueue."""

import pytest

from graphwalk.core.traversal import TraversalQueue


class TestTraversalQueue:
    """Test FIFO behavior."""

    def test_fifo_order(self):
        """Test names come out in the order they went in"""
        queue = TraversalQueue()
        for name in ["A", "B", "C"]:
            queue.enqueue(name)
        assert queue.dequeue() == "A"
        assert queue.dequeue() == "B"
        assert len(queue) == 1

    def test_empty_queue(self):
        """Test an empty queue is falsy and cannot be dequeued"""
        queue = TraversalQueue()
        assert not queue
        assert len(queue) == 0
        with pytest.raises(IndexError):
            queue.dequeue()

    def test_drained_queue_is_falsy(self):
        """Test the queue is falsy again once every name is taken out"""
        queue = TraversalQueue()
        queue.enqueue("A")
        assert queue
        queue.dequeue()
        assert not queue
