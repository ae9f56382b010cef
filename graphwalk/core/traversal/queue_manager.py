"""Queue management for breadth first traversals.

This module provides the FIFO of vertex names waiting to have their
neighbors examined.
"""

from __future__ import annotations

from collections import deque
from typing import Deque


class TraversalQueue:
    """FIFO queue of vertex names."""

    def __init__(self) -> None:
        self._backing: Deque[str] = deque()

    def enqueue(self, name: str) -> None:
        """Add a vertex name to the back of the queue."""
        self._backing.append(name)

    def dequeue(self) -> str:
        """Remove and return the vertex name at the front of the queue.

        Raises:
            IndexError: If the queue is empty
        """
        return self._backing.popleft()

    def __len__(self) -> int:
        return len(self._backing)

    def __bool__(self) -> bool:
        return bool(self._backing)
