"""FIFO queues: an unbounded linked queue and a fixed-size circular buffer."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFull(Exception):
    """Raised when adding to a queue that has no free slot."""


class QueueEmpty(Exception):
    """Raised when taking from a queue that holds nothing."""


class LinkedQueue:
    """An unbounded first-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularBuffer:
    """A ring of ``size`` slots with read and write positions.

    One slot always stays free to tell a full ring from an empty one,
    so the buffer holds at most ``size - 1`` values.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"buffer size must be at least 1, got {size}")
        self._slots: list[Any] = [None] * size
        self._read = 0
        self._write = 0

    @property
    def size(self) -> int:
        """Number of slots in the ring."""
        return len(self._slots)

    @property
    def capacity(self) -> int:
        """Most values the buffer can hold at once."""
        return len(self._slots) - 1

    def _advance(self, position: int) -> int:
        return (position + 1) % len(self._slots)

    def is_full(self) -> bool:
        """True if no further value can be added."""
        return self._advance(self._write) == self._read

    def is_empty(self) -> bool:
        """True if the buffer holds nothing."""
        return self._read == self._write

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if self.is_full():
            raise QueueFull("buffer is full")
        self._slots[self._write] = value
        self._write = self._advance(self._write)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmpty("buffer is empty")
        value = self._slots[self._read]
        self._slots[self._read] = None
        self._read = self._advance(self._read)
        return value

    def __len__(self) -> int:
        return (self._write - self._read) % len(self._slots)

    def __iter__(self) -> Iterator[Any]:
        position = self._read
        while position != self._write:
            yield self._slots[position]
            position = self._advance(position)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, items={list(self)!r})"