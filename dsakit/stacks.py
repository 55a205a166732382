"""Bounded and unbounded LIFO stacks, and a parenthesis balance check."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsakit.linked_list import Node


class StackFull(Exception):
    """Raised when pushing onto a stack that has reached its capacity."""


class StackEmpty(Exception):
    """Raised when popping or peeking a stack that holds nothing."""


class ArrayStack:
    """A stack backed by an array of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Most items the stack can hold."""
        return self._capacity

    def is_full(self) -> bool:
        """True if no further item can be pushed."""
        return len(self._items) == self._capacity

    def is_empty(self) -> bool:
        """True if the stack holds nothing."""
        return not self._items

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        if self.is_full():
            raise StackFull(f"stack is full at {self._capacity} items")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmpty("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackEmpty("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={self._items!r})"


class LinkedStack:
    """An unbounded stack built from a chain of nodes."""

    def __init__(self) -> None:
        self._top: Node | None = None
        self._size = 0

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        self._top = Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise StackEmpty("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackEmpty("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        """True if the stack holds nothing."""
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Yield items from the top down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def is_balanced(expression: str) -> bool:
    """True if every ')' in ``expression`` closes an earlier '(' and none stay open."""
    depth = 0
    for ch in expression:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0