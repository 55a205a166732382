"""Doubly linked and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dsakit.linked_list import Node


class _DNode:
    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: Any,
        prev: _DNode | None = None,
        next: _DNode | None = None,
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next


class DoublyLinkedList:
    """A list whose nodes link both forwards and backwards."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DNode | None = None
        self._tail: _DNode | None = None
        self._size = 0
        for value in values:
            self._append(value)

    def _append(self, value: Any) -> None:
        node = _DNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, index: int) -> _DNode:
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                assert node is not None
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                assert node is not None
                node = node.prev
        assert node is not None
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index`` (0-based)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert position must be in 0..{self._size}, got {index}")
        if index == self._size:
            self._append(value)
            return
        successor = self._node_at(index)
        node = _DNode(value, prev=successor.prev, next=successor)
        if successor.prev is None:
            self._head = node
        else:
            successor.prev.next = node
        successor.prev = node
        self._size += 1

    def delete(self, index: int) -> Any:
        """Remove the node at 1-based position ``index`` and return its value."""
        if not 1 <= index <= self._size:
            raise IndexError(f"delete position must be in 1..{self._size}, got {index}")
        node = self._node_at(index - 1)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the list in place by swapping each node's links."""
        node = self._head
        while node is not None:
            node.next, node.prev = node.prev, node.next
            node = node.prev
        self._head, self._tail = self._tail, self._head


class CircularLinkedList:
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.insert(self._size, value)

    def _node_at(self, index: int) -> Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index`` (0-based)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert position must be in 0..{self._size}, got {index}")
        node = Node(value)
        if self._head is None or self._tail is None:
            node.next = node
            self._head = self._tail = node
        elif index == 0:
            node.next = self._head
            self._tail.next = node
            self._head = node
        else:
            prev = self._node_at(index - 1)
            node.next = prev.next
            prev.next = node
            if prev is self._tail:
                self._tail = node
        self._size += 1

    def delete(self, index: int) -> Any:
        """Remove the node at 1-based position ``index`` and return its value."""
        if not 1 <= index <= self._size:
            raise IndexError(f"delete position must be in 1..{self._size}, got {index}")
        assert self._head is not None and self._tail is not None
        if self._size == 1:
            node = self._head
            self._head = self._tail = None
        elif index == 1:
            node = self._head
            self._head = node.next
            self._tail.next = self._head
        else:
            prev = self._node_at(index - 2)
            node = prev.next
            assert node is not None
            prev.next = node.next
            if node is self._tail:
                self._tail = prev
        self._size -= 1
        return node.value