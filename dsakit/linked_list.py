"""A singly linked list of values, plus helpers that work on raw node chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Node:
    """One link of a singly linked chain."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: Node | None = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList:
    """A singly linked list that keeps its head and its length."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    @property
    def head(self) -> Node | None:
        """The first node of the chain, or None when the list is empty."""
        return self._head

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index`` (0-based)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert position must be in 0..{self._size}, got {index}")
        if index == 0:
            self._head = Node(value, self._head)
        else:
            prev = self._node_at(index - 1)
            prev.next = Node(value, prev.next)
        self._size += 1

    def delete(self, index: int) -> Any:
        """Remove the node at 1-based position ``index`` and return its value."""
        if not 1 <= index <= self._size:
            raise IndexError(f"delete position must be in 1..{self._size}, got {index}")
        if index == 1:
            assert self._head is not None
            node = self._head
            self._head = node.next
        else:
            prev = self._node_at(index - 2)
            node = prev.next
            assert node is not None
            prev.next = node.next
        self._size -= 1
        return node.value

    def search(self, key: Any) -> int:
        """0-based position of the first node holding ``key``."""
        for position, value in enumerate(self):
            if value == key:
                return position
        raise ValueError(f"{key!r} is not in the list")

    def move_to_front(self, key: Any) -> Any:
        """Find ``key`` and move its node to the head, so later searches are faster."""
        prev: Node | None = None
        node = self._head
        while node is not None:
            if node.value == key:
                if prev is not None:
                    prev.next = node.next
                    node.next = self._head
                    self._head = node
                return node.value
            prev, node = node, node.next
        raise ValueError(f"{key!r} is not in the list")

    def insert_sorted(self, value: Any) -> None:
        """Insert ``value`` into an ascending list, keeping it ascending."""
        if self._head is None or self._head.value > value:
            self._head = Node(value, self._head)
        else:
            node = self._head
            while node.next is not None and node.next.value < value:
                node = node.next
            node.next = Node(value, node.next)
        self._size += 1

    def remove_duplicates(self) -> None:
        """Drop every node whose value equals that of the node before it."""
        node = self._head
        while node is not None and node.next is not None:
            if node.value == node.next.value:
                node.next = node.next.next
                self._size -= 1
            else:
                node = node.next

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        prev: Node | None = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = prev
            prev, node = node, following
        self._head = prev

    def middle(self) -> Any:
        """Value of the middle node; for an even length, the first of the two middles."""
        if self._head is None:
            raise ValueError("an empty list has no middle")
        slow = self._head
        fast = self._head.next
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            assert slow.next is not None
            slow = slow.next
        return slow.value

    def total(self) -> Any:
        """Sum of all values."""
        return sum(self)

    def maximum(self) -> Any:
        """Largest value, never below zero; an empty list gives 0."""
        return max(0, max(self, default=0))


def merge_sorted(first: LinkedList, second: LinkedList) -> LinkedList:
    """Merge two ascending lists into a new ascending list.

    On equal values the one from ``second`` comes first.
    """
    left = iter(first)
    right = iter(second)
    merged: list[Any] = []
    a = next(left, _END)
    b = next(right, _END)
    while a is not _END and b is not _END:
        if a < b:
            merged.append(a)
            a = next(left, _END)
        else:
            merged.append(b)
            b = next(right, _END)
    if a is not _END:
        merged.append(a)
        merged.extend(left)
    if b is not _END:
        merged.append(b)
        merged.extend(right)
    return LinkedList(merged)


_END = object()


def has_loop(head: Node | None) -> bool:
    """True if following ``next`` from ``head`` eventually revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def circular_chain(size: int) -> Node | None:
    """Build a circular chain holding 1..size and return its head; None if size <= 0."""
    if size <= 0:
        return None
    head = Node(1)
    tail = head
    for value in range(2, size + 1):
        tail.next = Node(value)
        tail = tail.next
    tail.next = head
    return head