"""An unbalanced binary search tree that ignores duplicate values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _TreeNode:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _TreeNode | None = None
        self.right: _TreeNode | None = None


class BinarySearchTree:
    """Binary search tree; iteration yields values in ascending order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add ``value``; returns False if it was already present."""
        if self._root is None:
            self._root = _TreeNode(value)
            self._size = 1
            return True
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _TreeNode(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _TreeNode(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def __iter__(self) -> Iterator[Any]:
        stack: list[_TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"