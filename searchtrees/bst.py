"""An unbalanced binary search tree mapping ordered keys to values."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


class EmptyTreeError(LookupError):
    """Raised when a minimum or maximum is requested from an empty tree."""


@dataclass(eq=False)
class _Node:
    key: Any
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree keyed by comparable keys.

    Inserting an existing key replaces its value. Traversals yield keys.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def size(self) -> int:
        """Return the number of keys in the tree."""
        return self._count

    def is_empty(self) -> bool:
        """Return True when the tree holds no keys."""
        return self._count == 0

    def search(self, key: Any) -> Any:
        """Return the value stored under key, or None if key is absent."""
        node = self._find(key)
        return node.value if node is not None else None

    def insert(self, key: Any, value: Any) -> None:
        """Insert key with value, replacing the value if key already exists."""
        self._root = self._insert(self._root, key, value)

    def remove(self, key: Any) -> None:
        """Remove key from the tree; absent keys are ignored."""
        self._root = self._remove(self._root, key)

    def remove_min(self) -> None:
        """Remove the smallest key; does nothing on an empty tree."""
        if self._root is not None:
            self._root = self._remove_min(self._root)

    def remove_max(self) -> None:
        """Remove the largest key; does nothing on an empty tree."""
        if self._root is not None:
            self._root = self._remove_max(self._root)

    def minimum(self) -> Any:
        """Return the smallest key."""
        if self._root is None:
            raise EmptyTreeError("minimum of an empty tree")
        return self._min_node(self._root).key

    def maximum(self) -> Any:
        """Return the largest key."""
        if self._root is None:
            raise EmptyTreeError("maximum of an empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.key

    def pre_order(self) -> Iterator[Any]:
        """Yield keys in pre-order (node, left, right)."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.key
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self) -> Iterator[Any]:
        """Yield keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def post_order(self) -> Iterator[Any]:
        """Yield keys in post-order (left, right, node)."""
        def walk(node: _Node | None) -> Iterator[Any]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.key

        return walk(self._root)

    def level_order(self) -> Iterator[Any]:
        """Yield keys breadth-first, level by level from the root."""
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.key
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _find(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def _insert(self, node: _Node | None, key: Any, value: Any) -> _Node:
        if node is None:
            self._count += 1
            return _Node(key, value)
        if key == node.key:
            node.value = value
        elif key < node.key:
            node.left = self._insert(node.left, key, value)
        else:
            node.right = self._insert(node.right, key, value)
        return node

    @staticmethod
    def _min_node(node: _Node) -> _Node:
        while node.left is not None:
            node = node.left
        return node

    def _remove_min(self, node: _Node) -> _Node | None:
        if node.left is None:
            self._count -= 1
            return node.right
        node.left = self._remove_min(node.left)
        return node

    def _remove_max(self, node: _Node) -> _Node | None:
        if node.right is None:
            self._count -= 1
            return node.left
        node.right = self._remove_max(node.right)
        return node

    def _remove(self, node: _Node | None, key: Any) -> _Node | None:
        if node is None:
            return None
        if key < node.key:
            node.left = self._remove(node.left, key)
            return node
        if key > node.key:
            node.right = self._remove(node.right, key)
            return node
        if node.left is None:
            self._count -= 1
            return node.right
        if node.right is None:
            self._count -= 1
            return node.left
        smallest = self._min_node(node.right)
        successor = _Node(smallest.key, smallest.value)
        successor.right = self._remove_min(node.right)
        successor.left = node.left
        return successor


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small tree and print its keys in order, one per line."""
    tree = BinarySearchTree()
    tree.insert(10, "A")
    tree.insert(20, "B")
    for key in tree.in_order():
        sys.stdout.write(f"{key}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())