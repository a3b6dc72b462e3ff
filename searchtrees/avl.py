"""A self-balancing AVL tree built on the binary search tree."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .bst import BinarySearchTree, _Node


@dataclass(eq=False)
class _AVLNode(_Node):
    height: int = 1


def _subtree_height(node: _Node | None) -> int:
    if node is None:
        return 0
    return 1 + max(_subtree_height(node.left), _subtree_height(node.right))


def _height(node: _Node | None) -> int:
    if node is None:
        return 0
    stored = getattr(node, "height", None)
    return stored if stored is not None else _subtree_height(node)


def _update_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


class AVLTree(BinarySearchTree):
    """A binary search tree that rebalances itself on insertion."""

    def insert(self, key: Any, value: Any) -> None:
        """Insert key with value, rebalancing the path back to the root."""
        self._root = self._avl_insert(self._root, key, value)

    def height(self) -> int:
        """Return the number of levels in the tree; 0 when empty."""
        return _subtree_height(self._root)

    def _avl_insert(self, node: _Node | None, key: Any, value: Any) -> _Node:
        if node is None:
            self._count += 1
            return _AVLNode(key, value)

        if key < node.key:
            node.left = self._avl_insert(node.left, key, value)
        elif key > node.key:
            node.right = self._avl_insert(node.right, key, value)
        else:
            node.value = value

        _update_height(node)
        balance = _balance_factor(node)

        if balance > 1 and key < node.left.key:
            return _rotate_right(node)
        if balance < -1 and key > node.right.key:
            return _rotate_left(node)
        if balance > 1 and key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node


def main(argv: Sequence[str] | None = None) -> int:
    """Insert three ascending keys, forcing a rotation, and print them in order."""
    tree = AVLTree()
    tree.insert(10, "A")
    tree.insert(20, "B")
    tree.insert(30, "C")
    for key in tree.in_order():
        sys.stdout.write(f"{key}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())