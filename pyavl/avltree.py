"""AVL tree over ordered integer keys.

Every public operation descends recursively from the root and, while the
recursion unwinds, recomputes the cached height of each node on the path and
applies at most one (single or double) rotation to restore the balance
invariant ``|height(left) - height(right)| <= 1``.

Complexities (worst case):
    • search   – O(log n)
    • insert   – O(log n)
    • remove   – O(log n)

Duplicate keys are ignored and removing an absent key is a no-op, so none of
the operations ever raise for ordinary input.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

__all__ = ["AVLTree"]

logger = logging.getLogger(__name__)

_BALANCE_LIMIT = 1  # max allowed |balance factor|


class _Node:
    __slots__ = ("key", "height", "left", "right")

    def __init__(self, key: int):
        self.key = key
        self.height = 1
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None

    def __repr__(self) -> str:  # pragma: no cover
        return f"Node<{self.key!r} h={self.height}>"


# ---------------------------------------------------------------------------
# Node helpers
# ---------------------------------------------------------------------------
def _height(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return node.height


def _update_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    """Rotate right around *y* and return the new subtree root.

            y                 x
           / \\               / \\
          x   T3     ->     T1   y
         / \\                    / \\
        T1  T2                 T2  T3
    """
    x = y.left
    assert x is not None, f"rotate_right on {y.key} without left child"
    y.left = x.right
    x.right = y
    # y is now the child, so it goes first.
    _update_height(y)
    _update_height(x)
    logger.debug("rotate right: %d -> %d", y.key, x.key)
    return x


def _rotate_left(x: _Node) -> _Node:
    """Mirror image of :func:`_rotate_right`."""
    y = x.right
    assert y is not None, f"rotate_left on {x.key} without right child"
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    logger.debug("rotate left: %d -> %d", x.key, y.key)
    return y


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


class AVLTree:
    """Self-balancing binary search tree holding distinct integer keys."""

    def __init__(self, keys: Iterable[int] = ()):
        self._root: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    # ------------------------------------------------------------------
    # Mutation API
    # ------------------------------------------------------------------
    def insert(self, key: int) -> None:
        """Insert *key*; inserting a key that is already present does nothing."""
        self._root = self._insert(self._root, key)

    def remove(self, key: int) -> None:
        """Remove *key*; removing an absent key does nothing."""
        self._root = self._remove(self._root, key)

    def clear(self) -> None:
        """Drop every node, leaving an empty tree."""
        self._root = None
        self._size = 0

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------
    def search(self, key: int) -> bool:
        """Return whether *key* is stored in the tree."""
        return self._search(self._root, key)

    def __contains__(self, key: int) -> bool:
        return self.search(key)

    def __len__(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        return _height(self._root)

    @property
    def root(self) -> Optional[_Node]:
        """Root node, exposed for inspection only."""
        return self._root

    def __repr__(self) -> str:  # pragma: no cover
        return f"AVLTree<size={self._size} height={self.height}>"

    # ------------------------------------------------------------------
    # Recursive helpers
    # ------------------------------------------------------------------
    def _search(self, node: Optional[_Node], key: int) -> bool:
        if node is None:
            return False
        if key == node.key:
            return True
        if key < node.key:
            return self._search(node.left, key)
        return self._search(node.right, key)

    def _insert(self, node: Optional[_Node], key: int) -> _Node:
        if node is None:
            self._size += 1
            return _Node(key)

        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node

        _update_height(node)
        balance = _balance_factor(node)

        # The inserted key tells which grandchild grew.
        if balance > _BALANCE_LIMIT:
            assert node.left is not None
            if key < node.left.key:  # left-left
                return _rotate_right(node)
            node.left = _rotate_left(node.left)  # left-right
            return _rotate_right(node)

        if balance < -_BALANCE_LIMIT:
            assert node.right is not None
            if key > node.right.key:  # right-right
                return _rotate_left(node)
            node.right = _rotate_right(node.right)  # right-left
            return _rotate_left(node)

        return node

    def _remove(self, node: Optional[_Node], key: int) -> Optional[_Node]:
        if node is None:
            return None

        if key < node.key:
            node.left = self._remove(node.left, key)
        elif key > node.key:
            node.right = self._remove(node.right, key)
        elif node.left is None or node.right is None:
            # Zero or one child: splice it into the parent's slot.
            self._size -= 1
            logger.debug("unlink node %d", node.key)
            return node.left if node.left is not None else node.right
        else:
            # Two children: take over the in-order successor's key and
            # delete the successor from the right subtree instead.
            successor = _min_node(node.right)
            node.key = successor.key
            node.right = self._remove(node.right, successor.key)

        _update_height(node)
        balance = _balance_factor(node)

        # Children's balance factors pick the case; thresholds are exact.
        if balance > _BALANCE_LIMIT:
            if _balance_factor(node.left) >= 0:
                return _rotate_right(node)
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
            return _rotate_right(node)

        if balance < -_BALANCE_LIMIT:
            if _balance_factor(node.right) <= 0:
                return _rotate_left(node)
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
            return _rotate_left(node)

        return node
