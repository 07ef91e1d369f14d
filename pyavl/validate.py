"""Structural checks for :class:`pyavl.AVLTree`.

These helpers walk the node graph directly and are meant for tests and
benchmarks. They are not part of the tree's own API, which deliberately has
no traversal.
"""
from __future__ import annotations

from typing import Optional

from .avltree import AVLTree, _Node

__all__ = ["InvariantError", "check_invariants", "keys_in_order", "shape"]

Shape = Optional[tuple[int, "Shape", "Shape"]]


class InvariantError(AssertionError):
    """Raised when a tree violates the BST, height or AVL invariant."""


def check_invariants(tree: AVLTree) -> int:
    """Verify every node of *tree* and return the number of nodes.

    Checks strict BST ordering, that each cached height equals
    ``1 + max(child heights)`` and that every balance factor is in
    ``{-1, 0, 1}``. The node count must match ``len(tree)``.
    """
    count, _ = _check(tree.root, None, None)
    if count != len(tree):
        raise InvariantError(f"tree reports {len(tree)} keys but holds {count}")
    return count


def _check(node: Optional[_Node], lo: Optional[int], hi: Optional[int]) -> tuple[int, int]:
    if node is None:
        return 0, 0
    if (lo is not None and node.key <= lo) or (hi is not None and node.key >= hi):
        raise InvariantError(f"key {node.key} out of order (bounds {lo}, {hi})")
    left_count, left_height = _check(node.left, lo, node.key)
    right_count, right_height = _check(node.right, node.key, hi)
    height = 1 + max(left_height, right_height)
    if node.height != height:
        raise InvariantError(f"node {node.key} caches height {node.height}, actual {height}")
    if abs(left_height - right_height) > 1:
        raise InvariantError(f"node {node.key} unbalanced: {left_height} vs {right_height}")
    return left_count + right_count + 1, height


def keys_in_order(tree: AVLTree) -> list[int]:
    out: list[int] = []

    def walk(node: Optional[_Node]) -> None:
        if node is not None:
            walk(node.left)
            out.append(node.key)
            walk(node.right)

    walk(tree.root)
    return out


def shape(tree: AVLTree) -> Shape:
    """Nested ``(key, left, right)`` tuples describing the exact tree shape."""

    def build(node: Optional[_Node]) -> Shape:
        if node is None:
            return None
        return node.key, build(node.left), build(node.right)

    return build(tree.root)
