"""PyAVL: a small self-balancing (AVL) binary search tree over integer keys.

The package exposes the tree via `pyavl.AVLTree`; structural checks used by
the test-suite and benchmarks live in `pyavl.validate`.
"""

from __future__ import annotations

__all__ = [
    "AVLTree",
]

from .avltree import AVLTree
