"""Scenario tests for the AVL tree."""
import logging

import pytest

from pyavl import AVLTree
from pyavl.validate import check_invariants, keys_in_order, shape

BALANCED_3 = (20, (10, None, None), (30, None, None))


@pytest.fixture
def seven():
    """Perfectly balanced tree of seven keys."""
    tree = AVLTree([10, 5, 15, 3, 7, 12, 17])
    assert shape(tree) == (10, (5, (3, None, None), (7, None, None)), (15, (12, None, None), (17, None, None)))
    return tree


def test_empty_tree():
    """A fresh tree holds nothing."""
    tree = AVLTree()
    assert not tree.search(10)
    assert len(tree) == 0
    assert tree.height == 0
    assert tree.root is None


def test_single_insertion():
    tree = AVLTree()
    tree.insert(10)
    assert tree.search(10)
    assert not tree.search(20)
    assert tree.height == 1


def test_insert_without_rotation():
    tree = AVLTree([10, 5, 15])
    assert shape(tree) == (10, (5, None, None), (15, None, None))
    assert all(tree.search(k) for k in (5, 10, 15))


@pytest.mark.parametrize(
    "keys",
    [
        [30, 20, 10],  # left-left
        [10, 20, 30],  # right-right
        [30, 10, 20],  # left-right
        [10, 30, 20],  # right-left
    ],
)
def test_insert_rotations(keys):
    """Each of the four imbalance cases ends with 20 at the root."""
    tree = AVLTree()
    for key in keys:
        tree.insert(key)
    assert shape(tree) == BALANCED_3
    assert tree.search(10) and tree.search(20) and tree.search(30)
    check_invariants(tree)


def test_duplicate_insert_ignored():
    tree = AVLTree([10, 20])
    before = shape(tree)
    tree.insert(20)
    tree.insert(10)
    assert shape(tree) == before
    assert len(tree) == 2


def test_contains_operator():
    tree = AVLTree([1, 2, 3])
    assert 2 in tree
    assert 4 not in tree


def test_remove_leaf_one_child_two_children(seven):
    """Removing 3 (leaf), 5 (one child) and 10 (two children)."""
    seven.remove(3)
    assert not seven.search(3) and seven.search(5)
    assert shape(seven) == (10, (5, None, (7, None, None)), (15, (12, None, None), (17, None, None)))
    check_invariants(seven)

    seven.remove(5)
    assert not seven.search(5) and seven.search(7) and seven.search(10)
    assert shape(seven) == (10, (7, None, None), (15, (12, None, None), (17, None, None)))
    check_invariants(seven)

    # Two children: the in-order successor (12) takes the root's place.
    seven.remove(10)
    assert not seven.search(10) and seven.search(12) and seven.search(15)
    assert shape(seven) == (12, (7, None, None), (15, None, (17, None, None)))
    check_invariants(seven)
    assert len(seven) == 4


def test_remove_causing_rebalance():
    tree = AVLTree([20, 10, 30, 5])
    tree.remove(30)
    assert not tree.search(30)
    assert tree.search(5) and tree.search(10) and tree.search(20)
    assert shape(tree) == (10, (5, None, None), (20, None, None))
    check_invariants(tree)


def test_remove_left_heavy_tie_uses_single_rotation():
    """A left child with balance factor 0 gets a single right rotation."""
    tree = AVLTree([20, 10, 30, 5, 15])
    tree.remove(30)
    assert shape(tree) == (10, (5, None, None), (20, (15, None, None), None))
    check_invariants(tree)


def test_remove_right_heavy_tie_uses_single_rotation():
    tree = AVLTree([20, 10, 30, 25, 35])
    tree.remove(10)
    assert shape(tree) == (30, (20, None, (25, None, None)), (35, None, None))
    check_invariants(tree)


def test_remove_left_right_double_rotation():
    tree = AVLTree([20, 10, 30, 15])
    tree.remove(30)
    assert shape(tree) == (15, (10, None, None), (20, None, None))
    check_invariants(tree)


def test_remove_right_left_double_rotation():
    tree = AVLTree([20, 10, 30, 25])
    tree.remove(10)
    assert shape(tree) == (25, (20, None, None), (30, None, None))
    check_invariants(tree)


def test_remove_nonexistent():
    tree = AVLTree([10])
    tree.remove(100)
    assert tree.search(10)
    assert len(tree) == 1


def test_remove_from_empty():
    tree = AVLTree()
    tree.remove(1)
    assert tree.root is None
    assert len(tree) == 0


def test_remove_root_until_empty():
    tree = AVLTree([2, 1, 3])
    for key in (2, 3, 1):
        tree.remove(key)
        check_invariants(tree)
    assert tree.root is None
    assert tree.height == 0


def test_clear(seven):
    seven.clear()
    assert len(seven) == 0
    assert seven.root is None
    assert not seven.search(10)
    seven.insert(4)
    assert keys_in_order(seven) == [4]


def test_original_demonstration():
    """Insert 10..50 and 25, then search and remove a leaf."""
    tree = AVLTree([10, 20, 30, 40, 50, 25])
    assert shape(tree) == (
        30,
        (20, (10, None, None), (25, None, None)),
        (40, None, (50, None, None)),
    )
    assert tree.search(25)
    assert not tree.search(100)
    tree.remove(10)
    assert not tree.search(10)
    assert keys_in_order(tree) == [20, 25, 30, 40, 50]
    check_invariants(tree)


def test_rotations_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="pyavl.avltree"):
        AVLTree([30, 20, 10])
    assert "rotate right: 30 -> 20" in caplog.text


def test_negative_keys():
    tree = AVLTree([-5, 0, -10, 5, -20])
    assert keys_in_order(tree) == [-20, -10, -5, 0, 5]
    check_invariants(tree)
