import math
import random

import pytest

from cpkit.avl import AVLTree, EmptyTreeError


def _random_items(seed, count=300, span=1000):
    rng = random.Random(seed)
    return [rng.randrange(span) for _ in range(count)]


def test_iteration_is_sorted_and_unique():
    items = _random_items(1)
    tree = AVLTree(items)
    assert list(tree) == sorted(set(items))


def test_duplicates_are_ignored():
    tree = AVLTree([5, 5, 5, 3, 3])
    assert list(tree) == [3, 5]


def test_contains():
    items = _random_items(2)
    tree = AVLTree(items)
    for value in range(1000):
        assert (value in tree) == (value in set(items))


def test_min_and_max():
    items = _random_items(3)
    tree = AVLTree(items)
    assert tree.find_min() == min(items)
    assert tree.find_max() == max(items)


def test_empty_tree_min_max_raise():
    tree = AVLTree()
    assert tree.is_empty()
    with pytest.raises(EmptyTreeError):
        tree.find_min()
    with pytest.raises(EmptyTreeError):
        tree.find_max()


def test_empty_height():
    assert AVLTree().height() == -1


def test_seven_sorted_items_make_perfect_tree():
    tree = AVLTree(range(1, 8))
    assert tree.height() == 2


def test_sorted_insert_stays_balanced():
    n = 1023
    tree = AVLTree(range(n))
    assert tree.height() <= 1.45 * math.log2(n + 2)
    assert list(tree) == list(range(n))


def test_remove_keeps_order_and_balance():
    items = list(range(500))
    tree = AVLTree(items)
    rng = random.Random(4)
    removed = set(rng.sample(items, 300))
    for value in removed:
        tree.remove(value)
    remaining = [v for v in items if v not in removed]
    assert list(tree) == remaining
    assert tree.height() <= 1.45 * math.log2(len(remaining) + 2)
    for value in removed:
        assert value not in tree


def test_remove_missing_is_noop():
    tree = AVLTree([1, 2, 3])
    tree.remove(42)
    assert list(tree) == [1, 2, 3]


def test_remove_node_with_two_children():
    tree = AVLTree([4, 2, 6, 1, 3, 5, 7])
    tree.remove(4)
    assert list(tree) == [1, 2, 3, 5, 6, 7]


def test_copy_is_independent():
    tree = AVLTree([1, 2, 3])
    clone = tree.copy()
    clone.insert(10)
    tree.remove(1)
    assert list(clone) == [1, 2, 3, 10]
    assert list(tree) == [2, 3]


def test_clear():
    tree = AVLTree([1, 2, 3])
    tree.clear()
    assert tree.is_empty()
    assert list(tree) == []


def test_strings():
    tree = AVLTree(["pear", "apple", "fig"])
    assert list(tree) == ["apple", "fig", "pear"]