import math
import random

import pytest

from cpkit.segment_tree import RangeAddTree, SegmentTree


@pytest.fixture
def values():
    rng = random.Random(7)
    return [rng.randint(-50, 50) for _ in range(37)]


def test_sum_queries_match_slices(values):
    tree = SegmentTree(values)
    for start in range(len(values)):
        for end in range(start, len(values)):
            assert tree.query(start, end) == sum(values[start : end + 1])


def test_min_queries(values):
    tree = SegmentTree(values, min, math.inf)
    for start in range(0, len(values), 3):
        for end in range(start, len(values), 2):
            assert tree.query(start, end) == min(values[start : end + 1])


def test_combine_order_is_kept():
    letters = list("segmenttree")
    tree = SegmentTree(letters, lambda a, b: a + b, "")
    assert tree.query(0, len(letters) - 1) == "segmenttree"
    assert tree.query(2, 6) == "gment"


def test_update_then_query(values):
    tree = SegmentTree(values)
    rng = random.Random(3)
    current = list(values)
    for _ in range(100):
        pos = rng.randrange(len(current))
        current[pos] = rng.randint(-100, 100)
        tree.update(pos, current[pos])
        start = rng.randrange(len(current))
        end = rng.randrange(start, len(current))
        assert tree.query(start, end) == sum(current[start : end + 1])


def test_empty_range_gives_identity(values):
    assert SegmentTree(values, min, math.inf).query(5, 4) == math.inf
    assert SegmentTree(values).query(3, 1) == 0


def test_out_of_range_raises(values):
    tree = SegmentTree(values)
    with pytest.raises(IndexError):
        tree.query(0, len(values))
    with pytest.raises(IndexError):
        tree.update(-1, 4)


def test_range_add_matches_naive(values):
    tree = RangeAddTree(values)
    current = list(values)
    rng = random.Random(11)
    for _ in range(200):
        start = rng.randrange(len(current))
        end = rng.randrange(start, len(current))
        delta = rng.randint(-20, 20)
        tree.add(start, end, delta)
        for i in range(start, end + 1):
            current[i] += delta
    assert [tree.get(i) for i in range(len(current))] == current


def test_range_add_small_example():
    tree = RangeAddTree([1, 2, 3])
    tree.add(0, 1, 10)
    assert [tree.get(i) for i in range(3)] == [11, 12, 3]


def test_range_add_errors():
    tree = RangeAddTree([0, 0])
    with pytest.raises(IndexError):
        tree.add(0, 2, 1)
    with pytest.raises(IndexError):
        tree.get(2)