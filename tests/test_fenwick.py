import random

import pytest

from contestkit.fenwick import FenwickTree, FenwickTree2D, RangeFenwickTree


@pytest.fixture
def values():
    rng = random.Random(7)
    return [rng.randint(-50, 50) for _ in range(40)]


def test_query_matches_slice_sums(values):
    tree = FenwickTree(len(values))
    tree.build(values)
    for l in range(len(values)):
        for r in range(l, len(values)):
            assert tree.query(l, r) == sum(values[l:r + 1])


def test_get_after_additions(values):
    tree = FenwickTree(len(values))
    tree.build(values)
    tree.add(3, 10)
    tree.add(3, -4)
    assert tree.get(3) == values[3] + 6
    assert tree.prefix(len(values) - 1) == sum(values) + 6


def test_empty_range_and_prefix_minus_one(values):
    tree = FenwickTree(len(values))
    tree.build(values)
    assert tree.query(5, 4) == 0
    assert tree.prefix(-1) == 0


def test_out_of_range_raises():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.add(4, 1)
    with pytest.raises(IndexError):
        tree.query(0, 4)
    with pytest.raises(ValueError):
        tree.build([1, 2, 3, 4, 5])


def test_2d_rectangles_match_brute_sum():
    rng = random.Random(3)
    grid = [[rng.randint(-9, 9) for _ in range(6)] for _ in range(5)]
    tree = FenwickTree2D(5, 6)
    tree.build(grid)
    for x1 in range(5):
        for x2 in range(x1, 5):
            for y1 in range(6):
                for y2 in range(y1, 6):
                    expected = sum(sum(row[y1:y2 + 1]) for row in grid[x1:x2 + 1])
                    assert tree.query(x1, y1, x2, y2) == expected


def test_2d_swapped_corners_give_same_sum():
    tree = FenwickTree2D(4, 4)
    tree.build([[i * 4 + j for j in range(4)] for i in range(4)])
    assert tree.query(3, 3, 1, 0) == tree.query(1, 0, 3, 3)
    with pytest.raises(IndexError):
        tree.add(4, 0, 1)


def test_range_tree_matches_model():
    rng = random.Random(11)
    size = 30
    model = [rng.randint(-5, 5) for _ in range(size)]
    tree = RangeFenwickTree(size)
    tree.build(model)
    for _ in range(50):
        l = rng.randrange(size)
        r = rng.randrange(l, size)
        value = rng.randint(-20, 20)
        tree.add(l, r, value)
        for i in range(l, r + 1):
            model[i] += value
        a = rng.randrange(size)
        b = rng.randrange(a, size)
        assert tree.query(a, b) == sum(model[a:b + 1])


def test_range_tree_errors():
    tree = RangeFenwickTree(3)
    assert tree.query(2, 1) == 0
    with pytest.raises(ValueError):
        tree.add(2, 1, 5)
    with pytest.raises(IndexError):
        tree.add(0, 3, 5)