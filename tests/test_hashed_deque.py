import random

import pytest

from contestkit.hashed_deque import HashedDeque, HashParams, next_prime
from contestkit.number_theory import is_prime


@pytest.fixture(scope="module")
def params():
    return HashParams(max_size=16, rng=random.Random(7))


def build(params, values):
    d = HashedDeque(params)
    for v in values:
        d.push_back(v)
    return d


def test_next_prime():
    assert next_prime(1_000_000_000) == 1_000_000_007
    assert next_prime(13) == 13
    assert is_prime(next_prime(100))


def test_moduli_are_distinct_primes(params):
    first, second = params.mods
    assert first != second
    assert all(is_prime(m) and 900_000_000 <= m for m in params.mods)


def test_front_and_back_building_agree(params):
    values = [5, 1, 9, 3]
    front = HashedDeque(params)
    for v in reversed(values):
        front.push_front(v)
    assert front == build(params, values)
    assert list(front) == values


def test_different_contents_differ(params):
    assert build(params, [1, 2, 3]) != build(params, [3, 2, 1])
    assert build(params, [1, 2]) != build(params, [1, 2, 0])


def test_pop_back_restores(params):
    d = build(params, [4, 8, 15])
    assert d.pop_back() == 15
    assert d == build(params, [4, 8])
    assert len(d) == 2


def test_pop_front_restores(params):
    d = build(params, [4, 8, 15])
    assert d.pop_front() == 4
    assert d == build(params, [8, 15])


def test_sliding_window_matches_fresh(params):
    d = HashedDeque(params)
    seq = [3, 1, 4, 1, 5, 9, 2, 6]
    for i, v in enumerate(seq):
        d.push_back(v)
        if len(d) > 3:
            d.pop_front()
        assert d == build(params, seq[max(0, i - 2): i + 1])


def test_empty_pop_raises(params):
    d = HashedDeque(params)
    with pytest.raises(IndexError):
        d.pop_back()
    with pytest.raises(IndexError):
        d.pop_front()


def test_full_deque_raises(params):
    d = build(params, range(16))
    with pytest.raises(OverflowError):
        d.push_front(1)
    with pytest.raises(OverflowError):
        d.push_back(1)


def test_invalid_size():
    with pytest.raises(ValueError):
        HashParams(max_size=0, rng=random.Random(1))