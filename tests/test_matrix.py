import pytest

from contestkit.matrix import (
    DEFAULT_MODULUS,
    Matrix,
    fibonacci_transition,
    identity,
    kth_term,
    zero,
)


def test_entries_are_reduced():
    m = Matrix([[DEFAULT_MODULUS + 1, -1], [0, 2]])
    assert m[0][0] == 1
    assert m[0][1] == DEFAULT_MODULUS - 1


def test_non_square_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_identity_is_neutral():
    m = Matrix([[2, 3], [5, 7]])
    assert identity(2) * m == m
    assert m * identity(2) == m


def test_zero_absorbs():
    m = Matrix([[2, 3], [5, 7]])
    assert m * zero(2) == zero(2)
    assert len(zero(3)) == 3


def test_power_matches_repeated_product():
    m = Matrix([[1, 2], [3, 4]])
    assert m ** 0 == identity(2)
    assert m ** 1 == m
    assert m ** 3 == m * m * m
    assert m ** 5 == (m ** 2) * (m ** 3)


def test_negative_power_rejected():
    with pytest.raises(ValueError):
        fibonacci_transition() ** -1


def test_size_mismatch_rejected():
    with pytest.raises(ValueError):
        identity(2) * identity(3)


def test_modulus_mismatch_rejected():
    with pytest.raises(ValueError):
        identity(2, 7) * identity(2, 11)


def test_kth_term_base_cases():
    assert kth_term(0, 0) == 0
    assert kth_term(7, 1) == 1


@pytest.mark.parametrize("k", range(0, 30))
def test_kth_term_follows_recurrence(k):
    assert kth_term(k + 2, 2) == (kth_term(k + 1, 2) + kth_term(k, 2)) % DEFAULT_MODULUS


def test_kth_term_rejects_larger_sizes():
    with pytest.raises(ValueError):
        kth_term(5, 3)