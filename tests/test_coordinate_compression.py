import pytest

from contestkit.coordinate_compression import CoordinateCompressor

VALUES = [100, -7, 42, 100, 3, -7, 1000]


def test_distinct_values_get_consecutive_ranks():
    comp = CoordinateCompressor(VALUES)
    distinct = sorted(set(VALUES))
    assert len(comp) == len(distinct)
    assert comp.compress(distinct) == list(range(1, len(distinct) + 1))


def test_compression_preserves_order_and_equality():
    comp = CoordinateCompressor(VALUES)
    ranks = comp.compress(VALUES)
    for a, ra in zip(VALUES, ranks):
        for b, rb in zip(VALUES, ranks):
            assert (a < b) == (ra < rb)
            assert (a == b) == (ra == rb)


def test_added_values_rebuild_on_lookup():
    comp = CoordinateCompressor()
    for x in VALUES:
        comp.add(x)
    assert len(comp) == len(set(VALUES))
    assert comp.index(min(VALUES)) == 1
    assert comp.index(max(VALUES)) == len(comp)


def test_mapping_inverts_compression():
    comp = CoordinateCompressor(VALUES)
    back = comp.mapping(VALUES)
    assert all(back[comp.index(x)] == x for x in VALUES)
    assert sorted(back) == list(range(1, len(comp) + 1))


@pytest.mark.parametrize("probe, expected_rank", [(-1000, 0), (10_000, 5)])
def test_unknown_values_count_smaller_ones(probe, expected_rank):
    comp = CoordinateCompressor(VALUES)
    assert comp.index(probe) == expected_rank