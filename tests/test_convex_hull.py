import random

from contestkit.convex_hull import EPS, convex_hull, cross, dcmp


def test_dcmp():
    assert dcmp(1.0, 1.0 + EPS / 2) == 0
    assert dcmp(1.0, 2.0) == -1
    assert dcmp(2.0, 1.0) == 1


def test_cross_sign():
    assert cross(1 + 0j, 1j) > 0
    assert cross(1j, 1 + 0j) < 0
    assert cross(2 + 2j, 1 + 1j) == 0


def test_square_with_interior_point():
    corners = [(0, 0), (2, 0), (2, 2), (0, 2)]
    hull = convex_hull(corners + [(1, 1)])
    assert hull[0] == hull[-1] == 0j
    assert set(hull[:-1]) == {0j, 2 + 0j, 2 + 2j, 2j}
    assert len(hull) == 5


def test_single_point_and_segment():
    assert convex_hull([(3, 4)]) == [3 + 4j]
    assert convex_hull([]) == []
    segment = convex_hull([(5, 5), (0, 0)])
    assert segment[0] == 0j
    assert set(segment) == {0j, 5 + 5j}


def test_input_not_modified():
    points = [3 + 3j, 0j, 1 + 4j]
    convex_hull(points)
    assert points == [3 + 3j, 0j, 1 + 4j]