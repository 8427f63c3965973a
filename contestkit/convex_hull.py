"""Convex hull of plane points by Graham's scan, points as complex numbers."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

EPS = 1e-9


def dcmp(a: float, b: float) -> int:
    """Compare with tolerance: 0 if close, -1 if ``a < b``, else 1."""
    if abs(a - b) <= EPS:
        return 0
    return -1 if a < b else 1


def cross(a: complex, b: complex) -> float:
    """Cross product of two vectors: ``|a| |b| sin(angle)``."""
    return (a.conjugate() * b).imag


def _as_point(p: complex | tuple[float, float]) -> complex:
    if isinstance(p, complex):
        return p
    if isinstance(p, (int, float)):
        return complex(p)
    x, y = p
    return complex(x, y)


def convex_hull(points: Iterable[complex | tuple[float, float]]) -> list[complex]:
    """Hull vertices in clockwise order from the lowest, leftmost point.

    Collinear points on the boundary are kept. When the hull has at least
    three points, the first point is repeated at the end to close it.
    """
    pts = [_as_point(p) for p in points]
    if len(pts) <= 1:
        return pts
    start = min(range(len(pts)), key=lambda i: (pts[i].imag, pts[i].real))
    pts[0], pts[start] = pts[start], pts[0]
    center = pts[0]

    def before(lhs: complex, rhs: complex) -> bool:
        turn = cross(lhs - center, rhs - center)
        if dcmp(turn, 0) == 0:
            if abs(lhs.imag - rhs.imag) < EPS:
                return lhs.real < rhs.real
            return lhs.imag < rhs.imag
        return turn < 0

    def compare(lhs: complex, rhs: complex) -> int:
        if before(lhs, rhs):
            return -1
        if before(rhs, lhs):
            return 1
        return 0

    ordered = [center] + sorted(pts[1:], key=cmp_to_key(compare))
    hull: list[complex] = []
    for p in ordered:
        while len(hull) > 1 and cross(hull[-2] - hull[-1], p - hull[-1]) < 0:
            hull.pop()
        hull.append(p)
    if len(hull) >= 3:
        hull.append(hull[0])
    return hull