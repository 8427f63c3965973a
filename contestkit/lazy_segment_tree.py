"""Segment tree with range assignment and range minimum, positions 1-based."""

from __future__ import annotations

import math
from collections.abc import Iterable

_NO_LAZY = object()


class LazySegmentTree:
    """Minimum over positions ``1..n`` with lazily applied range assignment."""

    def __init__(self, n: int, values: Iterable[int] | None = None) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        size = 1
        while size <= n:
            size *= 2
        self._size = size
        self._tree: list = [0] * (2 * size)
        self._lazy: list = [_NO_LAZY] * (2 * size)
        if values is not None:
            self.build(values)

    def _check(self, l: int, r: int) -> None:
        if l > r:
            raise ValueError("l must not exceed r")
        if l < 1 or r > self.n:
            raise IndexError(f"range [{l}, {r}] is outside 1..{self.n}")

    def _rebuild(self) -> None:
        for idx in range(self._size - 1, 0, -1):
            self._tree[idx] = min(self._tree[2 * idx], self._tree[2 * idx + 1])
        self._lazy = [_NO_LAZY] * (2 * self._size)

    def build(self, values: Iterable[int]) -> None:
        """Set positions ``1..len(values)`` to ``values``; the rest keep their values."""
        values = list(values)
        if len(values) > self.n:
            raise ValueError("more values than positions")
        current = [self.query(pos) for pos in range(len(values) + 1, self.n + 1)]
        leaves = self._size
        for pos, value in enumerate(values + current, start=1):
            self._tree[leaves + pos - 1] = value
        self._rebuild()

    def fill(self, value: int) -> None:
        """Set every position to ``value``."""
        self._tree = [value] * (2 * self._size)
        self._lazy = [_NO_LAZY] * (2 * self._size)

    def _apply(self, idx: int, value: int) -> None:
        self._tree[idx] = value
        if idx < self._size:
            self._lazy[idx] = value

    def _push(self, idx: int) -> None:
        pending = self._lazy[idx]
        if pending is not _NO_LAZY:
            self._apply(2 * idx, pending)
            self._apply(2 * idx + 1, pending)
            self._lazy[idx] = _NO_LAZY

    def _assign(self, l: int, r: int, value: int, idx: int, lx: int, rx: int) -> None:
        if rx < l or lx > r:
            return
        if l <= lx and rx <= r:
            self._apply(idx, value)
            return
        self._push(idx)
        mid = (lx + rx) // 2
        self._assign(l, r, value, 2 * idx, lx, mid)
        self._assign(l, r, value, 2 * idx + 1, mid + 1, rx)
        self._tree[idx] = min(self._tree[2 * idx], self._tree[2 * idx + 1])

    def _query(self, l: int, r: int, idx: int, lx: int, rx: int):
        if rx < l or lx > r:
            return math.inf
        if l <= lx and rx <= r:
            return self._tree[idx]
        self._push(idx)
        mid = (lx + rx) // 2
        return min(
            self._query(l, r, 2 * idx, lx, mid),
            self._query(l, r, 2 * idx + 1, mid + 1, rx),
        )

    def assign(self, l: int, r: int, value: int) -> None:
        """Set every position in ``l..r`` to ``value``."""
        self._check(l, r)
        self._assign(l, r, value, 1, 1, self._size)

    def query(self, l: int, r: int | None = None):
        """Minimum over ``l..r``, or the value at ``l`` when ``r`` is omitted."""
        if r is None:
            r = l
        self._check(l, r)
        return self._query(l, r, 1, 1, self._size)