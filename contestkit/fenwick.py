"""Binary indexed trees: point update, 2D point update, and range update."""

from __future__ import annotations

from collections.abc import Iterable


def _lowbit(i: int) -> int:
    return i & -i


class FenwickTree:
    """Prefix sums over positions ``0..size-1`` with point additions."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._tree = [0] * (size + 1)

    def _check(self, idx: int) -> None:
        if not 0 <= idx < self.size:
            raise IndexError(f"index {idx} is outside 0..{self.size - 1}")

    def build(self, values: Iterable[int]) -> None:
        """Add ``values[i]`` at every position ``i``."""
        values = list(values)
        if len(values) > self.size:
            raise ValueError("more values than positions")
        for idx, value in enumerate(values):
            self.add(idx, value)

    def add(self, idx: int, value: int) -> None:
        """Add ``value`` at position ``idx``."""
        self._check(idx)
        i = idx + 1
        while i <= self.size:
            self._tree[i] += value
            i += _lowbit(i)

    def prefix(self, idx: int) -> int:
        """Sum of positions ``0..idx``; ``idx == -1`` gives zero."""
        if not -1 <= idx < self.size:
            raise IndexError(f"index {idx} is outside -1..{self.size - 1}")
        total = 0
        i = idx + 1
        while i:
            total += self._tree[i]
            i -= _lowbit(i)
        return total

    def query(self, l: int, r: int) -> int:
        """Sum of positions ``l..r``; zero when ``l > r``."""
        if l > r:
            return 0
        self._check(l)
        self._check(r)
        return self.prefix(r) - self.prefix(l - 1)

    def get(self, idx: int) -> int:
        """Value held at position ``idx``."""
        return self.query(idx, idx)


class FenwickTree2D:
    """Rectangle sums over cells ``(0..rows-1, 0..cols-1)`` with point additions."""

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self._tree = [[0] * (cols + 1) for _ in range(rows + 1)]

    def _check(self, i: int, j: int, low: int = 0) -> None:
        if not (low <= i < self.rows and low <= j < self.cols):
            raise IndexError(f"cell ({i}, {j}) is outside the grid")

    def build(self, grid: Iterable[Iterable[int]]) -> None:
        """Add ``grid[i][j]`` at every cell ``(i, j)``."""
        for i, row in enumerate(grid):
            for j, value in enumerate(row):
                self.add(i, j, value)

    def add(self, i: int, j: int, value: int) -> None:
        """Add ``value`` at cell ``(i, j)``."""
        self._check(i, j)
        x = i + 1
        while x <= self.rows:
            y = j + 1
            row = self._tree[x]
            while y <= self.cols:
                row[y] += value
                y += _lowbit(y)
            x += _lowbit(x)

    def prefix(self, i: int, j: int) -> int:
        """Sum of the rectangle from ``(0, 0)`` to ``(i, j)``; ``-1`` gives zero."""
        self._check(i, j, low=-1)
        total = 0
        x = i + 1
        while x:
            y = j + 1
            row = self._tree[x]
            while y:
                total += row[y]
                y -= _lowbit(y)
            x -= _lowbit(x)
        return total

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of the rectangle with corners ``(x1, y1)`` and ``(x2, y2)``."""
        if x1 > x2:
            x1, x2 = x2, x1
        if y1 > y2:
            y1, y2 = y2, y1
        self._check(x1, y1)
        self._check(x2, y2)
        return (
            self.prefix(x2, y2)
            - self.prefix(x1 - 1, y2)
            - self.prefix(x2, y1 - 1)
            + self.prefix(x1 - 1, y1 - 1)
        )


class RangeFenwickTree:
    """Range additions and range sums over positions ``0..size-1``."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._slope = [0] * (size + 2)
        self._offset = [0] * (size + 2)

    def _check(self, idx: int) -> None:
        if not 0 <= idx < self.size:
            raise IndexError(f"index {idx} is outside 0..{self.size - 1}")

    def _add_line(self, idx: int, slope: int, offset: int) -> None:
        i = idx + 1
        while i <= self.size + 1:
            self._slope[i] += slope
            self._offset[i] += offset
            i += _lowbit(i)

    def build(self, values: Iterable[int]) -> None:
        """Add ``values[i]`` at every position ``i``."""
        values = list(values)
        if len(values) > self.size:
            raise ValueError("more values than positions")
        for idx, value in enumerate(values):
            self.add(idx, idx, value)

    def add(self, l: int, r: int, value: int) -> None:
        """Add ``value`` to every position in ``l..r``."""
        if l > r:
            raise ValueError("l must not exceed r")
        self._check(l)
        self._check(r)
        self._add_line(l, value, -value * (l - 1))
        self._add_line(r + 1, -value, value * r)

    def prefix(self, idx: int) -> int:
        """Sum of positions ``0..idx``; ``idx == -1`` gives zero."""
        if not -1 <= idx < self.size:
            raise IndexError(f"index {idx} is outside -1..{self.size - 1}")
        total = 0
        i = idx + 1
        while i:
            total += idx * self._slope[i] + self._offset[i]
            i -= _lowbit(i)
        return total

    def query(self, l: int, r: int) -> int:
        """Sum of positions ``l..r``; zero when ``l > r``."""
        if l > r:
            return 0
        self._check(l)
        self._check(r)
        return self.prefix(r) - self.prefix(l - 1)