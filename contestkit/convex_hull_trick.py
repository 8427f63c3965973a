"""Dynamic set of lines answering minimum or maximum value queries."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sortedcontainers import SortedKeyList


@dataclass
class _Line:
    m: int
    c: int
    p: float = 0

    def at(self, x: int) -> int:
        return self.m * x + self.c


class LineContainer:
    """Lines ``y = m*x + c``; ``query(x)`` gives the minimum, or maximum if asked."""

    def __init__(self, maximize: bool = False) -> None:
        self._sign = 1 if maximize else -1
        self._lines: SortedKeyList = SortedKeyList(key=lambda line: line.m)

    def _after(self, idx: int) -> _Line | None:
        return self._lines[idx + 1] if idx + 1 < len(self._lines) else None

    @staticmethod
    def _intersect(x: _Line, y: _Line | None) -> bool:
        if y is None:
            x.p = math.inf
            return False
        if x.m == y.m:
            x.p = math.inf if x.c > y.c else -math.inf
        else:
            x.p = (y.c - x.c) // (x.m - y.m)
        return x.p >= y.p

    def add(self, m: int, c: int) -> None:
        """Add the line ``y = m*x + c``."""
        lines = self._lines
        line = _Line(m * self._sign, c * self._sign)
        lines.add(line)
        i = lines.bisect_key_right(line.m) - 1
        while self._intersect(lines[i], self._after(i)):
            del lines[i + 1]
        xi = i
        if xi > 0:
            xi -= 1
            if self._intersect(lines[xi], lines[xi + 1]):
                del lines[xi + 1]
                self._intersect(lines[xi], self._after(xi))
        while xi > 0 and lines[xi - 1].p >= lines[xi].p:
            del lines[xi]
            xi -= 1
            self._intersect(lines[xi], self._after(xi))

    def query(self, x: int) -> int:
        """Best value over all lines at ``x``."""
        lines = self._lines
        if not lines:
            raise ValueError("no lines to query")
        lo, hi = 0, len(lines) - 1
        while lo < hi:
            mid = (lo + hi) // 2
            if lines[mid].p >= x:
                hi = mid
            else:
                lo = mid + 1
        return self._sign * lines[lo].at(x)

    def __len__(self) -> int:
        return len(self._lines)