"""Offline range queries answered in square-root block order."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RangeQuery:
    """An inclusive range ``l..r``."""

    l: int
    r: int


def process_queries(
    n: int,
    queries: Iterable[RangeQuery | tuple[int, int]],
    add: Callable[[int], None],
    remove: Callable[[int], None],
    answer: Callable[[], Any],
    one_based: bool = False,
) -> list[Any]:
    """Answer range queries over positions ``0..n-1`` with Mo's ordering.

    ``add`` and ``remove`` are called with the position entering or leaving
    the current window; ``answer`` reads the result for the window. Answers
    come back in the order the queries were given.
    """
    ranges = []
    for query in queries:
        l, r = (query.l, query.r) if isinstance(query, RangeQuery) else query
        if one_based:
            l, r = l - 1, r - 1
        if l > r:
            raise ValueError(f"query [{l}, {r}] is empty")
        if l < 0 or r >= n:
            raise IndexError(f"query [{l}, {r}] is outside 0..{n - 1}")
        ranges.append((l, r))
    if not ranges:
        return []
    block = int(n / math.sqrt(len(ranges))) + 1
    order = sorted(range(len(ranges)), key=lambda i: (ranges[i][0] // block, ranges[i][1]))
    answers: list[Any] = [None] * len(ranges)
    cur_l = ranges[order[0]][0]
    cur_r = cur_l - 1
    for i in order:
        l, r = ranges[i]
        while cur_l > l:
            cur_l -= 1
            add(cur_l)
        while cur_r < r:
            cur_r += 1
            add(cur_r)
        while cur_l < l:
            remove(cur_l)
            cur_l += 1
        while cur_r > r:
            remove(cur_r)
            cur_r -= 1
        answers[i] = answer()
    return answers