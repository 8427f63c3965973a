"""Nearest greater and smaller element indices by monotonic stacks.

A missing next element is reported as ``len(nums)``, a missing previous one as -1.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any


def _nearest(
    nums: Sequence[Any],
    order: range,
    discard: Callable[[Any, Any], bool],
    missing: int,
) -> list[int]:
    result = [missing] * len(nums)
    stack: list[int] = []
    for i in order:
        while stack and discard(nums[stack[-1]], nums[i]):
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def next_greater(nums: Sequence[Any]) -> list[int]:
    """Index of the next strictly greater element for every position."""
    n = len(nums)
    return _nearest(nums, range(n - 1, -1, -1), lambda top, x: top <= x, n)


def prev_greater(nums: Sequence[Any]) -> list[int]:
    """Index of the previous strictly greater element for every position."""
    return _nearest(nums, range(len(nums)), lambda top, x: top <= x, -1)


def next_smaller(nums: Sequence[Any]) -> list[int]:
    """Index of the next strictly smaller element for every position."""
    n = len(nums)
    return _nearest(nums, range(n - 1, -1, -1), lambda top, x: top >= x, n)


def prev_smaller(nums: Sequence[Any]) -> list[int]:
    """Index of the previous strictly smaller element for every position."""
    return _nearest(nums, range(len(nums)), lambda top, x: top >= x, -1)