"""Pattern matching with the prefix function, and longest palindromes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def prefix_function(pattern: Sequence[Any]) -> list[int]:
    """Length of the longest proper border of every prefix of ``pattern``."""
    pi = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k and pattern[k] != pattern[i]:
            k = pi[k - 1]
        if pattern[k] == pattern[i]:
            k += 1
        pi[i] = k
    return pi


def kmp_search(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    """Start positions of every, possibly overlapping, occurrence of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(pattern)
    matches = []
    k = 0
    for i, item in enumerate(text):
        while k and pattern[k] != item:
            k = pi[k - 1]
        if pattern[k] == item:
            k += 1
        if k == len(pattern):
            matches.append(i - k + 1)
            k = pi[k - 1]
    return matches


def longest_palindromic_substring(s: str) -> str:
    """The leftmost longest palindromic substring, found by Manacher's method."""
    left_end, gap, right_end = object(), object(), object()
    padded: list[Any] = [left_end, gap]
    for ch in s:
        padded.extend((ch, gap))
    padded.append(right_end)
    radius = [0] * len(padded)
    center = max_right = best = start = 0
    for i in range(1, len(padded) - 1):
        if i < max_right:
            radius[i] = min(max_right - i, radius[2 * center - i])
        while padded[i + radius[i] + 1] == padded[i - radius[i] - 1]:
            radius[i] += 1
        if i + radius[i] > max_right:
            center, max_right = i, i + radius[i]
        if radius[i] > best:
            start, best = (i - radius[i] - 1) // 2, radius[i]
    return s[start:start + best]