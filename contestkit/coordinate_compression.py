"""Map values to their 1-based rank among a sorted set of distinct values."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from typing import Any


class CoordinateCompressor:
    """Collects values and gives each its rank among the distinct ones."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values = list(values)
        self._built = False
        self.build()

    def add(self, x: Any) -> None:
        """Add a value; ranks are recomputed on the next lookup."""
        self._values.append(x)
        self._built = False

    def build(self) -> None:
        """Sort and deduplicate the collected values."""
        self._values = sorted(set(self._values))
        self._built = True

    def _ensure_built(self) -> None:
        if not self._built:
            self.build()

    def index(self, x: Any) -> int:
        """Number of distinct values not greater than ``x``: the rank of a known value."""
        self._ensure_built()
        return bisect_right(self._values, x)

    def compress(self, values: Iterable[Any]) -> list[int]:
        """Rank of every value, in order."""
        return [self.index(x) for x in values]

    def mapping(self, values: Iterable[Any]) -> dict[int, Any]:
        """Map the rank of every given value back to that value."""
        return {self.index(x): x for x in values}

    def __len__(self) -> int:
        self._ensure_built()
        return len(self._values)