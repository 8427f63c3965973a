"""A sorted multiset with positional access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from sortedcontainers import SortedList


class OrderedMultiset:
    """Sorted multiset; ``descending`` reverses the order used for positions."""

    def __init__(self, values: Iterable[Any] = (), descending: bool = False) -> None:
        self.descending = descending
        self._items = SortedList(values)

    def insert(self, value: Any) -> None:
        """Add one occurrence of ``value``."""
        self._items.add(value)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def erase(self, value: Any) -> bool:
        """Remove one occurrence of ``value``; False if it was absent."""
        if value not in self._items:
            return False
        self._items.remove(value)
        return True

    def __getitem__(self, idx: int) -> Any:
        n = len(self._items)
        if idx < 0:
            idx += n
        if not 0 <= idx < n:
            raise IndexError("index out of range")
        return self._items[n - 1 - idx] if self.descending else self._items[idx]

    def first_index(self, value: Any) -> int:
        """Position of the first occurrence of ``value``, or -1."""
        if value not in self._items:
            return -1
        if self.descending:
            return len(self._items) - self._items.bisect_right(value)
        return self._items.bisect_left(value)

    def last_index(self, value: Any) -> int:
        """Position of the last occurrence of ``value``, or -1."""
        if value not in self._items:
            return -1
        if self.descending:
            return len(self._items) - self._items.bisect_left(value) - 1
        return self._items.bisect_right(value) - 1

    def count(self, value: Any) -> int:
        """Number of occurrences of ``value``."""
        return self._items.count(value)

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def order_of_key(self, value: Any) -> int:
        """Number of elements at or before ``value`` in the set's order."""
        if self.descending:
            return len(self._items) - self._items.bisect_left(value)
        return self._items.bisect_right(value)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items) if self.descending else iter(self._items)

    def __str__(self) -> str:
        return " ".join(str(x) for x in self)