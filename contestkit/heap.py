"""Binary heap ordered by an arbitrary comparison."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any


class Heap:
    """A binary heap; ``compare(a, b)`` is true when ``a`` may sit above ``b``.

    The default ``operator.ge`` gives a max-heap.
    """

    def __init__(
        self,
        values: Iterable[Any] = (),
        compare: Callable[[Any, Any], bool] = operator.ge,
    ) -> None:
        self._compare = compare
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def _sift_up(self, idx: int) -> None:
        items = self._items
        while idx > 0:
            parent = (idx - 1) // 2
            if self._compare(items[parent], items[idx]):
                break
            items[parent], items[idx] = items[idx], items[parent]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        items = self._items
        n = len(items)
        while True:
            left, right = 2 * idx + 1, 2 * idx + 2
            if left >= n:
                break
            if right >= n:
                right = left
            best = left if self._compare(items[left], items[right]) else right
            if not self._compare(items[best], items[idx]):
                break
            items[best], items[idx] = items[idx], items[best]
            idx = best

    def push(self, x: Any) -> None:
        """Add ``x`` to the heap."""
        self._items.append(x)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        top = items.pop()
        self._sift_down(0)
        return top

    def top(self) -> Any:
        """The top element, left in place."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)