"""Stack and queue that keep a running aggregate (maximum by default)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class MonotonicStack:
    """A stack that knows the aggregate of all its elements at every depth."""

    def __init__(
        self,
        operation: Callable[[Any, Any], Any] = max,
        default: Any = 0,
    ) -> None:
        self.operation = operation
        self.default = default
        self._items: list[Any] = []
        self._aggregates: list[Any] = [default]

    def push(self, x: Any) -> None:
        """Push ``x``."""
        self._items.append(x)
        self._aggregates.append(self.operation(self._aggregates[-1], x))

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        self._aggregates.pop()
        return self._items.pop()

    def top(self) -> Any:
        """The top element."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def value(self) -> Any:
        """Aggregate of every element, or the default when empty."""
        return self._aggregates[-1]

    def __len__(self) -> int:
        return len(self._items)


class MonotonicQueue:
    """A FIFO queue built from two aggregate stacks."""

    def __init__(
        self,
        operation: Callable[[Any, Any], Any] = max,
        default: Any = 0,
    ) -> None:
        self.operation = operation
        self._front = MonotonicStack(operation, default)
        self._back = MonotonicStack(operation, default)

    def push(self, x: Any) -> None:
        """Append ``x`` at the back."""
        self._back.push(x)

    def pop(self) -> Any:
        """Remove and return the front element."""
        if not self._front:
            while self._back:
                self._front.push(self._back.pop())
        if not self._front:
            raise IndexError("pop from an empty queue")
        return self._front.pop()

    def value(self) -> Any:
        """Aggregate of every element in the queue."""
        return self.operation(self._front.value(), self._back.value())

    def is_good(self) -> bool:
        """Whether the aggregate equals 1."""
        return self.value() == 1

    def __len__(self) -> int:
        return len(self._front) + len(self._back)