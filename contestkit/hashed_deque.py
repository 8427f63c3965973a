"""A deque that keeps a double polynomial hash of its contents."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterator

from contestkit.number_theory import is_prime

DEFAULT_MAX_SIZE = 500_005
DEFAULT_BASE = 1_000_000_007
_MOD_LOW = 900_000_000
_MOD_HIGH = 1_000_000_009


def next_prime(x: int) -> int:
    """The smallest prime not less than ``x``."""
    while not is_prime(x):
        x += 1
    return x


class HashParams:
    """Two random prime moduli with the base powers a deque needs."""

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        base: int = DEFAULT_BASE,
        rng: random.Random | None = None,
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size must be positive")
        rng = rng or random.Random()
        self.max_size = max_size
        self.base = base
        mods: list[int] = []
        while len(mods) < 2:
            candidate = next_prime(rng.randint(_MOD_LOW, _MOD_HIGH))
            if candidate not in mods and base % candidate:
                mods.append(candidate)
        self.mods = tuple(mods)
        powers = [(1, 1)]
        for _ in range(max_size):
            last = powers[-1]
            powers.append(tuple(p * base % m for p, m in zip(last, self.mods)))
        self.powers = powers
        self.inverse_base = tuple(pow(base % m, m - 2, m) for m in self.mods)


class HashedDeque:
    """A deque of integers whose hash is updated on every push and pop."""

    def __init__(self, params: HashParams) -> None:
        self.params = params
        self._values: deque[int] = deque()
        self._hash = (0, 0)

    def _ensure_room(self) -> None:
        if len(self._values) >= self.params.max_size:
            raise OverflowError("deque is full")

    def push_back(self, x: int) -> None:
        self._ensure_room()
        base = self.params.base
        self._hash = tuple((h * base + x) % m for h, m in zip(self._hash, self.params.mods))
        self._values.append(x)

    def push_front(self, x: int) -> None:
        self._ensure_room()
        power = self.params.powers[len(self._values)]
        self._hash = tuple(
            (x * p + h) % m for h, p, m in zip(self._hash, power, self.params.mods)
        )
        self._values.appendleft(x)

    def pop_back(self) -> int:
        if not self._values:
            raise IndexError("pop from an empty deque")
        x = self._values.pop()
        self._hash = tuple(
            (h - x) * inv % m
            for h, inv, m in zip(self._hash, self.params.inverse_base, self.params.mods)
        )
        return x

    def pop_front(self) -> int:
        if not self._values:
            raise IndexError("pop from an empty deque")
        x = self._values.popleft()
        power = self.params.powers[len(self._values)]
        self._hash = tuple(
            (h - x * p) % m for h, p, m in zip(self._hash, power, self.params.mods)
        )
        return x

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashedDeque):
            return NotImplemented
        return len(self) == len(other) and self._hash == other._hash

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)