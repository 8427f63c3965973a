"""Sieved divisor and prime-divisor tables for every number up to a bound."""

from __future__ import annotations


class Factorization:
    """Divisors and distinct prime divisors of every integer in ``0..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._factors: list[list[int]] = [[] for _ in range(n + 1)]
        for i in range(2, n // 2 + 1):
            for j in range(2 * i, n + 1, i):
                self._factors[j].append(i)
        self._primes: list[list[int]] = [[] for _ in range(n + 1)]
        for i in range(2, n + 1):
            if not self._primes[i]:
                for j in range(i, n + 1, i):
                    self._primes[j].append(i)

    def _check(self, x: int) -> None:
        if not 0 <= x <= self.n:
            raise IndexError(f"{x} is outside 0..{self.n}")

    def count_factors(self, x: int) -> int:
        """Number of positive divisors of ``x`` (zero for ``x == 0``)."""
        self._check(x)
        if x < 2:
            return x
        return len(self._factors[x]) + 2

    def factors(self, x: int) -> list[int]:
        """Divisors of ``x`` strictly between 1 and ``x``, ascending."""
        self._check(x)
        return list(self._factors[x])

    def count_prime_factors(self, x: int) -> int:
        """Number of distinct primes dividing ``x``."""
        self._check(x)
        return len(self._primes[x])

    def prime_factors(self, x: int) -> list[int]:
        """Distinct primes dividing ``x``, ascending."""
        self._check(x)
        return list(self._primes[x])