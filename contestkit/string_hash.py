"""Double polynomial hashing of a string or integer sequence."""

from __future__ import annotations

from collections.abc import Iterable

P1, P2 = 313, 1013
M1, M2 = 1_000_000_007, 1_000_000_009


class DoubleHash:
    """Prefix hashes under two moduli; positions in queries are 1-based, inclusive."""

    def __init__(self, sequence: Iterable[int | str]) -> None:
        codes = [ord(item) if isinstance(item, str) else int(item) for item in sequence]
        self._n = len(codes)
        self._pow1 = [1]
        self._pow2 = [1]
        self._h1 = [0]
        self._h2 = [0]
        for code in codes:
            self._pow1.append(self._pow1[-1] * P1 % M1)
            self._pow2.append(self._pow2[-1] * P2 % M2)
            self._h1.append((self._h1[-1] * P1 + code) % M1)
            self._h2.append((self._h2[-1] * P2 + code) % M2)

    def _check(self, l: int, r: int) -> None:
        if l < 1 or r > self._n or l > r + 1:
            raise IndexError(f"range [{l}, {r}] is outside 1..{self._n}")

    def sub(self, l: int, r: int) -> tuple[int, int]:
        """Hash pair of positions ``l..r``."""
        self._check(l, r)
        length = r - l + 1
        first = (self._h1[r] - self._h1[l - 1] * self._pow1[length]) % M1
        second = (self._h2[r] - self._h2[l - 1] * self._pow2[length]) % M2
        return first, second

    def merge(self, l1: int, r1: int, l2: int, r2: int) -> tuple[int, int]:
        """Hash pair of ``l1..r1`` followed by ``l2..r2``."""
        a1, a2 = self.sub(l1, r1)
        b1, b2 = self.sub(l2, r2)
        length = r2 - l2 + 1
        return (a1 * self._pow1[length] + b1) % M1, (a2 * self._pow2[length] + b2) % M2

    def at(self, idx: int) -> tuple[int, int]:
        """Hash pair of the single position ``idx``."""
        return self.sub(idx, idx)

    def equal(self, l1: int, r1: int, l2: int, r2: int) -> bool:
        """Whether two ranges have the same hash pair."""
        return self.sub(l1, r1) == self.sub(l2, r2)