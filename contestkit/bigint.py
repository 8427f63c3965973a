"""Arbitrary-size non-negative integers stored as base 10**9 limbs."""

from __future__ import annotations

from functools import total_ordering
from itertools import zip_longest

BASE = 1_000_000_000
WIDTH = 9
_DIGITS = frozenset("0123456789")


class BigIntUnderflowError(ArithmeticError):
    """Raised when a subtraction would produce a negative number."""


@total_ordering
class BigInt:
    """A non-negative integer held as little-endian base 10**9 limbs."""

    __slots__ = ("_limbs",)

    def __init__(self, value: int | str | BigInt = 0) -> None:
        if isinstance(value, BigInt):
            self._limbs = list(value._limbs)
        elif isinstance(value, int):
            if value < 0:
                raise ValueError("BigInt cannot hold a negative value")
            limbs = []
            while value:
                value, low = divmod(value, BASE)
                limbs.append(low)
            self._limbs = limbs
        elif isinstance(value, str):
            self._limbs = self._parse(value)
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")

    @staticmethod
    def _parse(text: str) -> list[int]:
        text = text.strip()
        if not text or not set(text) <= _DIGITS:
            raise ValueError(f"not a decimal number: {text!r}")
        limbs = [
            int(text[max(0, end - WIDTH):end])
            for end in range(len(text), 0, -WIDTH)
        ]
        return _trim(limbs)

    @classmethod
    def _from_limbs(cls, limbs: list[int]) -> BigInt:
        result = cls.__new__(cls)
        result._limbs = _trim(limbs)
        return result

    @staticmethod
    def _coerce(other: object) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int):
            return BigInt(other)
        return None

    def __int__(self) -> int:
        total = 0
        for limb in reversed(self._limbs):
            total = total * BASE + limb
        return total

    def __str__(self) -> str:
        if not self._limbs:
            return "0"
        head = str(self._limbs[-1])
        return head + "".join(f"{limb:0{WIDTH}d}" for limb in reversed(self._limbs[:-1]))

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __bool__(self) -> bool:
        return bool(self._limbs)

    def _key(self) -> tuple[int, list[int]]:
        return len(self._limbs), self._limbs[::-1]

    def __eq__(self, other: object) -> bool:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return self._limbs == other_big._limbs

    def __lt__(self, other: object) -> bool:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return self._key() < other_big._key()

    def __le__(self, other: object) -> bool:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        return self._key() <= other_big._key()

    def __hash__(self) -> int:
        return hash(int(self))

    def __add__(self, other: object) -> BigInt:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        result = []
        carry = 0
        for a, b in zip_longest(self._limbs, other_big._limbs, fillvalue=0):
            carry, limb = divmod(a + b + carry, BASE)
            result.append(limb)
        if carry:
            result.append(carry)
        return BigInt._from_limbs(result)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigInt:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        if self < other_big:
            raise BigIntUnderflowError("UNDERFLOW")
        result = []
        borrow = 0
        for a, b in zip_longest(self._limbs, other_big._limbs, fillvalue=0):
            diff = a - b - borrow
            borrow = 1 if diff < 0 else 0
            result.append(diff + BASE if borrow else diff)
        return BigInt._from_limbs(result)

    def __mul__(self, other: object) -> BigInt:
        other_big = self._coerce(other)
        if other_big is None:
            return NotImplemented
        if not self._limbs or not other_big._limbs:
            return BigInt()
        right = other_big._limbs
        result = [0] * (len(self._limbs) + len(right))
        for i, a in enumerate(self._limbs):
            if a == 0:
                continue
            carry = 0
            for j, b in enumerate(right):
                carry, result[i + j] = divmod(result[i + j] + a * b + carry, BASE)
            result[i + len(right)] += carry
        return BigInt._from_limbs(result)

    __rmul__ = __mul__

    def _divmod_small(self, divisor: int) -> tuple[list[int], int]:
        if not isinstance(divisor, int):
            raise TypeError("divisor must be an int")
        if divisor == 0:
            raise ZeroDivisionError("division by zero")
        if divisor < 0:
            raise ValueError("divisor must be positive")
        quotient = [0] * len(self._limbs)
        remainder = 0
        for idx in range(len(self._limbs) - 1, -1, -1):
            remainder, quotient[idx] = (
                (remainder * BASE + self._limbs[idx]) % divisor,
                (remainder * BASE + self._limbs[idx]) // divisor,
            )
        return quotient, remainder

    def __floordiv__(self, divisor: int) -> BigInt:
        quotient, _ = self._divmod_small(divisor)
        return BigInt._from_limbs(quotient)

    def __mod__(self, divisor: int) -> BigInt:
        _, remainder = self._divmod_small(divisor)
        return BigInt(remainder)


def _trim(limbs: list[int]) -> list[int]:
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs