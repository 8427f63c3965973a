"""Integers modulo a fixed modulus."""

from __future__ import annotations

from functools import total_ordering

DEFAULT_MODULUS = 1_000_000_007
ALT_MODULUS = 998_244_353


@total_ordering
class ModInt:
    """An integer reduced modulo ``modulus`` into ``[0, modulus)``."""

    __slots__ = ("value", "modulus")

    def __init__(self, value: int | ModInt = 0, modulus: int = DEFAULT_MODULUS) -> None:
        if modulus < 1:
            raise ValueError("modulus must be positive")
        if isinstance(value, ModInt):
            value = value.value
        self.value = value % modulus
        self.modulus = modulus

    def _operand(self, other: object) -> int | None:
        if isinstance(other, ModInt):
            if other.modulus != self.modulus:
                raise ValueError("ModInt operands have different moduli")
            return other.value
        if isinstance(other, int):
            return other
        return None

    def _make(self, value: int) -> ModInt:
        return ModInt(value, self.modulus)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"ModInt({self.value}, {self.modulus})"

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return self.modulus == other.modulus and self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self.value < operand

    def __hash__(self) -> int:
        return hash(self.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __add__(self, other: object) -> ModInt:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._make(self.value + operand)

    def __radd__(self, other: object) -> ModInt:
        return self.__add__(other)

    def __sub__(self, other: object) -> ModInt:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._make(self.value - operand)

    def __rsub__(self, other: object) -> ModInt:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._make(operand - self.value)

    def __mul__(self, other: object) -> ModInt:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._make(self.value * operand)

    def __rmul__(self, other: object) -> ModInt:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> ModInt:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self * self._make(operand).inverse()

    def __mod__(self, other: object) -> ModInt:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._make(self.value % operand)

    def __pow__(self, exponent: int | ModInt) -> ModInt:
        return self.power(exponent)

    def inverse(self) -> ModInt:
        """Multiplicative inverse by Fermat's little theorem (prime modulus)."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self.power(self.modulus - 2)

    def power(self, exponent: int | ModInt) -> ModInt:
        """Raise to an integer power; a negative power uses the inverse."""
        if isinstance(exponent, ModInt):
            exponent = exponent.value
        if exponent < 0:
            return self.inverse().power(-exponent)
        return self._make(pow(self.value, exponent, self.modulus))