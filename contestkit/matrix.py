"""Square matrices over the integers modulo a fixed modulus."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_MODULUS = 1_000_000_007


class Matrix:
    """A square matrix whose entries are reduced modulo ``modulus``."""

    __slots__ = ("rows", "modulus")

    def __init__(self, rows: Iterable[Iterable[int]], modulus: int = DEFAULT_MODULUS) -> None:
        if modulus < 1:
            raise ValueError("modulus must be positive")
        grid = [list(row) for row in rows]
        size = len(grid)
        if any(len(row) != size for row in grid):
            raise ValueError("matrix must be square")
        self.rows = [[value % modulus for value in row] for row in grid]
        self.modulus = modulus

    def __getitem__(self, index: int) -> list[int]:
        return self.rows[index]

    def __len__(self) -> int:
        return len(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.modulus == other.modulus and self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.rows!r}, modulus={self.modulus})"

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if len(self) != len(other):
            raise ValueError("matrices must have the same size")
        if self.modulus != other.modulus:
            raise ValueError("matrices must share a modulus")
        columns = list(zip(*other.rows))
        product = [
            [sum(a * b for a, b in zip(row, column)) % self.modulus for column in columns]
            for row in self.rows
        ]
        return Matrix(product, self.modulus)

    def __pow__(self, exponent: int) -> Matrix:
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = identity(len(self), self.modulus)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result


def identity(n: int, modulus: int = DEFAULT_MODULUS) -> Matrix:
    """The ``n`` by ``n`` identity matrix."""
    return Matrix(([int(i == j) for j in range(n)] for i in range(n)), modulus)


def zero(n: int, modulus: int = DEFAULT_MODULUS) -> Matrix:
    """The ``n`` by ``n`` zero matrix."""
    return Matrix(([0] * n for _ in range(n)), modulus)


def fibonacci_transition(modulus: int = DEFAULT_MODULUS) -> Matrix:
    """The 2 by 2 transition matrix of the Fibonacci recurrence."""
    return Matrix([[0, 1], [1, 1]], modulus)


def kth_term(k: int, n: int) -> int:
    """The ``k``-th Fibonacci term modulo 10**9+7, computed with ``n`` by ``n`` matrices.

    ``n <= 0`` gives 0 and ``n == 1`` gives 1; the transition is 2 by 2, so
    any larger ``n`` other than 2 is rejected.
    """
    if n <= 0:
        return 0
    if n == 1:
        return 1
    if n != 2:
        raise ValueError("the transition matrix is 2 by 2")
    return (identity(n) * fibonacci_transition() ** (k + 1))[0][0]