"""Number-theory, combinatorics and small geometry helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

EPS = 1e-9
DEFAULT_MOD = 1_000_000_007
_DIGIT_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple."""
    return a // gcd(a, b) * b


def prime_factorization(n: int) -> list[int]:
    """Prime factors of ``n`` with multiplicity, in ascending order."""
    if n < 1:
        raise ValueError("n must be positive")
    factors = []
    while n % 2 == 0:
        factors.append(2)
        n //= 2
    i = 3
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 2
    if n > 2:
        factors.append(n)
    return factors


def ncr(n: int, r: int) -> int:
    """Number of combinations; zero when ``r > n`` or ``n < 1``."""
    if r > n or n < 1:
        return 0
    if r <= 0:
        return 1
    return math.comb(n, r)


def npr(n: int, r: int) -> int:
    """Number of ordered arrangements of ``r`` out of ``n``."""
    if r > n:
        return 0
    if r <= 0:
        return 1
    return math.perm(n, r)


def big_mod(digits: str, mod: int) -> int:
    """Remainder of a decimal number given as a string."""
    result = 0
    for ch in digits:
        result = (result * 10 + ord(ch) - ord("0")) % mod
    return result


def bin_pow(base: int, exponent: int, mod: int | None = None) -> int:
    """``base ** exponent``, reduced modulo ``mod`` when given."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if mod is None:
        return base**exponent
    return pow(base, exponent, mod)


def bin_mul(base: int, factor: int, mod: int) -> int:
    """``base * factor`` reduced modulo ``mod``."""
    if factor < 0:
        raise ValueError("factor must be non-negative")
    return (base % mod) * factor % mod


def is_prime(n: int) -> bool:
    """Primality by trial division."""
    if n < 2 or (n % 2 == 0 and n != 2):
        return False
    return all(n % i for i in range(3, math.isqrt(n) + 1, 2))


def _small_divisors(n: int) -> Iterator[int]:
    if n < 1:
        raise ValueError("n must be positive")
    return (i for i in range(1, math.isqrt(n) + 1) if i * i < n and n % i == 0)


def _square_root(n: int) -> int | None:
    root = math.isqrt(n)
    return root if root * root == n else None


def number_of_divisors(n: int) -> int:
    """How many positive divisors ``n`` has."""
    pairs = 2 * sum(1 for _ in _small_divisors(n))
    return pairs + (_square_root(n) is not None)


def sum_of_divisors(n: int) -> int:
    """Sum of the positive divisors of ``n``."""
    total = sum(i + n // i for i in _small_divisors(n))
    return total + (_square_root(n) or 0)


def divisor_sum(num: int) -> int:
    """Sum of ``sum_of_divisors(k)`` for every ``k`` in ``1..num``."""
    if num < 1:
        return 0
    total = 0
    for i in range(1, math.isqrt(num) + 1):
        q = num // i
        total += i * (q - i + 1)
        total += q * (q + 1) // 2 - i * (i + 1) // 2
    return total


def get_divisors(n: int) -> list[int]:
    """Divisors of ``n`` as pairs ``(i, n // i)`` with the square root last."""
    divisors = []
    for i in _small_divisors(n):
        divisors.extend((i, n // i))
    root = _square_root(n)
    if root is not None:
        divisors.append(root)
    return divisors


def permutations(items: Sequence[Any] | str) -> Iterator[Any]:
    """Distinct permutations in lexicographic order, starting from sorted input.

    Strings yield strings; other sequences yield tuples.
    """
    is_text = isinstance(items, str)
    current = sorted(items)
    while True:
        yield "".join(current) if is_text else tuple(current)
        i = len(current) - 2
        while i >= 0 and current[i] >= current[i + 1]:
            i -= 1
        if i < 0:
            return
        j = len(current) - 1
        while current[j] <= current[i]:
            j -= 1
        current[i], current[j] = current[j], current[i]
        current[i + 1:] = reversed(current[i + 1:])


def summation(r: int, l: int = 0) -> int:
    """Sum of the integers from ``l`` to ``r`` inclusive."""
    if l > r:
        l, r = r, l
    return r * (r + 1) // 2 - l * (l - 1) // 2


def how_many_divisible(a: int, b: int, c: int) -> int:
    """How many multiples of ``c`` lie in ``[a, b]``."""
    return _tdiv(b, c) - _tdiv(a - 1, c)


def summation_of_divisible(a: int, b: int, c: int) -> int:
    """Sum of the multiples of ``c`` in ``[a, b]``."""
    right = summation(_tdiv(b, c))
    left = summation(_tdiv(a - 1, c))
    return (right - left) * c


def get_log(a: float, b: float) -> float:
    """Logarithm of ``a`` in base ``b``."""
    return math.log(a) / math.log(b)


def is_power(number: int, base: int = 2) -> bool:
    """Whether ``number`` is an integer power of ``base`` (floating check)."""
    value = get_log(number, base)
    return value - math.trunc(value) <= EPS


def dist(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x1 - x2, y1 - y2)


def is_triangle(a: int, b: int, c: int) -> bool:
    """Whether three side lengths form a non-degenerate triangle."""
    return a + b > c and a + c > b and b + c > a and bool(a and b and c)


def slope(x1: float, y1: float, x2: float, y2: float) -> float:
    """Slope of the line through two points; zero for a vertical line."""
    if x2 == x1:
        return 0
    return (y2 - y1) / (x2 - x1)


def is_same_line(x1: int, y1: int, x2: int, y2: int, x3: int, y3: int) -> bool:
    """Whether three points are collinear."""
    return (y2 - y1) * (x3 - x1) == (y3 - y1) * (x2 - x1)


def is_perfect_square(n: int) -> bool:
    """Whether ``n`` is the square of an integer."""
    return n >= 0 and _square_root(n) is not None


def phi(n: int) -> int:
    """Euler's totient: integers in ``1..n`` coprime with ``n``."""
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1
    if n > 1:
        result -= result // n
    return result


def factorial_prime_power(n: int, p: int) -> int:
    """Exponent of the prime ``p`` in ``n!``."""
    if p < 2:
        raise ValueError("p must be at least 2")
    powers = 0
    power = p
    while power <= n:
        powers += n // power
        power *= p
    return powers


def decimal_to_base(decimal: int, base: int) -> str:
    """Write a non-negative integer in ``base`` (2..36), upper-case digits."""
    if not 2 <= base <= len(_DIGIT_CHARS):
        raise ValueError("base must be between 2 and 36")
    if decimal < 0:
        raise ValueError("decimal must be non-negative")
    if decimal == 0:
        return "0"
    digits = []
    while decimal:
        decimal, digit = divmod(decimal, base)
        digits.append(_DIGIT_CHARS[digit])
    return "".join(reversed(digits))


def base_to_decimal(text: Iterable[str], base: int) -> int:
    """Read digits ``0-9`` and ``A-Z`` written in ``base``."""
    number = 0
    for ch in text:
        value = ord(ch) - ord("0") if "0" <= ch <= "9" else ord(ch) - ord("A") + 10
        number = number * base + value
    return number