"""Probabilistic primality testing by the Miller-Rabin method."""

from __future__ import annotations

import random


def mul_mod(a: int, b: int, mod: int) -> int:
    """``a * b`` reduced modulo ``mod``."""
    if mod < 1:
        raise ValueError("mod must be positive")
    if b < 0:
        raise ValueError("b must be non-negative")
    return (a % mod) * (b % mod) % mod


def pow_mod(base: int, exponent: int, mod: int) -> int:
    """``base ** exponent`` reduced modulo ``mod``."""
    if mod < 1:
        raise ValueError("mod must be positive")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, mod)


def is_probable_prime(num: int, rounds: int = 10, rng: random.Random | None = None) -> bool:
    """Whether ``num`` passes ``rounds`` Miller-Rabin rounds with random bases."""
    if num < 2:
        return False
    if num != 2 and num % 2 == 0:
        return False
    rng = rng or random.Random()
    d = num - 1
    while d % 2 == 0:
        d >>= 1
    for _ in range(rounds):
        a = rng.randrange(1, num) if num > 2 else 1
        temp = d
        x = pow_mod(a, temp, num)
        while temp != num - 1 and x != 1 and x != num - 1:
            x = mul_mod(x, x, num)
            temp <<= 1
        if x != num - 1 and temp % 2 == 0:
            return False
    return True