import itertools
import math

import pytest

from contestkit import number_theory as nt


@pytest.mark.parametrize("a,b", [(12, 18), (17, 5), (0, 9), (100, 75), (2**40, 6**20)])
def test_gcd_and_lcm_match_math(a, b):
    assert nt.gcd(a, b) == math.gcd(a, b)
    if a and b:
        assert nt.lcm(a, b) == math.lcm(a, b)


@pytest.mark.parametrize("n", [1, 2, 12, 97, 360, 2**10 * 3**4, 999_983 * 7])
def test_prime_factorization_multiplies_back(n):
    factors = nt.prime_factorization(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors)
    assert all(nt.is_prime(f) for f in factors)


def test_prime_factorization_rejects_zero():
    with pytest.raises(ValueError):
        nt.prime_factorization(0)


def test_is_prime_agrees_with_factorization():
    for n in range(2, 300):
        assert nt.is_prime(n) == (len(nt.prime_factorization(n)) == 1)
    assert not nt.is_prime(1)
    assert not nt.is_prime(-7)


@pytest.mark.parametrize("n,r", [(5, 2), (10, 10), (30, 7), (60, 30), (4, 9)])
def test_ncr_and_npr_match_math(n, r):
    assert nt.ncr(n, r) == math.comb(n, r)
    assert nt.npr(n, r) == math.perm(n, r)


def test_ncr_of_zero_is_zero():
    assert nt.ncr(0, 0) == 0


def test_big_mod_matches_int():
    digits = "123456789123456789123456789"
    for mod in (7, 97, 10**9 + 7):
        assert nt.big_mod(digits, mod) == int(digits) % mod


@pytest.mark.parametrize("base,exponent", [(2, 10), (3, 0), (7, 123), (10**9, 5)])
def test_bin_pow_matches_pow(base, exponent):
    assert nt.bin_pow(base, exponent) == base**exponent
    assert nt.bin_pow(base, exponent, 10**9 + 7) == pow(base, exponent, 10**9 + 7)


def test_bin_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        nt.bin_pow(2, -1, 5)


@pytest.mark.parametrize("a,b", [(10**18, 10**18 + 3), (5, 0), (123456789, 987654321)])
def test_bin_mul_matches_product(a, b):
    mod = 10**9 + 7
    assert nt.bin_mul(a, b, mod) == a * b % mod


@pytest.mark.parametrize("n", [1, 2, 12, 16, 36, 97, 100, 360])
def test_divisor_functions_are_consistent(n):
    divisors = nt.get_divisors(n)
    assert sorted(divisors) == [d for d in range(1, n + 1) if n % d == 0]
    assert nt.number_of_divisors(n) == len(divisors)
    assert nt.sum_of_divisors(n) == sum(divisors)


def test_divisors_order_puts_root_last():
    divisors = nt.get_divisors(36)
    assert divisors[-1] == math.isqrt(36)
    assert divisors[:2] == [1, 36]


@pytest.mark.parametrize("num", [1, 2, 10, 50, 123])
def test_divisor_sum_accumulates_sum_of_divisors(num):
    assert nt.divisor_sum(num) == sum(nt.sum_of_divisors(k) for k in range(1, num + 1))


def test_permutations_follow_lexicographic_order():
    assert list(nt.permutations([3, 1, 2])) == list(itertools.permutations([1, 2, 3]))


def test_permutations_of_string_are_distinct():
    result = list(nt.permutations("baa"))
    assert result == sorted(set("".join(p) for p in itertools.permutations("baa")))


@pytest.mark.parametrize("r,l", [(10, 0), (100, 1), (5, 20), (7, 7)])
def test_summation_matches_sum(r, l):
    lo, hi = min(r, l), max(r, l)
    assert nt.summation(r, l) == sum(range(lo, hi + 1))


@pytest.mark.parametrize("a,b,c", [(1, 100, 7), (10, 20, 5), (3, 3, 3), (4, 50, 13)])
def test_divisible_counts_and_sums(a, b, c):
    multiples = [x for x in range(a, b + 1) if x % c == 0]
    assert nt.how_many_divisible(a, b, c) == len(multiples)
    assert nt.summation_of_divisible(a, b, c) == sum(multiples)


def test_logs_and_powers():
    assert nt.get_log(1024, 2) == pytest.approx(math.log2(1024))
    assert nt.is_power(8, 2)
    assert not nt.is_power(12, 2)


def test_geometry_helpers():
    assert nt.dist(0, 0, 3, 4) == pytest.approx(5.0)
    assert nt.slope(0, 0, 2, 4) == pytest.approx(2.0)
    assert nt.slope(1, 5, 1, 9) == 0
    assert nt.is_same_line(0, 0, 1, 1, 5, 5)
    assert not nt.is_same_line(0, 0, 1, 1, 5, 6)


@pytest.mark.parametrize("sides,expected", [((3, 4, 5), True), ((1, 2, 3), False), ((0, 1, 1), False)])
def test_is_triangle(sides, expected):
    assert nt.is_triangle(*sides) is expected


def test_is_perfect_square():
    squares = {k * k for k in range(40)}
    for n in range(1500):
        assert nt.is_perfect_square(n) == (n in squares)
    assert not nt.is_perfect_square(-4)


def test_phi_of_primes_and_multiplicativity():
    for p in (2, 3, 5, 7, 97, 101):
        assert nt.phi(p) == p - 1
    for m, n in ((4, 9), (8, 15), (7, 10)):
        assert nt.phi(m * n) == nt.phi(m) * nt.phi(n)


@pytest.mark.parametrize("n,p", [(10, 2), (25, 5), (100, 3), (1, 7)])
def test_factorial_prime_power(n, p):
    value = math.factorial(n)
    count = 0
    while value % p == 0:
        value //= p
        count += 1
    assert nt.factorial_prime_power(n, p) == count


@pytest.mark.parametrize("value,base", [(255, 16), (1, 2), (123456789, 36), (42, 7)])
def test_base_conversion_round_trip(value, base):
    text = nt.decimal_to_base(value, base)
    assert int(text, base) == value
    assert nt.base_to_decimal(text, base) == value


def test_decimal_to_base_uses_upper_case():
    assert nt.decimal_to_base(255, 16) == format(255, "X")
    assert nt.decimal_to_base(0, 2) == "0"


def test_decimal_to_base_rejects_bad_base():
    with pytest.raises(ValueError):
        nt.decimal_to_base(10, 1)