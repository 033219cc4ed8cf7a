# tests/test_semiprime.py
"""
Semiprime locator: semiprime_near, next_semiprime and the semiprime test.

Run: pytest -v
"""

from __future__ import annotations

import pytest
from sympy import factorint

from nearprime import (
    U64_MAX,
    U64_MAX_PRIME,
    PrimeResult,
    RangeExhausted,
    is_prime,
    is_semiprime,
    next_semiprime,
    semiprime_factors,
    semiprime_near,
)

# Semiprimes (OEIS A001358):
# 4, 6, 9, 10, 14, 15, 21, 22, 25, 26, 33, 34, 35, 38, 39, 46, 49 ...
SEMIPRIMES_UPTO_50 = [4, 6, 9, 10, 14, 15, 21, 22, 25, 26, 33, 34, 35, 38, 39, 46, 49]

# (2**32 - 5) is the largest 32-bit prime; its square is the result near the top
TOP_SQUARE = 4294967291 ** 2


def _is_semiprime_ref(n: int) -> bool:
    return n > 1 and sum(factorint(n).values()) == 2


def _assert_genuine(res: PrimeResult) -> None:
    s, f = res
    assert is_prime(f)
    assert s % f == 0
    assert is_prime(s // f)
    assert f <= s // f


# ---------- semiprime near ----------------------------------------------------

# target, (semiprime, smaller factor); None where only the result's validity is checked
SEMIPRIMES_NEAR = [
    (0, (4, 2)),
    (1, (4, 2)),
    (2, (4, 2)),
    (3, (4, 2)),
    (4, (4, 2)),
    (5, (4, 2)),
    (6, (6, 2)),
    (7, (9, 3)),
    (8, (9, 3)),
    (9, (9, 3)),
    (10, (10, 2)),
    (11, (9, 3)),
    (12, (9, 3)),
    (13, (15, 3)),
    (14, (14, 2)),
    (15, (15, 3)),
    (16, (15, 3)),
    (20, (21, 3)),
    (100, (119, 7)),
    (1000, (1147, 31)),
    (1000003 ** 3, None),
    (U64_MAX_PRIME, (TOP_SQUARE, 4294967291)),
    (U64_MAX, (TOP_SQUARE, 4294967291)),
]


@pytest.mark.parametrize("target,expected", SEMIPRIMES_NEAR, ids=[str(t) for t, _ in SEMIPRIMES_NEAR])
def test_semiprime_near(target, expected):
    res = semiprime_near(target)
    if expected is not None:
        assert tuple(res) == expected
    assert type(res.n) is int and type(res.factor) is int
    _assert_genuine(res)


def test_semiprime_near_top_of_range_is_the_square():
    assert semiprime_near(U64_MAX).n == 18446744030759878681


def test_semiprime_near_keeps_semiprime_targets():
    for n in SEMIPRIMES_UPTO_50:
        res = semiprime_near(n)
        assert res.n == n
        assert res.factor == min(factorint(n))


def test_semiprime_near_prefers_balanced_factors():
    # 2 × 499 = 998 is closer to 1000 than 1147, but the factors are far from sqrt(1000)
    res = semiprime_near(1000)
    assert res.n == 1147
    assert abs(res.n - 1000) > abs(998 - 1000)


def test_semiprime_near_results_are_genuine():
    for target in range(0, 600):
        _assert_genuine(semiprime_near(target))
    for target in (10 ** 12, 10 ** 15 + 37, 10 ** 18, 2 ** 63, 10 ** 19):
        res = semiprime_near(target)
        _assert_genuine(res)
        assert res.n <= U64_MAX


# ---------- semiprime test ----------------------------------------------------

def test_semiprime_factors_small_range():
    for n in range(0, 500):
        assert is_semiprime(n) is _is_semiprime_ref(n), n


@pytest.mark.parametrize("n,expected", [
    (4, PrimeResult(4, 2)),
    (33, PrimeResult(33, 3)),
    (49, PrimeResult(49, 7)),
    (1000003 * 1000033, PrimeResult(1000003 * 1000033, 1000003)),
    (TOP_SQUARE, PrimeResult(TOP_SQUARE, 4294967291)),
    (U64_MAX_PRIME, None),
    (U64_MAX, None),
    (8, None),
    (1000003 ** 3, None),
    (1, None),
    (0, None),
])
def test_semiprime_factors(n, expected):
    assert semiprime_factors(n) == expected


# ---------- next semiprime ----------------------------------------------------

NEXT_SEMIPRIMES = [
    (0, (4, 2)),
    (4, (4, 2)),
    (5, (6, 2)),
    (7, (9, 3)),
    (11, (14, 2)),
    (16, (21, 3)),
    (47, (49, 7)),
]


@pytest.mark.parametrize("n,expected", NEXT_SEMIPRIMES, ids=[str(n) for n, _ in NEXT_SEMIPRIMES])
def test_next_semiprime(n, expected):
    assert tuple(next_semiprime(n)) == expected


def test_next_semiprime_walks_the_sequence():
    n, seen = 0, []
    while len(seen) < len(SEMIPRIMES_UPTO_50):
        res = next_semiprime(n)
        seen.append(res.n)
        n = res.n + 1
    assert seen == SEMIPRIMES_UPTO_50


def test_next_semiprime_exhausts_range():
    with pytest.raises(RangeExhausted):
        next_semiprime(U64_MAX)
