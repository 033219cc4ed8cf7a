# -----------------------------------------------------------------------------
#  lpf.py
#  Least prime factor of unsigned 64-bit integers
# -----------------------------------------------------------------------------

from __future__ import annotations

import gmpy2
from sympy import factorint, isprime

from nearprime.result import PrimeResult
from nearprime.runtime import shortcut_backend, shortcut_limit, trial_limit
from nearprime.utility import check_u64, isqrt_bound


def shortcut_verdict(n: int) -> bool | None:
    """
    Primality verdict from the configured compositeness test, or None when no
    test applies to n (disabled, or n above ENGINE.SHORTCUT_LIMIT).

    Both backends are exact below 2**64:
      - bpsw:  strong Fermat base 2 + strong Lucas (gmpy2)
      - sympy: sympy.isprime (Miller-Rabin with a fixed base set + BPSW)
    Callers guarantee n is odd, not a multiple of 3 and at least 5.
    """
    backend = shortcut_backend()
    if backend == "none" or n > shortcut_limit():
        return None
    if backend == "bpsw":
        return bool(gmpy2.is_strong_bpsw_prp(n))
    return bool(isprime(n))


def _trial_divide(n: int, limit: int) -> int | None:
    """First divisor of n in 5, 7, 11, 13, ... (6k-1, 6k+1) up to limit inclusive."""
    i = 5
    while i <= limit:
        if n % i == 0:
            return i
        j = i + 2
        if n % j == 0:
            return j if j <= limit else None
        i += 6
    return None


def _wheel_lpf(n: int) -> int:
    """Least prime factor of n (n > 3, coprime to 6) without any shortcut."""
    root = isqrt_bound(n)
    cap = trial_limit()
    if not cap or cap >= root:
        d = _trial_divide(n, root)
        return n if d is None else d

    d = _trial_divide(n, cap)
    if d is not None:
        return d
    # Every prime factor is above cap; a complete factorisation gives the least one.
    return int(min(factorint(n)))  # keys may be gmpy2.mpz


def least_prime_factor(n: int) -> int:
    """
    Return the smallest prime factor of n.
    Returns n itself when n is prime and 1 when n == 1. Every even n,
    including 0, gives 2.
    """
    check_u64(n)
    if n == 1:
        return 1
    if n % 2 == 0:
        return 2
    if n % 3 == 0:
        return 3

    if shortcut_verdict(n):
        return n
    return _wheel_lpf(n)


def factorize(n: int) -> PrimeResult:
    """(n, least prime factor of n)."""
    return PrimeResult(n, least_prime_factor(n))
