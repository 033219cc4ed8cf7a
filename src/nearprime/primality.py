# -----------------------------------------------------------------------------
#  primality.py
#  Exact primality for unsigned 64-bit integers
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache

from nearprime.lpf import least_prime_factor, shortcut_verdict
from nearprime.utility import check_u64, isqrt_bound


@lru_cache(maxsize=4096)
def _isprime_lru(n: int) -> bool:
    """Process-wide cache for primality of n (the verdict is exact, so any backend may fill it)."""
    if n % 2 == 0 or n % 3 == 0:
        return n in (2, 3)
    sc = shortcut_verdict(n)
    if sc is not None:
        return sc
    return least_prime_factor(n) == n


def is_prime(n: int) -> bool:
    """
    True when n is prime, i.e. n > 1 and least_prime_factor(n) == n.

    If the configured compositeness test covers n its verdict is used as is;
    otherwise the least prime factor is computed.
    """
    check_u64(n)
    if n <= 1:
        return False
    return _isprime_lru(n)


def is_prime_direct(n: int) -> bool:
    """
    Trial division by 2, 3 and 6k±1 up to sqrt(n), no shortcut and no cache.
    Same answers as is_prime(); meant for small n and cross-checks.
    """
    check_u64(n)
    if n <= 3:
        return n > 1
    if n % 2 == 0 or n % 3 == 0:
        return False
    limit = isqrt_bound(n)
    i = 5
    while i <= limit:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def clear_cache() -> None:
    _isprime_lru.cache_clear()
