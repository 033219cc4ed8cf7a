# -----------------------------------------------------------------------------
#  neighbors.py
#  Nearest prime at or above / at or below a given value
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterator
from time import perf_counter

from nearprime.primality import is_prime
from nearprime.runtime import debug_log
from nearprime.utility import U64_MAX, RangeExhausted, RangeUnderflow, check_u64


def next_prime(n: int) -> int:
    """
    Smallest prime >= n. Returns n itself when n is prime and 2 when n < 2.

    Raises RangeExhausted when no prime exists between n and 2**64 - 1,
    which only happens above U64_MAX_PRIME.
    """
    check_u64(n)
    if n < 2:
        return 2
    if is_prime(n):
        return n

    t0 = perf_counter()
    candidate = n | 1  # skip even
    tested = 0
    while candidate < U64_MAX:
        tested += 1
        if is_prime(candidate):
            debug_log(f"next_prime({n}) = {candidate}: {tested} candidates in {perf_counter() - t0:.6f}s")
            return candidate
        candidate += 2
    raise RangeExhausted(f"no primes >= {n} in uint64 range")


def previous_prime(n: int) -> int:
    """
    Largest prime <= n. Returns n itself when n is prime.

    Raises RangeUnderflow when n < 2.
    """
    check_u64(n)
    if is_prime(n):
        return n

    t0 = perf_counter()
    candidate = n - 1 if n % 2 == 0 else n  # skip even
    tested = 0
    while candidate >= 2:
        tested += 1
        if is_prime(candidate):
            debug_log(f"previous_prime({n}) = {candidate}: {tested} candidates in {perf_counter() - t0:.6f}s")
            return candidate
        candidate -= 2
    raise RangeUnderflow("no primes < 2")


def primes_between(lo: int, hi: int) -> Iterator[int]:
    """Yield the primes p with lo <= p <= hi in ascending order."""
    check_u64(lo, "lo")
    check_u64(hi, "hi")
    p = lo
    while p <= hi:
        try:
            p = next_prime(p)
        except RangeExhausted:
            return
        if p > hi:
            return
        yield p
        p += 1
