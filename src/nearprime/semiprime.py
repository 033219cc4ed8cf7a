# -----------------------------------------------------------------------------
#  semiprime.py
#  Products of exactly two primes near a target
# -----------------------------------------------------------------------------

from __future__ import annotations

from nearprime.lpf import least_prime_factor
from nearprime.neighbors import next_prime, previous_prime
from nearprime.primality import is_prime
from nearprime.result import PrimeResult
from nearprime.runtime import debug_log
from nearprime.utility import U64_MAX, RangeExhausted, RangeUnderflow, check_u64, round_sqrt

_SMALLEST_SEMIPRIME = 4  # 2 × 2


def semiprime_factors(n: int) -> PrimeResult | None:
    """
    (n, p) when n = p × q with p <= q both prime, else None.
    Covers prime squares; excludes primes, 0 and 1.
    """
    check_u64(n)
    if n < _SMALLEST_SEMIPRIME:
        return None
    a = least_prime_factor(n)
    if a == n:
        return None
    if is_prime(n // a):
        return PrimeResult(n, a)
    return None


def is_semiprime(n: int) -> bool:
    return semiprime_factors(n) is not None


def semiprime_near(target: int) -> PrimeResult:
    """
    A semiprime close to target, with its smaller factor.

    The search prefers balanced factors: when target is not itself a
    semiprime, the result is a' × b' with a' the prime at or below
    round(sqrt(target)) and b' the prime at or above target // a'. This is
    not always the semiprime numerically closest to target.

    If a' × b' would leave the 64-bit range, a' × a' is returned instead.
    Raises RangeExhausted if the search for b' runs off the top of the range.
    """
    check_u64(target)

    if target >= _SMALLEST_SEMIPRIME:
        a = least_prime_factor(target)
        b = target // a
        if a == b or is_prime(b):
            return PrimeResult(target, a)

    root = max(round_sqrt(target), 2)  # 2 is the smallest prime
    if is_prime(root):
        return PrimeResult(root * root, root)

    try:
        a = previous_prime(root)
    except RangeUnderflow:
        a = next_prime(root)
    b = next_prime(target // a)

    product = a * b
    if product > U64_MAX:
        debug_log(f"semiprime_near({target}): {a} × {b} overflows, using {a}²")
        return PrimeResult(a * a, a)
    return PrimeResult(product, a)


def next_semiprime(n: int) -> PrimeResult:
    """
    Smallest semiprime >= n, with its smaller factor.
    Raises RangeExhausted when none fits in 64 bits.
    """
    check_u64(n)
    m = max(n, _SMALLEST_SEMIPRIME)
    while m <= U64_MAX:
        found = semiprime_factors(m)
        if found is not None:
            return found
        m += 1
    raise RangeExhausted(f"no semiprimes >= {n} in uint64 range")
