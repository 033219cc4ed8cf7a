from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("nearprime")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .lpf import factorize, least_prime_factor
from .neighbors import next_prime, previous_prime, primes_between
from .primality import is_prime, is_prime_direct
from .result import PrimeResult
from .runtime import APPLY, CFG
from .semiprime import is_semiprime, next_semiprime, semiprime_factors, semiprime_near
from .utility import (
    I64_MAX,
    U64_MAX,
    U64_MAX_PRIME,
    OutOfRangeError,
    PrimeRangeError,
    RangeExhausted,
    RangeUnderflow,
)

__all__ = [
    "APPLY",
    "CFG",
    "I64_MAX",
    "U64_MAX",
    "U64_MAX_PRIME",
    "OutOfRangeError",
    "PrimeRangeError",
    "PrimeResult",
    "RangeExhausted",
    "RangeUnderflow",
    "__version__",
    "factorize",
    "is_prime",
    "is_prime_direct",
    "is_semiprime",
    "least_prime_factor",
    "next_prime",
    "next_semiprime",
    "previous_prime",
    "primes_between",
    "semiprime_factors",
    "semiprime_near",
]
