# -----------------------------------------------------------------------------
#  Utility functions
#  Constants, errors and integer helpers shared by the engine and the CLI
# -----------------------------------------------------------------------------

from __future__ import annotations

import math
import os

U64_MAX = (1 << 64) - 1                 # 2 ** 64 - 1, composite
U64_MAX_PRIME = 18446744073709551557    # largest prime below 2 ** 64
I64_MAX = (1 << 63) - 1


class UserInputError(Exception):
    pass


class PrimeRangeError(Exception):
    """Base class for searches that run off either end of the uint64 range."""


class RangeExhausted(PrimeRangeError):
    """No prime exists at or above the starting point within 64 bits."""


class RangeUnderflow(PrimeRangeError):
    """No prime exists at or below the starting point (start < 2)."""


class OutOfRangeError(ValueError):
    """Argument is not an unsigned 64-bit integer."""


def check_u64(n: int, name: str = "n") -> int:
    """Return n unchanged if it is an int in [0, U64_MAX], else raise OutOfRangeError."""
    # bool is an int subclass; True/False are never meant as values here
    if isinstance(n, bool) or not isinstance(n, int):
        raise OutOfRangeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0 or n > U64_MAX:
        raise OutOfRangeError(f"{name}={n} is outside the uint64 range [0, {U64_MAX}]")
    return n


def isqrt_bound(n: int) -> int:
    """
    floor(sqrt(n)) for 0 <= n <= U64_MAX.

    The float square root is only a starting point: a double has 53 bits of
    mantissa, so near 2**64 it can be off by one in either direction. The
    result is nudged until r*r <= n < (r+1)*(r+1).
    """
    if n < 2:
        return n
    r = int(math.sqrt(float(n)) + 0.5)
    while r * r > n:
        r -= 1
    while (r + 1) * (r + 1) <= n:
        r += 1
    return r


def round_sqrt(n: int) -> int:
    """sqrt(n) rounded half away from zero (not banker's rounding)."""
    return math.floor(math.sqrt(float(n)) + 0.5)


def power_of_two_exponent(n: int) -> int | None:
    """Return k when n == 2 ** k for 2 <= k < 64, else None."""
    if n < 4 or n & (n - 1):
        return None
    k = n.bit_length() - 1
    return k if k < 64 else None


def validate_output_setting(output_file: str | None) -> str | None:
    """
    Validate the --output target.
    - None / "" => ok (screen only)
    - path/to/file => must not be a directory or a source file
    Returns the output_file unchanged, or raises ValueError.
    """
    FORBIDDEN_EXTENSIONS = {".py", ".md", ".toml"}

    if not output_file:
        return output_file

    if output_file.endswith(("/", os.sep)) or os.path.isdir(output_file):
        raise ValueError(f"Output must be a file, not a directory: {output_file}")

    ext = os.path.splitext(os.path.basename(output_file))[1].lower()
    if ext in FORBIDDEN_EXTENSIONS:
        raise ValueError(f"Forbidden output file extension: {ext}")

    return output_file


def typename(v: object) -> str:
    return type(v).__name__


def flatten_dotted(d: dict, prefix: str = "") -> dict[str, object]:
    out: dict[str, object] = {}
    for k, v in (d or {}).items():
        key = f"{prefix}.{k}" if prefix else str(k)
        if isinstance(v, dict):
            out.update(flatten_dotted(v, key))
        else:
            out[key] = v
    return out
