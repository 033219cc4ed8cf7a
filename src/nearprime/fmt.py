# src/nearprime/fmt.py
from __future__ import annotations

import re

from colorama import Fore, Style

from nearprime.result import PrimeResult

# Single source of truth for ANSI stripping
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(s: str | None) -> str:
    """Return s with ANSI escape sequences removed."""
    return "" if s is None else ANSI_RE.sub("", s)


def format_elapsed(seconds: float, short_time: float = 0.0001) -> str:
    """'< 0.0001s' for timings under short_time, else seconds with millis."""
    if seconds < short_time:
        return f"< {short_time}s"
    return f"{seconds:0.3f}s"


def format_semiprime(res: PrimeResult) -> str:
    """'1147 = 31 × 37'."""
    return f"{res.n} = {res.factor} × {res.cofactor}"


def format_experiment(n: int, lpf: int, comment: str = "") -> str:
    """
    One fixture row, e.g.
        Experiment(      17592186044416,                    2),  # 2 ** 44
    """
    tail = f"  # {comment}" if comment else ""
    return f"Experiment({n:20d}, {lpf:20d}),{tail}"


def format_neighbor_row(value: int, label: str, elapsed: str) -> str:
    """Fixed-width row for the find-primes report: value, label and timing."""
    return f"{value:20d}  {Style.DIM}#{Style.RESET_ALL} {label} ({elapsed})"


def colour_prime(text: str) -> str:
    return f"{Fore.GREEN}{Style.BRIGHT}{text}{Style.RESET_ALL}"
