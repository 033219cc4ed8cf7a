# -----------------------------------------------------------------------------
#  report.py
#  Text reports built on the core: primes around n, and the fixture table
#  sampling the whole uint64 range
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter

from nearprime.fmt import colour_prime, format_elapsed, format_experiment, format_neighbor_row, format_semiprime
from nearprime.lpf import least_prime_factor
from nearprime.neighbors import next_prime, previous_prime
from nearprime.output_manager import OutputManager
from nearprime.result import PrimeResult
from nearprime.runtime import CFG
from nearprime.semiprime import semiprime_near
from nearprime.utility import U64_MAX, RangeExhausted, check_u64, power_of_two_exponent


def _short_time() -> float:
    return float(CFG("REPORT.SHORT_TIME", 0.0001))


# ---------- Primes around n ---------------------------------------------------

@dataclass
class Neighborhood:
    n: int
    previous: int
    previous_s: float
    next: int | None = None
    next_s: float = 0.0
    next_error: str | None = None          # set when no prime lies above n
    lpf: int | None = None
    semiprime: PrimeResult | None = None

    @property
    def is_prime(self) -> bool:
        return self.previous == self.n


def neighborhood(n: int) -> Neighborhood:
    """
    Time previous_prime(n) and, unless n is prime, next_prime(n); also the
    least prime factor and a nearby semiprime of n.

    RangeUnderflow from the previous-prime search propagates; running off
    the top of the range is recorded in next_error instead.
    """
    check_u64(n)
    t0 = perf_counter()
    prev = previous_prime(n)
    hood = Neighborhood(n=n, previous=prev, previous_s=perf_counter() - t0)
    if hood.is_prime:
        return hood

    t0 = perf_counter()
    try:
        hood.next = next_prime(n)
    except RangeExhausted as e:
        hood.next_error = str(e)
    hood.next_s = perf_counter() - t0
    hood.lpf = least_prime_factor(n)
    hood.semiprime = semiprime_near(n)
    return hood


def render_neighborhood(hood: Neighborhood, om: OutputManager) -> None:
    short = _short_time()
    if hood.is_prime:
        om.write(f"{colour_prime(str(hood.n))} is prime ({format_elapsed(hood.previous_s, short)})")
        return
    om.write(format_neighbor_row(hood.previous, "previous prime", format_elapsed(hood.previous_s, short)))
    if hood.next is not None:
        om.write(format_neighbor_row(hood.next, "next prime", format_elapsed(hood.next_s, short)))
    else:
        om.write(f"{'':>20}  # {hood.next_error}")
    if hood.lpf is not None:
        om.write(f"{'least prime factor:':>20}  {hood.lpf}")
    if hood.semiprime is not None:
        om.write(f"{'semiprime near:':>20}  {format_semiprime(hood.semiprime)}")


# ---------- Fixture table -----------------------------------------------------

@dataclass(frozen=True)
class ReportLine:
    n: int
    lpf: int
    comment: str = ""


def gen_targets(steps: int | None = None) -> list[int]:
    """12, then every multiple of U64_MAX // steps that fits in 64 bits."""
    if steps is None:
        steps = int(CFG("REPORT.STEPS", 16))
    if steps < 1:
        raise ValueError(f"steps must be positive, got {steps}")
    step = U64_MAX // steps
    targets = [12]
    n = step
    while n <= U64_MAX:
        targets.append(n)
        n += step
    return targets


def lines_for_target(n: int) -> list[ReportLine]:
    """Previous prime, the target itself and its nearby semiprime, sorted by value."""
    lines: list[ReportLine] = []
    pp = previous_prime(n)
    if pp != n:
        lines.append(ReportLine(pp, pp, "prime"))

    k = power_of_two_exponent(n)
    lines.append(ReportLine(n, least_prime_factor(n), f"2 ** {k}" if k is not None else ""))

    sp = semiprime_near(n)
    if sp.n != n:
        lines.append(ReportLine(sp.n, sp.factor, "semiprime"))

    return sorted(lines, key=lambda line: line.n)


def report_lines(targets: list[int] | None = None) -> list[ReportLine]:
    if targets is None:
        targets = gen_targets()
    out: list[ReportLine] = []
    for n in targets:
        out.extend(lines_for_target(n))
    out.append(ReportLine(U64_MAX, least_prime_factor(U64_MAX), "2 ** 64 - 1"))
    return out


def render_report(lines: list[ReportLine], om: OutputManager) -> None:
    for line in lines:
        om.write(format_experiment(line.n, line.lpf, line.comment))
