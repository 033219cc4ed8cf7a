from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PrimeResult:
    n: int
    factor: int                      # least prime factor of n; n itself if prime; 1 for n == 1

    @property
    def cofactor(self) -> int:
        return self.n // self.factor if self.factor else 0

    @property
    def is_prime(self) -> bool:
        return self.n > 1 and self.factor == self.n

    def __iter__(self):
        # unpack as (n, factor)
        yield self.n
        yield self.factor
