"""Sieve of Eratosthenes oracle."""

import logging
from math import isqrt
from numbers import Integral

import numpy as np

from ..errors import InvalidInputError, RangeExceededError
from .base import PrimalityOracle


logger = logging.getLogger(__name__)


def prime_flags_below(limit: int) -> np.ndarray:
    """Return a boolean array where flags[i] is True iff i is prime.

    Covers [0, limit). Multiples of each prime are struck starting from
    its square.

    Args:
        limit: Exclusive upper bound (>= 2)

    Returns:
        Boolean array of length ``limit``
    """
    flags = np.ones(limit, dtype=bool)
    flags[:2] = False
    for p in range(2, isqrt(limit - 1) + 1):
        if flags[p]:
            flags[p * p :: p] = False
    return flags


class SieveOracle(PrimalityOracle):
    """Precomputed primality table over [0, limit).

    Construction is O(L log log L) time and O(L) space; queries are a
    single lookup. The table is read-only once built, so one instance can
    be shared between readers.

    Args:
        limit: Exclusive upper bound of answerable candidates.

    Raises:
        InvalidInputError: If ``limit`` cannot cover at least 1 and 2.
    """

    name = "sieve"
    complexity = "O(1) after O(L log log L) setup"

    def __init__(self, limit: int) -> None:
        if isinstance(limit, bool) or not isinstance(limit, Integral) or limit < 3:
            raise InvalidInputError(
                f"Sieve limit must be an integer >= 3, got {limit!r}"
            )
        limit = int(limit)
        self._limit = limit
        logger.debug(f"[Sieve] building table - limit={limit}")
        flags = prime_flags_below(limit)
        flags.setflags(write=False)
        self._flags = flags
        logger.debug(f"[Sieve] table ready - primes={int(flags.sum())}")

    @classmethod
    def build(cls, limit: int) -> "SieveOracle":
        return cls(limit)

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def max_candidate(self) -> int:
        return self._limit - 1

    def _is_prime(self, n: int) -> bool:
        if n >= self._limit:
            raise RangeExceededError(n, self._limit)
        return bool(self._flags[n])

    def __repr__(self) -> str:
        return f"SieveOracle(limit={self._limit})"
