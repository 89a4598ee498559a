"""Primality oracles and the strategy registry.

Strategies (cheapest to write first, fastest last):
    naive      - every divisor in [2, n)
    half       - divisors in [2, n // 2]
    third-odd  - evens rejected, odd divisors in [3, n // 3]
    sqrt       - divisors in [2, isqrt(n)]
    sieve      - precomputed table over [0, limit)
"""

from ..errors import InvalidInputError
from .base import PrimalityOracle, TrialDivisionOracle
from .sieve import SieveOracle, prime_flags_below
from .trial import HalfBoundOracle, NaiveOracle, SqrtBoundOracle, ThirdBoundOddOracle


STRATEGIES: dict[str, type[PrimalityOracle]] = {
    cls.name: cls
    for cls in (
        NaiveOracle,
        HalfBoundOracle,
        ThirdBoundOddOracle,
        SqrtBoundOracle,
        SieveOracle,
    )
}

DEFAULT_STRATEGY = SieveOracle.name


def get_oracle_class(name: str) -> type[PrimalityOracle]:
    """Look up a strategy class by registry name.

    Raises:
        InvalidInputError: If no strategy is registered under ``name``.
    """
    try:
        return STRATEGIES[name]
    except KeyError:
        available = ", ".join(STRATEGIES)
        raise InvalidInputError(
            f"Unknown strategy '{name}'. Available: {available}"
        ) from None


def get_oracle(name: str, limit: int) -> PrimalityOracle:
    """Build the named oracle for candidates below ``limit``."""
    return get_oracle_class(name).build(limit)


__all__ = [
    "PrimalityOracle",
    "TrialDivisionOracle",
    "NaiveOracle",
    "HalfBoundOracle",
    "ThirdBoundOddOracle",
    "SqrtBoundOracle",
    "SieveOracle",
    "prime_flags_below",
    "STRATEGIES",
    "DEFAULT_STRATEGY",
    "get_oracle_class",
    "get_oracle",
]
