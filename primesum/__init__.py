"""primesum: sum of primes below a bound, with pluggable primality oracles."""

__version__ = "0.1.0"

from .core import (
    PrimeSumError,
    InvalidInputError,
    RangeExceededError,
    ConstructionMismatchError,
    PrimalityOracle,
    STRATEGIES,
    get_oracle,
)
from .pipeline import PrimeSumPipeline, sum_primes_below

__all__ = [
    "__version__",
    "PrimeSumError",
    "InvalidInputError",
    "RangeExceededError",
    "ConstructionMismatchError",
    "PrimalityOracle",
    "STRATEGIES",
    "get_oracle",
    "PrimeSumPipeline",
    "sum_primes_below",
]
