"""Core primality layer: oracles, registry and errors."""

from .errors import (
    PrimeSumError,
    InvalidInputError,
    RangeExceededError,
    ConstructionMismatchError,
)
from .oracles import (
    PrimalityOracle,
    STRATEGIES,
    DEFAULT_STRATEGY,
    get_oracle,
    get_oracle_class,
)

__all__ = [
    # Errors
    "PrimeSumError",
    "InvalidInputError",
    "RangeExceededError",
    "ConstructionMismatchError",
    # Oracles
    "PrimalityOracle",
    "STRATEGIES",
    "DEFAULT_STRATEGY",
    "get_oracle",
    "get_oracle_class",
]
