"""CLI commands for primesum."""

from . import (
    sum,
    check,
    strategies,
    bench,
    config,
)

__all__ = [
    "sum",
    "check",
    "strategies",
    "bench",
    "config",
]
