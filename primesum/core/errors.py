"""Exception hierarchy for primesum.

All errors are caller-visible and non-retryable: a failure aborts the
current run and is never recovered by switching to another strategy.
"""


class PrimeSumError(Exception):
    """Base class for every error raised by primesum."""


class InvalidInputError(PrimeSumError, ValueError):
    """A candidate or construction parameter is outside its domain."""


class RangeExceededError(PrimeSumError, IndexError):
    """A precomputed oracle was queried at or beyond its limit.

    Args:
        value: The candidate that was queried.
        limit: Exclusive upper bound of the precomputed table.
    """

    def __init__(self, value: int, limit: int) -> None:
        self.value = value
        self.limit = limit
        super().__init__(
            f"Candidate {value} is outside the precomputed range [0, {limit})"
        )


class ConstructionMismatchError(PrimeSumError, ValueError):
    """An oracle cannot answer every candidate of the requested range.

    Raised during pipeline setup, before any candidate is queried.
    """

    def __init__(self, max_candidate: int, limit: int) -> None:
        self.max_candidate = max_candidate
        self.limit = limit
        super().__init__(
            f"Oracle answers candidates up to {max_candidate}, "
            f"but the range [1, {limit}) needs {limit - 1}"
        )
