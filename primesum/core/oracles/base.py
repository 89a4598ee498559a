"""Abstract base classes for primality oracles."""

from abc import ABC, abstractmethod
from numbers import Integral

from ..errors import InvalidInputError


class PrimalityOracle(ABC):
    """Abstract base class for primality oracles.

    All oracles answer ``is_prime`` with the same signature and the same
    results so they can be swapped without touching the caller. Input
    validation and the ``1``/``2`` special cases live here; subclasses
    only see candidates ``n >= 3``.
    """

    #: Registry name used to select the strategy.
    name: str = ""

    #: Cost of a single query, for display.
    complexity: str = ""

    @classmethod
    def build(cls, limit: int) -> "PrimalityOracle":
        """Construct an oracle able to answer every candidate below ``limit``.

        Stateless strategies ignore ``limit``.
        """
        return cls()

    @property
    def max_candidate(self) -> int | None:
        """Largest candidate this oracle can answer, or None if unbounded."""
        return None

    def is_prime(self, n: int) -> bool:
        """Return True iff ``n`` is prime.

        Raises:
            InvalidInputError: If ``n`` is not an integer >= 1.
        """
        if isinstance(n, bool) or not isinstance(n, Integral):
            raise InvalidInputError(f"Candidate must be an integer, got {n!r}")
        n = int(n)
        if n < 1:
            raise InvalidInputError(f"Candidate must be >= 1, got {n}")

        if n == 1:
            return False
        if n == 2:
            return True
        return self._is_prime(n)

    @abstractmethod
    def _is_prime(self, n: int) -> bool:
        """Strategy-specific test for a validated candidate ``n >= 3``."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class TrialDivisionOracle(PrimalityOracle):
    """Base for strategies that search a range of candidate divisors.

    Subclasses only define the divisor range, so the cost of a query is
    the length of that range. Instances hold no state and can be shared.
    """

    @abstractmethod
    def _divisors(self, n: int) -> range:
        """Candidate divisors of ``n`` to try, in increasing order."""
        ...

    def _is_prime(self, n: int) -> bool:
        for d in self._divisors(n):
            if n % d == 0:
                return False
        return True
