"""Trial division strategies.

Naive, half-bound and third-bound oracles all cost O(n) per query; the
bounded variants only shrink the constant factor. The square-root bound
is the asymptotic improvement, O(sqrt(n)).
"""

from math import isqrt

from .base import TrialDivisionOracle


class NaiveOracle(TrialDivisionOracle):
    """Try every divisor in [2, n)."""

    name = "naive"
    complexity = "O(n)"

    def _divisors(self, n: int) -> range:
        return range(2, n)


class HalfBoundOracle(TrialDivisionOracle):
    """Try divisors in [2, n // 2]; no proper divisor exceeds n / 2."""

    name = "half"
    complexity = "O(n)"

    def _divisors(self, n: int) -> range:
        return range(2, n // 2 + 1)


class ThirdBoundOddOracle(TrialDivisionOracle):
    """Reject even numbers, then try odd divisors in [3, n // 3].

    An odd composite has its smallest factor >= 3, so its largest proper
    divisor is at most n / 3.
    """

    name = "third-odd"
    complexity = "O(n)"

    def _is_prime(self, n: int) -> bool:
        if n == 3:
            return True
        if n % 2 == 0:
            return False
        return super()._is_prime(n)

    def _divisors(self, n: int) -> range:
        return range(3, n // 3 + 1, 2)


class SqrtBoundOracle(TrialDivisionOracle):
    """Try divisors in [2, isqrt(n)].

    ``math.isqrt`` is exact, so perfect squares always test their root and
    no floating point correction is needed at any magnitude.
    """

    name = "sqrt"
    complexity = "O(sqrt(n))"

    def _divisors(self, n: int) -> range:
        return range(2, isqrt(n) + 1)
