"""Aggregation pipeline: sum every prime below a limit.

The pipeline depends only on the PrimalityOracle interface. Every
candidate in [1, limit) is queried in increasing order; any skipping
(e.g. of even numbers) belongs inside an oracle, never here.
"""

import logging
import time
from numbers import Integral
from typing import Callable

from .core.errors import ConstructionMismatchError, InvalidInputError
from .core.oracles import DEFAULT_STRATEGY, PrimalityOracle, get_oracle
from .models import AggregationResult, BenchmarkResult


logger = logging.getLogger(__name__)

# Type for progress callbacks: (candidates_done, candidates_total)
ProgressCallback = Callable[[int, int], None]


def _validate_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, Integral) or limit < 1:
        raise InvalidInputError(f"Limit must be a positive integer, got {limit!r}")
    return int(limit)


class PrimeSumPipeline:
    """Drives one oracle over a candidate range and folds the primes.

    Args:
        oracle: The strategy answering primality queries.
        on_progress: Optional callback invoked every ``progress_every``
            candidates and after the last candidate.
        progress_every: Candidate interval between progress callbacks.
    """

    def __init__(
        self,
        oracle: PrimalityOracle,
        on_progress: ProgressCallback | None = None,
        progress_every: int = 100_000,
    ) -> None:
        if progress_every < 1:
            raise InvalidInputError(
                f"progress_every must be >= 1, got {progress_every}"
            )
        self.oracle = oracle
        self.on_progress = on_progress
        self.progress_every = progress_every

    def check_capacity(self, limit: int) -> None:
        """Fail before any query if the oracle cannot cover [1, limit).

        Raises:
            InvalidInputError: If ``limit`` is not a positive integer.
            ConstructionMismatchError: If the oracle's table is too small.
        """
        limit = _validate_limit(limit)
        max_candidate = self.oracle.max_candidate
        if max_candidate is not None and max_candidate < limit - 1:
            raise ConstructionMismatchError(max_candidate, limit)

    def run(self, limit: int) -> AggregationResult:
        """Sum all primes in [1, limit)."""
        limit = _validate_limit(limit)
        self.check_capacity(limit)

        candidates = limit - 1
        logger.info(
            f"[Pipeline] run starting - strategy={self.oracle.name}, limit={limit}"
        )

        total = 0
        count = 0
        is_prime = self.oracle.is_prime
        for n in range(1, limit):
            if is_prime(n):
                total += n
                count += 1
            if self.on_progress and (n % self.progress_every == 0 or n == candidates):
                self.on_progress(n, candidates)

        logger.info(f"[Pipeline] run complete - primes={count}, total={total}")
        return AggregationResult(
            strategy=self.oracle.name,
            limit=limit,
            total=total,
            prime_count=count,
        )


def sum_primes_below(limit: int, strategy: str = DEFAULT_STRATEGY) -> int:
    """Return the sum of all primes below ``limit`` using a named strategy."""
    limit = _validate_limit(limit)
    oracle = get_oracle(strategy, max(limit, 3))
    return PrimeSumPipeline(oracle).run(limit).total


def benchmark(strategy: str, limit: int) -> BenchmarkResult:
    """Time oracle construction and a full run for one strategy."""
    limit = _validate_limit(limit)

    start = time.perf_counter()
    oracle = get_oracle(strategy, max(limit, 3))
    setup_seconds = time.perf_counter() - start

    start = time.perf_counter()
    result = PrimeSumPipeline(oracle).run(limit)
    run_seconds = time.perf_counter() - start

    logger.info(
        f"[Bench] {strategy} - setup={setup_seconds:.4f}s, run={run_seconds:.4f}s"
    )
    return BenchmarkResult(
        strategy=strategy,
        limit=limit,
        total=result.total,
        setup_seconds=setup_seconds,
        run_seconds=run_seconds,
    )
