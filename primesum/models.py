"""Pydantic models for run results."""

from pydantic import BaseModel, Field


class AggregationResult(BaseModel):
    """Outcome of summing primes below a limit with one strategy."""

    strategy: str = Field(description="Registry name of the oracle used")
    limit: int = Field(gt=0, description="Exclusive upper bound of candidates")
    total: int = Field(ge=0, description="Sum of all primes below limit")
    prime_count: int = Field(ge=0, description="Number of primes found")


class BenchmarkResult(BaseModel):
    """Timing of one strategy over a full run."""

    strategy: str
    limit: int = Field(gt=0)
    total: int = Field(ge=0)
    setup_seconds: float = Field(ge=0)
    run_seconds: float = Field(ge=0)

    @property
    def total_seconds(self) -> float:
        return self.setup_seconds + self.run_seconds
