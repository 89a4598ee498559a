"""Run configuration.

Values come from defaults, then ``PRIMESUM_*`` environment variables.
CLI options override both.

    PRIMESUM_LIMIT         exclusive upper bound (default 2000000)
    PRIMESUM_STRATEGY      strategy name (default "sieve")
    PRIMESUM_SIEVE_LIMIT   sieve table size (default: the limit)
"""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.errors import InvalidInputError
from .core.oracles import DEFAULT_STRATEGY, STRATEGIES


DEFAULT_LIMIT = 2_000_000


class PrimeSumConfig(BaseSettings):
    """Effective configuration for a run."""

    limit: int = Field(default=DEFAULT_LIMIT, gt=0)
    strategy: str = DEFAULT_STRATEGY
    sieve_limit: int | None = Field(default=None, gt=2)

    # env prefix PRIMESUM_*
    model_config = SettingsConfigDict(
        env_prefix="PRIMESUM_", env_ignore_empty=True, extra="ignore"
    )

    @field_validator("strategy")
    @classmethod
    def _known_strategy(cls, v: str) -> str:
        if v not in STRATEGIES:
            raise ValueError(f"Unknown strategy '{v}'")
        return v

    @property
    def effective_sieve_limit(self) -> int:
        """Table size used when the sieve strategy is built."""
        return self.sieve_limit if self.sieve_limit is not None else max(self.limit, 3)

    @classmethod
    def env_var(cls, field: str) -> str:
        """Environment variable that sets ``field``."""
        return f"{cls.model_config['env_prefix']}{field}".upper()


def load_config(**overrides) -> PrimeSumConfig:
    """Load configuration from the environment, then apply overrides.

    Args:
        **overrides: Field values that take precedence; None is ignored

    Returns:
        Validated PrimeSumConfig

    Raises:
        InvalidInputError: If any value fails validation.
    """
    try:
        return PrimeSumConfig(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidInputError(f"Invalid configuration: {messages}") from e
