"""`primesum sum` - print the sum of primes below the limit."""

import typer

from ...config import load_config
from ...core.errors import PrimeSumError
from ...core.oracles import get_oracle
from ...pipeline import PrimeSumPipeline
from ..app import app, console, exit_with_error


@app.command("sum")
def sum_command(
    limit: int | None = typer.Option(
        None, "--limit", "-n", help="Exclusive upper bound (default 2000000)."
    ),
    strategy: str | None = typer.Option(
        None, "--strategy", "-s", help="Primality strategy (see `strategies`)."
    ),
    sieve_limit: int | None = typer.Option(
        None, "--sieve-limit", help="Sieve table size (default: the limit)."
    ),
) -> None:
    """Sum all primes strictly below the limit."""
    try:
        config = load_config(limit=limit, strategy=strategy, sieve_limit=sieve_limit)
        oracle = get_oracle(config.strategy, config.effective_sieve_limit)
        result = PrimeSumPipeline(oracle).run(config.limit)
    except PrimeSumError as e:
        exit_with_error(str(e))

    console.print(str(result.total))
