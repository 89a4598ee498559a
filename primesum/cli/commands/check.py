"""`primesum check` - test a single candidate."""

import typer

from ...config import load_config
from ...core.errors import PrimeSumError
from ...core.oracles import get_oracle
from ..app import app, console, exit_with_error


@app.command("check")
def check_command(
    n: int = typer.Argument(..., help="Candidate to test."),
    strategy: str | None = typer.Option(
        None, "--strategy", "-s", help="Primality strategy."
    ),
    sieve_limit: int | None = typer.Option(
        None, "--sieve-limit", help="Sieve table size (default: the limit)."
    ),
) -> None:
    """Report whether N is prime.

    The sieve is sized from configuration, not from N; candidates beyond
    its table are reported as errors.
    """
    try:
        config = load_config(strategy=strategy, sieve_limit=sieve_limit)
        oracle = get_oracle(config.strategy, config.effective_sieve_limit)
        prime = oracle.is_prime(n)
    except PrimeSumError as e:
        exit_with_error(str(e))

    console.print(f"{n} is prime" if prime else f"{n} is not prime")
