"""`primesum bench` - time strategies against each other."""

import typer
from rich.table import Table

from ...core.errors import PrimeSumError
from ...core.oracles import STRATEGIES, get_oracle_class
from ...pipeline import benchmark
from ..app import app, console, exit_with_error


@app.command("bench")
def bench_command(
    limit: int = typer.Option(
        10_000, "--limit", "-n", help="Exclusive upper bound for every run."
    ),
    strategies: list[str] | None = typer.Option(
        None, "--strategy", "-s", help="Strategy to time (repeatable; default all)."
    ),
) -> None:
    """Time each strategy over the same range and check they agree."""
    names = strategies or list(STRATEGIES)

    results = []
    try:
        for name in names:
            get_oracle_class(name)
        for name in names:
            results.append(benchmark(name, limit))
    except PrimeSumError as e:
        exit_with_error(str(e))

    table = Table(title=f"Sum of primes below {limit}")
    table.add_column("Strategy", style="cyan")
    table.add_column("Sum", justify="right")
    table.add_column("Setup (s)", justify="right")
    table.add_column("Run (s)", justify="right")
    table.add_column("Total (s)", justify="right")

    for r in sorted(results, key=lambda r: r.total_seconds):
        table.add_row(
            r.strategy,
            str(r.total),
            f"{r.setup_seconds:.4f}",
            f"{r.run_seconds:.4f}",
            f"{r.total_seconds:.4f}",
        )
    console.print(table)

    totals = {r.total for r in results}
    if len(totals) > 1:
        exit_with_error("Strategies disagree on the sum")
