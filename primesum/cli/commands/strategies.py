"""`primesum strategies` - list registered strategies."""

from rich.table import Table

from ...core.oracles import DEFAULT_STRATEGY, STRATEGIES
from ..app import app, console


@app.command("strategies")
def strategies_command() -> None:
    """List the available primality strategies."""
    table = Table(title="Strategies")
    table.add_column("Name", style="cyan")
    table.add_column("Class")
    table.add_column("Cost per query")

    for name, cls in STRATEGIES.items():
        label = f"{name} (default)" if name == DEFAULT_STRATEGY else name
        table.add_row(label, cls.__name__, cls.complexity)

    console.print(table)
