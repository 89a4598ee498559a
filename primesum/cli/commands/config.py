"""`primesum config` - inspect the effective configuration."""

import typer
from rich.table import Table

from ...config import PrimeSumConfig, load_config
from ...core.errors import PrimeSumError
from ..app import app, console, exit_with_error


@app.command("config")
def config_command(
    action: str = typer.Argument("show", help="Action to perform: show"),
) -> None:
    """Show configuration resolved from defaults and PRIMESUM_* variables."""
    if action != "show":
        exit_with_error(f"Unknown action '{action}'. Available: show")

    try:
        config = load_config()
    except PrimeSumError as e:
        exit_with_error(str(e))

    table = Table(title="Configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_column("Environment variable")

    for key, value in config.model_dump().items():
        shown = "(limit)" if key == "sieve_limit" and value is None else str(value)
        table.add_row(key, shown, PrimeSumConfig.env_var(key))

    console.print(table)
