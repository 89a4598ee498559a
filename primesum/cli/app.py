"""Typer application and global options."""

import logging
from typing import NoReturn

import typer
from rich.markup import escape
from rich.console import Console

from .. import __version__


app = typer.Typer(
    name="primesum",
    help="Sum the primes below a bound using interchangeable primality oracles.",
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"primesum {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def exit_with_error(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


# Register commands
from . import commands  # noqa: E402,F401
