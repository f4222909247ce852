"""Command-line front end for enclosplit.

Examples::

    enclosplit split '"a,b",c' -s , -e DOUBLE_QUOTES
    enclosplit split ' a / (b/c) / ' -s / -e PARENTHESIS -p TRIM_SPACES --json
    enclosplit enclosures
"""

import json
import logging
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .constants import PROGRAM_NAME
from .enclosures import ENCLOSURES
from .errors import ConfigurationError, SplittingError
from .policies import POLICIES
from .splitter import new_splitter

console = Console()

app = typer.Typer(
    name=PROGRAM_NAME,
    help="Split text on a separator, ignoring separators inside quotes and brackets",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Route log records through rich; DEBUG when ``verbose``."""
    log_level = logging.DEBUG if verbose else logging.INFO
    handler = RichHandler(console=console, show_time=False, show_path=False)
    handler.setLevel(log_level)
    logging.basicConfig(
        level=log_level, format="%(message)s", handlers=[handler], force=True
    )
    return logging.getLogger(PROGRAM_NAME)


def _lookup(catalog: dict, names: list[str], what: str) -> list:
    found = []
    for name in names:
        key = name.upper().replace("-", "_")
        if key not in catalog:
            rprint(f"[red]Error:[/red] unknown {what} '{name}'")
            raise typer.Exit(2)
        found.append(catalog[key])
    return found


@app.command("split")
def split_command(
    text: str = typer.Argument(..., help="Text to split"),
    separator: str = typer.Option(",", "--separator", "-s", help="Separator character"),
    enclosure: Optional[list[str]] = typer.Option(
        None, "--enclosure", "-e", help="Enclosure name (repeatable)"
    ),
    policy: Optional[list[str]] = typer.Option(
        None, "--policy", "-p", help="Policy name (repeatable, applied in order)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print parts as a JSON array"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
) -> None:
    """Split TEXT and print one part per line."""
    setup_logging(verbose)
    enclosures = _lookup(ENCLOSURES, enclosure or [], "enclosure")
    policies = _lookup(POLICIES, policy or [], "policy")

    try:
        splitter = new_splitter(separator, *enclosures)
    except ConfigurationError as e:
        rprint(f"[red]Configuration Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    try:
        parts = splitter.split(text, *policies)
    except SplittingError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(parts, ensure_ascii=False))
    else:
        for part in parts:
            typer.echo(part)


@app.command("enclosures")
def list_enclosures() -> None:
    """List the named enclosures."""
    table = Table(title="Enclosures")
    table.add_column("Name", style="cyan")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Kind")
    table.add_column("Escape")
    for name, enc in ENCLOSURES.items():
        table.add_row(
            name,
            escape(enc.start),
            escape(enc.end),
            "quote" if enc.is_quote else "bracket",
            escape(enc.escape or ""),
        )
    console.print(table)


@app.command("policies")
def list_policies() -> None:
    """List the named policies."""
    table = Table(title="Policies")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    for name, value in POLICIES.items():
        table.add_row(name, type(value).__name__)
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
