# ABOUTME: The `libcat log` command for reviewing circulation history.
# ABOUTME: Prints the transaction log, oldest entry first.

import click
from rich.console import Console
from rich.markup import escape

from libcat.audit import TransactionLog
from libcat.catalog.errors import CatalogError
from libcat.cli.options import fail, library_paths

console = Console()


@click.command("log")
@click.option("--tail", type=int, default=None, help="Only show the last N entries.")
@click.pass_context
def log(ctx: click.Context, tail: int | None) -> None:
    """Show issue and return transactions."""
    transactions = TransactionLog(library_paths(ctx).transactions_file)
    try:
        entries = transactions.entries()
    except CatalogError as exc:
        fail(console, exc)

    if not entries:
        console.print("[yellow]No transactions recorded.[/yellow]")
        return

    if tail is not None and tail >= 0:
        entries = entries[-tail:] if tail else []

    for entry in entries:
        console.print(escape(entry), highlight=False)
