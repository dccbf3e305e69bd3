# ABOUTME: The `libcat find` command for looking up a book by ISBN.
# ABOUTME: Shows every field of the matching catalog entry.

import click
from rich.console import Console
from rich.table import Table

from libcat.catalog.errors import CatalogError
from libcat.cli.commands.ls_cmd import last_issued_display
from libcat.cli.options import fail, library_paths, open_store

console = Console()


@click.command("find")
@click.argument("isbn")
@click.pass_context
def find(ctx: click.Context, isbn: str) -> None:
    """Show the book with the given ISBN."""
    try:
        store = open_store(library_paths(ctx))
    except CatalogError as exc:
        fail(console, exc)

    record = store.find_book(isbn.strip())
    if record is None:
        console.print(f"[red]Book {isbn} not found.[/red]")
        raise SystemExit(1)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=12)
    table.add_column("Value")

    table.add_row("Title", record.title)
    table.add_row("Author", record.author)
    table.add_row("ISBN", record.isbn)
    table.add_row("Status", record.status.value)
    table.add_row("Last Issued", last_issued_display(record))
    if record.current_borrower:
        table.add_row("Borrower", record.current_borrower)

    console.print(table)
