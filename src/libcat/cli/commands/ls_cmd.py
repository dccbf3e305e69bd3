# ABOUTME: The `libcat ls` command for listing cataloged books.
# ABOUTME: Displays a Rich table of every book with its status and last issue date.

import click
from rich.console import Console
from rich.table import Table

from libcat.catalog.codec import format_timestamp
from libcat.catalog.errors import CatalogError
from libcat.catalog.types import BookRecord, BookStatus
from libcat.cli.options import fail, library_paths, open_store

console = Console()

_STATUS_STYLES = {
    BookStatus.AVAILABLE: "green",
    BookStatus.ISSUED: "yellow",
    BookStatus.LOST: "red",
}


def last_issued_display(record: BookRecord) -> str:
    """Last issue date for display, or 'never' for the sentinel."""
    if not record.has_been_issued:
        return "never"
    return format_timestamp(record.last_issued_date)


@click.command("ls")
@click.option(
    "--status",
    "status_filter",
    type=click.Choice([status.value for status in BookStatus]),
    default=None,
    help="Only show books with this status.",
)
@click.pass_context
def ls(ctx: click.Context, status_filter: str | None) -> None:
    """List all books in the catalog."""
    try:
        store = open_store(library_paths(ctx))
    except CatalogError as exc:
        fail(console, exc)

    records = store.list_books()
    if status_filter:
        records = [r for r in records if r.status.value == status_filter]

    if not records:
        console.print("[yellow]No books in the catalog.[/yellow]")
        return

    table = Table()
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("ISBN", style="cyan")
    table.add_column("Status")
    table.add_column("Last Issued", style="dim")

    for record in records:
        style = _STATUS_STYLES[record.status]
        table.add_row(
            record.title,
            record.author,
            record.isbn,
            f"[{style}]{record.status.value}[/{style}]",
            last_issued_display(record),
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} book(s)[/dim]")
