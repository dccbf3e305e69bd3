# ABOUTME: The `libcat return` command for taking a book back.
# ABOUTME: Marks an Issued book as Available again and logs the transaction.

import click
from rich.console import Console
from rich.markup import escape

from libcat.catalog.errors import AuditLogError, CatalogError
from libcat.cli.options import fail, library_paths, open_store

console = Console()


@click.command("return")
@click.argument("isbn")
@click.pass_context
def return_book(ctx: click.Context, isbn: str) -> None:
    """Return an issued book."""
    isbn = isbn.strip()
    try:
        store = open_store(library_paths(ctx))
        record = store.return_book(isbn)
    except AuditLogError as exc:
        console.print(
            f"[yellow]Returned {escape(isbn)}, "
            "but the transaction log write failed.[/yellow]"
        )
        fail(console, exc)
    except CatalogError as exc:
        fail(console, exc)

    console.print(f"Returned [bold]{record.title}[/bold].")
