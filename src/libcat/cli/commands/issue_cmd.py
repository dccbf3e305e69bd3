# ABOUTME: The `libcat issue` command for lending a book.
# ABOUTME: Marks an Available book as Issued to a borrower and logs the transaction.

import click
from rich.console import Console
from rich.markup import escape

from libcat.catalog.errors import AuditLogError, CatalogError
from libcat.cli.options import fail, library_paths, open_store

console = Console()


@click.command("issue")
@click.argument("isbn")
@click.argument("borrower")
@click.pass_context
def issue(ctx: click.Context, isbn: str, borrower: str) -> None:
    """Issue a book to a borrower."""
    isbn, borrower = isbn.strip(), borrower.strip()
    try:
        store = open_store(library_paths(ctx))
        record = store.issue_book(isbn, borrower)
    except AuditLogError as exc:
        console.print(
            f"[yellow]Issued {escape(isbn)} to {escape(borrower)}, "
            "but the transaction log write failed.[/yellow]"
        )
        fail(console, exc)
    except CatalogError as exc:
        fail(console, exc)

    console.print(
        f"Issued [bold]{record.title}[/bold] to [cyan]{record.current_borrower}[/cyan]."
    )
