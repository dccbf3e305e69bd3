# ABOUTME: Shared helpers for libcat CLI commands.
# ABOUTME: Opens the book store from the group's data directory and reports catalog errors.

from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from libcat.audit import ParseErrorLog, TransactionLog
from libcat.catalog.errors import CatalogError
from libcat.catalog.store import BookStore
from libcat.config import LibraryPaths


def library_paths(ctx: click.Context) -> LibraryPaths:
    """Paths resolved by the root group's --data-dir option."""
    return ctx.find_object(LibraryPaths) or LibraryPaths.under()


def open_store(paths: LibraryPaths) -> BookStore:
    """Open the book store wired to the file-backed audit logs."""
    return BookStore(
        paths.books_file,
        transactions=TransactionLog(paths.transactions_file),
        errors=ParseErrorLog(paths.errors_file),
    )


def fail(console: Console, exc: CatalogError) -> NoReturn:
    """Print a catalog error and exit with status 1."""
    console.print(f"[red]Error: {escape(str(exc))}[/red]")
    raise SystemExit(1) from exc
