# ABOUTME: The `libcat add` command for cataloging a new book.
# ABOUTME: Adds the book as Available and rewrites the books file.

import click
from rich.console import Console

from libcat.catalog.errors import CatalogError
from libcat.cli.options import fail, library_paths, open_store

console = Console()


@click.command("add")
@click.argument("title")
@click.argument("author")
@click.argument("isbn")
@click.pass_context
def add(ctx: click.Context, title: str, author: str, isbn: str) -> None:
    """Add a book to the catalog."""
    title, author, isbn = title.strip(), author.strip(), isbn.strip()
    try:
        store = open_store(library_paths(ctx))
        store.add_book(title, author, isbn)
    except CatalogError as exc:
        fail(console, exc)

    console.print(f"Added [bold]{title}[/bold] ([cyan]{isbn}[/cyan]).")
