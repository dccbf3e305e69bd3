# ABOUTME: CLI package for libcat, built on Click.
# ABOUTME: Defines the root command group, its shared options, and registers subcommands.

import logging
from pathlib import Path

import click

from libcat.cli.commands import add_cmd, find_cmd, issue_cmd, log_cmd, ls_cmd, return_cmd
from libcat.config import DATA_DIR_ENVVAR, DEFAULT_DATA_DIR, LibraryPaths


@click.group()
@click.version_option(package_name="libcat")
@click.option(
    "--data-dir",
    "data_dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENVVAR,
    default=None,
    help=f"Directory holding the catalog files (default: {DEFAULT_DATA_DIR})",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """libcat - a flat-file library circulation catalog."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = LibraryPaths.under(data_dir)


cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
cli.add_command(find_cmd.find)
cli.add_command(issue_cmd.issue)
cli.add_command(return_cmd.return_book)
cli.add_command(log_cmd.log)
