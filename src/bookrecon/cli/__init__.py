# ABOUTME: CLI package for bookrecon, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from bookrecon.cli.commands import isbn_cmd, search_cmd


@click.group()
@click.version_option(package_name="bookrecon")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log provider requests to stderr.")
def cli(verbose: bool) -> None:
    """bookrecon - resolve book metadata across online catalogs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


cli.add_command(isbn_cmd.isbn_lookup)
cli.add_command(search_cmd.search)
