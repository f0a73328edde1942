# ABOUTME: Rich and JSON rendering of resolved metadata and per-source failures.
# ABOUTME: Shared by the isbn and search commands.

import json
from collections.abc import Sequence

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookrecon.metadata.errors import SourceFailure
from bookrecon.metadata.types import Metadata


def render_metadata(console: Console, meta: Metadata, *, title: str | None = None) -> None:
    """Print one record as a two-column field/value table."""
    table = Table(title=title, show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ISBN", meta.isbn or "[dim]none[/dim]")
    table.add_row("Title", escape(meta.title) if meta.title else "[dim]unknown[/dim]")
    table.add_row("Author", escape(meta.author) if meta.author else "[dim]unknown[/dim]")
    if meta.publisher:
        table.add_row("Publisher", escape(meta.publisher))
    if meta.published_date:
        table.add_row("Published", escape(meta.published_date))
    if meta.page_count:
        table.add_row("Pages", str(meta.page_count))
    if meta.language:
        table.add_row("Language", escape(meta.language))
    if meta.subjects:
        table.add_row("Subjects", escape(", ".join(meta.subjects)))
    if meta.cover_url:
        table.add_row("Cover", escape(meta.cover_url))
    if meta.description:
        table.add_row("Description", escape(meta.description))
    for key, value in sorted(meta.extra.items()):
        table.add_row(key, escape(value))

    console.print(table)


def render_failures(console: Console, failures: Sequence[SourceFailure]) -> None:
    """Print per-source failures that did not stop the command."""
    if not failures:
        return
    console.print(f"\n[yellow]{len(failures)} source failure(s):[/yellow]")
    for failure in failures:
        console.print(f"  [dim]{escape(str(failure))}[/dim]")


def echo_json(records: Metadata | Sequence[Metadata]) -> None:
    """Print one record, or a list of records, as indented JSON."""
    if isinstance(records, Metadata):
        payload: object = records.to_dict()
    else:
        payload = [record.to_dict() for record in records]
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
