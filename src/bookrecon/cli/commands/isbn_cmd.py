# ABOUTME: The `bookrecon isbn` command resolving one ISBN across the selected sources.
# ABOUTME: Prints the merged record plus any sources that failed along the way.

import click
from rich.console import Console
from rich.markup import escape

from bookrecon.cli.options import (
    DEFAULT_SOURCES,
    google_api_key_option,
    json_option,
    sources_option,
    timeout_option,
)
from bookrecon.cli.render import echo_json, render_failures, render_metadata
from bookrecon.cli.runner import run_resolution
from bookrecon.core.resolver import ResolutionDiagnostics, Resolver
from bookrecon.metadata.errors import AllSourcesFailedError, ReconError
from bookrecon.metadata.source import Source
from bookrecon.metadata.types import Metadata


@click.command("isbn")
@click.argument("isbn")
@sources_option
@timeout_option
@google_api_key_option
@json_option
def isbn_lookup(
    isbn: str,
    sources: tuple[Source, ...],
    timeout: float,
    google_api_key: str | None,
    as_json: bool,
) -> None:
    """Look up ISBN in every selected source and print the merged metadata."""
    console = Console()
    selected = sources or DEFAULT_SOURCES
    diagnostics = ResolutionDiagnostics()

    async def action(resolver: Resolver) -> Metadata:
        return await resolver.resolve_by_isbn(selected, isbn, diagnostics=diagnostics)

    try:
        record = run_resolution(action, timeout=timeout, google_api_key=google_api_key)
    except AllSourcesFailedError as exc:
        console.print(f"[red]Error:[/red] no source had data for {escape(isbn)}")
        render_failures(console, exc.failures)
        raise SystemExit(1) from exc
    except ReconError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if as_json:
        echo_json(record)
        return

    render_metadata(console, record)
    render_failures(console, diagnostics.source_failures)
