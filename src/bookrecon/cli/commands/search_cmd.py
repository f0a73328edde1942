# ABOUTME: The `bookrecon search` command resolving a free-text description into books.
# ABOUTME: One primary source finds candidate ISBNs; every selected source then fills them in.

import click
from rich.console import Console
from rich.markup import escape

from bookrecon.cli.options import (
    DEFAULT_PRIMARY,
    DEFAULT_SOURCES,
    SOURCE,
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


@click.command("search")
@click.argument("text")
@click.option(
    "-p",
    "--primary",
    type=SOURCE,
    default=DEFAULT_PRIMARY.value,
    show_default=True,
    help="Source used to turn the description into candidate ISBNs.",
)
@sources_option
@click.option(
    "-n",
    "--max-candidates",
    type=click.IntRange(min=1),
    default=None,
    help="Resolve at most this many candidate ISBNs.",
)
@timeout_option
@google_api_key_option
@json_option
def search(
    text: str,
    primary: Source,
    sources: tuple[Source, ...],
    max_candidates: int | None,
    timeout: float,
    google_api_key: str | None,
    as_json: bool,
) -> None:
    """Find books matching TEXT and print merged metadata for each."""
    console = Console()
    selected = sources or DEFAULT_SOURCES
    diagnostics = ResolutionDiagnostics()

    async def action(resolver: Resolver) -> list[Metadata]:
        return await resolver.resolve_by_description(
            primary, selected, text, diagnostics=diagnostics
        )

    try:
        records = run_resolution(
            action,
            timeout=timeout,
            google_api_key=google_api_key,
            max_candidates=max_candidates,
        )
    except AllSourcesFailedError as exc:
        console.print("[red]Error:[/red] no candidate could be resolved")
        render_failures(console, exc.failures)
        raise SystemExit(1) from exc
    except ReconError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    if as_json:
        echo_json(records)
        return

    for position, record in enumerate(records, start=1):
        render_metadata(console, record, title=f"Result {position} of {len(records)}")
        console.print()
    console.print(f"[dim]{len(records)} result(s)[/dim]")
    if diagnostics.dropped_candidates:
        console.print(
            f"[yellow]Dropped candidates:[/yellow] {', '.join(diagnostics.dropped_candidates)}"
        )
    render_failures(console, diagnostics.source_failures)
