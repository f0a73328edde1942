# ABOUTME: Shared Click options for bookrecon CLI commands.
# ABOUTME: Provides reusable decorators for source selection, timeouts, API keys, and JSON output.

import click

from bookrecon.metadata.source import Source

DEFAULT_SOURCES = (Source.GOOGLE_BOOKS, Source.OPEN_LIBRARY)
DEFAULT_PRIMARY = Source.GOOGLE_BOOKS
DEFAULT_TIMEOUT = 30.0


class SourceParamType(click.ParamType):
    """Click parameter converting names like "google-books" to Source."""

    name = "source"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> Source:
        if isinstance(value, Source):
            return value
        try:
            return Source.parse(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


SOURCE = SourceParamType()

sources_option = click.option(
    "-s",
    "--source",
    "sources",
    type=SOURCE,
    multiple=True,
    help=(
        "Metadata source to query; repeat to add more. Earlier sources win on "
        f"conflicts (default: {', '.join(s.value for s in DEFAULT_SOURCES)})."
    ),
)

timeout_option = click.option(
    "--timeout",
    type=click.FloatRange(min=0.0, min_open=True),
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Per-request timeout in seconds.",
)

google_api_key_option = click.option(
    "--google-api-key",
    envvar="GOOGLE_BOOKS_API_KEY",
    default=None,
    help="Google Books API key (or set GOOGLE_BOOKS_API_KEY).",
)

json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print results as JSON instead of a table.",
)
