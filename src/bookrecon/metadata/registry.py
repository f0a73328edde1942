# ABOUTME: ProviderRegistry mapping Source selectors to provider adapters.
# ABOUTME: Injected into the Resolver as configuration; build_registry wires the built-in adapters.

from bookrecon.metadata.errors import SourceNotRegisteredError
from bookrecon.metadata.goodreads import GoodreadsProvider
from bookrecon.metadata.googlebooks import GoogleBooksProvider
from bookrecon.metadata.http import HttpClient
from bookrecon.metadata.openlibrary import OpenLibraryProvider
from bookrecon.metadata.provider import MetadataProvider
from bookrecon.metadata.source import Source


class ProviderRegistry:
    """Lookup table from Source to the adapter that serves it."""

    def __init__(self, providers: dict[Source, MetadataProvider] | None = None) -> None:
        self._providers: dict[Source, MetadataProvider] = {}
        for source, provider in (providers or {}).items():
            self.register(source, provider)

    def register(self, source: Source, provider: MetadataProvider) -> None:
        """Register (or replace) the provider serving a source."""
        if not isinstance(provider, MetadataProvider):
            msg = f"{provider!r} does not implement MetadataProvider"
            raise TypeError(msg)
        self._providers[source] = provider

    def get(self, source: Source) -> MetadataProvider:
        """Return the provider for a source.

        Raises:
            SourceNotRegisteredError: If nothing is registered for the source.
        """
        try:
            return self._providers[source]
        except KeyError:
            raise SourceNotRegisteredError(source) from None


def build_registry(http_client: HttpClient, *, google_api_key: str | None = None) -> ProviderRegistry:
    """Create a registry with the built-in Google Books, Open Library, and Goodreads adapters."""
    return ProviderRegistry(
        {
            Source.GOOGLE_BOOKS: GoogleBooksProvider(http_client, api_key=google_api_key),
            Source.OPEN_LIBRARY: OpenLibraryProvider(http_client),
            Source.GOODREADS: GoodreadsProvider(http_client),
        }
    )
