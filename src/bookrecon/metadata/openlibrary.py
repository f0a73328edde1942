# ABOUTME: Open Library metadata provider implementation.
# ABOUTME: Looks up openlibrary.org by ISBN and turns free-text searches into candidate ISBNs.

import logging
from dataclasses import replace

from bookrecon.metadata.errors import MalformedResponseError, NotFoundError, ProviderError
from bookrecon.metadata.http import HttpClient
from bookrecon.metadata.openlibrary_parser import (
    parse_books_api_response,
    parse_edition_response,
    parse_search_isbns,
    parse_works_response,
)
from bookrecon.metadata.types import Metadata

logger = logging.getLogger(__name__)

_OL_BASE = "https://openlibrary.org"
_SEARCH_LIMIT = 10
_DISCOVERY_LIMIT = 3


class OpenLibraryProvider:
    """Metadata provider backed by the Open Library API.

    ISBN lookups use the Books API, then follow the edition and works
    endpoints to fill in language and description. Uses dependency-injected
    HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient, *, discovery_limit: int = _DISCOVERY_LIMIT) -> None:
        self._http = http_client
        self._discovery_limit = discovery_limit

    @property
    def name(self) -> str:
        return "openlibrary"

    async def lookup_by_isbn(self, isbn: str) -> Metadata:
        """Look up a book by ISBN via the Open Library Books API.

        Follows up with edition and works endpoints to enrich metadata;
        enrichment failures are logged and ignored.

        Raises:
            NotFoundError: If Open Library has no record for the ISBN.
        """
        params = {"bibkeys": f"ISBN:{isbn}", "jscmd": "data", "format": "json"}
        data = await self._http.get_json(f"{_OL_BASE}/api/books", params=params)
        try:
            metadata = parse_books_api_response(data, isbn)
        except (AttributeError, TypeError) as exc:
            raise MalformedResponseError(f"Unexpected Books API shape for {isbn}: {exc}") from exc
        if metadata is None:
            raise NotFoundError(f"Open Library has no record for ISBN {isbn}")

        return await self._enrich_from_edition(metadata)

    async def discover_isbns(self, text: str) -> list[str]:
        """Search Open Library by free text and return up to discovery_limit ISBNs."""
        params = {"q": text, "fields": "key,title,isbn", "limit": str(_SEARCH_LIMIT)}
        data = await self._http.get_json(f"{_OL_BASE}/search.json", params=params)
        try:
            isbns = parse_search_isbns(data)
        except (AttributeError, TypeError) as exc:
            raise MalformedResponseError(f"Unexpected search shape for {text!r}: {exc}") from exc
        isbns = isbns[: self._discovery_limit]
        logger.debug("Open Library candidates for %r: %s", text, isbns)
        return isbns

    async def _enrich_from_edition(self, metadata: Metadata) -> Metadata:
        """Fetch language and description from the edition and works endpoints."""
        if metadata.description and metadata.language:
            return metadata
        edition_key = metadata.extra.get("openlibrary_edition")
        if not edition_key:
            return metadata

        try:
            edition_data = await self._http.get_json(f"{_OL_BASE}{edition_key}.json")
            language, works_key = parse_edition_response(edition_data)
        except (ProviderError, AttributeError, TypeError) as exc:
            logger.warning("Edition enrichment failed for %s: %s", edition_key, exc)
            return metadata

        description = None
        if works_key and not metadata.description:
            try:
                works_data = await self._http.get_json(f"{_OL_BASE}{works_key}.json")
                description = parse_works_response(works_data)
            except (ProviderError, AttributeError, TypeError) as exc:
                logger.warning("Works enrichment failed for %s: %s", works_key, exc)

        extra = dict(metadata.extra)
        if works_key:
            extra["openlibrary_work"] = works_key
        return replace(
            metadata,
            language=metadata.language or language,
            description=metadata.description or description,
            extra=extra,
        )
