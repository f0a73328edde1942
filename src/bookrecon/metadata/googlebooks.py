# ABOUTME: Google Books metadata provider implementation.
# ABOUTME: Looks up volumes by ISBN and turns free-text searches into candidate ISBNs.

import logging

from bookrecon.metadata.errors import MalformedResponseError, NotFoundError
from bookrecon.metadata.googlebooks_parser import (
    parse_candidate_isbns,
    parse_items,
    parse_volume,
)
from bookrecon.metadata.http import HttpClient
from bookrecon.metadata.types import Metadata

logger = logging.getLogger(__name__)

_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"
_SEARCH_PAGE_SIZE = 10
_DISCOVERY_LIMIT = 3


class GoogleBooksProvider:
    """Metadata provider backed by the Google Books volumes API.

    Works without an API key at low request volumes; pass ``api_key`` to
    raise the quota. Uses dependency-injected HttpClient for testability.
    """

    def __init__(
        self,
        http_client: HttpClient,
        *,
        api_key: str | None = None,
        discovery_limit: int = _DISCOVERY_LIMIT,
    ) -> None:
        self._http = http_client
        self._api_key = api_key
        self._discovery_limit = discovery_limit

    @property
    def name(self) -> str:
        return "googlebooks"

    def _params(self, query: str, **extra: str) -> dict[str, str]:
        params = {"q": query, **extra}
        if self._api_key:
            params["key"] = self._api_key
        return params

    async def lookup_by_isbn(self, isbn: str) -> Metadata:
        """Look up a volume by ISBN and parse the first match.

        Raises:
            NotFoundError: If Google Books has no volume for the ISBN.
            MalformedResponseError: If the volume cannot be parsed.
        """
        data = await self._http.get_json(_VOLUMES_URL, params=self._params(f"isbn:{isbn}"))
        try:
            items = parse_items(data)
            if not items:
                raise NotFoundError(f"Google Books has no volume for ISBN {isbn}")
            return parse_volume(items[0])
        except (AttributeError, TypeError) as exc:
            raise MalformedResponseError(f"Unexpected volume shape for {isbn}: {exc}") from exc

    async def discover_isbns(self, text: str) -> list[str]:
        """Search volumes by free text and return up to discovery_limit ISBNs."""
        params = self._params(text, maxResults=str(_SEARCH_PAGE_SIZE), printType="books")
        data = await self._http.get_json(_VOLUMES_URL, params=params)
        try:
            isbns = parse_candidate_isbns(data)[: self._discovery_limit]
        except (AttributeError, TypeError) as exc:
            raise MalformedResponseError(f"Unexpected search shape for {text!r}: {exc}") from exc
        logger.debug("Google Books candidates for %r: %s", text, isbns)
        return isbns
