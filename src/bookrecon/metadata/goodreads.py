# ABOUTME: Goodreads metadata provider implementation (ISBN lookup only).
# ABOUTME: Scrapes the book page Goodreads redirects an ISBN search to; cannot act as a search source.

import logging

from bookrecon.metadata.errors import (
    MalformedResponseError,
    NotFoundError,
    UnsupportedOperationError,
)
from bookrecon.metadata.goodreads_parser import parse_book_page
from bookrecon.metadata.http import HttpClient
from bookrecon.metadata.types import Metadata

logger = logging.getLogger(__name__)

_SEARCH_URL = "https://www.goodreads.com/search"


class GoodreadsProvider:
    """Metadata provider that scrapes Goodreads book pages.

    Goodreads has no public API, so free-text discovery is not supported
    and this provider can only be used as a secondary source.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "goodreads"

    async def lookup_by_isbn(self, isbn: str) -> Metadata:
        """Search Goodreads for the ISBN and parse the book page it lands on.

        Raises:
            NotFoundError: If the search did not land on a book page.
            MalformedResponseError: If the page cannot be parsed.
        """
        params = {"q": isbn, "search_type": "books"}
        html = await self._http.get_text(_SEARCH_URL, params=params)
        try:
            metadata = parse_book_page(html)
        except (AttributeError, TypeError) as exc:
            raise MalformedResponseError(f"Unexpected book page shape for {isbn}: {exc}") from exc
        if metadata is None:
            raise NotFoundError(f"Goodreads has no book page for ISBN {isbn}")
        return metadata

    async def discover_isbns(self, text: str) -> list[str]:
        raise UnsupportedOperationError("Goodreads cannot be used as a search source")
