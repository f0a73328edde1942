# ABOUTME: Parsing functions for Open Library API JSON responses.
# ABOUTME: Converts Books API, edition, works, and search payloads into Metadata and ISBN lists.

from typing import Any

from bookrecon.metadata.errors import MalformedResponseError
from bookrecon.metadata.types import Metadata

# Cover sizes in the Books API "cover" object, largest first.
_COVER_PREFERENCE = ("large", "medium", "small")


def _names(entries: Any) -> tuple[str, ...]:
    """Extract the "name" of each {"name": ...} entry, skipping blanks."""
    if not isinstance(entries, list):
        return ()
    return tuple(e["name"] for e in entries if isinstance(e, dict) and e.get("name"))


def _first(values: Any) -> Any:
    if isinstance(values, list) and values:
        return values[0]
    return None


def parse_books_api_response(data: Any, isbn: str) -> Metadata | None:
    """Parse a Books API (jscmd=data) response keyed by "ISBN:<isbn>".

    Returns None when Open Library has no record for the ISBN (the API
    answers with an empty object).

    Raises:
        MalformedResponseError: If the response is not a JSON object.
    """
    if not isinstance(data, dict):
        raise MalformedResponseError("expected Books API response to be an object")

    record = data.get(f"ISBN:{isbn}")
    if record is None and data:
        # Open Library echoes the bibkey as requested; fall back to the only entry.
        record = next(iter(data.values()))
    if not record:
        return None
    if not isinstance(record, dict):
        raise MalformedResponseError("expected Books API record to be an object")

    title = record.get("title")
    subtitle = record.get("subtitle")
    if title and subtitle:
        title = f"{title}: {subtitle}"

    identifiers = record.get("identifiers") or {}
    found_isbn = _first(identifiers.get("isbn_13")) or _first(identifiers.get("isbn_10"))

    cover = record.get("cover") or {}
    cover_url = next((cover[size] for size in _COVER_PREFERENCE if cover.get(size)), None)

    page_count = record.get("number_of_pages")
    if not isinstance(page_count, int) or page_count <= 0:
        page_count = None

    publishers = _names(record.get("publishers"))

    extra: dict[str, str] = {}
    edition_key = record.get("key")
    if edition_key:
        extra["openlibrary_edition"] = edition_key

    return Metadata(
        isbn=found_isbn,
        title=title,
        authors=_names(record.get("authors")),
        publisher=publishers[0] if publishers else None,
        cover_url=cover_url,
        page_count=page_count,
        published_date=record.get("publish_date") or None,
        subjects=_names(record.get("subjects")),
        extra=extra,
    )


def parse_edition_response(data: dict[str, Any]) -> tuple[str | None, str | None]:
    """Extract (language, works_key) from an edition JSON response."""
    language = None
    languages = data.get("languages", [])
    if languages:
        lang_key = languages[0].get("key", "")
        language = lang_key.rsplit("/", 1)[-1] if "/" in lang_key else lang_key

    works_key = None
    works = data.get("works", [])
    if works:
        works_key = works[0].get("key") or None

    return language or None, works_key


def parse_works_response(data: dict[str, Any]) -> str | None:
    """Extract the description from an Open Library Works response.

    Handles the OL quirk where description can be either a plain string
    or a dict with {"type": ..., "value": "actual text"}.
    """
    desc = data.get("description")
    if desc is None:
        return None
    if isinstance(desc, str):
        return desc
    if isinstance(desc, dict):
        return desc.get("value")
    return None


def parse_search_isbns(data: Any) -> list[str]:
    """Extract one ISBN per search doc, in Open Library's relevance order.

    Prefers the first 13-digit ISBN listed on a doc; docs without any ISBN
    are skipped.
    """
    if not isinstance(data, dict):
        raise MalformedResponseError("expected search response to be an object")

    isbns: list[str] = []
    for doc in data.get("docs", []):
        doc_isbns = [i for i in doc.get("isbn", []) if isinstance(i, str)]
        if not doc_isbns:
            continue
        isbn13 = next((i for i in doc_isbns if len(i) == 13), None)
        isbns.append(isbn13 or doc_isbns[0])
    return isbns
