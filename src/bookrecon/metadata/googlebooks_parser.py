# ABOUTME: Parsing functions for Google Books API JSON responses.
# ABOUTME: Converts volume resources into Metadata and search results into candidate ISBNs.

from typing import Any

from bookrecon.metadata.errors import MalformedResponseError
from bookrecon.metadata.types import Metadata

# Largest first.
_IMAGE_LINK_PREFERENCE = (
    "extraLarge",
    "large",
    "medium",
    "small",
    "thumbnail",
    "smallThumbnail",
)


def _require_dict(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        msg = f"expected {what} to be an object, got {type(value).__name__}"
        raise MalformedResponseError(msg)
    return value


def _string_tuple(value: Any, what: str) -> tuple[str, ...]:
    if not value:
        return ()
    if not isinstance(value, list):
        raise MalformedResponseError(f"expected {what} to be a list")
    return tuple(v.strip() for v in value if isinstance(v, str) and v.strip())


def parse_items(data: Any) -> list[dict[str, Any]]:
    """Return the list of volume resources from a volumes search response."""
    data = _require_dict(data, "volumes response")
    items = data.get("items") or []
    if not isinstance(items, list):
        raise MalformedResponseError("expected 'items' to be a list")
    return [_require_dict(item, "volume") for item in items]


def _string(value: Any) -> str | None:
    """Return value if it is a non-blank string, else None."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def select_isbn(identifiers: Any) -> str | None:
    """Pick an ISBN from industryIdentifiers, preferring ISBN-13 over ISBN-10.

    Raises:
        MalformedResponseError: If identifiers is not a list.
    """
    if not isinstance(identifiers, list):
        raise MalformedResponseError("expected industryIdentifiers to be a list")
    by_type = {
        entry.get("type"): _string(entry.get("identifier"))
        for entry in identifiers
        if isinstance(entry, dict)
    }
    return by_type.get("ISBN_13") or by_type.get("ISBN_10")


def select_cover_url(image_links: Any) -> str | None:
    """Pick the largest image link and force https."""
    if not isinstance(image_links, dict):
        return None
    for key in _IMAGE_LINK_PREFERENCE:
        url = _string(image_links.get(key))
        if url:
            return url.replace("http://", "https://", 1)
    return None


def parse_volume(item: dict[str, Any]) -> Metadata:
    """Parse one Google Books volume resource into Metadata.

    Fields of the wrong type are treated as missing.

    Raises:
        MalformedResponseError: If volumeInfo is missing or not an object, or
            if the identifier, author, or category lists are not lists.
    """
    info = _require_dict(item.get("volumeInfo"), "volumeInfo")

    title = _string(info.get("title"))
    subtitle = _string(info.get("subtitle"))
    if title and subtitle:
        title = f"{title}: {subtitle}"

    page_count = info.get("pageCount")
    if not isinstance(page_count, int) or isinstance(page_count, bool) or page_count <= 0:
        page_count = None

    extra: dict[str, str] = {}
    volume_id = item.get("id")
    if volume_id:
        extra["googlebooks_id"] = str(volume_id)

    return Metadata(
        isbn=select_isbn(info.get("industryIdentifiers") or []),
        title=title,
        authors=_string_tuple(info.get("authors"), "authors"),
        description=_string(info.get("description")),
        publisher=_string(info.get("publisher")),
        cover_url=select_cover_url(info.get("imageLinks")),
        language=_string(info.get("language")),
        page_count=page_count,
        published_date=_string(info.get("publishedDate")),
        subjects=_string_tuple(info.get("categories"), "categories"),
        extra=extra,
    )


def parse_candidate_isbns(data: Any) -> list[str]:
    """Extract one ISBN per search result, in the API's relevance order.

    Items without an ISBN (periodicals, some ebooks) are skipped.
    """
    isbns: list[str] = []
    for item in parse_items(data):
        info = item.get("volumeInfo")
        if not isinstance(info, dict):
            continue
        identifiers = info.get("industryIdentifiers") or []
        if not isinstance(identifiers, list):
            continue
        isbn = select_isbn(identifiers)
        if isbn:
            isbns.append(isbn)
    return isbns
