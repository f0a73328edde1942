# ABOUTME: Parsing functions for Goodreads book detail pages.
# ABOUTME: Reads JSON-LD first, then falls back to current and legacy page markup via BeautifulSoup.

import json
import re
from typing import Any

from bs4 import BeautifulSoup

from bookrecon.metadata.errors import MalformedResponseError
from bookrecon.metadata.types import Metadata

_DIGITS_RE = re.compile(r"\d+")


def _text(soup: BeautifulSoup, selector: str) -> str | None:
    el = soup.select_one(selector)
    if el is None:
        return None
    text = el.get_text(" ", strip=True)
    return text or None


def _texts(soup: BeautifulSoup, selector: str) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for el in soup.select(selector):
        text = el.get_text(" ", strip=True)
        if text:
            seen.setdefault(text, None)
    return tuple(seen)


def _find_book_ld(soup: BeautifulSoup) -> dict[str, Any]:
    """Return the first JSON-LD object of @type Book, or an empty dict."""
    for script in soup.find_all("script", type="application/ld+json"):
        try:
            data = json.loads(script.string or "")
        except ValueError:
            continue
        candidates = data if isinstance(data, list) else [data]
        for entry in candidates:
            if isinstance(entry, dict) and entry.get("@type") == "Book":
                return entry
    return {}


def _ld_string(book: dict[str, Any], key: str) -> str | None:
    """Return a JSON-LD value only when it is a non-blank string."""
    value = book.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _ld_authors(book: dict[str, Any]) -> tuple[str, ...]:
    authors = book.get("author") or []
    if isinstance(authors, dict):
        authors = [authors]
    if not isinstance(authors, list):
        return ()
    names = (_ld_string(a, "name") for a in authors if isinstance(a, dict))
    return tuple(dict.fromkeys(n for n in names if n))


def _page_count(raw: Any) -> int | None:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw if raw > 0 else None
    if isinstance(raw, str):
        match = _DIGITS_RE.search(raw)
        if match:
            return int(match.group()) or None
    return None


def parse_book_page(html: str) -> Metadata | None:
    """Parse a Goodreads book page into Metadata.

    Returns None when the page is not a book page (for example a search
    page with no results), detected by the absence of any title.

    Raises:
        MalformedResponseError: If the page declares a JSON-LD Book but no
            usable title can be found anywhere on it.
    """
    soup = BeautifulSoup(html, "html.parser")
    book = _find_book_ld(soup)

    title = (
        _ld_string(book, "name")
        or _text(soup, 'h1[data-testid="bookTitle"]')
        or _text(soup, "h1#bookTitle")
    )
    if not title:
        if book:
            raise MalformedResponseError("JSON-LD Book has no usable name")
        return None

    authors = (
        _ld_authors(book)
        or _texts(soup, 'span[data-testid="name"]')
        or _texts(soup, 'a.authorName span[itemprop="name"]')
    )
    description = (
        _text(soup, 'div[data-testid="description"] span.Formatted')
        or _text(soup, 'div#description span[style="display:none"]')
        or _text(soup, "div#description span")
    )
    page_count = _page_count(book.get("numberOfPages")) or _page_count(
        _text(soup, 'span[itemprop="numberOfPages"]')
    )
    language = _ld_string(book, "inLanguage") or _text(soup, 'div[itemprop="inLanguage"]')
    subjects = _texts(
        soup, 'div[data-testid="genresList"] span.Button__labelItem'
    ) or _texts(soup, "a.actionLinkLite.bookPageGenreLink")

    cover_url = _ld_string(book, "image")
    if not cover_url:
        img = soup.select_one("img#coverImage") or soup.select_one("img.ResponsiveImage")
        cover_url = img.get("src") if img is not None else None

    isbn = _ld_string(book, "isbn") or _text(soup, 'span[itemprop="isbn"]')

    extra: dict[str, str] = {}
    canonical = soup.select_one('link[rel="canonical"]')
    if canonical is not None and canonical.get("href"):
        extra["goodreads_url"] = canonical["href"]

    return Metadata(
        isbn=isbn,
        title=title.strip(),
        authors=authors,
        description=description,
        cover_url=cover_url or None,
        language=language or None,
        page_count=page_count,
        subjects=subjects,
        extra=extra,
    )
