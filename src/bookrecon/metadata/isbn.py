# ABOUTME: ISBN validation and normalization used to key lookups and deduplicate results.
# ABOUTME: Accepts ISBN-10 or ISBN-13 (with or without hyphens) and returns canonical ISBN-13.

import re

from bookrecon.metadata.errors import InvalidIdentifierError

_ISBN_STRIP_RE = re.compile(r"[\s-]")
_ISBN10_RE = re.compile(r"^\d{9}[\dX]$")
_ISBN13_RE = re.compile(r"^97[89]\d{10}$")


def _clean(raw: str) -> str:
    """Strip hyphens and whitespace, uppercase a trailing 'x'."""
    return _ISBN_STRIP_RE.sub("", raw).upper()


def _isbn10_checksum_ok(isbn10: str) -> bool:
    total = 0
    for position, char in enumerate(isbn10):
        value = 10 if char == "X" else int(char)
        total += (10 - position) * value
    return total % 11 == 0


def _isbn13_check_digit(first12: str) -> int:
    total = sum(int(d) * (1 if i % 2 == 0 else 3) for i, d in enumerate(first12))
    return (10 - total % 10) % 10


def isbn10_to_isbn13(isbn10: str) -> str:
    """Convert a (clean, valid) ISBN-10 to its 978-prefixed ISBN-13 form."""
    first12 = "978" + isbn10[:9]
    return first12 + str(_isbn13_check_digit(first12))


def validate_isbn(raw: str) -> str:
    """Validate an ISBN-10 or ISBN-13 and return the canonical ISBN-13.

    Args:
        raw: User- or provider-supplied identifier, hyphens and spaces allowed.

    Returns:
        The 13-digit ISBN without separators.

    Raises:
        InvalidIdentifierError: If the identifier is malformed or its check digit is wrong.
    """
    if not isinstance(raw, str):
        raise InvalidIdentifierError(repr(raw), "identifier must be a string")

    isbn = _clean(raw)
    if _ISBN10_RE.match(isbn):
        if not _isbn10_checksum_ok(isbn):
            raise InvalidIdentifierError(raw, "bad ISBN-10 check digit")
        return isbn10_to_isbn13(isbn)

    if _ISBN13_RE.match(isbn):
        if int(isbn[-1]) != _isbn13_check_digit(isbn[:12]):
            raise InvalidIdentifierError(raw, "bad ISBN-13 check digit")
        return isbn

    raise InvalidIdentifierError(raw)

