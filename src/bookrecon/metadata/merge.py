# ABOUTME: Merge engine combining partial records for one ISBN into a single Metadata.
# ABOUTME: Field-by-field first-non-empty precedence in caller order; lists are never concatenated.

import logging
from collections.abc import Sequence
from typing import Any

from bookrecon.metadata.types import Metadata

logger = logging.getLogger(__name__)

# Scalar fields: first non-empty value wins.
_SCALAR_FIELDS = (
    "title",
    "description",
    "publisher",
    "cover_url",
    "language",
    "page_count",
    "published_date",
)

# List fields: first non-empty list wins as a whole. Concatenating author
# lists from different providers would mix credit orders.
_LIST_FIELDS = ("authors", "subjects")


def _first_non_empty(partials: Sequence[Metadata], field_name: str) -> Any:
    for partial in partials:
        value = getattr(partial, field_name)
        if value:
            return value
    return None


def merge(partials: Sequence[Metadata]) -> Metadata:
    """Merge partial records for the same book into one record.

    Earlier partials take precedence: for each field the first non-empty
    value in the given order wins. Author and subject lists are taken whole
    from the first partial that has any. Extra fields are unioned with the
    same precedence.

    Args:
        partials: Non-empty sequence of records sharing one ISBN, in
            precedence order. Partials with no ISBN are allowed.

    Returns:
        A new Metadata carrying the shared ISBN.

    Raises:
        ValueError: If partials is empty or carries conflicting ISBNs. Both
            are contract violations by the caller.
    """
    if not partials:
        msg = "merge requires at least one partial record"
        raise ValueError(msg)

    isbns = {p.isbn for p in partials if p.isbn}
    if len(isbns) > 1:
        msg = f"cannot merge records for different ISBNs: {sorted(isbns)}"
        raise ValueError(msg)

    fields: dict[str, Any] = {name: _first_non_empty(partials, name) for name in _SCALAR_FIELDS}
    for name in _LIST_FIELDS:
        fields[name] = _first_non_empty(partials, name) or ()

    extra: dict[str, str] = {}
    for partial in reversed(partials):
        extra.update(partial.extra)

    merged = Metadata(isbn=isbns.pop() if isbns else None, extra=extra, **fields)
    logger.debug("Merged %d partial(s) for %s", len(partials), merged.isbn)
    return merged
