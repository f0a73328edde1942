# ABOUTME: Core metadata record returned by providers and by the resolution engine.
# ABOUTME: Metadata is the interchange format between adapters, the merge engine, and callers.

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Metadata:
    """Book metadata as reported by one provider, or merged across several.

    Every field is optional because a single provider often knows only part
    of the picture. Once the resolution engine returns a record, ``isbn``
    always holds the canonical ISBN-13 used to join and deduplicate results.
    Records are immutable and hashable; ``extra`` is a read-only mapping and
    takes part in equality but not in the hash.
    """

    isbn: str | None = None
    title: str | None = None
    authors: tuple[str, ...] = ()
    description: str | None = None
    publisher: str | None = None
    cover_url: str | None = None
    language: str | None = None
    page_count: int | None = None
    published_date: str | None = None
    subjects: tuple[str, ...] = ()
    extra: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Parsers hand over lists and dicts; freeze them so a returned record cannot change.
        object.__setattr__(self, "authors", tuple(self.authors))
        object.__setattr__(self, "subjects", tuple(self.subjects))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(self.authors) if self.authors else ""

    @property
    def is_empty(self) -> bool:
        """Whether no descriptive field is populated (identifier and extras aside)."""
        return not any(
            (
                self.title,
                self.authors,
                self.description,
                self.publisher,
                self.cover_url,
                self.language,
                self.page_count,
                self.published_date,
                self.subjects,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for JSON output."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["authors"] = list(self.authors)
        data["subjects"] = list(self.subjects)
        data["extra"] = dict(self.extra)
        return data
