# ABOUTME: Source enum naming the metadata providers a caller can select.
# ABOUTME: Used purely as a selector; adapters are looked up through a ProviderRegistry.

import re
from enum import Enum

_NAME_NOISE_RE = re.compile(r"[\s_-]")


class Source(str, Enum):
    """A selectable external metadata provider."""

    GOOGLE_BOOKS = "googlebooks"
    OPEN_LIBRARY = "openlibrary"
    GOODREADS = "goodreads"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "Source":
        """Parse a user-supplied source name like "Google-Books" or "open_library".

        Raises:
            ValueError: If the name does not match any known source.
        """
        key = _NAME_NOISE_RE.sub("", name).lower()
        for source in cls:
            if source.value == key:
                return source
        choices = ", ".join(s.value for s in cls)
        msg = f"unknown source {name!r} (expected one of: {choices})"
        raise ValueError(msg)
