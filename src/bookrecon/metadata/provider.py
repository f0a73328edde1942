# ABOUTME: MetadataProvider protocol defining the contract for metadata sources.
# ABOUTME: Any external metadata API (Open Library, Google Books, etc.) implements this.

from typing import Protocol, runtime_checkable

from bookrecon.metadata.types import Metadata


@runtime_checkable
class MetadataProvider(Protocol):
    """Protocol for metadata lookup services.

    Implementations provide ISBN lookup and free-text ISBN discovery. Both
    raise a ProviderError subclass on failure and never retry on their own.
    """

    @property
    def name(self) -> str: ...

    async def lookup_by_isbn(self, isbn: str) -> Metadata: ...

    async def discover_isbns(self, text: str) -> list[str]: ...
