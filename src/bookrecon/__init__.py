# ABOUTME: bookrecon resolves book metadata by merging answers from several online catalogs.
# ABOUTME: Re-exports the public library surface: Resolver, Metadata, Source, registry, and errors.

from bookrecon.core.resolver import ResolutionDiagnostics, Resolver
from bookrecon.metadata.errors import (
    AllSourcesFailedError,
    InvalidIdentifierError,
    MalformedResponseError,
    NoCandidatesFoundError,
    NotFoundError,
    ProviderError,
    RateLimitedError,
    ReconError,
    SourceFailure,
    SourceNotRegisteredError,
    UnreachableError,
    UnsupportedOperationError,
)
from bookrecon.metadata.http import ReconHttpClient
from bookrecon.metadata.isbn import validate_isbn
from bookrecon.metadata.merge import merge
from bookrecon.metadata.registry import ProviderRegistry, build_registry
from bookrecon.metadata.source import Source
from bookrecon.metadata.types import Metadata

__all__ = [
    "AllSourcesFailedError",
    "InvalidIdentifierError",
    "MalformedResponseError",
    "Metadata",
    "NoCandidatesFoundError",
    "NotFoundError",
    "ProviderError",
    "ProviderRegistry",
    "RateLimitedError",
    "ReconError",
    "ReconHttpClient",
    "ResolutionDiagnostics",
    "Resolver",
    "Source",
    "SourceFailure",
    "SourceNotRegisteredError",
    "UnreachableError",
    "UnsupportedOperationError",
    "build_registry",
    "merge",
    "validate_isbn",
]
