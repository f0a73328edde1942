# ABOUTME: Metadata package: record type, provider contract, adapters, and merge engine.
# ABOUTME: Exports the Metadata dataclass and provider-facing types used throughout bookrecon.

from bookrecon.metadata.merge import merge
from bookrecon.metadata.provider import MetadataProvider
from bookrecon.metadata.registry import ProviderRegistry, build_registry
from bookrecon.metadata.source import Source
from bookrecon.metadata.types import Metadata

__all__ = [
    "Metadata",
    "MetadataProvider",
    "ProviderRegistry",
    "Source",
    "build_registry",
    "merge",
]
