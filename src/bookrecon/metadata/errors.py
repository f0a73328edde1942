# ABOUTME: Exception hierarchy for identifier validation, provider failures, and resolution outcomes.
# ABOUTME: Provider errors are aggregated by the resolver; only call-level errors reach callers.

from dataclasses import dataclass
from typing import ClassVar

from bookrecon.metadata.source import Source


class ReconError(Exception):
    """Base class for every error raised by bookrecon."""


class InvalidIdentifierError(ReconError):
    """Raised when an identifier is not a well-formed ISBN-10 or ISBN-13."""

    def __init__(self, identifier: str, reason: str = "not a valid ISBN") -> None:
        super().__init__(f"{identifier!r}: {reason}")
        self.identifier = identifier
        self.reason = reason


class SourceNotRegisteredError(ReconError):
    """Raised when a selected source has no provider in the registry."""

    def __init__(self, source: Source) -> None:
        super().__init__(f"no provider registered for source {source.value!r}")
        self.source = source


class ProviderError(ReconError):
    """A single provider failed to answer one request."""

    kind: ClassVar[str] = "provider_error"


class NotFoundError(ProviderError):
    """The provider has no record for the request."""

    kind = "not_found"


class RateLimitedError(ProviderError):
    """The provider refused the request because of rate limiting."""

    kind = "rate_limited"


class MalformedResponseError(ProviderError):
    """The provider answered with data the adapter could not parse."""

    kind = "malformed"


class UnreachableError(ProviderError):
    """Transport-level failure: connection error, timeout, or server error."""

    kind = "unreachable"


class UnsupportedOperationError(ProviderError):
    """The provider does not implement the requested operation."""

    kind = "unsupported"


@dataclass(frozen=True)
class SourceFailure:
    """One provider's failure for one identifier (isbn is None for discovery)."""

    source: Source
    isbn: str | None
    error: ProviderError

    @property
    def kind(self) -> str:
        return self.error.kind

    def __str__(self) -> str:
        target = f" for {self.isbn}" if self.isbn else ""
        return f"{self.source.value}{target}: {self.kind}: {self.error}"


class AllSourcesFailedError(ReconError):
    """Every selected source failed, so there is nothing to return.

    Carries the full list of per-source failures for diagnostics.
    """

    def __init__(self, failures: list[SourceFailure], isbn: str | None = None) -> None:
        target = isbn if isbn is not None else "every candidate"
        summary = "; ".join(str(f) for f in failures) or "no sources"
        super().__init__(f"all sources failed for {target}: {summary}")
        self.isbn = isbn
        self.failures = list(failures)


class NoCandidatesFoundError(ReconError):
    """The primary source produced no usable identifiers for a description."""

    def __init__(self, text: str, cause: ProviderError | None = None) -> None:
        msg = f"no candidate identifiers found for {text!r}"
        if cause is not None:
            msg = f"{msg}: {cause.kind}: {cause}"
        super().__init__(msg)
        self.text = text
        self.cause = cause
