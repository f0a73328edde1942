# ABOUTME: Resolution engine fanning lookups out to providers concurrently and merging the answers.
# ABOUTME: Implements ISBN resolution and the single-primary-source funnel for description searches.

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import NamedTuple

from bookrecon.metadata.errors import (
    AllSourcesFailedError,
    InvalidIdentifierError,
    MalformedResponseError,
    NoCandidatesFoundError,
    NotFoundError,
    ProviderError,
    SourceFailure,
)
from bookrecon.metadata.isbn import validate_isbn
from bookrecon.metadata.merge import merge
from bookrecon.metadata.provider import MetadataProvider
from bookrecon.metadata.registry import ProviderRegistry
from bookrecon.metadata.source import Source
from bookrecon.metadata.types import Metadata

logger = logging.getLogger(__name__)


def _adapter_bug(source: Source, exc: Exception) -> MalformedResponseError:
    """Wrap an exception an adapter should never have let escape."""
    error = MalformedResponseError(f"{source.value} adapter error: {type(exc).__name__}: {exc}")
    error.__cause__ = exc
    return error


@dataclass
class ResolutionDiagnostics:
    """Non-fatal failures collected during one resolution call.

    Pass an instance to a Resolver method to find out which sources failed
    even when the call as a whole succeeded.
    """

    source_failures: list[SourceFailure] = field(default_factory=list)
    dropped_candidates: list[str] = field(default_factory=list)
    rejected_candidates: list[str] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.source_failures or self.dropped_candidates or self.rejected_candidates)


class _IsbnOutcome(NamedTuple):
    isbn: str
    record: Metadata | None
    failures: list[SourceFailure]


def collect_candidates(
    raw_identifiers: Iterable[str],
    *,
    limit: int | None = None,
    rejected: list[str] | None = None,
) -> list[str]:
    """Normalize and de-duplicate discovered identifiers, keeping first-seen order.

    Identifiers that are not valid ISBNs are skipped and appended to
    ``rejected`` when given. ISBN-10 and ISBN-13 forms of the same book
    collapse into one candidate. ``limit`` applies after de-duplication.
    """
    candidates: dict[str, None] = {}
    for raw in raw_identifiers:
        try:
            isbn = validate_isbn(raw)
        except InvalidIdentifierError:
            logger.debug("Discarding invalid candidate identifier %r", raw)
            if rejected is not None:
                rejected.append(raw)
            continue
        candidates.setdefault(isbn, None)

    isbns = list(candidates)
    if limit is not None:
        isbns = isbns[:limit]
    return isbns


class Resolver:
    """Resolve book metadata across several providers.

    The registry supplies the adapter for each Source. Sources are passed
    per call, in precedence order: when providers disagree on a field, the
    earlier source wins. Every call waits for every provider it started;
    completion order never affects the result.
    """

    def __init__(self, registry: ProviderRegistry, *, max_candidates: int | None = None) -> None:
        if max_candidates is not None and max_candidates < 1:
            msg = f"max_candidates must be at least 1, got {max_candidates}"
            raise ValueError(msg)
        self._registry = registry
        self._max_candidates = max_candidates

    def _select(self, sources: Iterable[Source]) -> list[tuple[Source, MetadataProvider]]:
        """Resolve selected sources to providers, dropping repeats and keeping order."""
        unique = list(dict.fromkeys(sources))
        if not unique:
            msg = "at least one source must be selected"
            raise ValueError(msg)
        return [(source, self._registry.get(source)) for source in unique]

    async def resolve_by_isbn(
        self,
        sources: Iterable[Source],
        isbn: str,
        *,
        diagnostics: ResolutionDiagnostics | None = None,
    ) -> Metadata:
        """Look an ISBN up in every selected source and merge the answers.

        Args:
            sources: Non-empty sources in precedence order.
            isbn: ISBN-10 or ISBN-13, hyphens allowed.
            diagnostics: Optional collector for per-source failures.

        Returns:
            The merged record, carrying the canonical ISBN-13.

        Raises:
            InvalidIdentifierError: If isbn is malformed.
            AllSourcesFailedError: If no source returned data.
            SourceNotRegisteredError: If a selected source has no provider.
        """
        selected = self._select(sources)
        canonical = validate_isbn(isbn)

        outcome = await self._resolve_isbn(selected, canonical)
        if diagnostics is not None:
            diagnostics.source_failures.extend(outcome.failures)
        if outcome.record is None:
            logger.warning("All %d source(s) failed for %s", len(selected), canonical)
            raise AllSourcesFailedError(outcome.failures, isbn=canonical)
        return outcome.record

    async def resolve_by_description(
        self,
        primary: Source,
        sources: Iterable[Source],
        text: str,
        *,
        diagnostics: ResolutionDiagnostics | None = None,
    ) -> list[Metadata]:
        """Turn free text into ISBNs via one primary source, then resolve each ISBN.

        Only ``primary`` is asked to search, so a call issues at most one
        free-text query. Each candidate ISBN is then resolved against all of
        ``sources``. Candidates that fail are dropped and recorded in
        ``diagnostics``.

        Returns:
            Resolved records in the primary source's relevance order.

        Raises:
            NoCandidatesFoundError: If the primary source failed or found no valid ISBNs.
            AllSourcesFailedError: If every candidate failed to resolve.
            SourceNotRegisteredError: If a selected source has no provider.
        """
        selected = self._select(sources)
        primary_provider = self._registry.get(primary)

        query = text.strip() if text else ""
        if not query:
            raise NoCandidatesFoundError(text)

        try:
            raw = await self._discover(primary, primary_provider, query)
        except ProviderError as exc:
            if diagnostics is not None:
                diagnostics.source_failures.append(SourceFailure(primary, None, exc))
            logger.warning("Discovery via %s failed for %r: %s", primary.value, query, exc)
            raise NoCandidatesFoundError(query, cause=exc) from exc

        rejected = diagnostics.rejected_candidates if diagnostics is not None else None
        candidates = collect_candidates(raw, limit=self._max_candidates, rejected=rejected)
        if not candidates:
            logger.warning("No usable candidates from %s for %r", primary.value, query)
            raise NoCandidatesFoundError(query)
        logger.debug("Resolving %d candidate(s) for %r: %s", len(candidates), query, candidates)

        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(self._resolve_isbn(selected, isbn)) for isbn in candidates]

        records: list[Metadata] = []
        failures: list[SourceFailure] = []
        for task in tasks:
            outcome = task.result()
            failures.extend(outcome.failures)
            if diagnostics is not None:
                diagnostics.source_failures.extend(outcome.failures)
            if outcome.record is None:
                logger.info("Dropping candidate %s: no source returned data", outcome.isbn)
                if diagnostics is not None:
                    diagnostics.dropped_candidates.append(outcome.isbn)
                continue
            records.append(outcome.record)

        if not records:
            logger.warning("All %d candidate(s) failed for %r", len(candidates), query)
            raise AllSourcesFailedError(failures)
        return records

    async def _resolve_isbn(
        self, selected: list[tuple[Source, MetadataProvider]], isbn: str
    ) -> _IsbnOutcome:
        """Query every selected provider for one ISBN and merge whatever came back."""
        async with asyncio.TaskGroup() as tg:
            tasks = [
                tg.create_task(self._lookup(source, provider, isbn))
                for source, provider in selected
            ]

        partials: list[Metadata] = []
        failures: list[SourceFailure] = []
        for (source, _), task in zip(selected, tasks):
            result = task.result()
            if isinstance(result, SourceFailure):
                failures.append(result)
            elif result.is_empty:
                error = NotFoundError(f"{source.value} returned an empty record for {isbn}")
                failures.append(SourceFailure(source, isbn, error))
            else:
                partials.append(replace(result, isbn=isbn))

        if not partials:
            return _IsbnOutcome(isbn, None, failures)
        for failure in failures:
            logger.info("Ignoring failed source %s", failure)
        return _IsbnOutcome(isbn, merge(partials), failures)

    @staticmethod
    async def _lookup(
        source: Source, provider: MetadataProvider, isbn: str
    ) -> Metadata | SourceFailure:
        """Run one lookup, returning any failure as a value so the fan-out is never cancelled."""
        try:
            return await provider.lookup_by_isbn(isbn)
        except ProviderError as exc:
            return SourceFailure(source, isbn, exc)
        except Exception as exc:
            logger.warning(
                "Provider %s raised unexpectedly for %s", source.value, isbn, exc_info=True
            )
            return SourceFailure(source, isbn, _adapter_bug(source, exc))

    @staticmethod
    async def _discover(source: Source, provider: MetadataProvider, query: str) -> list[str]:
        try:
            return await provider.discover_isbns(query)
        except ProviderError:
            raise
        except Exception as exc:
            logger.warning(
                "Discovery via %s raised unexpectedly for %r", source.value, query, exc_info=True
            )
            raise _adapter_bug(source, exc) from exc
