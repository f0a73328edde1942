# ABOUTME: Shared pytest fixtures for bookrecon tests.
# ABOUTME: Provides fake providers and registries built around the Time War partial-data scenario.

import pytest

from bookrecon.metadata.registry import ProviderRegistry
from bookrecon.metadata.source import Source
from bookrecon.metadata.types import Metadata
from tests.fixtures.providers import TIME_WAR_ISBN, FakeProvider


@pytest.fixture
def time_war_google() -> FakeProvider:
    """Google Books fake that knows the title but no authors."""
    return FakeProvider(
        "googlebooks",
        records={
            TIME_WAR_ISBN: Metadata(
                title="This Is How You Lose the Time War",
                publisher="Simon and Schuster",
            )
        },
        candidates=[TIME_WAR_ISBN],
    )


@pytest.fixture
def time_war_openlibrary() -> FakeProvider:
    """Open Library fake that knows the authors but no title."""
    return FakeProvider(
        "openlibrary",
        records={
            TIME_WAR_ISBN: Metadata(
                authors=("Amal El-Mohtar", "Max Gladstone"),
                publisher="Saga Press",
                page_count=209,
            )
        },
    )


@pytest.fixture
def time_war_registry(
    time_war_google: FakeProvider, time_war_openlibrary: FakeProvider
) -> ProviderRegistry:
    """Registry wiring the two Time War fakes to their sources."""
    return ProviderRegistry(
        {
            Source.GOOGLE_BOOKS: time_war_google,
            Source.OPEN_LIBRARY: time_war_openlibrary,
        }
    )
