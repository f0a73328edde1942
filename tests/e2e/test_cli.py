# ABOUTME: End-to-end tests for the bookrecon CLI.
# ABOUTME: Invokes commands via Click's CliRunner with the provider registry swapped for fakes.

import json

import pytest
from click.testing import CliRunner

from bookrecon.cli import cli
from bookrecon.metadata.errors import UnreachableError
from bookrecon.metadata.registry import ProviderRegistry
from bookrecon.metadata.source import Source
from tests.fixtures.providers import DUNE_ISBN, TIME_WAR_ISBN, FakeProvider


@pytest.fixture
def fake_registry(
    monkeypatch: pytest.MonkeyPatch, time_war_registry: ProviderRegistry
) -> ProviderRegistry:
    """Make every command resolve against the Time War fakes instead of the network."""
    time_war_registry.register(
        Source.GOODREADS, FakeProvider("goodreads", fail_with=UnreachableError("timed out"))
    )
    monkeypatch.setattr(
        "bookrecon.cli.runner.build_registry",
        lambda http_client, google_api_key=None: time_war_registry,
    )
    return time_war_registry


class TestCliIsbn:
    """E2e tests for `bookrecon isbn`."""

    def test_isbn_shows_merged_metadata(self, fake_registry: ProviderRegistry) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["isbn", TIME_WAR_ISBN])
        assert result.exit_code == 0
        assert "This Is How You Lose the Time War" in result.output
        assert "Amal El-Mohtar" in result.output
        assert "Simon and Schuster" in result.output

    def test_isbn_json_output(self, fake_registry: ProviderRegistry) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["isbn", "1534431004", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["isbn"] == TIME_WAR_ISBN
        assert data["title"] == "This Is How You Lose the Time War"
        assert data["authors"] == ["Amal El-Mohtar", "Max Gladstone"]
        assert data["page_count"] == 209

    def test_source_order_from_options(self, fake_registry: ProviderRegistry) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["isbn", TIME_WAR_ISBN, "-s", "openlibrary", "-s", "googlebooks", "--json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["publisher"] == "Saga Press"

    def test_failed_source_is_reported(self, fake_registry: ProviderRegistry) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["isbn", TIME_WAR_ISBN, "-s", "googlebooks", "-s", "goodreads"])
        assert result.exit_code == 0
        assert "1 source failure(s)" in result.output
        assert "unreachable" in result.output

    def test_unknown_book_exits_1(self, fake_registry: ProviderRegistry) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["isbn", DUNE_ISBN])
        assert result.exit_code == 1
        assert "no source had data" in result.output
        assert "not_found" in result.output

    def test_invalid_isbn_exits_1(self, fake_registry: ProviderRegistry) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["isbn", "12345"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unknown_source_is_usage_error(self, fake_registry: ProviderRegistry) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["isbn", TIME_WAR_ISBN, "-s", "amazon"])
        assert result.exit_code == 2
        assert "unknown source" in result.output


class TestCliSearch:
    """E2e tests for `bookrecon search`."""

    def test_search_shows_results(self, fake_registry: ProviderRegistry) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["search", "love letters across a time war"])
        assert result.exit_code == 0
        assert "Result 1 of 1" in result.output
        assert "Max Gladstone" in result.output
        assert "1 result(s)" in result.output

    def test_search_json_output(self, fake_registry: ProviderRegistry) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["search", "time war", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert isinstance(data, list)
        assert [item["isbn"] for item in data] == [TIME_WAR_ISBN]

    def test_goodreads_primary_exits_1(self, fake_registry: ProviderRegistry) -> None:
        """A primary that offers no candidates ends the search with an error."""
        runner = CliRunner()
        result = runner.invoke(cli, ["search", "time war", "-p", "goodreads"])
        assert result.exit_code == 1
        assert "no candidate identifiers found" in result.output

    def test_max_candidates_must_be_positive(self, fake_registry: ProviderRegistry) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["search", "time war", "-n", "0"])
        assert result.exit_code == 2


class TestCliRoot:
    """E2e tests for the root command group."""

    def test_help_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "isbn" in result.output
        assert "search" in result.output
