# ABOUTME: Unit tests for the Metadata dataclass.
# ABOUTME: Validates construction, immutability, properties, and dict conversion.

import dataclasses

import pytest

from bookrecon.metadata import Metadata


class TestMetadata:
    """Tests for Metadata dataclass."""

    def test_empty_construction(self) -> None:
        """A Metadata can be created with no fields at all."""
        meta = Metadata()
        assert meta.isbn is None
        assert meta.title is None
        assert meta.authors == ()
        assert meta.author == ""
        assert meta.description is None
        assert meta.publisher is None
        assert meta.cover_url is None
        assert meta.subjects == ()
        assert meta.extra == {}
        assert meta.is_empty

    def test_lists_are_stored_as_tuples(self) -> None:
        """Author and subject lists are converted to tuples."""
        meta = Metadata(authors=["Amal El-Mohtar", "Max Gladstone"], subjects=["Fiction"])
        assert meta.authors == ("Amal El-Mohtar", "Max Gladstone")
        assert meta.subjects == ("Fiction",)

    def test_author_property_joins_names(self) -> None:
        """author joins names in credit order."""
        meta = Metadata(authors=("Amal El-Mohtar", "Max Gladstone"))
        assert meta.author == "Amal El-Mohtar, Max Gladstone"

    def test_is_frozen(self) -> None:
        """Records cannot be mutated once built."""
        meta = Metadata(title="Dune")
        with pytest.raises(dataclasses.FrozenInstanceError):
            meta.title = "Not Dune"  # type: ignore[misc]

    def test_identifier_alone_is_empty(self) -> None:
        """A record with only an ISBN and extras carries no metadata."""
        meta = Metadata(isbn="9780441172719", extra={"googlebooks_id": "x"})
        assert meta.is_empty

    def test_any_field_makes_record_non_empty(self) -> None:
        """A single populated field is enough to count as data."""
        assert not Metadata(page_count=412).is_empty
        assert not Metadata(authors=("Frank Herbert",)).is_empty

    def test_to_dict_uses_plain_lists(self) -> None:
        """to_dict produces JSON-friendly lists."""
        meta = Metadata(isbn="9780441172719", title="Dune", authors=("Frank Herbert",))
        data = meta.to_dict()
        assert data["isbn"] == "9780441172719"
        assert data["title"] == "Dune"
        assert data["authors"] == ["Frank Herbert"]
        assert data["subjects"] == []
        assert data["extra"] == {}

    def test_records_are_hashable(self) -> None:
        """Equal records hash equally, so they can sit in sets and dict keys."""
        first = Metadata(title="Dune", authors=["Frank Herbert"], extra={"k": "v"})
        second = Metadata(title="Dune", authors=("Frank Herbert",), extra={"k": "v"})
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_extra_is_read_only(self) -> None:
        """extra cannot be changed through a returned record."""
        meta = Metadata(extra={"googlebooks_id": "abc"})
        with pytest.raises(TypeError):
            meta.extra["googlebooks_id"] = "xyz"  # type: ignore[index]

    def test_extra_is_copied_from_caller(self) -> None:
        """Mutating the dict passed in does not reach the record."""
        source = {"googlebooks_id": "abc"}
        meta = Metadata(extra=source)
        source["googlebooks_id"] = "xyz"
        assert meta.extra["googlebooks_id"] == "abc"
