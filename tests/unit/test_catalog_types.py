# ABOUTME: Unit tests for the BookRecord and ExtractedFields data structures.
# ABOUTME: Verifies defaults, the display label, and immutability.

import dataclasses

import pytest

from babeltui.catalog.types import BookRecord, ExtractedFields


class TestBookRecord:
    """Tests for the BookRecord dataclass."""

    def test_display_label_joins_title_and_author(self) -> None:
        """display_label is '<title> by <author>'."""
        record = BookRecord(title="La Peste", author="Albert Camus", detail_url="u")
        assert record.display_label == "La Peste by Albert Camus"

    def test_thumbnail_defaults_to_empty(self) -> None:
        """A record without a thumbnail has an empty string, not None."""
        record = BookRecord(title="T", author="A", detail_url="u")
        assert record.thumbnail_url == ""

    def test_record_is_immutable(self) -> None:
        """Fields cannot be reassigned after construction."""
        record = BookRecord(title="T", author="A", detail_url="u")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.title = "Other"  # type: ignore[misc]


class TestExtractedFields:
    """Tests for the ExtractedFields container."""

    def test_defaults_are_empty(self) -> None:
        fields = ExtractedFields()
        assert fields.titles == ()
        assert fields.authors == ()
        assert fields.detail_urls == ()
        assert fields.thumbnail_urls == ()
