# ABOUTME: Shared pytest fixtures for Babeltui tests.
# ABOUTME: Provides sample records and a fake clipboard for session tests.

import pytest

from babeltui.catalog.types import BookRecord
from tests.fixtures.fakes import FakeClipboard


@pytest.fixture
def sample_records() -> list[BookRecord]:
    """Three records with distinct values in every field."""
    return [
        BookRecord(
            title="L'Étranger",
            author="Albert Camus",
            detail_url="https://www.babelio.com/livres/Camus-LEtranger/3635",
            thumbnail_url="https://www.babelio.com/couv/cvt_LEtranger_5180.jpg",
        ),
        BookRecord(
            title="Le mythe de Sisyphe",
            author="Albert Camus",
            detail_url="https://www.babelio.com/livres/Camus-Le-mythe-de-Sisyphe/3638",
            thumbnail_url="https://www.babelio.com/couv/cvt_Le-mythe-de-Sisyphe_1226.jpg",
        ),
        BookRecord(
            title="Vendredi ou la vie sauvage",
            author="Michel Tournier",
            detail_url="https://www.babelio.com/livres/Tournier-Vendredi-ou-la-vie-sauvage/2799",
            thumbnail_url="https://www.babelio.com/couv/cvt_Vendredi-ou-la-vie-sauvage_4491.jpg",
        ),
    ]


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()
