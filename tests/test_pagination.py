"""Test reader pagination and settings."""

import pytest
from pydantic import ValidationError

from hikari_segment.runtime.pagination import (
    ReaderSettings,
    paginate,
    prefetch_window,
    page_for_order,
    SENTENCES_PER_PAGE_ENV,
    PREFETCH_PAGES_ENV,
)


@pytest.fixture
def numbered_units(segmenter):
    """Twenty-five one-line sentences in a single paragraph."""
    text = " ".join(f"Sentence {i}." for i in range(25))
    units = segmenter.segment(text)
    assert len(units) == 25
    return units


class TestPaginate:
    """Test splitting sentences into pages."""

    def test_page_sizes(self, numbered_units):
        pages = paginate(numbered_units, 12)

        assert [len(p.sentences) for p in pages] == [12, 12, 1]
        assert [p.index for p in pages] == [0, 1, 2]
        assert (pages[1].first_order, pages[1].last_order) == (12, 23)
        assert pages[2].sentences[0].text == "Sentence 24."

    def test_empty(self):
        assert paginate([], 12) == []

    def test_invalid_page_size(self, numbered_units):
        with pytest.raises(ValueError, match="sentences_per_page"):
            paginate(numbered_units, 0)

    def test_paragraph_indices(self, segmenter):
        units = segmenter.segment("One. Two.\nThree.\nFour.")
        pages = paginate(units, 3)

        assert pages[0].paragraph_indices == [0, 1]
        assert pages[1].paragraph_indices == [2]

    def test_page_serialization(self, segmenter):
        page = paginate(segmenter.segment("One. Two."), 5)[0]
        data = page.to_dict()

        assert data["index"] == 0
        assert data["paragraph_indices"] == [0]
        assert [s["text"] for s in data["sentences"]] == ["One.", "Two."]

    def test_page_for_order(self):
        assert page_for_order(0, 12) == 0
        assert page_for_order(11, 12) == 0
        assert page_for_order(12, 12) == 1
        with pytest.raises(ValueError):
            page_for_order(-1, 12)


class TestPrefetchWindow:
    """Test the translation prefetch window."""

    def test_window(self):
        assert prefetch_window(0, 5, 1) == range(0, 2)
        assert prefetch_window(4, 5, 2) == range(4, 5)

    def test_no_prefetch(self):
        assert prefetch_window(2, 5, 0) == range(2, 3)

    def test_out_of_range(self):
        assert len(prefetch_window(5, 5, 1)) == 0
        assert len(prefetch_window(0, 0, 1)) == 0


class TestReaderSettings:
    """Test reader settings defaults and environment parsing."""

    def test_defaults(self):
        settings = ReaderSettings()
        assert settings.sentences_per_page == 12
        assert settings.translation_prefetch_pages == 1

    def test_validation(self):
        with pytest.raises(ValidationError):
            ReaderSettings(sentences_per_page=0)

    def test_from_env(self):
        settings = ReaderSettings.from_env({SENTENCES_PER_PAGE_ENV: "5", PREFETCH_PAGES_ENV: "3"})
        assert settings.sentences_per_page == 5
        assert settings.translation_prefetch_pages == 3

    def test_from_env_clamps_and_falls_back(self):
        settings = ReaderSettings.from_env({SENTENCES_PER_PAGE_ENV: "0", PREFETCH_PAGES_ENV: "-3"})
        assert settings.sentences_per_page == 1
        assert settings.translation_prefetch_pages == 0

        settings = ReaderSettings.from_env({SENTENCES_PER_PAGE_ENV: "many", PREFETCH_PAGES_ENV: ""})
        assert settings.sentences_per_page == 12
        assert settings.translation_prefetch_pages == 1

    def test_from_process_env(self, monkeypatch):
        monkeypatch.setenv(SENTENCES_PER_PAGE_ENV, "7")
        monkeypatch.delenv(PREFETCH_PAGES_ENV, raising=False)

        settings = ReaderSettings.from_env()
        assert settings.sentences_per_page == 7
        assert settings.translation_prefetch_pages == 1
