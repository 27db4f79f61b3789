"""Test translation batch planning."""

import pytest

from hikari_segment.core.types import SentenceUnit
from hikari_segment.runtime.batching import chunk_sentences, cache_key, batch_payload


def make_units(lengths):
    """Build sentence units of the given lengths laid out back to back."""
    units = []
    offset = 0
    for order, length in enumerate(lengths):
        units.append(SentenceUnit(text="x" * length, paragraph_index=0, order=order,
                                  start=offset, end=offset + length))
        offset += length + 1
    return units


class TestChunkSentences:
    """Test batch boundaries."""

    def test_batch_size_limit(self):
        batches = chunk_sentences(make_units([10] * 45), batch_size=20)
        assert [len(b) for b in batches] == [20, 20, 5]

    def test_character_limit(self):
        batches = chunk_sentences(make_units([3000, 1000, 1000]), max_characters=4500)
        assert [[len(u.text) for u in b] for b in batches] == [[3000, 1000], [1000]]

    def test_oversized_sentence_travels_alone(self):
        batches = chunk_sentences(make_units([5000, 10]), max_characters=4500)
        assert [[len(u.text) for u in b] for b in batches] == [[5000], [10]]

    def test_order_preserved(self):
        units = make_units([100] * 7)
        batches = chunk_sentences(units, batch_size=3)
        assert [u.order for b in batches for u in b] == list(range(7))

    def test_empty(self):
        assert chunk_sentences([]) == []

    def test_invalid_limits(self):
        with pytest.raises(ValueError, match="batch_size"):
            chunk_sentences(make_units([1]), batch_size=0)
        with pytest.raises(ValueError, match="max_characters"):
            chunk_sentences(make_units([1]), max_characters=0)

    def test_logs_plan(self, test_logger):
        chunk_sentences(make_units([5, 7]), batch_size=1, logger=test_logger)
        assert test_logger.messages == [
            ("info", "batches_planned", {"batches": 2, "sentences": 2, "max_sentence_length": 7.0})
        ]


class TestCacheKey:
    """Test translation cache keys and payloads."""

    def test_stable_key(self):
        key = cache_key("mock", "ja-en", "今日は晴れです。")
        assert key.startswith("mock:ja-en:")
        assert key == cache_key("mock", "ja-en", "今日は晴れです。")
        assert key != cache_key("mock", "en-ja", "今日は晴れです。")

    def test_unknown_direction(self):
        with pytest.raises(ValueError, match="Unknown translation direction"):
            cache_key("mock", "ja-fr", "text")

    def test_payload(self):
        units = make_units([3, 4])
        payload = batch_payload(units, "en-ja")

        assert payload == {
            "sentences": ["xxx", "xxxx"],
            "orders": [0, 1],
            "src": "en",
            "tgt": "ja",
        }
