"""Translation batch planning over sentence units."""

from typing import Dict, List, Optional, Sequence
from ..core.abc import Logger
from ..core.stats import length_summary
from ..core.types import SentenceUnit
from ..core.util import hash_text

DEFAULT_BATCH_SIZE = 20
DEFAULT_MAX_CHARACTERS_PER_BATCH = 4500

DIRECTIONS = {
    "ja-en": ("ja", "en"),
    "en-ja": ("en", "ja"),
}

def chunk_sentences(units: Sequence[SentenceUnit],
                    batch_size: int = DEFAULT_BATCH_SIZE,
                    max_characters: int = DEFAULT_MAX_CHARACTERS_PER_BATCH,
                    logger: Optional[Logger] = None) -> List[List[SentenceUnit]]:
    """
    Group sentences into translation batches.

    A batch closes when it already holds batch_size sentences, or when adding the
    next sentence would push it past max_characters. A sentence longer than
    max_characters still travels, alone in its batch.

    Args:
        units: Sentence units in reading order
        batch_size: Maximum sentences per batch
        max_characters: Soft character cap per batch
        logger: Optional structured logger

    Returns:
        List[List[SentenceUnit]]: Batches in order, none empty
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")
    if max_characters < 1:
        raise ValueError(f"max_characters must be >= 1, got {max_characters}")

    batches: List[List[SentenceUnit]] = []
    current: List[SentenceUnit] = []
    current_characters = 0

    for unit in units:
        length = len(unit.text)
        if len(current) >= batch_size or (
                current_characters > 0 and current_characters + length > max_characters):
            batches.append(current)
            current = []
            current_characters = 0
        current.append(unit)
        current_characters += length

    if current:
        batches.append(current)

    if logger:
        summary = length_summary(units)
        logger.info("batches_planned", batches=len(batches), sentences=summary["count"],
                    max_sentence_length=summary["max"])
    return batches

def cache_key(provider: str, direction: str, text: str) -> str:
    """
    Cache key for a translated sentence.

    Raises:
        ValueError: If direction is not a known language pair
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown translation direction: {direction!r}")
    return f"{provider}:{direction}:{hash_text(text)}"

def batch_payload(batch: Sequence[SentenceUnit], direction: str) -> Dict[str, object]:
    """Request body for one batch: sentence texts plus source and target languages."""
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown translation direction: {direction!r}")
    src, tgt = DIRECTIONS[direction]
    return {
        "sentences": [unit.text for unit in batch],
        "orders": [unit.order for unit in batch],
        "src": src,
        "tgt": tgt,
    }
