"""Sentence length statistics."""

import numpy as np
from typing import Dict, Sequence
from .types import SentenceUnit

def sentence_lengths(units: Sequence[SentenceUnit]) -> np.ndarray:
    """
    Code-point lengths of sentence texts.

    Args:
        units: Sentence units in any order

    Returns:
        np.ndarray: Shape (N,) integer lengths
    """
    return np.fromiter((len(u.text) for u in units), dtype=np.int64, count=len(units))

def length_summary(units: Sequence[SentenceUnit]) -> Dict[str, float]:
    """
    Summarize sentence lengths for diagnostics.

    Args:
        units: Sentence units

    Returns:
        Dict[str, float]: count, mean, min, max and p95 (all zero when empty)
    """
    lengths = sentence_lengths(units)
    if lengths.size == 0:
        return {"count": 0, "mean": 0.0, "min": 0.0, "max": 0.0, "p95": 0.0}
    return {
        "count": int(lengths.size),
        "mean": float(lengths.mean()),
        "min": float(lengths.min()),
        "max": float(lengths.max()),
        "p95": float(np.percentile(lengths, 95)),
    }
