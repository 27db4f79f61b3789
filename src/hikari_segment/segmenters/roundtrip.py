"""Recover the whitespace between sentence units and rebuild the source."""

from typing import List, Sequence
from ..core.types import SentenceUnit

def separators(text: str, units: Sequence[SentenceUnit]) -> List[str]:
    """
    Return the gaps around sentence units.

    Args:
        text: The text the units were cut from
        units: Sentence units in order

    Returns:
        List[str]: len(units) + 1 gaps; gaps[0] precedes the first unit

    Raises:
        ValueError: If units overlap or are out of order
    """
    gaps = []
    cursor = 0
    for unit in units:
        if unit.start < cursor:
            raise ValueError(f"Sentence {unit.order} overlaps the previous one")
        gaps.append(text[cursor:unit.start])
        cursor = unit.end
    gaps.append(text[cursor:])
    return gaps

def reassemble(units: Sequence[SentenceUnit], gaps: Sequence[str]) -> str:
    """Interleave gaps and sentence texts back into one string."""
    if len(gaps) != len(units) + 1:
        raise ValueError(f"Expected {len(units) + 1} gaps, got {len(gaps)}")

    parts = [gaps[0]]
    for unit, gap in zip(units, gaps[1:]):
        parts.append(unit.text)
        parts.append(gap)
    return "".join(parts)
