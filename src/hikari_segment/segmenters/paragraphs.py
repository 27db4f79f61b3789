"""Paragraph boundary detection."""

import re
from typing import List, Tuple

LINE_BREAK_CHARS = frozenset("\n\r\u2028\u2029")

_LINE_BREAK = re.compile(r"\r\n|[\n\r\u2028\u2029]")
# a line break followed by one or more whitespace-only lines
_BLANK_LINE_BREAK = re.compile(
    r"(?:\r\n|[\n\r\u2028\u2029])(?:[^\S\r\n\u2028\u2029]*(?:\r\n|[\n\r\u2028\u2029]))+"
)

def split_paragraphs(text: str, mode: str = "line") -> List[Tuple[int, int]]:
    """
    Find paragraph spans in text.

    Break characters stay outside the spans so callers can recover them from
    the gaps. Whitespace-only paragraphs are dropped.

    Args:
        text: Document text
        mode: "line" (every line break) or "blank_line" (blank lines only)

    Returns:
        List[Tuple[int, int]]: (start, end) offsets of non-blank paragraphs
    """
    if mode == "line":
        pattern = _LINE_BREAK
    elif mode == "blank_line":
        pattern = _BLANK_LINE_BREAK
    else:
        raise ValueError(f"Unknown paragraph mode: {mode!r}")

    spans = []
    cursor = 0
    for match in pattern.finditer(text):
        spans.append((cursor, match.start()))
        cursor = match.end()
    spans.append((cursor, len(text)))

    return [(start, end) for start, end in spans if start < end and not text[start:end].isspace()]
