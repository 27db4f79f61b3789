"""Deterministic sentence segmenter with no statistical model."""

import re
from enum import Enum
from typing import List, Optional

from ..core.abc import Logger, Meter
from ..core.types import SentenceUnit
from ..rules.schema import SegmentationRules
from .paragraphs import LINE_BREAK_CHARS, split_paragraphs

CLOSING_BRACKETS = frozenset(")]}）］｝】〕》〉")

# attach after a terminator; also apostrophes, so never quote openers
TRAILING_APOSTROPHES = frozenset("'’")

_ACRONYM = re.compile(r"^(?:[^\W\d_]\.)+[^\W\d_]$")

class ScanState(Enum):
    """Where the paragraph scanner currently is."""
    BETWEEN = "between"                        # skipping whitespace before a sentence
    IN_SENTENCE = "in_sentence"
    IN_QUOTE = "in_quote"                      # quote depth > 0, terminators suppressed
    ELLIPSIS_CANDIDATE = "ellipsis_candidate"  # ellipsis seen, waiting for the next word

class SentenceSegmenter:
    """
    Deterministic rule-based sentence segmenter.

    Scans each paragraph once, left to right. Boundary rules in precedence order:
    abbreviation exception, ellipsis, quoted dialogue, ordinary terminator, and a
    per-line fallback for unpunctuated text. Every ambiguous case falls back to
    keeping text rather than raising.
    """

    def __init__(self, rules: Optional[SegmentationRules] = None, *,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize segmenter.

        Args:
            rules: Segmentation rules (defaults to SegmentationRules())
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.rules = rules if rules is not None else SegmentationRules()
        self.log = logger
        self.meter = meter

        rules = self.rules
        if rules.case_sensitive:
            self._abbreviations = frozenset(rules.abbreviations)
        else:
            self._abbreviations = frozenset(a.casefold() for a in rules.abbreviations)
        self._openers = dict(rules.quote_pairs)
        self._closers = frozenset(rules.quote_pairs.values())
        self._terminators = frozenset(rules.terminators)
        self._wide = frozenset(rules.wide_terminators)
        self._ellipsis = frozenset(rules.ellipsis_chars)
        self._run_chars = self._terminators | self._ellipsis
        self._marks = self._run_chars | self._wide
        self._attachable = self._closers | CLOSING_BRACKETS | TRAILING_APOSTROPHES

    def segment(self, text: str) -> List[SentenceUnit]:
        """
        Segment text into sentence units.

        Args:
            text: Decoded document text

        Returns:
            List[SentenceUnit]: Sentences in reading order; empty for blank input

        Raises:
            TypeError: If text is not a str
        """
        if not isinstance(text, str):
            raise TypeError(f"segment() expects str, got {type(text).__name__}")

        units: List[SentenceUnit] = []
        if not text or text.isspace():
            return units

        paragraphs = split_paragraphs(text, self.rules.paragraph_mode)
        for paragraph_index, (start, end) in enumerate(paragraphs):
            self._scan_paragraph(text, start, end, paragraph_index, units)

        if self.meter:
            self.meter.inc("segmenter.paragraphs", len(paragraphs))
            self.meter.inc("segmenter.sentences", len(units))
        if self.log:
            self.log.info("segmented", sentences=len(units), paragraphs=len(paragraphs),
                          text_length=len(text))

        return units

    def _scan_paragraph(self, text: str, start: int, end: int,
                        paragraph_index: int, units: List[SentenceUnit]) -> None:
        """Emit the sentences of text[start:end] into units."""
        state = ScanState.BETWEEN
        sentence_start = start
        quotes: List[str] = []        # expected closing characters, innermost last
        saw_terminal = False
        saw_space = False
        candidate_end = start
        i = start

        while i < end:
            ch = text[i]

            if state is ScanState.BETWEEN:
                if ch.isspace():
                    i += 1
                    continue
                state = ScanState.IN_SENTENCE
                sentence_start = i
                saw_terminal = False

            if state is ScanState.ELLIPSIS_CANDIDATE:
                if ch.isspace():
                    saw_space = True
                    i += 1
                    continue
                if saw_space and ch.isupper():
                    self._emit(text, sentence_start, candidate_end, paragraph_index, units)
                    state = ScanState.BETWEEN
                    continue
                state = ScanState.IN_SENTENCE

            if ch in LINE_BREAK_CHARS:
                # only inside blank_line paragraphs
                if not saw_terminal:
                    self._emit(text, sentence_start, i, paragraph_index, units)
                    if self.meter:
                        self.meter.inc("segmenter.line_fallback")
                    quotes.clear()
                    state = ScanState.BETWEEN
                i += 1
                continue

            transition = self._quote_transition(ch, quotes)
            if transition is not None:
                if quotes:
                    state = ScanState.IN_QUOTE
                    i += 1
                    continue
                state = ScanState.IN_SENTENCE
                if transition == "close" and text[i - 1] in self._marks \
                        and self._quote_closes_sentence(text, i + 1, end):
                    stop = self._attach_closers(text, i + 1, end)
                    self._emit(text, sentence_start, stop, paragraph_index, units)
                    state = ScanState.BETWEEN
                    i = stop
                    continue
                i += 1
                continue

            if ch in self._marks:
                saw_terminal = True
            if state is ScanState.IN_QUOTE:
                i += 1
                continue

            if ch in self._wide:
                stop = i
                while stop < end and text[stop] in self._wide:
                    stop += 1
                stop = self._attach_closers(text, stop, end)
                self._emit(text, sentence_start, stop, paragraph_index, units)
                state = ScanState.BETWEEN
                i = stop
                continue

            if ch in self._run_chars:
                stop = i
                while stop < end and text[stop] in self._run_chars:
                    stop += 1
                kind = self._classify_run(text[i:stop])

                if kind == "period" and self._is_abbreviation(text, start, i):
                    i = stop
                    continue

                after = self._attach_closers(text, stop, end)
                if kind == "ellipsis":
                    state = ScanState.ELLIPSIS_CANDIDATE
                    candidate_end = after
                    saw_space = False
                    i = after
                    continue

                if after >= end or text[after].isspace():
                    self._emit(text, sentence_start, after, paragraph_index, units)
                    state = ScanState.BETWEEN
                    i = after
                    continue
                i = stop
                continue

            i += 1

        if state is ScanState.BETWEEN:
            return
        if quotes:
            if self.meter:
                self.meter.inc("segmenter.unterminated_quote")
            if self.log:
                self.log.warn("unterminated_quote", paragraph=paragraph_index, depth=len(quotes))
        self._emit(text, sentence_start, end, paragraph_index, units)

    def _emit(self, text: str, start: int, end: int,
              paragraph_index: int, units: List[SentenceUnit]) -> None:
        """Append text[start:end], trimmed, unless it is blank."""
        while start < end and text[start].isspace():
            start += 1
        while end > start and text[end - 1].isspace():
            end -= 1
        if start >= end:
            return

        units.append(SentenceUnit(
            text=text[start:end],
            paragraph_index=paragraph_index,
            order=len(units),
            start=start,
            end=end,
        ))
        if self.meter:
            self.meter.observe("segmenter.sentence_length", float(end - start))

    def _quote_transition(self, ch: str, quotes: List[str]) -> Optional[str]:
        """Update the quote stack for ch; return "open", "close" or None."""
        if ch in self._closers and ch in quotes:
            # pop through any unclosed inner quotes
            while quotes.pop() != ch:
                pass
            return "close"
        closer = self._openers.get(ch)
        if closer is not None:
            quotes.append(closer)
            return "open"
        return None

    def _quote_closes_sentence(self, text: str, pos: int, end: int) -> bool:
        """Decide whether terminal punctuation just inside a closed quote ends the sentence."""
        pos = self._attach_closers(text, pos, end)
        if pos >= end:
            return True
        if text[pos] in self._openers:
            return True
        if not text[pos].isspace():
            return False
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            return True
        return text[pos].isupper() or text[pos] in self._openers

    def _attach_closers(self, text: str, pos: int, end: int) -> int:
        while pos < end and text[pos] in self._attachable:
            pos += 1
        return pos

    def _classify_run(self, run: str) -> str:
        """Classify a run of terminal characters as period, ellipsis or terminal."""
        if all(c == "." for c in run):
            if len(run) >= self.rules.ellipsis_min_run:
                return "ellipsis"
            return "period" if len(run) == 1 else "terminal"
        if all(c == "." or c in self._ellipsis for c in run):
            return "ellipsis"
        return "terminal"

    def _is_abbreviation(self, text: str, floor: int, period: int) -> bool:
        """Check the word token before text[period] against the abbreviation rules."""
        limit = max(floor, period - self.rules.max_abbreviation_length)
        j = period
        while j > limit and (text[j - 1].isalpha() or text[j - 1] == "."):
            j -= 1
        if j > floor and (text[j - 1].isalpha() or text[j - 1] == "." or text[j - 1].isdigit()
                          or text[j - 1] == "_"):
            # token longer than the lookback, or glued to digits
            return False

        token = text[j:period].lstrip(".")
        if not token:
            return False

        key = token if self.rules.case_sensitive else token.casefold()
        if key in self._abbreviations:
            return True
        if self.rules.detect_acronyms and _ACRONYM.match(token):
            return True
        if self.rules.single_initials and len(token) == 1 and token.isupper() and token != "I":
            return True
        return False


def split_into_sentences(text: str, rules: Optional[SegmentationRules] = None) -> List[str]:
    """
    Segment text and return only the sentence strings.

    Args:
        text: Decoded document text
        rules: Optional segmentation rules

    Returns:
        List[str]: Sentence texts in reading order
    """
    return [unit.text for unit in SentenceSegmenter(rules).segment(text)]
