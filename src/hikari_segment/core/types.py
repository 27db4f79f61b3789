"""Data types and result structures for segmentation and reading."""

from dataclasses import dataclass, field
from typing import List, Dict, Any

@dataclass(frozen=True)
class SentenceUnit:
    """One sentence cut from a document, in reading order."""
    text: str                   # source[start:end], trimmed of outer whitespace
    paragraph_index: int        # 0-based, dense over non-blank paragraphs
    order: int                  # 0-based position in the output sequence
    start: int                  # code-point offset of text in the source
    end: int                    # exclusive end offset

    def __len__(self) -> int:
        return self.end - self.start

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for JSON output and graph state."""
        return {
            "text": self.text,
            "paragraph_index": self.paragraph_index,
            "order": self.order,
            "start": self.start,
            "end": self.end,
        }

@dataclass
class Page:
    """A reader page: a contiguous slice of sentence units."""
    index: int
    sentences: List[SentenceUnit] = field(default_factory=list)

    @property
    def paragraph_indices(self) -> List[int]:
        """Distinct paragraph indices on this page, in order."""
        seen: List[int] = []
        for sentence in self.sentences:
            if not seen or seen[-1] != sentence.paragraph_index:
                seen.append(sentence.paragraph_index)
        return seen

    @property
    def first_order(self) -> int:
        return self.sentences[0].order if self.sentences else -1

    @property
    def last_order(self) -> int:
        return self.sentences[-1].order if self.sentences else -1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "paragraph_indices": self.paragraph_indices,
            "sentences": [s.to_dict() for s in self.sentences],
        }
