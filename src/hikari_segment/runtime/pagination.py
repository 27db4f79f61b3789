"""Reader pagination over sentence units."""

import os
from typing import List, Mapping, Optional, Sequence
from pydantic import BaseModel, Field
from ..core.types import Page, SentenceUnit

SENTENCES_PER_PAGE_ENV = "HIKARI_SENTENCES_PER_PAGE"
PREFETCH_PAGES_ENV = "HIKARI_TRANSLATION_PREFETCH_PAGES"

def _parse_number(value: Optional[str], fallback: int, minimum: int) -> int:
    if not value:
        return fallback
    try:
        parsed = int(value.strip(), 10)
    except ValueError:
        return fallback
    return max(parsed, minimum)

class ReaderSettings(BaseModel):
    """Pagination and prefetch settings for the reader."""
    sentences_per_page: int = Field(default=12, ge=1, description="Sentences shown per reader page")
    translation_prefetch_pages: int = Field(default=1, ge=0,
                                            description="Pages ahead to translate before they are opened")

    class Config:
        extra = "forbid"
        frozen = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReaderSettings":
        """
        Build settings from environment variables.

        Unparsable values fall back to the defaults; parsed values are clamped to
        the minimum instead of being rejected.
        """
        env = os.environ if environ is None else environ
        return cls(
            sentences_per_page=_parse_number(env.get(SENTENCES_PER_PAGE_ENV), 12, 1),
            translation_prefetch_pages=_parse_number(env.get(PREFETCH_PAGES_ENV), 1, 0),
        )

def paginate(units: Sequence[SentenceUnit], sentences_per_page: int = 12) -> List[Page]:
    """
    Split sentence units into consecutive reader pages.

    Args:
        units: Sentence units in reading order
        sentences_per_page: Page size, at least 1

    Returns:
        List[Page]: Pages in order; the last one may be short
    """
    if sentences_per_page < 1:
        raise ValueError(f"sentences_per_page must be >= 1, got {sentences_per_page}")

    return [
        Page(index=page_index, sentences=list(units[offset:offset + sentences_per_page]))
        for page_index, offset in enumerate(range(0, len(units), sentences_per_page))
    ]

def prefetch_window(page_index: int, total_pages: int, prefetch_pages: int) -> range:
    """
    Pages to translate when page_index is opened: itself plus the next
    prefetch_pages, clipped to the document.
    """
    if total_pages <= 0 or page_index >= total_pages:
        return range(0)
    page_index = max(page_index, 0)
    return range(page_index, min(total_pages, page_index + prefetch_pages + 1))

def page_for_order(order: int, sentences_per_page: int) -> int:
    """Index of the page that holds the sentence at the given order."""
    if order < 0:
        raise ValueError(f"order must be >= 0, got {order}")
    return order // sentences_per_page
