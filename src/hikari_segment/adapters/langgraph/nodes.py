"""LangGraph node factories for sentence segmentation."""

from langchain_core.runnables import RunnableLambda
from ...core.abc import Segmenter
from ...core.stats import length_summary
from ...core.types import SentenceUnit
from ...runtime.pagination import ReaderSettings, paginate
from .state_keys import DOCUMENT_TEXT, SENTENCES, PAGES, SENTENCE_STATS

def make_segment_node(segmenter: Segmenter, text_key: str = DOCUMENT_TEXT,
                      with_stats: bool = False):
    """
    Create a LangGraph node that segments document text into sentences.

    Args:
        segmenter: Configured segmenter instance
        text_key: State key containing the document text
        with_stats: Also write a sentence length summary

    Returns:
        RunnableLambda: Node that adds serialized sentence units to state
    """
    def _segment(state):
        text = state.get(text_key) or ""
        units = segmenter.segment(text)
        update = {SENTENCES: [unit.to_dict() for unit in units]}
        if with_stats:
            update[SENTENCE_STATS] = length_summary(units)
        return update

    return RunnableLambda(_segment)

def make_paginate_node(settings: ReaderSettings, sentences_key: str = SENTENCES):
    """
    Create a LangGraph node that paginates previously segmented sentences.

    Args:
        settings: Reader settings providing the page size
        sentences_key: State key holding sentence dicts from make_segment_node

    Returns:
        RunnableLambda: Node that adds serialized pages to state
    """
    def _paginate(state):
        units = [SentenceUnit(**item) for item in state.get(sentences_key, [])]
        pages = paginate(units, settings.sentences_per_page)
        return {PAGES: [page.to_dict() for page in pages]}

    return RunnableLambda(_paginate)
