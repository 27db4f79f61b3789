"""Default state key names for LangGraph integration."""

# Standard state keys used by segmentation nodes
DOCUMENT_TEXT = "document_text"
SENTENCES = "sentences"
PAGES = "pages"

# Additional optional keys
SENTENCE_STATS = "sentence_stats"
