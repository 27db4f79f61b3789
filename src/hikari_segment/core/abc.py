"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Any
from .types import SentenceUnit

class Segmenter(Protocol):
    """Anything that turns document text into ordered sentence units."""

    def segment(self, text: str) -> List[SentenceUnit]:
        """
        Segment text into sentence units.

        Args:
            text: Decoded document text

        Returns:
            List[SentenceUnit]: Sentences in reading order
        """
        ...

class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
