"""Small utility functions."""

import hashlib
import json
import sys
from typing import Any

def hash_text(text: str) -> str:
    """Create a stable hash of text content."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()[:16]

def safe_json(obj: Any, indent: int = 2) -> str:
    """Safely serialize object to JSON, handling numpy types and dataclasses."""
    def serialize_item(item):
        if hasattr(item, 'to_dict'):  # SentenceUnit, Page
            return serialize_item(item.to_dict())
        elif hasattr(item, 'tolist'):  # numpy array or scalar
            return item.tolist()
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item

    try:
        return json.dumps(serialize_item(obj), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        return f"<serialization error: {e}>"


class ConsoleLogger:
    """Logger that writes `LEVEL: msg k=v` lines to stderr."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stderr

    def _emit(self, level: str, msg: str, kv: dict) -> None:
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        line = f"{level}: {msg} {details}" if details else f"{level}: {msg}"
        print(line, file=self.stream)

    def info(self, msg: str, **kv):
        self._emit("INFO", msg, kv)

    def warn(self, msg: str, **kv):
        self._emit("WARN", msg, kv)

    def error(self, msg: str, **kv):
        self._emit("ERROR", msg, kv)
