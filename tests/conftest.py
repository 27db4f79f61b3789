"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from hikari_segment.rules.loader import load_rules_from_string
from hikari_segment.segmenters.sentence import SentenceSegmenter


@pytest.fixture
def segmenter():
    """Provide a segmenter with the built-in rules."""
    return SentenceSegmenter()


@pytest.fixture
def sample_rules_yaml():
    """Provide a sample rules YAML for testing."""
    return """
version: 1
abbreviations:
  - Dr
  - Mr
  - approx
  - U.S
case_sensitive: true
detect_acronyms: false
single_initials: false
quote_pairs:
  '"': '"'
  "「": "」"
ellipsis_min_run: 3
paragraph_mode: blank_line
"""


@pytest.fixture
def sample_rules(sample_rules_yaml):
    """Provide loaded rules for testing."""
    return load_rules_from_string(sample_rules_yaml)


@pytest.fixture
def temp_rules_file(sample_rules_yaml):
    """Provide a temporary rules file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False, encoding='utf-8') as f:
        f.write(sample_rules_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def temp_document(tmp_path):
    """Provide a small mixed-script document on disk."""
    path = tmp_path / "story.txt"
    path.write_text(
        "第一章\n"
        "\"Where are you going?\" she asked. It was late.\n"
        "「帰ろう。」と彼は言った。\n",
        encoding="utf-8",
    )
    return path


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Meter that accumulates counters and observations."""

    def __init__(self):
        self.counters = {}
        self.observations = {}

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.setdefault(name, []).append(value)


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
