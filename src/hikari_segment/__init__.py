"""
Hikari Segment - Deterministic sentence-boundary detection for reader pipelines.

Splits mixed Japanese/English prose into ordered sentence units tagged with
their paragraph. Rules are plain data; logging and metrics are injected.
"""

__version__ = "0.1.0"
