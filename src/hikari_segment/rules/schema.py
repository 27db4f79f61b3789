"""Pydantic schemas for YAML segmentation rules."""

from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Tuple

DEFAULT_ABBREVIATIONS: Tuple[str, ...] = (
    # courtesy titles and ranks
    "Mr", "Mrs", "Ms", "Dr", "Prof", "Sr", "Jr", "St", "Mt", "Rev", "Capt", "Lt", "Col", "Gen",
    # common shortenings
    "vs", "etc", "e.g", "i.e", "Fig", "fig", "No", "Dept", "Est", "est", "approx", "Appt", "appt",
    "Inc", "Ltd", "Co", "Corp",
    # months and weekdays
    "Jan", "Feb", "Mar", "Apr", "Jun", "Jul", "Aug", "Sep", "Sept", "Oct", "Nov", "Dec",
    "Mon", "Tue", "Tues", "Wed", "Thu", "Thur", "Thurs", "Fri", "Sat", "Sun",
    # acronyms
    "U.S", "U.K", "U.N",
)

DEFAULT_QUOTE_PAIRS: Dict[str, str] = {
    '"': '"',
    "“": "”",
    "‘": "’",
    "«": "»",
    "「": "」",
    "『": "』",
}

class SegmentationRules(BaseModel):
    """Immutable rule set bound to a segmenter at construction."""
    version: int = Field(default=1, description="Rules schema version")
    abbreviations: Tuple[str, ...] = Field(default=DEFAULT_ABBREVIATIONS,
                                           description="Word tokens whose trailing period never terminates")
    case_sensitive: bool = Field(default=True,
                                 description="Compare abbreviation tokens case-sensitively")
    detect_acronyms: bool = Field(default=True,
                                  description="Treat letter.letter tokens like U.S or p.m as abbreviations")
    single_initials: bool = Field(default=True,
                                  description="Treat a single uppercase letter before a period as an initial, except the pronoun I")
    quote_pairs: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_QUOTE_PAIRS),
                                        description="Opening quote -> closing quote; equal chars toggle")
    terminators: str = Field(default=".?!‼⁉⁈",
                             description="Terminal marks that need trailing whitespace")
    wide_terminators: str = Field(default="。！？｡",
                                  description="Full-width terminal marks that end a sentence directly")
    ellipsis_chars: str = Field(default="…",
                                description="Single-character ellipsis marks")
    ellipsis_min_run: int = Field(default=3, ge=2,
                                  description="Consecutive periods that form an ellipsis")
    max_abbreviation_length: int = Field(default=16, ge=1,
                                         description="Lookback bound for the preceding word token")
    paragraph_mode: Literal["line", "blank_line"] = Field(default="line",
                                                         description="line: every line break is a paragraph break")

    class Config:
        extra = "forbid"  # Strict validation
        frozen = True

    def validate_rules(self) -> List[str]:
        """Validate rule consistency and return any issues."""
        issues = []

        bad_abbreviations = [a for a in self.abbreviations
                             if not a or not all(c.isalpha() or c == "." for c in a)]
        if bad_abbreviations:
            issues.append(f"Abbreviations must contain only letters and periods: {bad_abbreviations}")

        too_long = [a for a in self.abbreviations if len(a) > self.max_abbreviation_length]
        if too_long:
            issues.append(f"Abbreviations longer than max_abbreviation_length "
                          f"({self.max_abbreviation_length}): {too_long}")

        bad_quotes = [f"{k!r}->{v!r}" for k, v in self.quote_pairs.items() if len(k) != 1 or len(v) != 1]
        if bad_quotes:
            issues.append(f"Quote pairs must map single characters: {bad_quotes}")

        marks = set(self.terminators) | set(self.wide_terminators) | set(self.ellipsis_chars) | {"."}
        quote_chars = set(self.quote_pairs) | set(self.quote_pairs.values())
        clashes = sorted(quote_chars & marks)
        if clashes:
            issues.append(f"Quote characters also used as terminators: {clashes}")

        if any(c.isspace() for c in self.terminators + self.wide_terminators + self.ellipsis_chars):
            issues.append("Terminator sets must not contain whitespace")

        overlap = sorted(set(self.ellipsis_chars) & (set(self.terminators) | set(self.wide_terminators)))
        if overlap:
            issues.append(f"Ellipsis characters also listed as terminators: {overlap}")

        return issues
