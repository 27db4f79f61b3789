"""Command-line interface for segmenting documents and checking rule files."""

import argparse
import sys
import json
from pathlib import Path
from typing import Optional

from hikari_segment.core.stats import length_summary
from hikari_segment.core.util import ConsoleLogger, safe_json
from hikari_segment.rules.loader import load_rules, RulesLoadError
from hikari_segment.rules.schema import SegmentationRules
from hikari_segment.runtime.pagination import ReaderSettings, paginate
from hikari_segment.segmenters.sentence import SentenceSegmenter


def _read_text(source: str) -> str:
    """Read document text from a path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _build_segmenter(args) -> SentenceSegmenter:
    rules = load_rules(args.rules) if args.rules else SegmentationRules()
    if getattr(args, "paragraph_mode", None):
        rules = rules.model_copy(update={"paragraph_mode": args.paragraph_mode})
    logger = ConsoleLogger() if getattr(args, "verbose", False) else None
    return SentenceSegmenter(rules, logger=logger)


def segment_command(args):
    """Segment a document and print its sentences."""
    try:
        text = _read_text(args.source)
        segmenter = _build_segmenter(args)
    except RulesLoadError as e:
        print(f"❌ Rules could not be loaded: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.source}: {e}")
        return 1

    units = segmenter.segment(text)

    if args.format == "json":
        print(safe_json(units))
    elif args.format == "jsonl":
        for unit in units:
            print(json.dumps(unit.to_dict(), ensure_ascii=False))
    else:
        for unit in units:
            print(f"[{unit.paragraph_index}:{unit.order}] {unit.text}")

    if args.stats:
        summary = length_summary(units)
        print(f"\n📊 {summary['count']} sentences, mean {summary['mean']:.1f} chars, "
              f"max {summary['max']:.0f}, p95 {summary['p95']:.1f}", file=sys.stderr)

    return 0


def paginate_command(args):
    """Segment a document and print its reader pages."""
    try:
        text = _read_text(args.source)
        segmenter = _build_segmenter(args)
    except RulesLoadError as e:
        print(f"❌ Rules could not be loaded: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.source}: {e}")
        return 1

    settings = ReaderSettings.from_env()
    per_page = args.per_page if args.per_page is not None else settings.sentences_per_page
    if per_page < 1:
        print(f"Error: --per-page must be at least 1, got {per_page}")
        return 1

    pages = paginate(segmenter.segment(text), per_page)
    for page in pages:
        print(f"--- page {page.index + 1}/{len(pages)} "
              f"(sentences {page.first_order}-{page.last_order}, paragraphs {page.paragraph_indices})")
        for unit in page.sentences:
            print(f"  {unit.text}")

    return 0


def validate_rules_command(args):
    """Validate a segmentation rules file."""
    rules_path = Path(args.rules_file)
    if not rules_path.exists():
        print(f"Error: Rules file not found: {rules_path}")
        return 1

    try:
        print(f"Validating rules: {rules_path}")
        rules = load_rules(rules_path)
    except RulesLoadError as e:
        print(f"❌ Rules validation failed: {e}")
        return 1

    print("✅ Rules validation successful!")
    print(f"   Version: {rules.version}")
    print(f"   Abbreviations: {len(rules.abbreviations)} "
          f"({'case-sensitive' if rules.case_sensitive else 'case-insensitive'})")
    print(f"   Quote pairs: {len(rules.quote_pairs)}")
    print(f"   Paragraph mode: {rules.paragraph_mode}")

    if args.verbose:
        print("\nAbbreviations:")
        print("   " + ", ".join(rules.abbreviations))
        print("\nQuote pairs:")
        for opener, closer in rules.quote_pairs.items():
            print(f"   {opener} ... {closer}")

    return 0


def info_command(args):
    """Display version and system information."""
    print("Hikari Segment CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("hikari-segment")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nOptional dependencies:")
    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hikari-segment",
        description="Deterministic sentence segmentation for reader pipelines"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Segment command
    segment_parser = subparsers.add_parser(
        "segment",
        help="Split a document into sentences"
    )
    _add_source_arguments(segment_parser)
    segment_parser.add_argument(
        "-f", "--format",
        choices=["text", "json", "jsonl"],
        default="text",
        help="Output format (default: text)"
    )
    segment_parser.add_argument(
        "--stats",
        action="store_true",
        help="Print a sentence length summary to stderr"
    )

    # Paginate command
    paginate_parser = subparsers.add_parser(
        "paginate",
        help="Split a document into reader pages"
    )
    _add_source_arguments(paginate_parser)
    paginate_parser.add_argument(
        "-n", "--per-page",
        type=int,
        help="Sentences per page (default: from environment, else 12)"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a segmentation rules file"
    )
    validate_parser.add_argument(
        "rules_file",
        help="Path to the rules YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show the full rule lists"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def _add_source_arguments(subparser):
    subparser.add_argument(
        "source",
        help="Path to a UTF-8 text file, or - for stdin"
    )
    subparser.add_argument(
        "-r", "--rules",
        help="Path to a rules YAML file (default: built-in rules)"
    )
    subparser.add_argument(
        "--paragraph-mode",
        choices=["line", "blank_line"],
        help="Override the paragraph mode from the rules"
    )
    subparser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log segmentation events to stderr"
    )


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "segment":
        return segment_command(args)
    elif args.command == "paginate":
        return paginate_command(args)
    elif args.command == "validate":
        return validate_rules_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
