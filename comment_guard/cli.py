"""Command-line front end for classifying comments without the GUI.

Usage:
    comment-guard text comments.txt
    comment-guard source "https://youtu.be/dQw4w9WgXcQ" --watch 30
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from .config import LOG_FORMAT
from .exceptions import CommentGuardError
from .models.record import ClassificationRecord
from .processing.session import DetectorSession
from .services.gateway import create_gateway

logger = logging.getLogger(__name__)


def print_separator() -> None:
    print("=" * 80)


def print_record(record: ClassificationRecord) -> None:
    """Pretty print one classified comment."""
    verdict = "THREAT" if record.is_spam else "CLEAN"
    print(f"\n[{verdict}] {record.category.value} ({record.display_confidence:.0%})")
    print(f"Comment: {record.text}")
    print(f"Reason: {record.reason or 'N/A'}")


def print_summary(session: DetectorSession) -> None:
    stats = session.stats()
    print("\nSUMMARY")
    print("-------")
    print(stats.to_display_string())
    for category, count in stats.category_breakdown.items():
        print(f"  {category.value}: {count}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Detect spam in YouTube comments")
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the offline heuristic gateway instead of OpenAI",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    text_parser = subparsers.add_parser("text", help="Classify comments, one per line")
    text_parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="File containing comments (default: read from stdin)",
    )

    source_parser = subparsers.add_parser("source", help="Analyze comments for a video URL")
    source_parser.add_argument("url", help="YouTube video URL")
    source_parser.add_argument(
        "--watch",
        type=float,
        default=0.0,
        help="Keep monitoring for new comments for this many seconds",
    )

    return parser


def _read_text(file_arg: str) -> str:
    if file_arg == "-":
        return sys.stdin.read()
    return Path(file_arg).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Run the command-line interface and return the exit status."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)

    session = DetectorSession(create_gateway(use_mock=True if args.mock else None))

    try:
        if args.command == "text":
            try:
                text = _read_text(args.file)
            except OSError as e:
                print(f"Error: cannot read {args.file}: {e.strerror}")
                return 1
            records = session.analyze_text(text)
            if not records:
                print("No comments long enough to analyze")
                return 0
        else:
            records = session.analyze_source(args.url)
            source = session.active_source
            if source:
                print(f"Source: {source.label}")
    except CommentGuardError as e:
        print(f"Error: {e}")
        return 1

    print_separator()
    for record in records:
        print_record(record)
    print_separator()

    if args.command == "source" and args.watch > 0:
        seen = {record.id for record in session.records()}
        print(f"\nMonitoring for new comments for {args.watch:.0f}s...")
        session.start_monitoring()
        try:
            time.sleep(args.watch)
        except KeyboardInterrupt:
            pass
        finally:
            session.stop_monitoring()

        new_records = [r for r in session.records() if r.id not in seen]
        print(f"\n{len(new_records)} new comments arrived")
        for record in reversed(new_records):
            print_record(record)
        print_separator()

    print_summary(session)
    session.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
