"""Command-line entry point: count the terms of a text file."""

from __future__ import annotations

import argparse
import logging
import sys

from ._analyzer import LexicalAnalyzer
from ._config import AnalyzerConfig
from ._errors import FileUnreadableError, TermTooLongError
from ._stopwatch import Stopwatch

logger = logging.getLogger("wordsieve.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordsieve",
        description="Tokenize a text file, dropping words from a stop list.",
    )
    parser.add_argument("stop_words", help="stop-word file, one word per line")
    parser.add_argument("text", help="text file to scan")
    parser.add_argument(
        "--print-terms", action="store_true",
        help="print each accepted term on its own line",
    )
    parser.add_argument(
        "--max-term-length", type=int, default=AnalyzerConfig().max_term_length,
        help="longest term accepted (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="debug logging",
    )
    return parser


def count_terms(analyzer: LexicalAnalyzer, path: str, print_terms: bool = False) -> int:
    """Scan a file and return the number of accepted terms.

    Over-long terms are logged and skipped.
    """
    count = 0
    with analyzer.open(path) as reader:
        while True:
            try:
                term = analyzer.next_term(reader)
            except TermTooLongError as exc:
                logger.warning("%s", exc)
                continue
            if term is None:
                break
            if print_terms:
                print(term)
            count += 1
    return count


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(name)s: %(message)s",
    )

    try:
        config = AnalyzerConfig(max_term_length=args.max_term_length)
    except ValueError as exc:
        print(f"wordsieve: {exc}", file=sys.stderr)
        return 2

    analyzer = LexicalAnalyzer(config)
    try:
        analyzer.set_stop_words(args.stop_words)
        with Stopwatch("text scanning"):
            count = count_terms(analyzer, args.text, args.print_terms)
    except FileUnreadableError as exc:
        print(f"wordsieve: {exc}", file=sys.stderr)
        return 1

    print(f"{count} terms found.")
    return 0
