"""wordsieve: stop-word filtering tokenizer driven by a minimal DFA."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._analyzer import LexicalAnalyzer
from ._builder import build_dfa
from ._charclass import CharClass, CharClassTables
from ._config import AnalyzerConfig
from ._dfa import DFA, DFAMatcher
from ._errors import FileUnreadableError, TermTooLongError, WordSieveError
from ._loader import collect_words, load_stop_words
from ._reader import CharReader, open_reader
from ._stop_words import DEFAULT_STOP_WORDS
from ._stopwatch import Stopwatch
from ._tokenizer import Tokenizer
from ._types import Arc, State, Word, WordCollection

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "AnalyzerConfig",
    "Arc",
    "CharClass",
    "CharClassTables",
    "CharReader",
    "DEFAULT_STOP_WORDS",
    "DFA",
    "DFAMatcher",
    "FileUnreadableError",
    "LexicalAnalyzer",
    "State",
    "Stopwatch",
    "TermTooLongError",
    "Tokenizer",
    "Word",
    "WordCollection",
    "WordSieveError",
    "build_dfa",
    "collect_words",
    "load_stop_words",
    "open_reader",
]


def load(
    stop_words: Path | str | None = None,
    config: AnalyzerConfig | None = None,
) -> LexicalAnalyzer:
    """Return a ready-to-use LexicalAnalyzer.

    Args:
        stop_words: Path to a stop-word file. If None, uses the bundled
            English list.
        config: Analyzer limits. If None, uses the defaults.
    """
    analyzer = LexicalAnalyzer(config)
    if stop_words is None:
        analyzer.set_stop_words_from(DEFAULT_STOP_WORDS)
    else:
        analyzer.set_stop_words(stop_words)
    return analyzer
