"""LexicalAnalyzer: stop-word DFA build plus streaming term extraction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator

from ._builder import build_dfa
from ._charclass import CharClassTables
from ._config import AnalyzerConfig
from ._loader import collect_words, load_stop_words
from ._reader import CharReader, open_reader
from ._stopwatch import Stopwatch
from ._tokenizer import Tokenizer
from ._types import WordCollection

if TYPE_CHECKING:
    from pathlib import Path

    from ._dfa import DFA

logger = logging.getLogger("wordsieve.analyzer")


class LexicalAnalyzer:
    """Pulls lowercase terms from byte streams, dropping stop words.

    A new analyzer has an empty stop list, so every term passes through
    until set_stop_words() or set_stop_words_from() is called.
    """

    __slots__ = ("_config", "_tokenizer")

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self._config = config if config is not None else AnalyzerConfig()
        self._tokenizer = self._make_tokenizer(WordCollection())

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    @property
    def dfa(self) -> DFA:
        return self._tokenizer.dfa

    # -- Stop list --

    def set_stop_words(self, path: Path | str) -> None:
        """Replace the stop list with the words in a file.

        Raises:
            FileUnreadableError: the file cannot be read. The previous stop
                list stays in effect.
        """
        with Stopwatch("dfa build", logger=logger):
            words = load_stop_words(path)
            tokenizer = self._make_tokenizer(words)
        self._tokenizer = tokenizer

    def set_stop_words_from(self, words: Iterable[str | bytes]) -> None:
        """Replace the stop list with in-memory words."""
        with Stopwatch("dfa build", logger=logger):
            tokenizer = self._make_tokenizer(collect_words(words))
        self._tokenizer = tokenizer

    def _make_tokenizer(self, words: WordCollection) -> Tokenizer:
        dfa = build_dfa(words)
        return Tokenizer(dfa, CharClassTables(), self._config.max_term_length)

    # -- Scanning --

    def open(self, path: Path | str) -> CharReader:
        """Open a text file as a reader using the configured chunk size."""
        return open_reader(path, self._config.read_chunk_size)

    def next_term(self, reader: CharReader) -> str | None:
        """Next accepted term from reader, or None at end of stream."""
        return self._tokenizer.next_term(reader)

    def terms(self, reader: CharReader) -> Iterator[str]:
        """Yield accepted terms until the reader is exhausted."""
        return self._tokenizer.iter_terms(reader)

    def is_stop_word(self, word: str) -> bool:
        return self._tokenizer.dfa.accepts(word.encode("utf-8").lower())
