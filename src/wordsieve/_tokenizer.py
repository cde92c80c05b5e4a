"""Streaming term extraction with DFA stop-word suppression."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from ._charclass import CharClassTables
from ._dfa import DFAMatcher
from ._errors import TermTooLongError

if TYPE_CHECKING:
    from ._dfa import DFA
    from ._reader import CharReader

DEFAULT_MAX_TERM_LENGTH = 99


class Tokenizer:
    __slots__ = ("_dfa", "_matcher", "_tables", "_max_len")

    def __init__(
        self,
        dfa: DFA,
        tables: CharClassTables | None = None,
        max_term_length: int = DEFAULT_MAX_TERM_LENGTH,
    ) -> None:
        if max_term_length < 1:
            raise ValueError(
                f"max_term_length must be >= 1, got {max_term_length}"
            )
        self._dfa = dfa
        self._matcher = DFAMatcher(dfa)
        self._tables = tables if tables is not None else CharClassTables()
        self._max_len = max_term_length

    @property
    def dfa(self) -> DFA:
        return self._dfa

    @property
    def max_term_length(self) -> int:
        return self._max_len

    def next_term(self, reader: CharReader) -> str | None:
        """Return the next lowercase term that is not a stop word.

        Returns None once the reader is exhausted.

        Raises:
            TermTooLongError: a token run exceeded max_term_length. The
                whole run has been consumed, so the next call continues
                after it.
        """
        tables = self._tables
        matcher = self._matcher
        next_char = reader.next_char

        while True:
            # separator* token
            c = next_char()
            while tables.is_separator(c):
                c = next_char()
            if c is None:
                return None

            matcher.init()
            term = bytearray()
            while tables.is_token_char(c):
                if len(term) == self._max_len:
                    while tables.is_token_char(c):
                        c = next_char()
                    raise TermTooLongError(term.decode("ascii"), self._max_len)
                lc = tables.to_lower(c)
                term.append(lc)
                matcher.feed(lc)
                c = next_char()

            if not matcher.recognized():
                return term.decode("ascii")

    def iter_terms(self, reader: CharReader) -> Iterator[str]:
        """Yield terms until the reader is exhausted."""
        while (term := self.next_term(reader)) is not None:
            yield term
