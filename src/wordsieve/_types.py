"""Data structures for wordsieve."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


class Word(NamedTuple):
    start: int   # index of first byte in the shared buffer
    end: int     # index of last byte + 1


Label = list[Word]


@dataclass(slots=True)
class WordCollection:
    buffer: bytes = b""
    words: list[Word] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.words)

    def word_bytes(self, word: Word) -> bytes:
        return self.buffer[word.start:word.end]

    def __iter__(self):
        """Iterate the stop words as ASCII strings, in load order."""
        for w in self.words:
            yield self.buffer[w.start:w.end].decode("ascii", "replace")


@dataclass(slots=True, frozen=True)
class State:
    arc_offset: int  # index of first arc in the arc table
    num_arcs: int
    is_final: bool   # right language contains the empty suffix


@dataclass(slots=True, frozen=True)
class Arc:
    on_char: int     # u8 lowercase byte
    target: int      # state index
