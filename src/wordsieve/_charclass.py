"""Byte classification tables for the tokenizer.

End of input is represented by None and classifies as neither a
separator nor a token character, so scan loops stop on it.
"""

from __future__ import annotations

import enum

_APOSTROPHE = ord("'")


class CharClass(enum.Enum):
    EOF = "eof"
    LETTER = "letter"          # ASCII alphabetic
    APOSTROPHE = "apostrophe"  # separator between terms, token char inside one
    OTHER = "other"


def _is_alpha(c: int) -> bool:
    return 65 <= c <= 90 or 97 <= c <= 122


class CharClassTables:
    __slots__ = ("_separator", "_token", "_lower")

    def __init__(self) -> None:
        self._separator = bytes(0 if _is_alpha(c) else 1 for c in range(256))
        self._token = bytes(
            1 if _is_alpha(c) or c == _APOSTROPHE else 0 for c in range(256)
        )
        self._lower = bytes(range(256)).lower()

    def is_separator(self, c: int | None) -> bool:
        return c is not None and self._separator[c] == 1

    def is_token_char(self, c: int | None) -> bool:
        return c is not None and self._token[c] == 1

    def to_lower(self, c: int) -> int:
        return self._lower[c]

    def classify(self, c: int | None) -> CharClass:
        if c is None:
            return CharClass.EOF
        if c == _APOSTROPHE:
            return CharClass.APOSTROPHE
        if self._token[c]:
            return CharClass.LETTER
        return CharClass.OTHER
