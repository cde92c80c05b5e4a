"""wordsieve error types."""

from __future__ import annotations


class WordSieveError(Exception):
    """Base error for all wordsieve failures."""


class FileUnreadableError(WordSieveError):
    """A stop-word or input file could not be opened or read."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Cannot read file: {path}")
        self.path = path


class TermTooLongError(WordSieveError):
    """A token run exceeded the configured maximum term length."""

    def __init__(self, prefix: str, limit: int) -> None:
        super().__init__(
            f"Term longer than {limit} characters: {prefix[:16]!r}..."
        )
        self.prefix = prefix
        self.limit = limit
