"""Stop-word loading into a flat WordCollection."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from ._errors import FileUnreadableError
from ._types import Word, WordCollection

logger = logging.getLogger("wordsieve.loader")


def _normalize(raw: bytes) -> bytes:
    # bytes.lower() only touches A-Z
    return raw.strip().lower()


def _append(buf: bytearray, words: list[Word], word: bytes) -> None:
    start = len(buf)
    buf += word
    words.append(Word(start, len(buf)))


def load_stop_words(path: Path | str) -> WordCollection:
    """Read a stop-word file, one word per line, skipping blank lines.

    Raises:
        FileUnreadableError: the file cannot be opened or read.
    """
    buf = bytearray()
    words: list[Word] = []
    try:
        with open(path, "rb") as f:
            for line in f:
                word = _normalize(line)
                if not word:
                    continue
                _append(buf, words, word)
    except OSError as exc:
        raise FileUnreadableError(path) from exc

    logger.debug("Loaded %d stop words from %s", len(words), path)
    return WordCollection(bytes(buf), words)


def collect_words(items: Iterable[str | bytes]) -> WordCollection:
    """Build a WordCollection from in-memory words.

    Unlike file loading, an empty entry is kept as the empty word.
    """
    buf = bytearray()
    words: list[Word] = []
    for item in items:
        raw = item.encode("utf-8") if isinstance(item, str) else bytes(item)
        _append(buf, words, _normalize(raw))
    return WordCollection(bytes(buf), words)
