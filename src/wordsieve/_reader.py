"""Buffered byte reader with an explicit cursor."""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO

from ._errors import FileUnreadableError

DEFAULT_CHUNK_SIZE = 4096


class CharReader:
    """Pull bytes one at a time from a binary stream.

    next_char() returns None at end of input and keeps returning None
    afterwards.
    """

    __slots__ = ("_stream", "_chunk_size", "_buf", "_pos", "_eof", "_owns")

    def __init__(
        self,
        stream: BinaryIO,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        *,
        owns_stream: bool = False,
    ) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self._stream = stream
        self._chunk_size = chunk_size
        self._buf = b""
        self._pos = 0
        self._eof = False
        self._owns = owns_stream

    @classmethod
    def from_bytes(cls, data: bytes, chunk_size: int = DEFAULT_CHUNK_SIZE) -> CharReader:
        return cls(io.BytesIO(data), chunk_size, owns_stream=True)

    @classmethod
    def from_text(cls, text: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> CharReader:
        return cls.from_bytes(text.encode("utf-8"), chunk_size)

    @property
    def at_eof(self) -> bool:
        return self._eof

    def next_char(self) -> int | None:
        if self._pos == len(self._buf):
            if self._eof:
                return None
            try:
                self._buf = self._stream.read(self._chunk_size)
            except OSError as exc:
                raise FileUnreadableError(
                    getattr(self._stream, "name", self._stream)
                ) from exc
            self._pos = 0
            if not self._buf:
                self._eof = True
                return None
        c = self._buf[self._pos]
        self._pos += 1
        return c

    def close(self) -> None:
        if self._owns:
            self._stream.close()

    def __enter__(self) -> CharReader:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_reader(path: Path | str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> CharReader:
    """Open a file for scanning.

    Raises:
        FileUnreadableError: the file cannot be opened.
    """
    try:
        stream = open(path, "rb")
    except OSError as exc:
        raise FileUnreadableError(path) from exc
    return CharReader(stream, chunk_size, owns_stream=True)
