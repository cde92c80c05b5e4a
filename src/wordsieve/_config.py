"""Runtime configuration for the lexical analyzer."""

from __future__ import annotations

from dataclasses import dataclass

from ._reader import DEFAULT_CHUNK_SIZE
from ._tokenizer import DEFAULT_MAX_TERM_LENGTH


@dataclass(slots=True, frozen=True)
class AnalyzerConfig:
    max_term_length: int = DEFAULT_MAX_TERM_LENGTH
    read_chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.max_term_length < 1:
            raise ValueError(
                f"max_term_length must be >= 1, got {self.max_term_length}"
            )
        if self.read_chunk_size < 1:
            raise ValueError(
                f"read_chunk_size must be >= 1, got {self.read_chunk_size}"
            )
