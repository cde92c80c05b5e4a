"""Shared fixtures for wordsieve tests."""

import pytest

import wordsieve
from wordsieve import CharReader, LexicalAnalyzer


@pytest.fixture(scope="session")
def analyzer():
    """Analyzer over the bundled stop list, built once for all tests."""
    return wordsieve.load()


@pytest.fixture
def make_analyzer():
    """Build an analyzer from an in-memory stop list."""
    def _make(words, **config):
        a = LexicalAnalyzer(wordsieve.AnalyzerConfig(**config))
        a.set_stop_words_from(words)
        return a
    return _make


@pytest.fixture
def stop_file(tmp_path):
    """Write a stop-word file and return its path."""
    def _write(text, name="stopwords.txt"):
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8") if isinstance(text, str) else text)
        return path
    return _write


def drain(analyzer, text, chunk_size=4096):
    """All terms an analyzer yields for text."""
    return list(analyzer.terms(CharReader.from_text(text, chunk_size)))
