"""Tests for label signatures."""

from wordsieve._hash import (
    SIGNATURE_INCREMENT,
    SIGNATURE_START,
    label_signature,
    update_signature,
)
from wordsieve._types import Word


def test_empty_label():
    """An empty label keeps the start value."""
    assert label_signature(b"", []) == SIGNATURE_START


def test_empty_word_adds_increment():
    assert update_signature(SIGNATURE_START, b"", 0, 0) == (
        SIGNATURE_START + SIGNATURE_INCREMENT
    )


def test_empty_word_differs_from_no_word():
    assert label_signature(b"", [Word(0, 0)]) != label_signature(b"", [])


def test_single_word():
    buf = b"ab"
    expected = SIGNATURE_START + (ord("a") + 1) * SIGNATURE_INCREMENT
    expected += ord("a") + ord("b")
    assert update_signature(SIGNATURE_START, buf, 0, 2) == expected


def test_wraps_to_32_bits():
    buf = b"z" * 64
    sig = SIGNATURE_START
    for _ in range(1000):
        sig = update_signature(sig, buf, 0, len(buf))
        assert 0 <= sig < 2**32


def test_same_content_different_spans():
    """Signatures depend on bytes, not on where the span sits."""
    buf = b"theXthe"
    assert label_signature(buf, [Word(0, 3)]) == label_signature(buf, [Word(4, 7)])


def test_first_byte_weighted():
    buf = b"abba"
    assert label_signature(buf, [Word(0, 2)]) != label_signature(buf, [Word(2, 4)])


def test_known_collision():
    """{"a", "d"} and {"b", "c"} hash identically; the builder must not
    rely on signatures alone."""
    buf = b"adbc"
    ad = [Word(0, 1), Word(1, 2)]
    bc = [Word(2, 3), Word(3, 4)]
    assert label_signature(buf, ad) == label_signature(buf, bc)
