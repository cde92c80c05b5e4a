"""Minimal DFA construction by top-down suffix-set hashing.

States are discovered breadth-first, starting from a label that holds the
whole word set. Each state's label is split by first byte into successor
labels (the suffixes left after that byte). Successors whose canonical
labels are identical resolve to the same state, so no two states share a
right language and the automaton is minimal.

Labels are lists of spans into the collection buffer; words are never
copied while sorting or comparing.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key

from ._dfa import DFA
from ._hash import SIGNATURE_START, label_signature, update_signature
from ._types import Arc, Label, State, Word, WordCollection

logger = logging.getLogger("wordsieve.builder")

_HASH_BUCKETS = 53


def compare_words(buf: bytes, a: Word, b: Word) -> int:
    """Byte-wise three-way comparison; a proper prefix sorts first."""
    i, j = a.start, b.start
    while i != a.end:
        if j == b.end:
            return 1
        ca, cb = buf[i], buf[j]
        if ca != cb:
            return -1 if ca < cb else 1
        i += 1
        j += 1
    return 0 if j == b.end else -1


def canonicalize(buf: bytes, label: Label) -> Label:
    """Sort a label in canonical order and drop exact duplicates."""
    ordered = sorted(label, key=cmp_to_key(lambda a, b: compare_words(buf, a, b)))
    out: Label = []
    for w in ordered:
        if out and compare_words(buf, out[-1], w) == 0:
            continue
        out.append(w)
    return out


class _SignatureIndex:
    """Fixed bucket table of signature -> state indices.

    A signature hit is only a candidate; callers confirm with an exact
    label comparison.
    """

    __slots__ = ("_buckets",)

    def __init__(self) -> None:
        self._buckets: list[dict[int, list[int]]] = [
            {} for _ in range(_HASH_BUCKETS)
        ]

    def candidates(self, signature: int) -> list[int]:
        return self._buckets[signature % _HASH_BUCKETS].get(signature, [])

    def add(self, signature: int, state: int) -> None:
        bucket = self._buckets[signature % _HASH_BUCKETS]
        bucket.setdefault(signature, []).append(state)


class _Builder:
    __slots__ = ("_buf", "_view", "_labels", "_index", "_states", "_arcs")

    def __init__(self, collection: WordCollection) -> None:
        self._buf = collection.buffer
        self._view = memoryview(collection.buffer)
        self._labels: list[Label] = []
        self._index = _SignatureIndex()
        self._states: list[State] = []
        self._arcs: list[Arc] = []

        seed = canonicalize(self._buf, collection.words)
        self._labels.append(seed)
        self._index.add(label_signature(self._buf, seed), 0)

    def run(self) -> DFA:
        # The label table grows while it is walked; every state is
        # expanded exactly once, in discovery order.
        state = 0
        while state < len(self._labels):
            self._expand(state)
            state += 1
        return DFA(self._states, self._arcs)

    def _expand(self, state: int) -> None:
        buf = self._buf
        offset = len(self._arcs)
        is_final = False

        successor: Label = []
        signature = SIGNATURE_START
        arc_char = -1

        for w in self._labels[state]:
            if w.start == w.end:
                is_final = True
                continue
            ch = buf[w.start]
            if ch != arc_char and successor:
                self._add_arc(arc_char, successor, signature)
                successor = []
                signature = SIGNATURE_START
            arc_char = ch
            successor.append(Word(w.start + 1, w.end))
            signature = update_signature(signature, buf, w.start + 1, w.end)

        if successor:
            self._add_arc(arc_char, successor, signature)

        self._states.append(State(offset, len(self._arcs) - offset, is_final))

    def _add_arc(self, ch: int, label: Label, signature: int) -> None:
        target = self._resolve(canonicalize(self._buf, label), signature)
        self._arcs.append(Arc(ch, target))

    def _resolve(self, label: Label, signature: int) -> int:
        for state in self._index.candidates(signature):
            if self._labels_equal(label, self._labels[state]):
                return state
        state = len(self._labels)
        self._labels.append(label)
        self._index.add(signature, state)
        return state

    def _labels_equal(self, a: Label, b: Label) -> bool:
        if len(a) != len(b):
            return False
        view = self._view
        for wa, wb in zip(a, b):
            if wa.end - wa.start != wb.end - wb.start:
                return False
            if view[wa.start:wa.end] != view[wb.start:wb.end]:
                return False
        return True


def build_dfa(collection: WordCollection) -> DFA:
    """Build the minimal DFA recognizing exactly the collection's words.

    Build-time labels and the signature index are discarded on return;
    the DFA holds only its state and arc tables.
    """
    dfa = _Builder(collection).run()
    logger.debug(
        "Built DFA from %d words: %d states, %d arcs",
        len(collection), dfa.num_states, dfa.num_arcs,
    )
    return dfa
