"""Built automaton tables and the runtime matcher that walks them."""

from __future__ import annotations

from ._types import Arc, State


class DFA:
    """Immutable state and arc tables. State 0 is the start state."""

    __slots__ = ("_states", "_arcs")

    def __init__(self, states: list[State], arcs: list[Arc]) -> None:
        self._states = tuple(states)
        self._arcs = tuple(arcs)

    @property
    def states(self) -> tuple[State, ...]:
        return self._states

    @property
    def arcs(self) -> tuple[Arc, ...]:
        return self._arcs

    @property
    def num_states(self) -> int:
        return len(self._states)

    @property
    def num_arcs(self) -> int:
        return len(self._arcs)

    def arcs_of(self, state: int) -> tuple[Arc, ...]:
        s = self._states[state]
        return self._arcs[s.arc_offset:s.arc_offset + s.num_arcs]

    def accepts(self, word: str | bytes) -> bool:
        """Run a fresh matcher over word and report whether it is recognized."""
        if isinstance(word, str):
            word = word.encode("utf-8")
        matcher = DFAMatcher(self)
        for c in word:
            matcher.feed(c)
        return matcher.recognized()

    def __repr__(self) -> str:
        return f"DFA(states={self.num_states}, arcs={self.num_arcs})"


class DFAMatcher:
    """Stateful cursor over a DFA, fed one byte at a time.

    Once a byte has no matching arc the matcher is dead until the next
    init(); further bytes are ignored.
    """

    __slots__ = ("_states", "_arcs", "_cur", "_dead")

    def __init__(self, dfa: DFA) -> None:
        self._states = dfa.states
        self._arcs = dfa.arcs
        self.init()

    def init(self) -> None:
        self._cur = 0
        self._dead = False

    @property
    def dead(self) -> bool:
        return self._dead

    @property
    def state(self) -> int:
        return self._cur

    def feed(self, c: int) -> None:
        if self._dead:
            return
        s = self._states[self._cur]
        arcs = self._arcs
        for i in range(s.arc_offset, s.arc_offset + s.num_arcs):
            arc = arcs[i]
            if arc.on_char == c:
                self._cur = arc.target
                return
        self._dead = True

    def recognized(self) -> bool:
        return not self._dead and self._states[self._cur].is_final
