"""Finite-state acceptor for the colorings of one nonogram line.

For a clue sequence `[(c1, n1), ..., (ck, nk)]` the automaton accepts

    0* c1^n1 SEP c2^n2 SEP ... ck^nk 0*

where SEP is `0+` between two runs of the same color and `0*` between runs of
different colors. States are plain integers local to one build; state 0 is
always the fail state.
"""

from typing import Dict, Iterable, List, Sequence

from .errors import AutomatonError, MalformedPuzzleError
from .model import BACKGROUND, Clue

FAIL = 0


class Automaton:
    def __init__(
        self,
        transitions: List[Dict[int, int]],
        initial: int,
        final: int,
        alphabet: Sequence[int],
    ):
        self._transitions = transitions
        self.initial = initial
        self.final = final
        self.alphabet = tuple(alphabet)

    @property
    def num_states(self) -> int:
        """Number of states, fail state included."""
        return len(self._transitions)

    def is_fail(self, state: int) -> bool:
        return state == FAIL

    def is_final(self, state: int) -> bool:
        return state == self.final

    def step(self, state: int, color: int) -> int:
        try:
            return self._transitions[state][color]
        except (IndexError, KeyError):
            raise AutomatonError(
                f"No transition from state {state} on color {color}"
            ) from None

    def accepts(self, sequence: Iterable[int]) -> bool:
        state = self.initial
        for color in sequence:
            state = self.step(state, color)
            if state == FAIL:
                return False
        return state == self.final


class _Builder:
    """Allocates states and records transitions for a single automaton."""

    def __init__(self, alphabet: Sequence[int]):
        self.alphabet = alphabet
        self.colors = [c for c in alphabet if c != BACKGROUND]
        self.transitions: List[Dict[int, int]] = []

    def new_state(self) -> int:
        self.transitions.append({})
        return len(self.transitions) - 1

    def add(self, state: int, color: int, target: int) -> None:
        self.transitions[state][color] = target

    def only_background(self, state: int, target: int) -> None:
        """Background leads to `target`, every other color fails."""
        self.add(state, BACKGROUND, target)
        for color in self.colors:
            self.add(state, color, FAIL)


def build_automaton(clues: Sequence[Clue], alphabet: Iterable[int]) -> Automaton:
    alphabet = sorted(set(alphabet))
    if BACKGROUND not in alphabet:
        raise MalformedPuzzleError("The alphabet must include the background color 0")
    for clue in clues:
        if clue.count <= 0:
            raise MalformedPuzzleError(f"{clue}: run length must be positive")
        if clue.color == BACKGROUND or clue.color not in alphabet:
            raise MalformedPuzzleError(f"{clue}: color not usable with alphabet {alphabet}")

    builder = _Builder(alphabet)
    fail = builder.new_state()
    for color in alphabet:
        builder.add(fail, color, fail)

    current = builder.new_state()
    initial = current

    if not clues:
        builder.only_background(current, current)
        return Automaton(builder.transitions, initial, initial, alphabet)

    for index, clue in enumerate(clues):
        # Background before a run: leading filler, or the optional gap after a
        # run of another color, or the mandatory gap after a same-color run.
        builder.add(current, BACKGROUND, current)
        first = builder.new_state()
        for color in builder.colors:
            builder.add(current, color, first if color == clue.color else fail)
        current = first

        for _ in range(clue.count - 1):
            following = builder.new_state()
            for color in alphabet:
                builder.add(current, color, following if color == clue.color else fail)
            current = following

        if index == len(clues) - 1:
            builder.only_background(current, current)
        elif clues[index + 1].color == clue.color:
            gap = builder.new_state()
            builder.only_background(current, gap)
            current = gap
        # A different next color needs no gap state: its transitions are added
        # on the next iteration.

    return Automaton(builder.transitions, initial, current, alphabet)
