"""Regular-language propagator for one row or column.

The line's automaton is unrolled over the cells into a layered graph: layer `i`
holds the states reachable after reading cells `0..i-1` with values taken from
their current domains. States that cannot reach the accepting state at the end
of the line, or that cannot be reached from the start, are pruned, and a value
survives in a cell only if some surviving edge of that layer reads it.

Reference: N. Paltzer, "Regular Language Membership Constraint".
"""

from typing import Dict, List, Sequence, Set, Tuple

from .automaton import Automaton, build_automaton
from .domain import Domain
from .model import Cell, Clue, Outcome


class RegularConstraint:
    """Keeps the domains of one line consistent with the line's clue sequence."""

    def __init__(self, name: str, cells: Sequence[Cell], clues: Sequence[Clue], alphabet: Sequence[int]):
        self.name = name
        self.cells: Tuple[Cell, ...] = tuple(cells)
        self.clues: Tuple[Clue, ...] = tuple(clues)
        self.alphabet: Tuple[int, ...] = tuple(alphabet)

    def __repr__(self) -> str:
        clues = ", ".join(str(c) for c in self.clues)
        return f"RegularConstraint({self.name}: [{clues}])"

    def automaton(self) -> Automaton:
        return build_automaton(self.clues, self.alphabet)

    def revise(self, domains: List[Domain]) -> Outcome:
        """
        Remove every value that no accepted coloring of the line can use.

        `domains` are the line's domains in cell order and are narrowed in place.
        The automaton and its layered graph are rebuilt on each call and dropped
        afterwards.
        """
        n = len(domains)
        if n != len(self.cells):
            raise ValueError(f"{self.name}: expected {len(self.cells)} domains, got {n}")

        fsm = self.automaton()

        layers: List[Set[int]] = [set() for _ in range(n + 1)]
        layers[0].add(fsm.initial)
        forward: List[Dict[int, Set[int]]] = [{} for _ in range(n + 1)]
        backward: List[Dict[int, Set[int]]] = [{} for _ in range(n + 1)]
        supports: List[Dict[int, List[int]]] = [{} for _ in range(n)]

        # Forward pass: unroll the automaton over the current domains.
        for i in range(n):
            values = list(domains[i].values())
            for state in layers[i]:
                for value in values:
                    target = fsm.step(state, value)
                    if fsm.is_fail(target):
                        continue
                    supports[i].setdefault(value, []).append(state)
                    layers[i + 1].add(target)
                    forward[i].setdefault(state, set()).add(target)
                    backward[i + 1].setdefault(target, set()).add(state)

        alive = [set(layer) for layer in layers]
        alive[n] = {state for state in alive[n] if fsm.is_final(state)}

        # Dead ends: states whose successors are all gone.
        for i in range(n - 1, -1, -1):
            alive[i] = {
                state for state in alive[i]
                if not alive[i + 1].isdisjoint(forward[i].get(state, ()))
            }

        # Unreachable: states whose predecessors are all gone.
        for i in range(1, n + 1):
            alive[i] = {
                state for state in alive[i]
                if not alive[i - 1].isdisjoint(backward[i].get(state, ()))
            }

        removed = 0
        for i in range(n):
            domain = domains[i]
            for value in list(domain.values()):
                supported = any(
                    state in alive[i] and fsm.step(state, value) in alive[i + 1]
                    for state in supports[i].get(value, ())
                )
                if not supported:
                    domain.remove(value)
                    removed += 1
            if domain.is_empty():
                row, col = self.cells[i]
                return Outcome.failure(f"{self.name}: no color left for r{row}c{col}")

        return Outcome.success(removed)
