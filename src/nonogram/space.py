"""Constraint store: one domain per cell plus a regular constraint per line."""

from typing import Dict, List, Optional

from .domain import Domain
from .model import Cell, Grid, Outcome, Puzzle
from .regular import RegularConstraint

Domains = Dict[Cell, Domain]


class Space:
    def __init__(
        self,
        height: int,
        width: int,
        domains: Domains,
        constraints: List[RegularConstraint],
        stamps: Optional[Dict[str, int]] = None,
    ):
        self.height = height
        self.width = width
        self.domains = domains
        # Constraints hold no mutable state, so clones share them.
        self.constraints = constraints
        # Sum of the line's domain change counters at its last revision.
        self._stamps: Dict[str, int] = dict(stamps or {})

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle) -> "Space":
        alphabet = puzzle.alphabet
        domains = {cell: Domain.from_values(alphabet) for cell in puzzle.cells()}

        constraints: List[RegularConstraint] = []
        for r, clues in enumerate(puzzle.row_clues):
            cells = [(r, c) for c in range(puzzle.width)]
            constraints.append(RegularConstraint(f"row {r}", cells, clues, alphabet))
        for c, clues in enumerate(puzzle.col_clues):
            cells = [(r, c) for r in range(puzzle.height)]
            constraints.append(RegularConstraint(f"column {c}", cells, clues, alphabet))

        return cls(puzzle.height, puzzle.width, domains, constraints)

    def clone(self) -> "Space":
        domains = {cell: domain.copy() for cell, domain in self.domains.items()}
        return Space(self.height, self.width, domains, self.constraints, self._stamps)

    def _stamp(self, constraint: RegularConstraint) -> int:
        return sum(self.domains[cell].changes for cell in constraint.cells)

    def propagate(self) -> Outcome:
        """
        Revise constraints until a full round removes nothing.

        A constraint is skipped when none of its cells changed since it last
        ran. Returns the total number of values removed, or the first
        contradiction reported by a constraint.
        """
        total = 0
        while True:
            round_removed = 0
            for constraint in self.constraints:
                stamp = self._stamp(constraint)
                if self._stamps.get(constraint.name) == stamp:
                    continue
                outcome = constraint.revise([self.domains[cell] for cell in constraint.cells])
                if not outcome.ok:
                    return outcome
                self._stamps[constraint.name] = self._stamp(constraint)
                round_removed += outcome.removed
            total += round_removed
            if round_removed == 0:
                return Outcome.success(total)

    def assign(self, cell: Cell, value: int) -> Outcome:
        domain = self.domains[cell]
        if domain.intersect_value(value):
            return Outcome.success()
        row, col = cell
        return Outcome.failure(f"{value} is not in the domain of r{row}c{col}")

    def is_solved(self) -> bool:
        return all(domain.is_singleton() for domain in self.domains.values())

    def first_unfixed_cell(self) -> Optional[Cell]:
        for r in range(self.height):
            for c in range(self.width):
                if not self.domains[(r, c)].is_singleton():
                    return (r, c)
        return None

    def to_grid(self) -> Grid:
        if not self.is_solved():
            raise RuntimeError("Only a solved space can be turned into a grid")
        return [
            [self.domains[(r, c)].value() for c in range(self.width)]
            for r in range(self.height)
        ]

    def __repr__(self) -> str:
        rows = []
        for r in range(self.height):
            rows.append(" ".join(
                str(self.domains[(r, c)].value()) if self.domains[(r, c)].is_singleton() else "?"
                for c in range(self.width)
            ))
        return "Space(\n  " + "\n  ".join(rows) + "\n)"
