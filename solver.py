"""Top-level nonogram solve interface.

Expose `solve_puzzle(puzzle)` that accepts either a pre-built Puzzle object or a
raw puzzle dictionary compatible with `src.nonogram.parser.parse_puzzle`.
"""

from typing import Any, List, Optional

from src.nonogram import search
from src.nonogram.model import Grid, Puzzle
from src.nonogram.parser import parse_puzzle


def solve_puzzle(
    puzzle: Any,
    max_solutions: Optional[int] = None,
    time_limit: Optional[float] = None,
    branch_over_domain: bool = False,
) -> List[Grid]:
    """
    Solve a puzzle and return every solution grid found (row-major, 0 = background).
    Accepts:
      - Puzzle instances (used directly)
      - Raw puzzle dictionaries (parsed via `parse_puzzle`)
    An empty list means the puzzle is unsatisfiable (or the search was cut short).
    """
    if isinstance(puzzle, Puzzle):
        parsed = puzzle
    elif isinstance(puzzle, dict):
        parsed = parse_puzzle(puzzle)
    else:
        raise TypeError("solve_puzzle expects a Puzzle instance or puzzle dictionary")

    return search.solve(
        parsed,
        max_solutions=max_solutions,
        time_limit=time_limit,
        branch_over_domain=branch_over_domain,
    )


__all__ = ["solve_puzzle"]
