"""Run-length helpers: derive clues from painted lines and check lines against clues."""

from typing import Dict, List, Sequence

from .model import BACKGROUND, Clue, Grid, Puzzle


def describe_line(line: Sequence[int]) -> List[Clue]:
    """Maximal runs of non-background cells, in order."""
    result: List[Clue] = []
    color = None
    counter = 0
    for value in line:
        value = int(value)
        if value == color:
            counter += 1
            continue
        if counter > 0 and color != BACKGROUND:
            result.append(Clue(color, counter))
        color = value
        counter = 1
    if counter > 0 and color != BACKGROUND:
        result.append(Clue(color, counter))
    return result


def clues_from_solution(grid: Grid) -> Dict[str, List[List[Clue]]]:
    """Row and column clue sets describing a painted grid."""
    if not grid or not grid[0]:
        return {"rows": [], "cols": []}
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("Grid rows must all have the same length")

    rows = [describe_line(row) for row in grid]
    cols = [describe_line([row[c] for row in grid]) for c in range(width)]
    return {"rows": rows, "cols": cols}


def line_matches(line: Sequence[int], clues: Sequence[Clue]) -> bool:
    return describe_line(line) == list(clues)


def grid_matches(puzzle: Puzzle, grid: Grid) -> bool:
    """True when `grid` has the puzzle's shape and reproduces every row and column clue."""
    if len(grid) != puzzle.height or any(len(row) != puzzle.width for row in grid):
        return False
    for row, clues in zip(grid, puzzle.row_clues):
        if not line_matches(row, clues):
            return False
    for c, clues in enumerate(puzzle.col_clues):
        if not line_matches([row[c] for row in grid], clues):
            return False
    return True
