"""Example puzzles that ship with the solver.

Grids use 0 for background. Clues for the grid examples are derived from the
picture; the others list their black-and-white clue counts directly.
"""

from typing import Any, Dict, List

from .model import Puzzle
from .parser import parse_puzzle

BW_SOLUTION = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 1, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 1, 1, 1, 0, 1, 1, 1, 1, 0, 0],
    [0, 0, 0, 0, 1, 1, 0, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1],
    [0, 0, 1, 1, 1, 1, 1, 1, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0],
    [0, 1, 1, 1, 1, 0, 0, 0, 1, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0],
    [1, 1, 1, 1, 1, 1, 0, 0, 1, 1, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 1, 1, 0, 0, 1, 1, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 1, 1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 1, 1, 1, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 0, 1, 1, 0, 1, 1, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 0, 1, 1, 1, 0, 1, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 1, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
]

SMALL_SOLUTION = [
    [0, 1, 1, 0, 0],
    [0, 1, 1, 0, 1],
    [0, 0, 1, 0, 1],
    [0, 1, 1, 1, 0],
    [1, 0, 1, 0, 0],
    [1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0],
    [0, 1, 0, 1, 0],
    [0, 1, 0, 1, 1],
    [1, 1, 0, 0, 0],
]

SIMPLE_COLOR_SOLUTION = [
    [1, 1, 0, 0, 4],
    [0, 0, 2, 2, 1],
    [0, 0, 0, 0, 0],
    [0, 4, 0, 2, 4],
    [1, 2, 1, 0, 0],
]

COLOR_SOLUTION = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 2, 2, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 2, 2, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 2, 2, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 2, 2, 0, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 2, 2, 0, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 2, 2, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 0, 0, 0],
    [0, 0, 0, 0, 2, 2, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0],
    [0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1, 1, 0, 1, 1, 1, 1, 1, 0, 0],
    [0, 0, 0, 0, 2, 0, 0, 0, 0, 1, 1, 0, 1, 1, 1, 1, 1, 1, 1, 0],
    [3, 3, 3, 3, 3, 3, 3, 0, 0, 1, 0, 1, 1, 1, 1, 1, 1, 1, 1, 0],
    [3, 3, 3, 3, 3, 3, 3, 0, 1, 1, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [3, 3, 3, 3, 3, 3, 3, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [3, 3, 3, 3, 3, 3, 3, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [3, 3, 3, 3, 3, 3, 3, 0, 4, 4, 4, 4, 4, 4, 4, 4, 1, 1, 1, 1],
    [3, 3, 3, 3, 3, 3, 3, 0, 4, 4, 4, 4, 4, 4, 4, 4, 1, 1, 1, 1],
    [3, 3, 3, 3, 3, 3, 3, 0, 4, 4, 4, 4, 4, 4, 4, 4, 1, 1, 1, 1],
    [0, 3, 3, 3, 3, 3, 0, 0, 4, 4, 4, 4, 4, 4, 4, 4, 1, 1, 1, 1],
    [0, 0, 3, 3, 3, 0, 0, 0, 4, 4, 4, 4, 4, 4, 4, 4, 1, 1, 1, 1],
    [0, 0, 0, 3, 0, 0, 0, 0, 4, 4, 4, 4, 4, 4, 4, 4, 1, 1, 1, 1],
    [0, 0, 0, 3, 0, 0, 0, 0, 4, 4, 4, 4, 4, 4, 4, 4, 1, 1, 1, 1],
    [0, 0, 0, 3, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [0, 0, 0, 3, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [0, 0, 0, 3, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [0, 0, 3, 3, 3, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [0, 3, 3, 3, 3, 3, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0],
]

CAT_CLUES = {
    "rows": [
        [2], [2], [1], [1], [1, 3],
        [2, 5], [1, 7, 1, 1], [1, 8, 2, 2], [1, 9, 5], [2, 16],
        [1, 17], [7, 11], [5, 5, 3], [5, 4], [3, 3],
        [2, 2], [2, 1], [1, 1], [2, 2], [2, 2],
    ],
    "cols": [
        [5], [5, 3], [2, 3, 4], [1, 7, 2], [8],
        [9], [9], [8], [7], [8],
        [9], [10], [13], [6, 2], [4],
        [6], [6], [5], [6], [6],
    ],
}

# Every line holds five single cells; the puzzle has many solutions.
CHESS_CLUES = {
    "rows": [[1, 1, 1, 1, 1] for _ in range(10)],
    "cols": [[1, 1, 1, 1, 1] for _ in range(10)],
}

FOREVER_CLUES = {
    "rows": [
        [1, 2, 2, 2, 2, 2, 1], [1, 2, 2, 2, 2, 2, 1, 1], [1, 1], [1, 1], [1, 3, 1],
        [1, 13, 1], [1, 13, 1], [1, 13, 1], [1, 4, 4, 1], [1, 4, 3, 4, 1],
        [1, 4, 5, 4, 1], [1, 7, 1], [1, 7, 1], [1, 7, 1], [1, 7, 1],
        [1, 1, 5, 1], [1, 2, 6, 1], [1, 4, 6, 1], [1, 6, 6, 1], [1, 3, 1],
        [1, 1, 1], [1, 1], [1, 1], [1, 1, 2, 2, 2, 2, 2, 1], [1, 2, 2, 2, 2, 2, 1],
    ],
    "cols": [
        [1, 2, 2, 2, 2, 2, 1], [1, 1, 2, 2, 2, 2, 2, 1], [1, 1], [1, 1], [1, 1],
        [1, 2, 1], [1, 6, 1, 1], [1, 6, 2, 1], [1, 6, 3, 1], [1, 4, 8, 1],
        [1, 3, 5, 2, 1], [1, 4, 8, 2, 1], [1, 4, 9, 2, 1], [1, 4, 11, 1], [1, 3, 9, 1],
        [1, 4, 8, 1], [1, 6, 3, 1], [1, 6, 2, 1], [1, 6, 1, 1], [1, 2, 1],
        [1, 1], [1, 1], [1, 1], [1, 2, 2, 2, 2, 2, 1, 1], [1, 2, 2, 2, 2, 2, 1],
    ],
}

EXAMPLES: Dict[str, Dict[str, Any]] = {
    "bw": {"id": "bw", "solution": BW_SOLUTION},
    "small": {"id": "small", "solution": SMALL_SOLUTION},
    "simple_color": {"id": "simple_color", "solution": SIMPLE_COLOR_SOLUTION},
    "color": {"id": "color", "solution": COLOR_SOLUTION},
    "cat": {"id": "cat", **CAT_CLUES},
    "chess": {"id": "chess", **CHESS_CLUES},
    "forever": {"id": "forever", **FOREVER_CLUES},
}


def example_names() -> List[str]:
    return sorted(EXAMPLES)


def get_example(name: str) -> Puzzle:
    try:
        record = EXAMPLES[name]
    except KeyError:
        raise KeyError(f"Unknown example {name!r}; choose from {', '.join(example_names())}") from None
    return parse_puzzle(record)


def example_record(name: str) -> Dict[str, Any]:
    """Raw record of an example with explicit clue lists, as the loader would return it."""
    puzzle = get_example(name)
    return {
        "id": name,
        "size": f"{puzzle.height}*{puzzle.width}",
        "rows": [[[c.color, c.count] for c in line] for line in puzzle.row_clues],
        "cols": [[[c.color, c.count] for c in line] for line in puzzle.col_clues],
    }
