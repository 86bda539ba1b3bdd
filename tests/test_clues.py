from src.nonogram.clues import clues_from_solution, describe_line, grid_matches, line_matches
from src.nonogram.model import Clue, Puzzle


def test_describe_line_splits_on_background_and_color_changes():
    assert describe_line([0, 1, 1, 0, 2, 2, 1, 0]) == [Clue(1, 2), Clue(2, 2), Clue(1, 1)]
    assert describe_line([0, 0, 0]) == []
    assert describe_line([]) == []
    assert describe_line([3]) == [Clue(3, 1)]


def test_clues_from_solution():
    clues = clues_from_solution([[1, 0], [1, 2]])
    assert clues["rows"] == [[Clue(1, 1)], [Clue(1, 1), Clue(2, 1)]]
    assert clues["cols"] == [[Clue(1, 2)], [Clue(2, 1)]]


def test_line_and_grid_matching():
    assert line_matches([1, 0, 1], [Clue(1, 1), Clue(1, 1)])
    assert not line_matches([1, 1, 0], [Clue(1, 1), Clue(1, 1)])

    puzzle = Puzzle(
        row_clues=[[Clue(1, 1)], [Clue(1, 1)]],
        col_clues=[[Clue(1, 1)], [Clue(1, 1)]],
    )
    assert grid_matches(puzzle, [[1, 0], [0, 1]])
    assert not grid_matches(puzzle, [[1, 1], [0, 0]])
    assert not grid_matches(puzzle, [[1, 0]])
