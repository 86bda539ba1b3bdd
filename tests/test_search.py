"""Tests for the backtracking search driver."""

import itertools

import pytest

from src.nonogram import search
from src.nonogram.clues import clues_from_solution, grid_matches
from src.nonogram.errors import MalformedPuzzleError
from src.nonogram.examples import BW_SOLUTION, SIMPLE_COLOR_SOLUTION, SMALL_SOLUTION, get_example
from src.nonogram.model import Clue, Puzzle
from src.utils.trace import Tracer


def _puzzle_from_picture(grid, colors=None):
    clues = clues_from_solution(grid)
    return Puzzle(row_clues=clues["rows"], col_clues=clues["cols"], colors=colors)


def _all_matching_grids(puzzle):
    """Brute force: every grid over the alphabet that reproduces the clues."""
    cells = puzzle.height * puzzle.width
    found = []
    for values in itertools.product(puzzle.alphabet, repeat=cells):
        grid = [list(values[r * puzzle.width:(r + 1) * puzzle.width]) for r in range(puzzle.height)]
        if grid_matches(puzzle, grid):
            found.append(grid)
    return sorted(found)


def test_two_by_two_diagonals():
    puzzle = Puzzle(
        row_clues=[[Clue(1, 1)], [Clue(1, 1)]],
        col_clues=[[Clue(1, 1)], [Clue(1, 1)]],
    )
    solutions = search.solve(puzzle, tracer=Tracer())
    assert sorted(solutions) == [[[0, 1], [1, 0]], [[1, 0], [0, 1]]]


@pytest.mark.parametrize(
    "picture",
    [
        [[1, 0, 1], [0, 1, 0], [1, 0, 1]],
        [[1, 1, 0], [0, 1, 1], [0, 0, 1]],
        [[0, 0, 0], [1, 0, 1], [0, 0, 0]],
        [[1, 0, 0], [0, 0, 1], [0, 1, 0]],
    ],
)
def test_search_is_complete_on_small_black_and_white_puzzles(picture):
    puzzle = _puzzle_from_picture(picture)
    solutions = search.solve(puzzle, tracer=Tracer())
    assert sorted(solutions) == _all_matching_grids(puzzle)
    assert picture in solutions


@pytest.mark.parametrize(
    "picture",
    [
        [[1, 2, 0], [2, 0, 1]],
        [[2, 2, 1], [0, 1, 2]],
        [[1, 0, 1], [2, 2, 0]],
    ],
)
def test_search_is_complete_on_small_color_puzzles(picture):
    puzzle = _puzzle_from_picture(picture, colors={0, 1, 2})
    solutions = search.solve(puzzle, tracer=Tracer())
    assert sorted(solutions) == _all_matching_grids(puzzle)


@pytest.mark.parametrize(
    "name, picture",
    [("bw", BW_SOLUTION), ("small", SMALL_SOLUTION), ("simple_color", SIMPLE_COLOR_SOLUTION)],
)
def test_example_solutions_are_sound(name, picture):
    puzzle = get_example(name)
    solutions = search.solve(puzzle, tracer=Tracer())
    assert picture in solutions
    assert all(grid_matches(puzzle, grid) for grid in solutions)


def test_chess_example_has_several_solutions():
    puzzle = get_example("chess")
    solutions = search.solve(puzzle, max_solutions=5, tracer=Tracer())
    assert len(solutions) == 5
    assert len({str(grid) for grid in solutions}) == 5
    assert all(grid_matches(puzzle, grid) for grid in solutions)


def test_branching_over_present_values_finds_the_same_solutions():
    puzzle = get_example("simple_color")
    naive = search.solve(puzzle, tracer=Tracer())
    pruned = search.solve(puzzle, branch_over_domain=True, tracer=Tracer())
    assert sorted(naive) == sorted(pruned)


def test_values_in_domain_gaps_are_probed_and_discarded():
    puzzle = Puzzle(
        row_clues=[[Clue(2, 1)], [Clue(2, 1)]],
        col_clues=[[Clue(2, 1)], [Clue(2, 1)]],
    )
    tracer = Tracer()
    solutions = search.solve(puzzle, tracer=tracer)
    assert sorted(solutions) == [[[0, 2], [2, 0]], [[2, 0], [0, 2]]]
    probed = [s for s in tracer.steps if s.action_type == "contradiction" and s.value == 1]
    assert probed


def test_max_solutions_stops_early():
    puzzle = Puzzle(
        row_clues=[[Clue(1, 1)], [Clue(1, 1)]],
        col_clues=[[Clue(1, 1)], [Clue(1, 1)]],
    )
    tracer = Tracer()
    solutions = search.solve(puzzle, max_solutions=1, tracer=tracer)
    assert len(solutions) == 1
    assert tracer.steps[-1].action_type == "stopped"


def test_max_solutions_must_be_positive():
    puzzle = Puzzle(row_clues=[[Clue(1, 1)]], col_clues=[[Clue(1, 1)]])
    with pytest.raises(ValueError):
        search.solve(puzzle, max_solutions=0, tracer=Tracer())


def test_stop_check_cancels_search():
    puzzle = get_example("small")
    calls = []

    def _stop():
        calls.append(1)
        return True

    assert search.solve(puzzle, should_stop=_stop, tracer=Tracer()) == []
    assert len(calls) == 1


def test_expired_time_limit_returns_nothing():
    puzzle = get_example("small")
    assert search.solve(puzzle, time_limit=0.0, tracer=Tracer()) == []


def test_unsatisfiable_puzzle_has_no_solutions():
    puzzle = Puzzle(row_clues=[[Clue(1, 1)]], col_clues=[[]])
    assert search.solve(puzzle, tracer=Tracer()) == []


def test_overflowing_clues_fail_before_branching():
    puzzle = Puzzle(
        row_clues=[[Clue(1, 2), Clue(1, 2)]],
        col_clues=[[Clue(1, 1)]] * 4,
    )
    tracer = Tracer()
    assert search.solve(puzzle, tracer=tracer) == []
    assert tracer.summary()["num_branches"] == 0


def test_malformed_puzzle_is_rejected_before_search():
    with pytest.raises(MalformedPuzzleError):
        Puzzle(row_clues=[[Clue(1, 4)]], col_clues=[[], [], []])
    with pytest.raises(MalformedPuzzleError):
        Puzzle(row_clues=[[Clue(2, 1)]], col_clues=[[]], colors={0, 1})


def test_tracer_counts_solutions():
    puzzle = Puzzle(
        row_clues=[[Clue(1, 1)], [Clue(1, 1)]],
        col_clues=[[Clue(1, 1)], [Clue(1, 1)]],
    )
    tracer = Tracer()
    solutions = search.solve(puzzle, tracer=tracer)
    summary = tracer.summary()
    assert summary["num_solutions"] == len(solutions) == 2
    assert summary["num_branches"] >= 2
