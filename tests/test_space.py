"""Unit tests for the constraint store."""

import pytest

from src.nonogram.model import Clue, Puzzle
from src.nonogram.space import Space


def _puzzle(rows, cols, colors=None):
    def _lines(raw):
        return [[Clue(1, n) if isinstance(n, int) else Clue(*n) for n in line] for line in raw]

    return Puzzle(row_clues=_lines(rows), col_clues=_lines(cols), colors=colors)


def test_initial_domains_follow_alphabet():
    space = Space.from_puzzle(_puzzle([[(3, 1)]], [[(3, 1)], []]))
    assert space.domains[(0, 0)].intervals == [(0, 0), (3, 3)]
    assert len(space.constraints) == 3


def test_propagate_solves_forced_line():
    space = Space.from_puzzle(_puzzle([[3]], [[1], [1], [1]]))
    outcome = space.propagate()
    assert outcome.ok
    assert outcome.removed == 3
    assert space.is_solved()
    assert space.to_grid() == [[1, 1, 1]]


def test_second_propagation_is_a_fixpoint():
    space = Space.from_puzzle(_puzzle([[1], [1]], [[1], [1]]))
    assert space.propagate().ok
    again = space.propagate()
    assert again.ok
    assert again.removed == 0
    assert not space.is_solved()


def test_overflowing_row_fails_first_propagation():
    space = Space.from_puzzle(_puzzle([[2, 2]], [[1], [1], [1], [1]]))
    assert not space.propagate().ok


def test_assign_rejects_missing_value():
    space = Space.from_puzzle(_puzzle([[1], [1]], [[1], [1]]))
    outcome = space.assign((0, 0), 2)
    assert not outcome.ok
    assert space.domains[(0, 0)].is_empty()


def test_assign_then_propagate_fixes_everything():
    space = Space.from_puzzle(_puzzle([[1], [1]], [[1], [1]]))
    assert space.propagate().ok
    assert space.assign((0, 0), 1).ok
    assert space.propagate().ok
    assert space.to_grid() == [[1, 0], [0, 1]]


def test_clone_is_independent():
    space = Space.from_puzzle(_puzzle([[1], [1]], [[1], [1]]))
    assert space.propagate().ok
    child = space.clone()
    assert child.assign((0, 0), 0).ok
    assert child.propagate().ok

    assert child.to_grid() == [[0, 1], [1, 0]]
    assert space.domains[(0, 0)].intervals == [(0, 1)]
    assert not space.is_solved()


def test_first_unfixed_cell_scans_row_major():
    space = Space.from_puzzle(_puzzle([[1], [1]], [[1], [1]]))
    assert space.first_unfixed_cell() == (0, 0)
    space.domains[(0, 0)].intersect_value(1)
    assert space.first_unfixed_cell() == (0, 1)


def test_to_grid_requires_solved_space():
    space = Space.from_puzzle(_puzzle([[1], [1]], [[1], [1]]))
    with pytest.raises(RuntimeError):
        space.to_grid()
