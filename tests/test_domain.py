"""Unit tests for interval domains."""

import pytest

from src.nonogram.domain import Domain


def test_from_values_merges_consecutive_values():
    dom = Domain.from_values([4, 0, 1, 2, 7, 6])
    assert dom.intervals == [(0, 2), (4, 4), (6, 7)]
    assert len(dom) == 6
    assert list(dom.values()) == [0, 1, 2, 4, 6, 7]


def test_remove_splits_interval():
    dom = Domain([(0, 4)])
    assert dom.remove(2)
    assert dom.intervals == [(0, 1), (3, 4)]
    assert dom.remove(0)
    assert dom.intervals == [(1, 1), (3, 4)]
    assert dom.remove(4)
    assert dom.intervals == [(1, 1), (3, 3)]


def test_remove_absent_value_is_a_no_op():
    dom = Domain([(0, 1), (3, 3)])
    changes = dom.changes
    assert not dom.remove(2)
    assert dom.intervals == [(0, 1), (3, 3)]
    assert dom.changes == changes


def test_remove_last_value_empties_domain():
    dom = Domain([(5, 5)])
    assert dom.remove(5)
    assert dom.is_empty()


def test_intersect_value():
    dom = Domain([(0, 1), (3, 3)])
    assert dom.intersect_value(3)
    assert dom.is_singleton()
    assert dom.value() == 3

    gap = Domain([(0, 1), (3, 3)])
    assert not gap.intersect_value(2)
    assert gap.is_empty()


def test_contains_min_max():
    dom = Domain([(0, 1), (3, 5)])
    assert 0 in dom and 4 in dom
    assert 2 not in dom and 6 not in dom
    assert dom.min() == 0
    assert dom.max() == 5
    with pytest.raises(ValueError):
        Domain().min()


def test_copy_is_independent():
    dom = Domain([(0, 2)])
    clone = dom.copy()
    clone.remove(1)
    assert dom.intervals == [(0, 2)]
    assert clone.intervals == [(0, 0), (2, 2)]
    assert clone.changes == dom.changes + 1


@pytest.mark.parametrize("intervals", [[(0, 1), (2, 3)], [(3, 4), (0, 1)], [(0, 2), (1, 4)], [(2, 1)]])
def test_constructor_rejects_unnormalised_intervals(intervals):
    with pytest.raises(ValueError):
        Domain(intervals)
