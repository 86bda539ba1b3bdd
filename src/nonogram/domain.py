"""Cell domains stored as sorted lists of disjoint closed intervals."""

from typing import Iterable, Iterator, List, Optional, Tuple

Interval = Tuple[int, int]


class Domain:
    """
    The colors still possible for one cell.

    Intervals are sorted, non-overlapping and non-adjacent, so the cost of an
    operation grows with the number of gaps rather than with the alphabet.
    `changes` is bumped on every mutation; propagation uses it to skip lines
    whose cells have not moved since their last revision.
    """

    __slots__ = ("intervals", "changes")

    def __init__(self, intervals: Optional[Iterable[Interval]] = None, changes: int = 0):
        self.intervals: List[Interval] = [(lo, hi) for lo, hi in (intervals or [])]
        self.changes = changes
        previous = None
        for lo, hi in self.intervals:
            if lo > hi:
                raise ValueError(f"Empty interval ({lo}, {hi}) in domain")
            if previous is not None and lo <= previous + 1:
                raise ValueError(f"Intervals must be sorted, disjoint and non-adjacent: {self.intervals}")
            previous = hi

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Domain":
        intervals: List[Interval] = []
        for value in sorted(set(values)):
            if intervals and intervals[-1][1] + 1 == value:
                intervals[-1] = (intervals[-1][0], value)
            else:
                intervals.append((value, value))
        return cls(intervals)

    def copy(self) -> "Domain":
        return Domain(self.intervals, self.changes)

    def values(self) -> Iterator[int]:
        for lo, hi in self.intervals:
            yield from range(lo, hi + 1)

    def __contains__(self, value: int) -> bool:
        for lo, hi in self.intervals:
            if value < lo:
                return False
            if value <= hi:
                return True
        return False

    def __len__(self) -> int:
        return sum(hi - lo + 1 for lo, hi in self.intervals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return self.intervals == other.intervals

    def __repr__(self) -> str:
        return f"Domain({self.intervals})"

    def is_empty(self) -> bool:
        return not self.intervals

    def is_singleton(self) -> bool:
        return len(self.intervals) == 1 and self.intervals[0][0] == self.intervals[0][1]

    def min(self) -> int:
        if not self.intervals:
            raise ValueError("min() of an empty domain")
        return self.intervals[0][0]

    def max(self) -> int:
        if not self.intervals:
            raise ValueError("max() of an empty domain")
        return self.intervals[-1][1]

    def value(self) -> int:
        """The only value of a singleton domain."""
        if not self.is_singleton():
            raise ValueError(f"{self!r} is not a singleton")
        return self.intervals[0][0]

    def remove(self, value: int) -> bool:
        """Drop `value`, splitting its interval in two. Returns False if it was absent."""
        for index, (lo, hi) in enumerate(self.intervals):
            if lo <= value <= hi:
                pieces = []
                if lo < value:
                    pieces.append((lo, value - 1))
                if value < hi:
                    pieces.append((value + 1, hi))
                self.intervals[index:index + 1] = pieces
                self.changes += 1
                return True
        return False

    def intersect_value(self, value: int) -> bool:
        """Restrict the domain to `{value}`; empties it when `value` is absent."""
        if value in self:
            if not self.is_singleton():
                self.intervals = [(value, value)]
                self.changes += 1
            return True
        if self.intervals:
            self.intervals = []
            self.changes += 1
        return False
