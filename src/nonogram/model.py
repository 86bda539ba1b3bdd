"""Nonogram core data structures: clues, puzzles and propagation outcomes."""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Set, Tuple

from .errors import MalformedPuzzleError

BACKGROUND = 0

Cell = Tuple[int, int]
Grid = List[List[int]]


def as_int(value: Any, what: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise MalformedPuzzleError(f"{what} must be an integer, got {value!r}") from e


@dataclass(frozen=True)
class Clue:
    """One expected run of `count` contiguous cells painted `color`."""

    color: int
    count: int

    @classmethod
    def coerce(cls, value: Any) -> "Clue":
        if isinstance(value, Clue):
            return value
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return cls(color=as_int(value[0], "Clue color"), count=as_int(value[1], "Clue count"))
        raise MalformedPuzzleError(f"Cannot interpret {value!r} as a (color, count) clue")

    def __str__(self) -> str:
        return f"Clue({self.color},{self.count})"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a propagation or assignment step.

    Contradictions are ordinary control flow during search, so they are reported
    through `ok=False` instead of being raised.
    """

    ok: bool
    removed: int = 0
    reason: str = ""

    @classmethod
    def success(cls, removed: int = 0) -> "Outcome":
        return cls(ok=True, removed=removed)

    @classmethod
    def failure(cls, reason: str) -> "Outcome":
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok


def colors_in_use(lines: Iterable[Iterable[Clue]]) -> Set[int]:
    """Alphabet implied by a set of clue lines: background plus every clue color."""
    colors = {BACKGROUND}
    for line in lines:
        for clue in line:
            colors.add(clue.color)
    return colors


@dataclass
class Puzzle:
    row_clues: List[List[Clue]]
    col_clues: List[List[Clue]]
    colors: Optional[Set[int]] = None
    name: str = ""
    _alphabet: Tuple[int, ...] = field(init=False, repr=False, default=())

    def __post_init__(self) -> None:
        self.row_clues = [[Clue.coerce(c) for c in line] for line in self.row_clues]
        self.col_clues = [[Clue.coerce(c) for c in line] for line in self.col_clues]

        if not self.row_clues or not self.col_clues:
            raise MalformedPuzzleError("A puzzle needs at least one row and one column")

        if self.colors is None:
            self.colors = colors_in_use(self.row_clues + self.col_clues)
        else:
            self.colors = {as_int(c, "Color") for c in self.colors}
        self._alphabet = tuple(sorted(self.colors))

        if BACKGROUND not in self.colors:
            raise MalformedPuzzleError("The color alphabet must include the background color 0")
        if self._alphabet[0] < 0:
            raise MalformedPuzzleError(f"Negative color {self._alphabet[0]} in alphabet")

        for index, line in enumerate(self.row_clues):
            self._validate_line(f"row {index}", line, self.width)
        for index, line in enumerate(self.col_clues):
            self._validate_line(f"column {index}", line, self.height)

    @property
    def height(self) -> int:
        return len(self.row_clues)

    @property
    def width(self) -> int:
        return len(self.col_clues)

    @property
    def alphabet(self) -> Tuple[int, ...]:
        """Sorted colors usable in any cell, background first."""
        return self._alphabet

    def _validate_line(self, label: str, line: List[Clue], length: int) -> None:
        for clue in line:
            if clue.count <= 0:
                raise MalformedPuzzleError(
                    f"{label}: run length must be positive, got {clue.count}"
                )
            if clue.count > length:
                raise MalformedPuzzleError(
                    f"{label}: run of {clue.count} does not fit in a line of {length}"
                )
            if clue.color == BACKGROUND:
                raise MalformedPuzzleError(f"{label}: clues cannot use the background color")
            if clue.color not in self.colors:
                raise MalformedPuzzleError(
                    f"{label}: color {clue.color} is not in the alphabet {list(self._alphabet)}"
                )

    def cells(self) -> List[Cell]:
        """Every cell in row-major order."""
        return [(r, c) for r in range(self.height) for c in range(self.width)]
