"""Nonogram models, line automata, regular-constraint propagation and search."""

from .model import BACKGROUND, Clue, Puzzle, Outcome
from .errors import NonogramError, MalformedPuzzleError, AutomatonError
from .automaton import Automaton, build_automaton
from .space import Space
from .search import solve, iter_solutions
from .parser import parse_puzzle

__all__ = [
    "BACKGROUND",
    "Clue",
    "Puzzle",
    "Outcome",
    "NonogramError",
    "MalformedPuzzleError",
    "AutomatonError",
    "Automaton",
    "build_automaton",
    "Space",
    "solve",
    "iter_solutions",
    "parse_puzzle",
]
