"""Exceptions raised by the nonogram engine."""


class NonogramError(Exception):
    """Base class for every error raised by the solver package."""


class MalformedPuzzleError(NonogramError, ValueError):
    """The puzzle definition cannot be solved as given (bad clue, bad alphabet, bad size)."""


class AutomatonError(NonogramError, RuntimeError):
    """An automaton was asked for a transition it does not define."""
