"""Depth-first search over cloned constraint stores, with propagation at every node."""

import time
from typing import Callable, Iterator, List, Optional

from .model import Grid, Puzzle
from .space import Space
from src.utils.logging_utils import get_logger
from src.utils.trace import Tracer, get_tracer

StopCheck = Callable[[], bool]

logger = get_logger("search")


def solve(
    puzzle: Puzzle,
    max_solutions: Optional[int] = None,
    should_stop: Optional[StopCheck] = None,
    time_limit: Optional[float] = None,
    branch_over_domain: bool = False,
    tracer: Optional[Tracer] = None,
) -> List[Grid]:
    """
    Return every grid satisfying the puzzle's clues (no particular order).

    An empty list means the puzzle has no solution, or the search was stopped
    before it found one. `time_limit` (seconds) is turned into a stop check
    combined with `should_stop`.
    """
    if time_limit is not None:
        should_stop = _with_deadline(should_stop, time_limit)
    return list(iter_solutions(
        puzzle,
        max_solutions=max_solutions,
        should_stop=should_stop,
        branch_over_domain=branch_over_domain,
        tracer=tracer,
    ))


def iter_solutions(
    puzzle: Puzzle,
    max_solutions: Optional[int] = None,
    should_stop: Optional[StopCheck] = None,
    branch_over_domain: bool = False,
    tracer: Optional[Tracer] = None,
) -> Iterator[Grid]:
    if max_solutions is not None and max_solutions < 1:
        raise ValueError(f"max_solutions must be positive, got {max_solutions}")
    tracer = tracer or get_tracer()

    root = Space.from_puzzle(puzzle)
    outcome = root.propagate()
    if not outcome.ok:
        logger.debug("Puzzle %s is contradictory: %s", puzzle.name or "?", outcome.reason)
        tracer.log_contradiction(outcome.reason)
        return
    tracer.log_propagation(outcome.removed)

    found = 0
    stack: List[Space] = [root]
    while stack:
        if should_stop is not None and should_stop():
            logger.info("Search stopped after %d solution(s)", found)
            tracer.log_stop("cancelled", found)
            return

        space = stack.pop()
        if space.is_solved():
            found += 1
            tracer.log_solution_found(found)
            yield space.to_grid()
            if _reached(found, max_solutions):
                tracer.log_stop("solution limit", found)
                return
            continue

        cell = space.first_unfixed_cell()
        if cell is None:
            continue

        for value in _branch_values(space, cell, branch_over_domain):
            child = space.clone()
            tracer.log_branch(cell, value, len(space.domains[cell]), len(stack))

            outcome = child.assign(cell, value)
            if outcome.ok:
                outcome = child.propagate()
            if not outcome.ok:
                tracer.log_contradiction(outcome.reason, cell, value)
                continue
            tracer.log_propagation(outcome.removed, cell)

            if child.is_solved():
                found += 1
                tracer.log_solution_found(found)
                yield child.to_grid()
                if _reached(found, max_solutions):
                    tracer.log_stop("solution limit", found)
                    return
            else:
                stack.append(child)


def _branch_values(space: Space, cell, branch_over_domain: bool) -> List[int]:
    domain = space.domains[cell]
    if branch_over_domain:
        return list(domain.values())
    # Every value between min and max, including gaps; absent values fail at
    # assignment.
    return list(range(domain.min(), domain.max() + 1))


def _reached(found: int, max_solutions: Optional[int]) -> bool:
    return max_solutions is not None and found >= max_solutions


def _with_deadline(should_stop: Optional[StopCheck], time_limit: float) -> StopCheck:
    deadline = time.monotonic() + time_limit

    def _check() -> bool:
        if time.monotonic() >= deadline:
            return True
        return should_stop is not None and should_stop()

    return _check
