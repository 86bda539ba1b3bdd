"""Tracing module: logs nonogram search steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the solving process."""

    timestamp: float
    step_number: int
    action_type: str  # 'branch', 'contradiction', 'propagate', 'solution_found', 'stopped'
    cell: Optional[str] = None  # "r{row}c{col}"
    value: Optional[int] = None
    domain_size: Optional[int] = None
    stack_size: Optional[int] = None  # Pending spaces when the step happened
    removed: Optional[int] = None  # Values pruned by a propagation
    solutions_found: Optional[int] = None
    reason: Optional[str] = None


def cell_label(cell) -> str:
    row, col = cell
    return f"r{row}c{col}"


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        if not self.enabled:
            return
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_branch(self, cell, value: int, domain_size: int, stack_size: int):
        """Log a trial assignment of `value` to `cell` on a cloned space."""
        self._record(
            'branch',
            cell=cell_label(cell),
            value=value,
            domain_size=domain_size,
            stack_size=stack_size,
        )

    def log_contradiction(self, reason: str, cell=None, value: Optional[int] = None):
        """Log a branch abandoned because a domain became empty."""
        self._record(
            'contradiction',
            cell=cell_label(cell) if cell is not None else None,
            value=value,
            reason=reason,
        )

    def log_propagation(self, removed: int, cell=None):
        """Log a successful propagation to fixpoint."""
        self._record(
            'propagate',
            cell=cell_label(cell) if cell is not None else None,
            removed=removed,
        )

    def log_solution_found(self, solutions_found: int):
        """Log when a solution is recorded."""
        self._record('solution_found', solutions_found=solutions_found)

    def log_stop(self, reason: str, solutions_found: int):
        """Log an early end of the search (solution limit, deadline, cancellation)."""
        self._record('stopped', reason=reason, solutions_found=solutions_found)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'cell', 'value', 'domain_size',
            'stack_size', 'removed', 'solutions_found', 'reason',
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_branches': action_counts.get('branch', 0),
            'num_contradictions': action_counts.get('contradiction', 0),
            'num_solutions': action_counts.get('solution_found', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
