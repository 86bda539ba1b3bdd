"""
Settings shared by the solver and the command line runner.

Edit these values to change the defaults used when no option is given:
- where puzzle files are looked up,
- how many solutions to collect and for how long,
- how the search branches.
"""

from __future__ import annotations

import os
from typing import Optional

# ==== Input =================================================================

# Environment variable naming a puzzle file or directory.
DATA_PATH_ENV: str = "NONOGRAM_DATA_PATH"

# Puzzle file or directory read by run.py when no input is given.
DEFAULT_DATA_PATH: str = os.environ.get(DATA_PATH_ENV, "data/puzzles.json")

# File suffixes picked up when the input is a directory.
PUZZLE_SUFFIXES: tuple = (".json", ".jsonl", ".csv", ".parquet")

# ==== Search ================================================================

# Stop after this many solutions (None collects every solution).
DEFAULT_MAX_SOLUTIONS: Optional[int] = None

# Wall-clock budget per puzzle in seconds (None means no limit).
DEFAULT_TIME_LIMIT: Optional[float] = None

# Budget for built-in examples when no --time-limit is given. Some of them
# (`forever`, `chess` when collecting every solution) do not finish quickly.
EXAMPLE_TIME_LIMIT: float = 30.0

# Branch only over values still present in a cell's domain instead of every
# value between the domain's minimum and maximum.
BRANCH_OVER_DOMAIN_VALUES: bool = False

# ==== Tracing ===============================================================

# Record search steps in the global tracer.
TRACE_ENABLED: bool = True
