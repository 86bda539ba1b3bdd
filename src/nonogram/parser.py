"""Puzzle parser: convert raw puzzle records into `Puzzle` objects.

Supports:
- explicit clue lists (`rows` / `cols`), each clue written as `[color, count]`,
  `{"color": c, "count": n}`, `"c:n"`, or a bare count for black-and-white puzzles
- a painted `solution` grid, from which the clues are derived
Fields may also arrive JSON-encoded or as array-likes (CSV and parquet rows).
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Optional

from .clues import clues_from_solution
from .errors import MalformedPuzzleError
from .model import Clue, Puzzle, as_int

# Color used for bare counts in black-and-white puzzles.
DEFAULT_INK = 1

_CLUE_RE = re.compile(r"^\s*(\d+)\s*[:x]\s*(\d+)\s*$")
_SIZE_RE = re.compile(r"^\s*(\d+)\s*[*x]\s*(\d+)\s*$")


def _to_plain(value: Any) -> Any:
    """Turn JSON strings and numpy-style arrays into plain Python lists."""
    if isinstance(value, str):
        text = value.strip()
        if text[:1] in ("[", "{"):
            try:
                return _to_plain(json.loads(text))
            except json.JSONDecodeError as e:
                raise MalformedPuzzleError(f"Invalid JSON field: {e}") from e
        return value
    if hasattr(value, "tolist"):
        value = value.tolist()
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def parse_clue(raw: Any) -> Clue:
    if isinstance(raw, Clue):
        return raw
    if isinstance(raw, bool):
        raise MalformedPuzzleError(f"Cannot interpret {raw!r} as a clue")
    if isinstance(raw, int):
        return Clue(DEFAULT_INK, raw)
    if isinstance(raw, float) and raw.is_integer():
        return Clue(DEFAULT_INK, int(raw))
    if isinstance(raw, str):
        text = raw.strip()
        if text.isdigit():
            return Clue(DEFAULT_INK, int(text))
        match = _CLUE_RE.match(text)
        if match:
            return Clue(int(match.group(1)), int(match.group(2)))
    if isinstance(raw, dict) and "color" in raw and "count" in raw:
        return Clue(as_int(raw["color"], "Clue color"), as_int(raw["count"], "Clue count"))
    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        return Clue(as_int(raw[0], "Clue color"), as_int(raw[1], "Clue count"))
    raise MalformedPuzzleError(f"Cannot interpret {raw!r} as a clue")


def parse_clue_lines(raw_lines: Any, label: str) -> List[List[Clue]]:
    raw_lines = _to_plain(raw_lines)
    if not isinstance(raw_lines, list):
        raise MalformedPuzzleError(f"'{label}' must be a list of clue lists")

    lines: List[List[Clue]] = []
    for index, raw_line in enumerate(raw_lines):
        if raw_line is None:
            lines.append([])
            continue
        if not isinstance(raw_line, list):
            raise MalformedPuzzleError(f"{label}[{index}] must be a list of clues")
        lines.append([parse_clue(raw) for raw in raw_line])
    return lines


def _parse_size(raw: Any) -> Optional[tuple]:
    if raw is None or raw == "":
        return None
    match = _SIZE_RE.match(str(raw))
    if not match:
        raise MalformedPuzzleError(f"Size must look like 'ROWS*COLS', got {raw!r}")
    return int(match.group(1)), int(match.group(2))


def parse_puzzle(puzzle_json: Dict[str, Any]) -> Puzzle:
    name = str(puzzle_json.get("id", "") or "")

    rows_raw = puzzle_json.get("rows")
    cols_raw = puzzle_json.get("cols")
    solution = puzzle_json.get("solution")

    if rows_raw is None or cols_raw is None:
        if solution is None:
            raise MalformedPuzzleError(
                f"Puzzle {name or '?'} needs 'rows' and 'cols' clues or a 'solution' grid"
            )
        grid = _to_plain(solution)
        if not isinstance(grid, list) or not all(isinstance(row, list) for row in grid):
            raise MalformedPuzzleError(f"Puzzle {name or '?'}: 'solution' must be a grid")
        derived = clues_from_solution([[as_int(v, "Solution cell") for v in row] for row in grid])
        row_clues, col_clues = derived["rows"], derived["cols"]
    else:
        row_clues = parse_clue_lines(rows_raw, "rows")
        col_clues = parse_clue_lines(cols_raw, "cols")

    size = _parse_size(puzzle_json.get("size"))
    if size is not None and size != (len(row_clues), len(col_clues)):
        raise MalformedPuzzleError(
            f"Puzzle {name or '?'}: size {size[0]}*{size[1]} does not match "
            f"{len(row_clues)} row and {len(col_clues)} column clue lines"
        )

    colors = puzzle_json.get("colors")
    if colors is not None:
        colors = _to_plain(colors)
        if not isinstance(colors, list):
            raise MalformedPuzzleError(f"Puzzle {name or '?'}: 'colors' must be a list")
        colors = {as_int(c, "Color") for c in colors}

    return Puzzle(row_clues=row_clues, col_clues=col_clues, colors=colors, name=name)
