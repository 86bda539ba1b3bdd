"""CLI entrypoint: load nonogram puzzle(s), run the solver, and report solutions."""

import argparse
import csv
import json
from pathlib import Path
from typing import Any, Dict, List

from solver import solve_puzzle
from src.nonogram import config
from src.nonogram.clues import grid_matches
from src.nonogram.errors import NonogramError
from src.nonogram.examples import example_names, example_record
from src.nonogram.loader import load_puzzles
from src.nonogram.parser import parse_puzzle
from src.utils.io import save_json
from src.utils.logging_utils import get_logger
from src.utils.trace import enable_tracing, get_tracer, reset_tracer

logger = get_logger("run")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Solve nonogram puzzles with regular-constraint propagation")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=Path(config.DEFAULT_DATA_PATH),
        help=f"Path to a puzzle file or directory of puzzles (default: ${config.DATA_PATH_ENV} "
             f"or {config.DEFAULT_DATA_PATH})",
    )
    parser.add_argument(
        "--example",
        action="append",
        choices=example_names(),
        default=None,
        help="Solve a built-in example instead of reading INPUT (repeatable). "
             f"Examples run with a {config.EXAMPLE_TIME_LIMIT:g}s budget unless --time-limit is given.",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write a results CSV")
    parser.add_argument("--json-output", type=Path, default=None, help="Optional path to write results as JSON")
    parser.add_argument(
        "--max-solutions",
        type=int,
        default=config.DEFAULT_MAX_SOLUTIONS or 0,
        help="Stop after this many solutions per puzzle (0 = all).",
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=config.DEFAULT_TIME_LIMIT,
        help="Wall-clock budget per puzzle, in seconds.",
    )
    parser.add_argument(
        "--branch-over-domain",
        action="store_true",
        default=config.BRANCH_OVER_DOMAIN_VALUES,
        help="Branch only over values still in a cell's domain.",
    )
    parser.add_argument("--trace-dir", type=Path, default=None, help="Write one trace CSV per puzzle here")
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check every solution against the clues and report mismatches.",
    )
    return parser.parse_args(argv)


def format_grid(grid: List[List[int]]) -> List[str]:
    """One string per row; colors above 9 are space separated."""
    wide = any(value > 9 for row in grid for value in row)
    sep = " " if wide else ""
    return [sep.join(str(value) for value in row) for row in grid]


def format_solutions(solutions: List[List[List[int]]], *, include_status: bool = False) -> Dict[str, Any]:
    result: Dict[str, Any] = {"solutions": solutions}
    if include_status:
        if not solutions:
            status = "unsolved"
        elif len(solutions) == 1:
            status = "solved"
        else:
            status = "multiple"
        result = {"status": status, **result}
    return result


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "num_solutions", "solutions", "steps"])

        for r in results:
            writer.writerow([
                r["id"],
                r["num_solutions"],
                json.dumps(r["solutions"], separators=(",", ":")),
                r["steps"],
            ])


def collect_puzzles(args) -> List[Dict[str, Any]]:
    if args.example:
        return [example_record(name) for name in args.example]

    puzzles: List[Dict[str, Any]] = []
    if args.input.is_file():
        puzzles = load_puzzles(str(args.input))
    elif args.input.is_dir():
        for file_path in sorted(args.input.iterdir()):
            if file_path.suffix in config.PUZZLE_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
    else:
        raise ValueError(f"Input path {args.input} is neither file nor directory")
    return puzzles


def solve_record(record: Dict[str, Any], args) -> Dict[str, Any]:
    puzzle_id = str(record.get("id", "unknown"))
    reset_tracer()
    enable_tracing(config.TRACE_ENABLED or args.trace_dir is not None)
    tracer = get_tracer()

    try:
        puzzle = parse_puzzle(record)
        solutions = solve_puzzle(
            puzzle,
            max_solutions=args.max_solutions or None,
            time_limit=args.time_limit,
            branch_over_domain=args.branch_over_domain,
        )
    except (NonogramError, ValueError, TypeError) as e:
        logger.error("Failed to solve puzzle %s: %s", puzzle_id, e)
        return {"id": puzzle_id, "num_solutions": -1, "solutions": [], "steps": -1}

    if args.verify:
        for index, grid in enumerate(solutions):
            if not grid_matches(puzzle, grid):
                logger.warning("Puzzle %s: solution %d does not match its clues", puzzle_id, index)

    if args.trace_dir is not None:
        tracer.to_csv(args.trace_dir / f"{puzzle_id}.csv")

    summary = tracer.summary()
    logger.info(
        "Puzzle %s: %d solution(s), %d branch(es), %.3fs",
        puzzle_id, len(solutions), summary["num_branches"], summary["elapsed_time_seconds"],
    )
    return {
        "id": puzzle_id,
        "num_solutions": len(solutions),
        "solutions": solutions,
        # Branches tried is the search-effort measure; bookkeeping steps are not counted.
        "steps": summary["num_branches"],
    }


def main(argv=None):
    args = parse_args(argv)
    if args.example and args.time_limit is None:
        args.time_limit = config.EXAMPLE_TIME_LIMIT
    results = [solve_record(record, args) for record in collect_puzzles(args)]

    if args.output:
        write_results_csv(results, args.output)
    if args.json_output:
        save_json(args.json_output, [
            {"id": r["id"], "steps": r["steps"], **format_solutions(r["solutions"], include_status=True)}
            for r in results
        ])
    if not args.output and not args.json_output:
        for r in results:
            print(f"{r['id']}: {r['num_solutions']} solution(s)")
            for grid in r["solutions"]:
                print("\n".join(format_grid(grid)))
                print()
    return results


if __name__ == "__main__":
    main()
