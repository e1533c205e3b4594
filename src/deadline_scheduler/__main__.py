"""Command line entry point for the deadline scheduler."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .deadlines import default_deadlines, generate_deadlines, parse_task_count
from .errors import SchedulerError
from .runner import schedule_file
from .scheduler import DeadlineScheduler, SchedulerConfig


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Schedule unit-time tasks on one machine, minimizing late tasks."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--tasks", type=int, help="Number of tasks to generate random deadlines for")
    source.add_argument(
        "--prompt",
        action="store_true",
        help="Ask for the number of tasks; invalid answers use the default deadlines",
    )
    source.add_argument("--input", type=Path, help="CSV or Excel file with 1-based deadlines")
    parser.add_argument("--output", type=Path, help="Path where the schedule will be written (with --input)")
    parser.add_argument("--deadline-column", default="deadline", help="Column holding the deadlines (default: deadline)")
    parser.add_argument(
        "--seed",
        type=int,
        default=os.getenv("DEADLINE_SCHEDULER_SEED"),
        help="Seed for random deadlines",
    )
    parser.add_argument(
        "--show-table",
        dest="show_table",
        action="store_true",
        help="Print the slot forest after every assignment",
    )
    parser.add_argument(
        "--no-table",
        dest="show_table",
        action="store_false",
        help="Do not print the slot forest",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable the progress bar shown in quiet mode",
    )
    parser.add_argument("--quiet", action="store_true", help="Only report errors")
    parser.set_defaults(show_table=True)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = SchedulerConfig(
        verbose=not args.quiet,
        use_tqdm=not args.disable_tqdm,
        show_table=args.show_table and not args.quiet,
    )

    if args.input is not None:
        result = schedule_file(args.input, args.output, config, deadline_column=args.deadline_column)
        return 0 if result is not None else 1

    if args.prompt:
        size = parse_task_count(input("Enter the number of task(s): "))
    else:
        size = args.tasks

    if size is None:
        deadlines = default_deadlines()
    elif size < 1:
        print(f"ERROR: the number of tasks must be positive, got {size}")
        return 1
    else:
        deadlines = generate_deadlines(size, seed=args.seed)

    try:
        DeadlineScheduler(config).schedule(deadlines)
    except SchedulerError as exc:
        print(f"ERROR: {exc}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
