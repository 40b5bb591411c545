"""
CLI (Command Line Interface).

Quick terminal commands on top of WolfScheduler, e.g.:

    wolfscheduler catalog courses.txt
    wolfscheduler schedule courses.txt --add "CSC 216:001" --add "CSC 226:001" --full
    wolfscheduler schedule courses.txt --add "CSC 216:001" --title "Fall" --export out.txt
    wolfscheduler interactive courses.txt

Note:
- The interactive menu lives in wolfscheduler/interactive.py
- This CLI prints plain text (tab separated rows, no rich formatting)
"""

from __future__ import annotations

import argparse

from wolfscheduler.errors import SchedulerError
from wolfscheduler.interactive import parse_offering, run_interactive
from wolfscheduler.scheduler import WolfScheduler


def _print_rows(rows: list[list[str]]) -> None:
    for row in rows:
        print("\t".join(row))


def _load(path: str) -> WolfScheduler | None:
    """
    Build the scheduler, printing the error instead of raising it.
    """
    try:
        return WolfScheduler(path)
    except SchedulerError as e:
        print(f"Error: {e}")
        return None


def _cmd_catalog(args: argparse.Namespace) -> int:
    scheduler = _load(args.file)
    if scheduler is None:
        return 1

    rows = scheduler.get_course_catalog()
    if not rows:
        print("Catalog is empty.")
        return 0

    _print_rows(rows)
    return 0


def _cmd_schedule(args: argparse.Namespace) -> int:
    """
    Add the requested offerings in order, print the schedule, optionally export it.
    """
    scheduler = _load(args.file)
    if scheduler is None:
        return 1

    if args.title is not None:
        scheduler.set_schedule_title(args.title)

    for item in args.add:
        offering = parse_offering(item)
        if offering is None:
            print(f"Cannot read course {item!r} (expected NAME:SECTION).")
            return 1

        name, section = offering
        try:
            added = scheduler.add_course_to_schedule(name, section)
        except SchedulerError as e:
            print(f"Error: {e}")
            return 1
        if not added:
            print(f"Warning: {name}-{section} not found in catalog (skipped).")

    print(scheduler.get_schedule_title())
    rows = scheduler.get_full_scheduled_courses() if args.full else scheduler.get_scheduled_courses()
    if rows:
        _print_rows(rows)
    else:
        print("No courses scheduled.")

    if args.export:
        try:
            scheduler.export_schedule(args.export)
        except SchedulerError as e:
            print(f"Error: {e}")
            return 1
        print(f"Exported {len(rows)} courses to: {args.export}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="wolfscheduler", description="WolfScheduler CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    p_catalog = sub.add_parser("catalog", help="Show the course catalog")
    p_catalog.add_argument("file", type=str, help="Course record file")

    p_schedule = sub.add_parser("schedule", help="Build a schedule from the catalog")
    p_schedule.add_argument("file", type=str, help="Course record file")
    p_schedule.add_argument(
        "--add", action="append", default=[], metavar="NAME:SECTION", help="Course to add (e.g. 'CSC 216:001')"
    )
    p_schedule.add_argument("--title", type=str, default=None, help="Schedule title")
    p_schedule.add_argument("--full", action="store_true", help="Show credits, instructor and meeting times")
    p_schedule.add_argument("--export", type=str, default=None, help="Write the schedule to this file")

    p_interactive = sub.add_parser("interactive", help="Interactive menu mode")
    p_interactive.add_argument("file", type=str, help="Course record file")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "catalog":
        raise SystemExit(_cmd_catalog(args))
    if args.command == "schedule":
        raise SystemExit(_cmd_schedule(args))

    if args.command == "interactive":
        scheduler = _load(args.file)
        if scheduler is None:
            raise SystemExit(1)
        run_interactive(scheduler)
        raise SystemExit(0)

    raise SystemExit(2)
