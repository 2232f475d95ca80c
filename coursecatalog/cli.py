"""
CLI (Command Line Interface).

This module provides quick terminal commands on a course file, e.g.:

    coursecatalog report [--pretty]
    coursecatalog count <category>
    coursecatalog categories
    coursecatalog oldest
    coursecatalog delete <category> <level>
    coursecatalog demo

Note:
- Every command loads the course file first (--data, COURSECATALOG_DATA,
  or the bundled sample)
- delete only changes the in-memory catalog, the file is never rewritten
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich import box
from rich.console import Console
from rich.table import Table

from coursecatalog.catalog import Catalog, CategoryNotFound
from coursecatalog.config import get_app_config
from coursecatalog.model import Level
from coursecatalog.parse import load_file


logger = logging.getLogger(__name__)

# (category, level) pairs removed by the demo
DEMO_DELETIONS = [
    ("bases de datos", Level.ADVANCED),
    ("cms", Level.INTERMEDIATE),
]


def write_report(catalog: Catalog) -> None:
    """
    Print the plain text report to stdout.
    """
    print(catalog.report())


def _print_pretty_report(catalog: Catalog) -> None:
    """
    Render the catalog with rich: one table per category.
    """
    console = Console()
    for category in catalog.categories():
        table = Table(title=category, box=box.SIMPLE_HEAVY)
        table.add_column("Course")
        table.add_column("Published", justify="right")
        table.add_column("Level")
        for course in catalog.courses_in(category) or ():
            table.add_row(course.name, course.publication_date.strftime("%d/%m/%Y"), str(course.level))
        console.print(table)


def _print_deleted(catalog: Catalog, category: str, level: Level) -> None:
    # CategoryNotFound propagates before anything is printed
    deleted = catalog.delete_courses_of(category, level)
    print(f"Deleting courses of {category.upper()} with level {level}")
    print(f"Deleted = {deleted}\n")


def run_demo(catalog: Catalog) -> None:
    """
    Report, oldest course, two deletions, report again.
    """
    write_report(catalog)
    print(f"Oldest course: {catalog.oldest_course()}\n")

    print("------------------")
    for category, level in DEMO_DELETIONS:
        _print_deleted(catalog, category, level)
    print("------------------\n")

    print("After deleting ....")
    write_report(catalog)


def _cmd_report(args: argparse.Namespace, catalog: Catalog) -> int:
    if args.pretty:
        _print_pretty_report(catalog)
    else:
        write_report(catalog)
    return 0


def _cmd_count(args: argparse.Namespace, catalog: Catalog) -> int:
    category = (args.category or "").strip()
    if not category:
        print("Please provide a category.")
        return 1

    total = catalog.total_courses_in(category)
    if total < 0:
        print(f"Category not found: {category.upper()}")
        return 1

    print(f"{category.upper()}: {total}")
    return 0


def _cmd_categories(args: argparse.Namespace, catalog: Catalog) -> int:
    categories = catalog.categories()
    if not categories:
        print("No categories.")
        return 0

    for category in categories:
        print(category)
    return 0


def _cmd_oldest(args: argparse.Namespace, catalog: Catalog) -> int:
    name = catalog.oldest_course()
    if not name:
        print("No courses.")
        return 0

    print(f"Oldest course: {name}")
    return 0


def _cmd_delete(args: argparse.Namespace, catalog: Catalog) -> int:
    # InvalidLevel / CategoryNotFound are reported by main()
    level = Level.from_text(args.level)
    _print_deleted(catalog, args.category, level)
    write_report(catalog)
    return 0


def _cmd_demo(args: argparse.Namespace, catalog: Catalog) -> int:
    run_demo(catalog)
    return 0


COMMANDS = {
    "report": _cmd_report,
    "count": _cmd_count,
    "categories": _cmd_categories,
    "oldest": _cmd_oldest,
    "delete": _cmd_delete,
    "demo": _cmd_demo,
}


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="coursecatalog", description="Online course catalog CLI")
    parser.add_argument("--data", type=Path, default=None, help="Course file (category : name : dd/mm/yyyy : level)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_report = sub.add_parser("report", help="Show all courses grouped by category")
    p_report.add_argument("--pretty", action="store_true", help="Render tables with rich")

    p_count = sub.add_parser("count", help="Number of courses in a category")
    p_count.add_argument("category", type=str, help="Category name (any case)")

    sub.add_parser("categories", help="List all categories")
    sub.add_parser("oldest", help="Show the first published course")

    p_delete = sub.add_parser("delete", help="Delete courses of a category and level (in memory)")
    p_delete.add_argument("category", type=str, help="Category name (any case)")
    p_delete.add_argument("level", type=str, help="beginner / intermediate / advanced")

    sub.add_parser("demo", help="Run the full demonstration")

    return parser


def _log_level(verbose: bool, level_name: str) -> int:
    """
    --verbose means DEBUG; otherwise the configured level name.
    Unknown names fall back to WARNING.
    """
    if verbose:
        return logging.DEBUG
    # getLevelName maps known names to their number, anything else to a str
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging(verbose: bool, level_name: str) -> None:
    logging.basicConfig(
        level=_log_level(verbose, level_name),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, loads the catalog, dispatches to command
    handlers, and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_app_config()
    _configure_logging(args.verbose, config["log_level"])

    data_path = args.data if args.data is not None else config["data_path"]
    catalog = Catalog()
    try:
        load_file(catalog, data_path)
    except OSError as e:
        print(f"Cannot read course file {data_path}: {e}")
        raise SystemExit(1)
    except ValueError as e:
        print(f"Invalid course file {data_path}: {e}")
        raise SystemExit(1)

    handler = COMMANDS.get(args.command)
    if handler is None:
        raise SystemExit(2)

    try:
        raise SystemExit(handler(args, catalog))
    except (CategoryNotFound, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(e)
        raise SystemExit(1)
