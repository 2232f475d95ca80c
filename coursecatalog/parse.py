"""
Parsing (text records -> Catalog).

Each line of a course file describes exactly one course:

    category : name : dd/mm/yyyy : level

e.g.

    Bases de datos : SQL Essential Training : 3/12/2019 : principiante

Rules:
- whitespace around every field is ignored
- the category is everything before the first colon
- the rest must split into exactly three fields (name, date, level)
- blank lines are skipped
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple

from coursecatalog.catalog import Catalog
from coursecatalog.config import get_app_config
from coursecatalog.model import Course


logger = logging.getLogger(__name__)

SEPARATOR = ":"


# ---------------------------------------------------------------------------
# Record parsing
# ---------------------------------------------------------------------------


def parse_course(text: str) -> Course:
    """
    Parse the course part of a record (everything after the category).

    Example: "sql essential training: 3/12/2019 : principiante "
    Raises ValueError (or one of its subclasses InvalidDate / InvalidLevel).
    """
    fields = text.strip().split(SEPARATOR)
    if len(fields) != 3:
        raise ValueError(f"Expected 'name : date : level', got: {text!r}")

    name, date_text, level_text = fields
    return Course.from_text(name, date_text, level_text)


def parse_line(line: str) -> Optional[Tuple[str, Course]]:
    """
    Parse one full record line into (category, course).
    Returns None for blank lines.
    """
    raw = line.strip()
    if not raw:
        return None

    p = raw.find(SEPARATOR)
    if p < 0:
        raise ValueError(f"Missing category separator in line: {line!r}")

    category = raw[:p].strip()
    return category, parse_course(raw[p + 1 :])


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_lines(catalog: Catalog, lines: Iterable[str]) -> int:
    """
    Add every course described by `lines` to the catalog.
    Returns the number of courses added.
    """
    count = 0
    for lineno, line in enumerate(lines, start=1):
        parsed = parse_line(line)
        if parsed is None:
            logger.debug("Skipping blank line %d", lineno)
            continue

        category, course = parsed
        catalog.add_course(category, course)
        count += 1

    return count


def load_file(catalog: Catalog, path: str | Path | None = None) -> int:
    """
    Load a course file (UTF-8, with or without BOM) into the catalog.

    Without a path, the configured data file is used
    (COURSECATALOG_DATA, else the bundled sample).
    """
    data_path = Path(path) if path is not None else get_app_config()["data_path"]

    text = data_path.read_text(encoding="utf-8-sig")
    count = load_lines(catalog, text.splitlines())

    logger.info("Loaded %d courses from %s", count, data_path)
    return count
