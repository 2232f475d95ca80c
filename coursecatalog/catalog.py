"""
The course catalog.

A Catalog maps category names to the list of courses filed under them.

Rules:
- category keys are always stored uppercase, and every lookup uppercases
  its input first
- categories are enumerated in alphabetical order
- within a category, courses keep their insertion order

Nothing returned by a Catalog is a reference into its internal lists:
callers always get fresh lists / tuples.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from coursecatalog.model import Course, Level


logger = logging.getLogger(__name__)

REPORT_HEADER = "Online courses offered by the platform"
REPORT_SEPARATOR = "---------------------------------------"


class CategoryNotFound(LookupError):
    """Raised when an operation needs a category the catalog does not have."""

    def __init__(self, category: str) -> None:
        super().__init__(f"Category not found: {category}")
        self.category = category


def _key(category: str) -> str:
    return category.upper()


class Catalog:
    def __init__(self) -> None:
        self._categories: dict[str, list[Course]] = {}

    def add_course(self, category: str, course: Course) -> None:
        """
        Add a course at the end of its category, creating the category if needed.
        """
        self._categories.setdefault(_key(category), []).append(course)

    def total_courses_in(self, category: str) -> int:
        """
        Number of courses in a category, or -1 if the category does not exist.
        """
        courses = self._categories.get(_key(category))
        if courses is None:
            return -1
        return len(courses)

    def courses_in(self, category: str) -> Optional[tuple[Course, ...]]:
        """
        Courses of a category in insertion order, or None if the category
        does not exist.
        """
        courses = self._categories.get(_key(category))
        if courses is None:
            return None
        return tuple(courses)

    def categories(self) -> list[str]:
        return sorted(self._categories)

    def delete_courses_of(self, category: str, level: Level) -> list[str]:
        """
        Remove every course of the given level from a category.

        Returns the names of the removed courses, alphabetically sorted and
        without duplicates. The remaining courses keep their order.
        Raises CategoryNotFound if the category does not exist.
        """
        key = _key(category)
        if key not in self._categories:
            raise CategoryNotFound(key)

        kept: list[Course] = []
        removed: set[str] = set()
        for course in self._categories[key]:
            if course.level == level:
                removed.add(course.name)
            else:
                kept.append(course)
        self._categories[key] = kept

        logger.debug("Deleted %d %s courses from %s", len(removed), level, key)
        return sorted(removed)

    def oldest_course(self) -> str:
        """
        Name of the first published course in the whole catalog.

        Categories are scanned alphabetically, courses in insertion order;
        on equal dates the first one found wins. Returns "" if the catalog
        has no courses.
        """
        oldest: Optional[Course] = None
        for course in self._iter_courses():
            if oldest is None or course.publication_date < oldest.publication_date:
                oldest = course
        return oldest.name if oldest is not None else ""

    def report(self) -> str:
        """
        Text rendering of the catalog: one block per category, in key order.
        """
        lines: list[str] = [REPORT_HEADER, ""]
        for key in self.categories():
            lines.append(key)
            for course in self._categories[key]:
                lines.append(f"    {course.display()}")
            lines.append(REPORT_SEPARATOR)
        return "\n".join(lines) + "\n"

    def _iter_courses(self) -> Iterator[Course]:
        for key in self.categories():
            for course in self._categories[key]:
                yield course

    def __len__(self) -> int:
        return sum(len(courses) for courses in self._categories.values())

    def __str__(self) -> str:
        return self.report()
