"""
Central data model definitions used across the project.

This module defines the canonical Level and Course types so that:
- the loader, the catalog and the CLI share the same field names
- invalid text is rejected once, when a Course is built
- the rest of the code can rely on real date / enum values
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


DATE_FORMAT = "%d/%m/%Y"


class InvalidLevel(ValueError):
    """Raised when a text does not name a known difficulty level."""


class InvalidDate(ValueError):
    """Raised when a text is not a valid day/month/year date."""


class Level(Enum):
    """
    Difficulty of a course.

    The value is the label used in the course data files.
    """

    BEGINNER = "principiante"
    INTERMEDIATE = "intermedio"
    ADVANCED = "avanzado"

    @classmethod
    def from_text(cls, text: str) -> Level:
        """
        Parse a level case-insensitively.

        Accepts the member name (BEGINNER) as well as the data file label
        (principiante).
        """
        key = text.strip()
        for level in cls:
            if key.upper() == level.name or key.lower() == level.value:
                return level
        raise InvalidLevel(f"Invalid level: {text!r}")

    def __str__(self) -> str:
        return self.name


def parse_date(text: str) -> date:
    """
    Convert 'dd/mm/yyyy' to a date. Single-digit day/month are accepted.
    Raises InvalidDate for invalid formats or values.
    """
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        raise InvalidDate(f"Invalid date: {text!r}") from None


@dataclass(frozen=True)
class Course:
    """
    Represents one online course as stored in a catalog category.
    """

    name: str
    publication_date: date
    level: Level

    @classmethod
    def from_text(cls, name: str, date_text: str, level_text: str) -> Course:
        """
        Build a Course from raw text fields (as read from a data file).
        """
        return cls(
            name=name.strip(),
            publication_date=parse_date(date_text),
            level=Level.from_text(level_text),
        )

    def display(self) -> str:
        return f"{self.name} | {self.publication_date.strftime(DATE_FORMAT)} | {self.level}"

    def __str__(self) -> str:
        return self.display()
