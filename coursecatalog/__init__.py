"""
Online course catalog: courses grouped by category, loaded from a text file.
"""

from coursecatalog.catalog import Catalog, CategoryNotFound
from coursecatalog.model import Course, InvalidDate, InvalidLevel, Level

__all__ = ["Catalog", "CategoryNotFound", "Course", "InvalidDate", "InvalidLevel", "Level"]
