"""
Tests for CLI entry points.

These tests focus on:
- exit codes of the sub-commands
- the printed output for a small course file written to a temporary directory
"""

import contextlib
import io
import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from coursecatalog.catalog import Catalog
from coursecatalog.cli import _log_level, main, run_demo
from coursecatalog.parse import load_lines


SAMPLE = """\
Bases de datos : SQL Essential Training : 3/12/2019 : principiante
CMS : Drupal 8 Essential Training : 7/02/2017 : intermedio
Bases de datos : Advanced SQL : 12/06/2020 : avanzado
CMS : WordPress Essential Training : 21/11/2018 : principiante
Programacion : Learning Python : 15/03/2018 : principiante
"""


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.data = Path(self._tmp.name) / "courses.csv"
        self.data.write_text(SAMPLE, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, *args: str) -> tuple[int, str]:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                main(["--data", str(self.data), *args])
        return ctx.exception.code, out.getvalue()

    def test_count_ignores_case(self) -> None:
        code, out = self._run("count", "bases de datos")
        self.assertEqual(code, 0)
        self.assertIn("BASES DE DATOS: 2", out)

    def test_count_unknown_category_fails(self) -> None:
        code, out = self._run("count", "no-such-category")
        self.assertNotEqual(code, 0)
        self.assertIn("NO-SUCH-CATEGORY", out)

    def test_categories_sorted(self) -> None:
        code, out = self._run("categories")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["BASES DE DATOS", "CMS", "PROGRAMACION"])

    def test_oldest(self) -> None:
        code, out = self._run("oldest")
        self.assertEqual(code, 0)
        self.assertIn("Drupal 8 Essential Training", out)

    def test_delete_prints_removed_names(self) -> None:
        code, out = self._run("delete", "cms", "intermedio")
        self.assertEqual(code, 0)
        self.assertIn("Deleted = ['Drupal 8 Essential Training']", out)
        self.assertNotIn("Drupal 8 Essential Training |", out)

    def test_delete_unknown_category_fails(self) -> None:
        code, out = self._run("delete", "nope", "avanzado")
        self.assertEqual(code, 1)
        self.assertIn("Category not found: NOPE", out)
        self.assertNotIn("Deleting courses of", out)

    def test_delete_unknown_level_fails(self) -> None:
        code, out = self._run("delete", "cms", "guru")
        self.assertEqual(code, 1)
        self.assertIn("Invalid level", out)

    def test_report_plain_and_pretty(self) -> None:
        code, out = self._run("report")
        self.assertEqual(code, 0)
        self.assertIn("Learning Python | 15/03/2018 | BEGINNER", out)

        code, out = self._run("report", "--pretty")
        self.assertEqual(code, 0)
        self.assertIn("PROGRAMACION", out)
        self.assertIn("Learning Python", out)

    def test_missing_data_file_fails(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                main(["--data", str(Path(self._tmp.name) / "missing.csv"), "categories"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Cannot read course file", out.getvalue())

    def test_invalid_data_file_fails(self) -> None:
        self.data.write_text("CMS : Drupal : 7/02/2017 : expert\n", encoding="utf-8")
        code, out = self._run("categories")
        self.assertEqual(code, 1)
        self.assertIn("Invalid course file", out)


class TestCLIConfig(unittest.TestCase):
    """
    Command line options override the environment configuration.
    """

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.data = Path(self._tmp.name) / "courses.csv"
        self.data.write_text(SAMPLE, encoding="utf-8")
        self.missing = Path(self._tmp.name) / "missing.csv"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, argv: list[str], env: dict[str, str]) -> tuple[int, str, mock.MagicMock]:
        out = io.StringIO()
        with mock.patch.dict(os.environ, env, clear=True), mock.patch("logging.basicConfig") as basic_config:
            with contextlib.redirect_stdout(out):
                with self.assertRaises(SystemExit) as ctx:
                    main(argv)
        return ctx.exception.code, out.getvalue(), basic_config

    def test_data_file_from_environment(self) -> None:
        code, out, _ = self._run(["count", "cms"], {"COURSECATALOG_DATA": str(self.data)})
        self.assertEqual(code, 0)
        self.assertIn("CMS: 2", out)

    def test_data_option_wins_over_environment(self) -> None:
        code, out, _ = self._run(
            ["--data", str(self.data), "count", "cms"],
            {"COURSECATALOG_DATA": str(self.missing)},
        )
        self.assertEqual(code, 0)
        self.assertIn("CMS: 2", out)

    def test_log_level_from_environment(self) -> None:
        env = {"COURSECATALOG_DATA": str(self.data), "COURSECATALOG_LOG_LEVEL": "info"}
        code, _, basic_config = self._run(["categories"], env)
        self.assertEqual(code, 0)
        self.assertEqual(basic_config.call_args.kwargs["level"], logging.INFO)

    def test_verbose_wins_over_environment(self) -> None:
        env = {"COURSECATALOG_DATA": str(self.data), "COURSECATALOG_LOG_LEVEL": "ERROR"}
        code, _, basic_config = self._run(["--verbose", "categories"], env)
        self.assertEqual(code, 0)
        self.assertEqual(basic_config.call_args.kwargs["level"], logging.DEBUG)


class TestLogLevel(unittest.TestCase):
    def test_known_names(self) -> None:
        self.assertEqual(_log_level(False, "WARNING"), logging.WARNING)
        self.assertEqual(_log_level(False, "debug"), logging.DEBUG)
        self.assertEqual(_log_level(True, "ERROR"), logging.DEBUG)

    def test_unknown_names_fall_back_to_warning(self) -> None:
        # BASIC_FORMAT is a logging module attribute, not a level
        self.assertEqual(_log_level(False, "BASIC_FORMAT"), logging.WARNING)
        self.assertEqual(_log_level(False, "loud"), logging.WARNING)
        self.assertEqual(_log_level(False, ""), logging.WARNING)


class TestDemo(unittest.TestCase):
    def test_demo_deletes_and_reports_twice(self) -> None:
        cat = Catalog()
        load_lines(cat, SAMPLE.splitlines())

        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            run_demo(cat)
        text = out.getvalue()

        self.assertIn("Oldest course: Drupal 8 Essential Training", text)
        self.assertIn("Deleted = ['Advanced SQL']", text)
        self.assertIn("Deleted = ['Drupal 8 Essential Training']", text)
        self.assertIn("After deleting ....", text)
        self.assertEqual(cat.total_courses_in("bases de datos"), 1)
        self.assertEqual(cat.total_courses_in("cms"), 1)


if __name__ == "__main__":
    unittest.main()
