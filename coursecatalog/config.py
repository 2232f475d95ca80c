"""
Application configuration.

Values come from environment variables; command line options override them.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any


PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_PATH = PACKAGE_DIR / "data" / "courses.csv"


def get_app_config() -> dict[str, Any]:
    """Get application configuration from environment variables"""
    return {
        "data_path": Path(os.getenv("COURSECATALOG_DATA", str(DEFAULT_DATA_PATH))),
        "log_level": os.getenv("COURSECATALOG_LOG_LEVEL", "WARNING").upper(),
    }
