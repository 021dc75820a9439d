"""Core constants used across linedb modules.

This module centralizes file format and configuration defaults.
Keeping values here avoids magic literals in store logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATABASE_PATH = Path("linedb.txt")
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
RECORD_SEPARATOR = "\n"
FILE_ENCODING = "utf-8"
APPEND_POSITION = 0
FIRST_RECORD_NUMBER = 1
TEMP_FILE_SUFFIX = ".tmp"
