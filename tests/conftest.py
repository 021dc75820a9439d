"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def default_logging() -> Iterator[None]:
    """Restore the default log level after each test."""
    yield
    from core.logging_config import configure_logging

    configure_logging()


@pytest.fixture
def database_file(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory writing backing files with exact content."""

    def _write(content: str) -> Path:
        file_path = tmp_path / "linedb.txt"
        file_path.write_bytes(content.encode("utf-8"))
        return file_path

    return _write
