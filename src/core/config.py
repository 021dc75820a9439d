"""Runtime configuration model for linedb.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATABASE_PATH, DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import LineDbConfigError


@dataclass(frozen=True)
class LineDbConfig:
    """Validated runtime configuration.

    Attributes:
        database_path: Backing file of the record store.
        log_level: Minimum level for structured log events.
    """

    database_path: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "LineDbConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LineDbConfigError: If environment values are invalid.
        """
        database_path_value = os.getenv("LINEDB_PATH", str(DEFAULT_DATABASE_PATH))
        log_level_value = os.getenv("LINEDB_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            database_path=Path(database_path_value).expanduser().resolve(),
            log_level=parse_log_level(log_level_value),
        )


def parse_log_level(raw_value: str) -> str:
    """Parse and normalize a log level name.

    Args:
        raw_value: Raw level name from environment or CLI.

    Returns:
        Lower-case supported level name.

    Raises:
        LineDbConfigError: If the level is not supported.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise LineDbConfigError(
            "Invalid LINEDB_LOG_LEVEL value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
            "Set LINEDB_LOG_LEVEL to a supported level name."
        )
    return level
