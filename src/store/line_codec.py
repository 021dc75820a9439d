"""Line record codec and backing file persistence.

This module maps raw backing file bytes onto ordered record texts.
It also owns the whole-file replace used by every store mutation.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Sequence

from core.constants import FILE_ENCODING, RECORD_SEPARATOR, TEMP_FILE_SUFFIX
from core.errors import LoadError, PersistError


def decode_records(payload: bytes) -> list[str]:
    """Split backing file bytes into record texts.

    A zero-byte payload holds zero records. Any other payload holds
    one more record than it has separators.

    Args:
        payload: Raw backing file content.

    Returns:
        Ordered record texts.

    Raises:
        ValueError: If payload is not valid UTF-8.
    """
    if not payload:
        return []
    return payload.decode(FILE_ENCODING).split(RECORD_SEPARATOR)


def encode_records(records: Sequence[str]) -> bytes:
    """Join record texts into backing file bytes.

    Args:
        records: Ordered record texts.

    Returns:
        Encoded file content, empty for zero records.
    """
    return RECORD_SEPARATOR.join(records).encode(FILE_ENCODING)


def read_records_file(file_path: Path) -> list[str]:
    """Read and decode the backing file.

    Args:
        file_path: Backing file path.

    Returns:
        Ordered record texts.

    Raises:
        LoadError: If the file cannot be read or decoded.
    """
    try:
        return decode_records(file_path.read_bytes())
    except (OSError, ValueError) as error:
        raise LoadError(f"cannot open linedb backing file {file_path}: {error}") from error


def write_records_file(file_path: Path, records: Sequence[str]) -> None:
    """Replace the backing file content with encoded records.

    The new content lands in a sibling temporary file first and is
    renamed over the target, so readers see old or new content only.

    Args:
        file_path: Backing file path.
        records: Complete ordered record texts to persist.

    Raises:
        PersistError: If any step of the replace fails.
    """
    try:
        _replace_file(file_path, encode_records(records))
    except OSError as error:
        raise PersistError(f"cannot save linedb backing file {file_path}: {error}") from error


def _replace_file(file_path: Path, payload: bytes) -> None:
    """Write payload to a temporary sibling and rename it over file_path."""
    mode = _probe_writable(file_path)
    fd, temp_name = tempfile.mkstemp(
        dir=str(file_path.parent),
        prefix=f".{file_path.name}.",
        suffix=TEMP_FILE_SUFFIX,
    )
    try:
        with os.fdopen(fd, "wb") as temp_handle:
            temp_handle.write(payload)
            temp_handle.flush()
            os.fsync(temp_handle.fileno())
        if mode is not None:
            os.chmod(temp_name, mode)
        os.replace(temp_name, str(file_path))
    except BaseException:
        # rename never happened, target is untouched
        Path(temp_name).unlink(missing_ok=True)
        raise


def _probe_writable(file_path: Path) -> int | None:
    """Fail early when the existing target refuses writes.

    Returns:
        Permission bits of the existing target, or None when absent.
    """
    if not file_path.exists():
        return None
    with file_path.open("ab"):
        pass
    return stat.S_IMODE(file_path.stat().st_mode)
