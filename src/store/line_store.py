"""Line record store.

This module owns the in-memory record list for one backing file.
Mutations persist a fresh list first and commit it only on success.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from core.constants import APPEND_POSITION, FIRST_RECORD_NUMBER
from core.errors import EmptyStoreError, LoadError, OutOfBoundsError, PersistError
from core.logging_config import get_logger
from core.types import Record
from store.line_codec import read_records_file, write_records_file

_LOGGER = get_logger(__name__)


class LineStore:
    """Handle to a line record database backed by one text file.

    Records are 1-indexed like lines in a file. Reads are served from
    memory; every mutation rewrites the whole backing file.

    A lone empty record is written as a zero-byte file, so the handle
    keeps one record while a reopened store holds none.
    """

    def __init__(self, path: Path, records: list[str]) -> None:
        self._path = path
        self._records = records

    @classmethod
    def open(cls, path: str | Path) -> "LineStore":
        """Load a store from its backing file.

        Args:
            path: Backing file path.

        Returns:
            Store holding the decoded records.

        Raises:
            LoadError: If the file cannot be read.
        """
        file_path = Path(path)
        try:
            records = read_records_file(file_path)
        except LoadError:
            _LOGGER.warning("store_load_failed", path=str(file_path))
            raise
        _LOGGER.info("store_opened", path=str(file_path), record_count=len(records))
        return cls(file_path, records)

    @property
    def path(self) -> Path:
        """Backing file path."""
        return self._path

    def __len__(self) -> int:
        return self.length()

    def length(self) -> int:
        """Return the number of records."""
        return len(self._records)

    def all(self) -> list[Record]:
        """Return every record with its number in ascending order."""
        return [
            Record(number=index, text=text)
            for index, text in enumerate(self._records, FIRST_RECORD_NUMBER)
        ]

    def record(self, number: int) -> str:
        """Return the text of the number-th record.

        Args:
            number: One-based record number.

        Returns:
            Record text.

        Raises:
            EmptyStoreError: If the store has no records.
            OutOfBoundsError: If number is outside [1, length].
        """
        self._check_not_empty()
        self._check_bounds(FIRST_RECORD_NUMBER, number)
        return self._records[number - 1]

    def select(self, predicate: Callable[[Record], bool]) -> list[Record]:
        """Return records accepted by predicate in ascending order."""
        return [record for record in self.all() if predicate(record)]

    def insert(self, number: int, text: str) -> None:
        """Insert a record so it becomes the number-th record.

        The record previously at that position and all later records
        move one position forward. Number 0 appends after the last
        record. Inserting empty text into an empty store does nothing.

        Args:
            number: Target position in [0, length].
            text: Record text.

        Raises:
            OutOfBoundsError: If number is outside [0, length].
            PersistError: If the backing file cannot be replaced.
        """
        self._check_bounds(APPEND_POSITION, number)
        if not self._records and text == "":
            _LOGGER.debug("record_insert_skipped", path=str(self._path), number=number)
            return
        if number == APPEND_POSITION:
            new_records = [*self._records, text]
        else:
            new_records = [*self._records[: number - 1], text, *self._records[number - 1 :]]
        self._commit(new_records, "record_inserted", number)

    def update(self, number: int, text: str) -> str:
        """Replace the text of the number-th record.

        Args:
            number: One-based record number.
            text: New record text.

        Returns:
            Previous record text.

        Raises:
            EmptyStoreError: If the store has no records.
            OutOfBoundsError: If number is outside [1, length].
            PersistError: If the backing file cannot be replaced.
        """
        old_text = self.record(number)
        new_records = list(self._records)
        new_records[number - 1] = text
        self._commit(new_records, "record_updated", number)
        return old_text

    def delete(self, number: int) -> str:
        """Remove the number-th record.

        Later records move one position back.

        Args:
            number: One-based record number.

        Returns:
            Removed record text.

        Raises:
            EmptyStoreError: If the store has no records.
            OutOfBoundsError: If number is outside [1, length].
            PersistError: If the backing file cannot be replaced.
        """
        old_text = self.record(number)
        new_records = [*self._records[: number - 1], *self._records[number:]]
        self._commit(new_records, "record_deleted", number)
        return old_text

    def _commit(self, new_records: list[str], event: str, number: int) -> None:
        """Persist new_records and adopt them as the in-memory state."""
        try:
            write_records_file(self._path, new_records)
        except PersistError as error:
            _LOGGER.error(
                "store_persist_failed",
                path=str(self._path),
                operation=event,
                number=number,
                error=str(error),
            )
            raise
        self._records = new_records
        _LOGGER.info(event, path=str(self._path), number=number, record_count=len(new_records))

    def _check_not_empty(self) -> None:
        if not self._records:
            raise EmptyStoreError()

    def _check_bounds(self, lower: int, number: int) -> None:
        upper = self.length()
        if number < lower or number > upper:
            raise OutOfBoundsError(number, lower, upper)


def open_store(path: str | Path) -> LineStore:
    """Open a line store at path.

    Args:
        path: Backing file path.

    Returns:
        Loaded store handle.
    """
    return LineStore.open(path)
