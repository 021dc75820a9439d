"""linedb exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Store failures carry the structured detail callers need to react.
"""

from __future__ import annotations


class LineDbError(Exception):
    """Base exception for all linedb failures."""


class LineDbConfigError(LineDbError):
    """Raised for invalid runtime configuration."""


class LineDbStoreError(LineDbError):
    """Raised for record store failures."""


class LoadError(LineDbStoreError):
    """Raised when the backing file cannot be read at open time."""


class EmptyStoreError(LineDbStoreError):
    """Raised when an operation needs at least one record."""

    def __init__(self) -> None:
        super().__init__("no records in database")


class OutOfBoundsError(LineDbStoreError):
    """Raised when a record number falls outside the valid range.

    Attributes:
        number: Requested record number.
        lower: Inclusive lower bound for the operation.
        upper: Inclusive upper bound, the current record count.
    """

    def __init__(self, number: int, lower: int, upper: int) -> None:
        self.number = number
        self.lower = lower
        self.upper = upper
        super().__init__(f"record number ({number}) out of bounds [{lower}, {upper}]")


class PersistError(LineDbStoreError):
    """Raised when the whole-file replace of the backing file fails."""
