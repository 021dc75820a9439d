"""Shared typed models.

This module defines the immutable record model returned by
store queries and consumed by select predicates.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """One line of the backing file.

    Attributes:
        number: One-based line number of the record.
        text: Line content without the record separator.
    """

    number: int
    text: str
