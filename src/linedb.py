"""Public SDK surface for linedb.

This module provides a stable import path for library users.
It re-exports the store handle, record model, and error types.
"""

from __future__ import annotations

from core.config import LineDbConfig
from core.errors import (
    EmptyStoreError,
    LineDbConfigError,
    LineDbError,
    LineDbStoreError,
    LoadError,
    OutOfBoundsError,
    PersistError,
)
from core.types import Record
from store.line_store import LineStore, open_store

__all__ = [
    "EmptyStoreError",
    "LineDbConfig",
    "LineDbConfigError",
    "LineDbError",
    "LineDbStoreError",
    "LineStore",
    "LoadError",
    "OutOfBoundsError",
    "PersistError",
    "Record",
    "open_store",
]
