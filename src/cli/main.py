"""linedb CLI entry points.
This module exposes record store operations as subcommands.
It maps argparse commands onto store calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import LineDbConfig, parse_log_level
from core.constants import SUPPORTED_LOG_LEVELS
from core.errors import LineDbError
from core.logging_config import configure_logging
from core.types import Record
from store.line_store import LineStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="linedb", description="Line record database CLI")
    parser.add_argument("--path", help="Override LINEDB_PATH for this command")
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override LINEDB_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_read_commands(subparsers)
    _add_write_commands(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the linedb CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.path, args.log_level)
        configure_logging(config.log_level)
        store = LineStore.open(config.database_path)
        return _dispatch(store, args)
    except LineDbError as error:
        print(f"error={error}")
        return 1


def _build_config(path: str | None, log_level: str | None) -> LineDbConfig:
    """Build config with optional CLI overrides.

    Args:
        path: Optional backing file override.
        log_level: Optional log level override.

    Returns:
        Validated config.
    """
    config = LineDbConfig.from_env()
    if path:
        config = replace(config, database_path=Path(path).expanduser().resolve())
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    return config


def _dispatch(store: LineStore, args: argparse.Namespace) -> int:
    """Run the selected subcommand against an open store."""
    if args.command == "count":
        print(store.length())
    elif args.command == "list":
        _print_records(store.all())
    elif args.command == "get":
        print(store.record(args.number))
    elif args.command == "grep":
        pattern = args.pattern
        _print_records(store.select(lambda record: pattern in record.text))
    elif args.command == "insert":
        store.insert(args.number, args.text)
    elif args.command == "update":
        print(store.update(args.number, args.text))
    elif args.command == "delete":
        print(store.delete(args.number))
    return 0


def _print_records(records: list[Record]) -> None:
    for record in records:
        print(f"{record.number}\t{record.text}")


def _add_read_commands(subparsers: Any) -> None:
    """Register read-only subcommands."""
    subparsers.add_parser("count", help="Print the number of records")
    subparsers.add_parser("list", help="Print every record with its number")
    get_parser = subparsers.add_parser("get", help="Print one record")
    get_parser.add_argument("number", type=int, help="One-based record number")
    grep_parser = subparsers.add_parser("grep", help="Print records containing a substring")
    grep_parser.add_argument("pattern", help="Substring to match against record text")


def _add_write_commands(subparsers: Any) -> None:
    """Register mutating subcommands."""
    insert_parser = subparsers.add_parser("insert", help="Insert a record at a position")
    insert_parser.add_argument("number", type=int, help="Target position, 0 appends")
    insert_parser.add_argument("text", help="Record text")
    update_parser = subparsers.add_parser("update", help="Replace a record, print the old text")
    update_parser.add_argument("number", type=int, help="One-based record number")
    update_parser.add_argument("text", help="New record text")
    delete_parser = subparsers.add_parser("delete", help="Remove a record, print its text")
    delete_parser.add_argument("number", type=int, help="One-based record number")
