"""DataStore CLI entry points.
This module exposes commands that load JSONL records into an in-memory
store and run lookups and queries against it.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Sequence

from cli.find_command import add_find_command, run_find_command
from cli.query_command import add_query_command, run_query_command
from core.config import DataStoreConfig
from core.errors import DataStoreError
from core.types import Identifier
from store.array_store import ArrayStore
from store.identifiers import build_identifier_policy
from store.record_payload import load_records_into, read_records_jsonl, record_to_payload


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="datastore", description="In-memory record store CLI")
    parser.add_argument("--records", required=True, help="JSONL file with one record per line")
    parser.add_argument("--id-field", help="Record field holding each identifier")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_get_command(subparsers)
    _add_count_command(subparsers)
    add_find_command(subparsers)
    add_query_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the DataStore CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        store = _build_store(args.records, args.id_field)
        if args.command == "get":
            return _run_get_command(store, args)
        if args.command == "count":
            return _run_count_command(store)
        if args.command == "find":
            return run_find_command(store, args)
        if args.command == "query":
            return run_query_command(store, args)
    except DataStoreError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_store(records_path: str, id_field: str | None) -> ArrayStore:
    """Build a store seeded from a JSONL records file.

    Args:
        records_path: JSONL file path.
        id_field: Optional record field holding identifiers.

    Returns:
        Populated store.
    """
    config = DataStoreConfig.from_env()
    store = ArrayStore(build_identifier_policy(config))
    records = read_records_jsonl(Path(records_path).expanduser().resolve())
    load_records_into(store, records, id_field)
    return store


def _run_get_command(store: ArrayStore, args: argparse.Namespace) -> int:
    """Handle get command.

    Args:
        store: Populated store.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    identifier = _resolve_identifier(store, args.identifier)
    print(record_to_payload(identifier, store.get(identifier)))
    return 0


def _run_count_command(store: ArrayStore) -> int:
    """Handle count command."""
    print(len(store))
    return 0


def _resolve_identifier(store: ArrayStore, raw_identifier: str) -> Identifier:
    """Match a command-line identifier against string or integer keys."""
    if store.has(raw_identifier):
        return raw_identifier
    try:
        numeric_identifier = int(raw_identifier)
    except ValueError:
        return raw_identifier
    return numeric_identifier if store.has(numeric_identifier) else raw_identifier


def _add_get_command(subparsers: Any) -> None:
    """Register get subcommand."""
    parser = subparsers.add_parser("get", help="Print the record stored under an identifier")
    parser.add_argument("identifier", help="Record identifier")


def _add_count_command(subparsers: Any) -> None:
    """Register count subcommand."""
    subparsers.add_parser("count", help="Print the number of stored records")
