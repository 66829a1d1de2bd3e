"""Query-spec CLI command wiring.

This module registers the query subcommand and runs a YAML query spec
against the loaded store.
"""

from __future__ import annotations

import argparse
from typing import Any

from core.query_spec import load_query_spec
from store.array_store import ArrayStore
from store.record_payload import record_to_payload


def add_query_command(subparsers: Any) -> None:
    """Register query subcommand."""
    parser = subparsers.add_parser(
        "query",
        help="Run a declarative YAML query spec",
    )
    parser.add_argument("spec_file", help="Path to YAML query-spec file")


def run_query_command(store: ArrayStore, args: argparse.Namespace) -> int:
    """Handle query command invocation."""
    spec = load_query_spec(args.spec_file)
    if spec.mode == "one":
        identifier, record = store.find_one_item_by(spec.criteria)
        print(record_to_payload(identifier, record))
        return 0
    for identifier, record in store.find_by(spec.criteria).items():
        print(record_to_payload(identifier, record))
    return 0
