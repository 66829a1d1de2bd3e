"""Find command wiring for DataStore CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.query_spec import parse_criterion_expression
from store.array_store import ArrayStore
from store.record_payload import record_to_payload


def add_find_command(subparsers: Any) -> None:
    """Register find subcommand."""
    parser = subparsers.add_parser(
        "find",
        help="Print records matching inline criteria",
    )
    parser.add_argument(
        "--where",
        action="append",
        required=True,
        help="Criterion such as 'profile.age>=18' or 'tag IN [a, b]' (repeatable)",
    )
    parser.add_argument(
        "--one",
        action="store_true",
        help="Print only the first record matching every criterion",
    )


def run_find_command(store: ArrayStore, args: argparse.Namespace) -> int:
    """Execute find and print one JSON row per match."""
    criteria = [parse_criterion_expression(expression) for expression in args.where]
    if args.one:
        identifier, record = store.find_one_item_by(criteria)
        print(record_to_payload(identifier, record))
        return 0
    for identifier, record in store.find_by(criteria).items():
        print(record_to_payload(identifier, record))
    return 0
