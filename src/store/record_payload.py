"""JSONL record payload helpers.

This module reads newline-delimited JSON records used to seed a store
and renders stored records as output rows.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from core.errors import RecordPayloadError
from core.logging_config import get_logger
from core.types import Identifier, Record, is_identifier
from store.contract import DataStore

_LOGGER = get_logger(__name__)


def read_records_jsonl(records_path: Path) -> list[Record]:
    """Read records from a JSONL file.

    Args:
        records_path: Input JSONL file path.

    Returns:
        Parsed records in file order.

    Raises:
        RecordPayloadError: If the file is missing or a row is invalid.
    """
    if not records_path.exists():
        raise RecordPayloadError(
            f"Records file not found at {records_path}. Provide a JSONL file path."
        )
    records: list[Record] = []
    for line_number, line in enumerate(records_path.read_text(encoding="utf-8").splitlines(), 1):
        if not line.strip():
            continue
        records.append(_parse_payload_line(line, line_number))
    return records


def load_records_into(
    store: DataStore,
    records: Iterable[Record],
    id_field: str | None = None,
) -> list[Identifier]:
    """Store records, keyed by ``id_field`` when given.

    Args:
        store: Target store.
        records: Records to store.
        id_field: Optional record field holding each identifier.

    Returns:
        Identifiers in storage order.

    Raises:
        RecordPayloadError: If a record lacks a usable ``id_field`` value.
    """
    identifiers: list[Identifier] = []
    for position, record in enumerate(records, 1):
        identifier = None
        if id_field is not None:
            identifier = record.get(id_field)
            if not is_identifier(identifier):
                raise RecordPayloadError(
                    f"Record {position} has no string or integer '{id_field}' field. "
                    "Fix the record or choose another --id-field."
                )
        identifiers.append(store.store(record, identifier))
    _LOGGER.info("records_loaded", record_count=len(identifiers), id_field=id_field)
    return identifiers


def record_to_payload(identifier: Identifier, record: Record) -> str:
    """Render one stored record as a JSON output row."""
    return json.dumps({"id": identifier, "record": record}, sort_keys=True, default=str)


def _parse_payload_line(line: str, line_number: int) -> dict[str, Any]:
    """Parse and validate one JSONL payload row.

    Args:
        line: Raw JSONL line.
        line_number: One-based line number.

    Returns:
        Parsed payload dictionary.

    Raises:
        RecordPayloadError: If JSON row is invalid.
    """
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as error:
        raise RecordPayloadError(f"Invalid JSON at line {line_number}: {error.msg}") from error
    if not isinstance(payload, dict):
        raise RecordPayloadError(f"Invalid payload at line {line_number}: expected JSON object")
    return payload
