"""Unit tests for JSONL record payload helpers."""

from __future__ import annotations

import json

import pytest

from core.errors import RecordPayloadError
from store.array_store import ArrayStore
from store.record_payload import (
    load_records_into,
    read_records_jsonl,
    record_to_payload,
)
from tests.fixture_paths import fixture_path


def test_read_records_skips_blank_lines() -> None:
    """Blank lines in JSONL input are ignored."""
    records = read_records_jsonl(fixture_path("records.jsonl"))

    assert [record["id"] for record in records] == ["ada", "grace", "linus", "anon"]


def test_read_records_rejects_non_object_rows() -> None:
    """Rows must be JSON objects."""
    with pytest.raises(RecordPayloadError):
        read_records_jsonl(fixture_path("invalid_records.jsonl"))

    assert fixture_path("invalid_records.jsonl").exists()


def test_read_records_rejects_missing_file(tmp_path) -> None:
    """A missing file raises a payload error."""
    with pytest.raises(RecordPayloadError):
        read_records_jsonl(tmp_path / "missing.jsonl")

    assert not (tmp_path / "missing.jsonl").exists()


def test_load_records_uses_id_field() -> None:
    """id_field should key each record explicitly."""
    store = ArrayStore()

    identifiers = load_records_into(store, [{"name": "a"}, {"name": "b"}], id_field="name")

    assert identifiers == ["a", "b"] and store.get("b") == {"name": "b"}


def test_load_records_requires_id_field_value() -> None:
    """Records missing the id field should be rejected."""
    store = ArrayStore()

    with pytest.raises(RecordPayloadError):
        load_records_into(store, [{"name": "a"}, {"other": 1}], id_field="name")

    assert store.has("a")


def test_record_to_payload_renders_id_and_record() -> None:
    """Output rows carry the identifier and the record."""
    row = json.loads(record_to_payload(3, {"a": {"b": 1}}))

    assert row == {"id": 3, "record": {"a": {"b": 1}}}
