"""Dotted property path resolution.

This module walks nested records along paths like ``"a.b.c"``.
A broken path never raises; it resolves to an absent value instead.
"""

from __future__ import annotations

from typing import Sequence, cast

from core.constants import PROPERTY_PATH_SEPARATOR
from core.types import Record, RecordValue, value_kind


def get_entry_property(entry: Record, property_path: str) -> RecordValue:
    """Resolve a dotted property path inside a record.

    Args:
        entry: Record to read from.
        property_path: Dot-separated path, e.g. ``"profile.address.city"``.

    Returns:
        The resolved value, or None when any segment is missing or the
        path runs through a scalar.
    """
    # "aaa.bbb.ccc" -> head "aaa", remaining "bbb.ccc"
    head, _, remaining_path = property_path.partition(PROPERTY_PATH_SEPARATOR)
    if head not in entry:
        return None
    value = entry[head]
    if not remaining_path:
        return value
    return _descend(value, remaining_path)


def _descend(value: RecordValue, remaining_path: str) -> RecordValue:
    """Continue resolution below a container value."""
    kind = value_kind(value)
    if kind == "record":
        return get_entry_property(cast(Record, value), remaining_path)
    if kind == "sequence":
        return _descend_sequence(cast(Sequence[RecordValue], value), remaining_path)
    return None


def _descend_sequence(items: Sequence[RecordValue], remaining_path: str) -> RecordValue:
    """Continue resolution through a positional index like ``items.0.name``."""
    head, _, rest = remaining_path.partition(PROPERTY_PATH_SEPARATOR)
    if not head.isdecimal():
        return None
    index = int(head)
    if index >= len(items):
        return None
    if not rest:
        return items[index]
    return _descend(items[index], rest)
