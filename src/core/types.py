"""Shared typed models.

This module defines the record, identifier, and criterion models used by
the store, the query engine, and the CLI to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Sequence, Union

Identifier = Union[str, int]
RecordValue = Any
Record = Mapping[str, RecordValue]
Records = dict[Identifier, Record]

ValueKind = Literal["absent", "bool", "number", "string", "record", "sequence", "other"]


def value_kind(value: object) -> ValueKind:
    """Classify a record value into its closed value-kind tag.

    Args:
        value: Any value found in a record or passed as a comparison operand.

    Returns:
        The value-kind tag used by path resolution and comparators.
    """
    if value is None:
        return "absent"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "record"
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return "sequence"
    return "other"


def is_identifier(value: object) -> bool:
    """Return whether a value can key a store entry."""
    return isinstance(value, (str, int)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Criterion:
    """One filter predicate.

    Attributes:
        path: Dotted property path resolved inside each record.
        value: Operand compared against the resolved property value.
        comparator: Normalized comparator token.
    """

    path: str
    value: RecordValue = None
    comparator: str = "=="

    def describe(self) -> tuple[str, str, RecordValue]:
        """Return the (path, comparator, value) triple used in diagnostics."""
        return self.path, self.comparator, self.value
