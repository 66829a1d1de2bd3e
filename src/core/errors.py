"""DataStore exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations

from typing import Sequence

from core.types import Criterion


class DataStoreError(Exception):
    """Base exception for all DataStore failures."""


class DataStoreConfigError(DataStoreError):
    """Raised for invalid runtime configuration."""


class QuerySpecError(DataStoreError):
    """Raised for invalid query-spec files or criterion expressions."""


class RecordPayloadError(DataStoreError):
    """Raised for malformed record input payloads."""


class NotFound(DataStoreError, LookupError):
    """Raised when an identifier or a filter matches no stored record.

    Attributes:
        identifier: Missing identifier for identifier lookups.
        criteria: Filter description as (path, comparator, value) triples.
    """

    def __init__(
        self,
        message: str,
        identifier: object = None,
        criteria: Sequence[tuple[str, object, object]] = (),
    ) -> None:
        super().__init__(message)
        self.identifier = identifier
        self.criteria = tuple(criteria)

    @classmethod
    def from_identifier(cls, identifier: object) -> "NotFound":
        """Build the error raised by identifier lookups."""
        return cls(f"No record found with identifier {identifier!r}.", identifier=identifier)

    @classmethod
    def from_property(cls, property: object, comparator: object, value: object) -> "NotFound":
        """Build the error raised by criteria lookups.

        Args:
            property: Property path, or a sequence of criteria.
            comparator: Comparator token used with a single path.
            value: Compared value used with a single path.

        Returns:
            Error carrying the filter description.
        """
        if isinstance(property, str):
            criteria = [(property, comparator or "=", value)]
        else:
            criteria = [_describe_criterion(item) for item in property]  # type: ignore[union-attr]
        rendered = " AND ".join(f"{path} {token} {operand!r}" for path, token, operand in criteria)
        return cls(f"No record matches {rendered or 'an empty filter'}.", criteria=criteria)


def _describe_criterion(item: object) -> tuple[str, object, object]:
    """Normalize one criterion into a (path, comparator, value) triple."""
    if isinstance(item, Criterion):
        return item.describe()
    parts = list(item) + [None, None, None]  # type: ignore[call-overload]
    return str(parts[0]), parts[2] or "=", parts[1]
