"""Storage contracts.

This module declares the protocols that store adapters and identifier
policies implement, so callers depend on behavior instead of classes.
"""

from __future__ import annotations

from typing import Protocol

from core.types import Identifier, Record, Records, RecordValue
from store.criteria import PropertyFilter


class IdentifierPolicy(Protocol):
    """Derives an identifier for a record stored without one."""

    def guess_or_create_identifier(self, record: Record) -> Identifier: ...


class DataStore(Protocol):
    """Identifier-keyed record storage with predicate queries."""

    def store(self, record: Record, identifier: Identifier | None = None) -> Identifier: ...

    def has(self, identifier: Identifier) -> bool: ...

    def remove(self, identifier: Identifier) -> None: ...

    def get(self, identifier: Identifier) -> Record: ...

    def find_by(
        self,
        property: PropertyFilter,
        value: RecordValue = None,
        comparator: str | None = "=",
    ) -> Records: ...

    def find_one_by(
        self,
        property: PropertyFilter,
        value: RecordValue = None,
        comparator: str | None = "=",
    ) -> Record: ...

    def find_all(self) -> Records: ...
