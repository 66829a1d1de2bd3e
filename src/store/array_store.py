"""In-memory record store with predicate queries.

This module keeps records in an owned dictionary keyed by identifier.
Queries are linear scans that resolve dotted property paths per record.
"""

from __future__ import annotations

import threading
from typing import Iterator, Mapping

from core.errors import NotFound
from core.logging_config import get_logger
from core.types import Identifier, Record, Records, RecordValue, is_identifier
from store.contract import IdentifierPolicy
from store.criteria import PropertyFilter, build_criteria, matches
from store.identifiers import GuessOrCreateIdentifierPolicy

_LOGGER = get_logger(__name__)


class ArrayStore:
    """Dictionary-backed store implementation.

    Each instance owns its entries; instances never share state. One
    lock guards every read and write of the entries.
    """

    def __init__(self, identifier_policy: IdentifierPolicy | None = None) -> None:
        """Initialize an empty store.

        Args:
            identifier_policy: Policy used when ``store`` gets no identifier.
        """
        self._identifier_policy = identifier_policy or GuessOrCreateIdentifierPolicy()
        self._entries: dict[Identifier, Record] = {}
        self._lock = threading.Lock()

    def store(self, record: Record, identifier: Identifier | None = None) -> Identifier:
        """Insert or fully replace a record.

        Args:
            record: Record payload.
            identifier: Optional key; derived from the record when omitted.

        Returns:
            Identifier the record was stored under.

        Raises:
            TypeError: If the record is not a mapping or the identifier is
                not a string or integer.
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"Record must be a mapping, got {type(record).__name__}.")
        if identifier is None:
            identifier = self._identifier_policy.guess_or_create_identifier(record)
        if not is_identifier(identifier):
            raise TypeError(
                f"Identifier must be a string or integer, got {type(identifier).__name__}."
            )
        with self._lock:
            replaced = identifier in self._entries
            self._entries[identifier] = record
        _LOGGER.debug("record_stored", identifier=identifier, replaced=replaced)
        return identifier

    def has(self, identifier: Identifier) -> bool:
        """Return whether a record is stored under the identifier."""
        with self._lock:
            return identifier in self._entries

    def remove(self, identifier: Identifier) -> None:
        """Delete a record; missing identifiers are ignored."""
        with self._lock:
            if identifier not in self._entries:
                return
            del self._entries[identifier]
        _LOGGER.debug("record_removed", identifier=identifier)

    def get(self, identifier: Identifier) -> Record:
        """Return the record stored under the identifier.

        Raises:
            NotFound: If no record is stored under the identifier.
        """
        with self._lock:
            if identifier not in self._entries:
                raise NotFound.from_identifier(identifier)
            return self._entries[identifier]

    def find_by(
        self,
        property: PropertyFilter,
        value: RecordValue = None,
        comparator: str | None = "=",
    ) -> Records:
        """Return every record matching any of the criteria.

        A record is included as soon as one criterion matches it, so
        several criteria combine with OR. Use ``find_one_by`` for AND.

        Args:
            property: A property path, or a sequence of
                ``(path, value, comparator)`` criteria.
            value: Operand used with a single property path.
            comparator: Comparator used with a single property path.

        Returns:
            Matching records keyed by identifier, in insertion order.
        """
        criteria = build_criteria(property, value, comparator)
        found: Records = {}
        for identifier, entry in self._snapshot().items():
            for criterion in criteria:
                if matches(entry, criterion):
                    found[identifier] = entry
        return found

    def find_one_by(
        self,
        property: PropertyFilter,
        value: RecordValue = None,
        comparator: str | None = "=",
    ) -> Record:
        """Return the first record matching all of the criteria.

        Args:
            property: A property path, or a sequence of
                ``(path, value, comparator)`` criteria.
            value: Operand used with a single property path.
            comparator: Comparator used with a single property path.

        Returns:
            First matching record in insertion order.

        Raises:
            NotFound: If no record satisfies every criterion.
        """
        return self.find_one_item_by(property, value, comparator)[1]

    def find_one_item_by(
        self,
        property: PropertyFilter,
        value: RecordValue = None,
        comparator: str | None = "=",
    ) -> tuple[Identifier, Record]:
        """Return the first ``(identifier, record)`` pair matching all criteria.

        Raises:
            NotFound: If no record satisfies every criterion.
        """
        criteria = build_criteria(property, value, comparator)
        for identifier, entry in self._snapshot().items():
            if all(matches(entry, criterion) for criterion in criteria):
                return identifier, entry
        raise NotFound.from_property(property, comparator, value)

    def find_all(self) -> Records:
        """Return a snapshot of every stored record keyed by identifier."""
        return self._snapshot()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._entries

    def __iter__(self) -> Iterator[Identifier]:
        return iter(self._snapshot())

    def _snapshot(self) -> Records:
        with self._lock:
            return dict(self._entries)
