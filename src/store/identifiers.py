"""Identifier policies for records stored without an identifier.

This module guesses an identifier from well-known record fields and
otherwise synthesizes one with a pluggable factory (uuid, sequence, hash).
"""

from __future__ import annotations

import hashlib
import itertools
import json
import threading
from typing import Callable, Sequence
from uuid import uuid4

from core.config import DataStoreConfig
from core.constants import (
    DEFAULT_CONTENT_HASH_LENGTH,
    DEFAULT_IDENTIFIER_FIELDS,
    DEFAULT_SEQUENCE_START,
    HASH_ALGORITHM,
)
from core.errors import DataStoreConfigError
from core.logging_config import get_logger
from core.types import Identifier, Record, is_identifier

_LOGGER = get_logger(__name__)

IdentifierFactory = Callable[[Record], Identifier]


class UuidIdentifierFactory:
    """Random hex identifiers."""

    def __call__(self, record: Record) -> Identifier:
        return uuid4().hex


class SequentialIdentifierFactory:
    """Monotonically increasing integer identifiers."""

    def __init__(self, start: int = DEFAULT_SEQUENCE_START) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self, record: Record) -> Identifier:
        with self._lock:
            return next(self._counter)


class ContentHashIdentifierFactory:
    """Deterministic identifiers derived from record content.

    Equal records hash to the same identifier, so storing a duplicate
    replaces the earlier entry.
    """

    def __init__(self, length: int = DEFAULT_CONTENT_HASH_LENGTH) -> None:
        self._length = length

    def __call__(self, record: Record) -> Identifier:
        canonical = json.dumps(record, sort_keys=True, default=str, separators=(",", ":"))
        digest = hashlib.new(HASH_ALGORITHM, canonical.encode("utf-8")).hexdigest()
        return digest[: self._length]


class GuessOrCreateIdentifierPolicy:
    """Reuse an identifier-like record field, or synthesize a new identifier.

    Args:
        candidate_fields: Record fields checked in order.
        factory: Fallback used when no candidate field holds an identifier.
    """

    def __init__(
        self,
        candidate_fields: Sequence[str] = DEFAULT_IDENTIFIER_FIELDS,
        factory: IdentifierFactory | None = None,
    ) -> None:
        self._candidate_fields = tuple(candidate_fields)
        self._factory = factory or UuidIdentifierFactory()

    def guess_or_create_identifier(self, record: Record) -> Identifier:
        """Return the identifier a record should be stored under."""
        guessed = self.guess_identifier(record)
        if guessed is not None:
            return guessed
        identifier = self._factory(record)
        _LOGGER.debug("identifier_generated", identifier=identifier)
        return identifier

    def guess_identifier(self, record: Record) -> Identifier | None:
        """Return the first candidate field holding a usable identifier."""
        for field_name in self._candidate_fields:
            candidate = record.get(field_name)
            if is_identifier(candidate) and candidate != "":
                return candidate
        return None


def build_identifier_policy(config: DataStoreConfig) -> GuessOrCreateIdentifierPolicy:
    """Build the identifier policy selected by runtime config.

    Args:
        config: Runtime configuration.

    Returns:
        Configured identifier policy.

    Raises:
        DataStoreConfigError: If the configured strategy is unknown.
    """
    factory: IdentifierFactory
    if config.identifier_strategy == "uuid":
        factory = UuidIdentifierFactory()
    elif config.identifier_strategy == "sequence":
        factory = SequentialIdentifierFactory(config.sequence_start)
    elif config.identifier_strategy == "hash":
        factory = ContentHashIdentifierFactory()
    else:
        raise DataStoreConfigError(
            f"Unsupported identifier strategy '{config.identifier_strategy}'. "
            "Use one of: uuid, sequence, hash."
        )
    return GuessOrCreateIdentifierPolicy(config.identifier_fields, factory)
