"""Public SDK surface for DataStore.

This module provides a stable import path for library users.
It re-exports the store, its contracts, and typed models.
"""

from __future__ import annotations

from core.config import DataStoreConfig
from core.errors import DataStoreError, NotFound
from core.types import Criterion, Identifier, Record
from store.array_store import ArrayStore
from store.contract import DataStore, IdentifierPolicy
from store.identifiers import (
    ContentHashIdentifierFactory,
    GuessOrCreateIdentifierPolicy,
    SequentialIdentifierFactory,
    UuidIdentifierFactory,
    build_identifier_policy,
)
from store.property_path import get_entry_property


def create_store(config: DataStoreConfig | None = None) -> ArrayStore:
    """Create an empty store using the configured identifier policy.

    Args:
        config: Optional config; read from the environment when omitted.

    Returns:
        Empty store.
    """
    resolved_config = config or DataStoreConfig.from_env()
    return ArrayStore(build_identifier_policy(resolved_config))


__all__ = [
    "ArrayStore",
    "ContentHashIdentifierFactory",
    "Criterion",
    "DataStore",
    "DataStoreConfig",
    "DataStoreError",
    "GuessOrCreateIdentifierPolicy",
    "Identifier",
    "IdentifierPolicy",
    "NotFound",
    "Record",
    "SequentialIdentifierFactory",
    "UuidIdentifierFactory",
    "build_identifier_policy",
    "create_store",
    "get_entry_property",
]
