"""Runtime configuration model for DataStore.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_IDENTIFIER_FIELDS,
    DEFAULT_IDENTIFIER_STRATEGY,
    DEFAULT_SEQUENCE_START,
    SUPPORTED_IDENTIFIER_STRATEGIES,
)
from core.errors import DataStoreConfigError


@dataclass(frozen=True)
class DataStoreConfig:
    """Validated runtime configuration.

    Attributes:
        identifier_strategy: Fallback identifier scheme (uuid, sequence, hash).
        identifier_fields: Record fields checked for an existing identifier.
        sequence_start: First identifier issued by the sequence strategy.
    """

    identifier_strategy: str = DEFAULT_IDENTIFIER_STRATEGY
    identifier_fields: tuple[str, ...] = DEFAULT_IDENTIFIER_FIELDS
    sequence_start: int = DEFAULT_SEQUENCE_START

    @classmethod
    def from_env(cls) -> "DataStoreConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            DataStoreConfigError: If environment values are invalid.
        """
        strategy_value = os.getenv("DATASTORE_IDENTIFIER_STRATEGY", DEFAULT_IDENTIFIER_STRATEGY)
        fields_value = os.getenv("DATASTORE_IDENTIFIER_FIELDS", ",".join(DEFAULT_IDENTIFIER_FIELDS))
        start_value = os.getenv("DATASTORE_SEQUENCE_START", str(DEFAULT_SEQUENCE_START))
        return cls(
            identifier_strategy=_parse_identifier_strategy(strategy_value),
            identifier_fields=_parse_identifier_fields(fields_value),
            sequence_start=_parse_sequence_start(start_value),
        )


def _parse_identifier_strategy(raw_value: str) -> str:
    """Parse the identifier strategy environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized strategy name.

    Raises:
        DataStoreConfigError: If the strategy is not supported.
    """
    strategy = raw_value.strip().lower()
    if strategy not in SUPPORTED_IDENTIFIER_STRATEGIES:
        supported = ", ".join(SUPPORTED_IDENTIFIER_STRATEGIES)
        raise DataStoreConfigError(
            "Invalid DATASTORE_IDENTIFIER_STRATEGY value: "
            f"expected one of {supported}, got '{raw_value}'."
        )
    return strategy


def _parse_identifier_fields(raw_value: str) -> tuple[str, ...]:
    """Parse the comma-separated identifier field list."""
    fields = tuple(part.strip() for part in raw_value.split(",") if part.strip())
    if not fields:
        raise DataStoreConfigError(
            "Invalid DATASTORE_IDENTIFIER_FIELDS value: expected at least one field name. "
            "Unset the variable to use the default field list."
        )
    return fields


def _parse_sequence_start(raw_value: str) -> int:
    """Parse the sequence start environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed integer start.

    Raises:
        DataStoreConfigError: If value cannot be parsed into int.
    """
    try:
        return int(raw_value)
    except ValueError as error:
        raise DataStoreConfigError(
            "Invalid DATASTORE_SEQUENCE_START value: "
            f"expected integer, got '{raw_value}'. "
            "Set DATASTORE_SEQUENCE_START to a numeric value."
        ) from error
