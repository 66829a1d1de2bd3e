"""Core constants used across DataStore modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

PROPERTY_PATH_SEPARATOR = "."
DEFAULT_COMPARATOR = "="
LOOSE_EQUALITY_COMPARATOR = "=="
SUPPORTED_COMPARATORS = ("==", "===", "!=", "!==", ">", ">=", "<", "<=", "IN")
DEFAULT_IDENTIFIER_STRATEGY = "uuid"
SUPPORTED_IDENTIFIER_STRATEGIES = ("uuid", "sequence", "hash")
DEFAULT_IDENTIFIER_FIELDS = ("id", "_id", "identifier", "uuid")
DEFAULT_SEQUENCE_START = 1
DEFAULT_CONTENT_HASH_LENGTH = 16
HASH_ALGORITHM = "sha256"
QUERY_SPEC_VERSION = 1
SUPPORTED_QUERY_MODES = ("all", "one")
DEFAULT_LOG_LEVEL = "INFO"
