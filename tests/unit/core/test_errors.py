"""Unit tests for the not-found error constructors."""

from __future__ import annotations

from core.errors import DataStoreError, NotFound
from core.types import Criterion


def test_from_identifier_carries_identifier() -> None:
    """Identifier lookups keep the missing identifier."""
    error = NotFound.from_identifier(42)

    assert error.identifier == 42 and "42" in str(error)


def test_from_property_describes_single_path() -> None:
    """Single-path lookups describe path, comparator and value."""
    error = NotFound.from_property("profile.age", ">=", 18)

    assert error.criteria == (("profile.age", ">=", 18),) and "profile.age >= 18" in str(error)


def test_from_property_describes_criteria_sequence() -> None:
    """Criteria lookups describe every tuple and Criterion."""
    error = NotFound.from_property(
        [("x", 1, "="), ("y", 2), Criterion(path="z", value=3, comparator=">")], "=", None
    )

    assert error.criteria == (("x", "=", 1), ("y", "=", 2), ("z", ">", 3))


def test_not_found_is_a_lookup_error() -> None:
    """NotFound fits both the domain and builtin hierarchies."""
    error = NotFound.from_identifier("id")

    assert isinstance(error, DataStoreError) and isinstance(error, LookupError)


def test_from_property_uses_criterion_description() -> None:
    """Criterion objects contribute the triple from their own description."""
    criterion = Criterion(path="profile.city", value="Paris", comparator="IN")

    error = NotFound.from_property([criterion], "=", None)

    assert error.criteria == (criterion.describe(),) and "profile.city IN 'Paris'" in str(error)
