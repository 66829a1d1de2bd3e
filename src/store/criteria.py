"""Filter criteria building and matching.

This module turns the polymorphic ``property`` argument of record queries
into normalized criteria and evaluates one criterion against a record.
"""

from __future__ import annotations

from typing import Sequence, Union

from core.constants import SUPPORTED_COMPARATORS
from core.logging_config import get_logger
from core.types import Criterion, Record, RecordValue
from store.comparators import compare, is_supported_comparator, normalize_comparator
from store.property_path import get_entry_property

_LOGGER = get_logger(__name__)

CriterionInput = Union[Criterion, Sequence[RecordValue]]
PropertyFilter = Union[str, Sequence[CriterionInput]]


def build_criteria(
    property: PropertyFilter,
    value: RecordValue = None,
    comparator: str | None = None,
) -> tuple[Criterion, ...]:
    """Normalize a filter request into criteria.

    Args:
        property: A property path, or a sequence of criteria given as
            Criterion objects or ``(path, value, comparator)`` tuples.
        value: Operand used with a single property path.
        comparator: Comparator used with a single property path.

    Returns:
        Criteria with normalized comparators.

    Raises:
        TypeError: If a criterion has no property path.
    """
    if isinstance(property, str):
        raw_criteria: Sequence[CriterionInput] = [(property, value, comparator)]
    else:
        raw_criteria = property
    criteria = tuple(_to_criterion(item) for item in raw_criteria)
    for criterion in criteria:
        if not is_supported_comparator(criterion.comparator):
            _LOGGER.warning(
                "unsupported_comparator",
                path=criterion.path,
                comparator=criterion.comparator,
                supported=list(SUPPORTED_COMPARATORS),
            )
    return criteria


def matches(entry: Record, criterion: Criterion) -> bool:
    """Return whether one record satisfies one criterion."""
    entry_value = get_entry_property(entry, criterion.path)
    return compare(entry_value, criterion.comparator, criterion.value)


def _to_criterion(item: CriterionInput) -> Criterion:
    """Convert one criterion input, padding missing tuple items with None."""
    if isinstance(item, Criterion):
        return Criterion(item.path, item.value, normalize_comparator(item.comparator))
    if isinstance(item, str) or not isinstance(item, Sequence) or not item:
        raise TypeError(
            f"Invalid criterion {item!r}: expected a Criterion or a "
            "(path, value, comparator) sequence."
        )
    path, value, comparator = (list(item) + [None, None])[:3]
    if not isinstance(path, str):
        raise TypeError(f"Invalid criterion path {path!r}: expected a string.")
    return Criterion(path, value, normalize_comparator(comparator))
