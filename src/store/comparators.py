"""Comparator normalization and evaluation.

This module implements the comparison operators used by record queries.
Cross-type behavior is explicit: loose equality coerces numeric strings
and compares truthiness against booleans, strict equality requires
matching types, and ordering between incomparable kinds never matches.
"""

from __future__ import annotations

import math
from typing import Callable, Mapping, Sequence, cast

from core.constants import DEFAULT_COMPARATOR, LOOSE_EQUALITY_COMPARATOR, SUPPORTED_COMPARATORS
from core.types import RecordValue, value_kind

Operator = Callable[[RecordValue, RecordValue], bool]


def normalize_comparator(comparator: str | None) -> str:
    """Map empty and ``=`` comparators onto loose equality.

    Args:
        comparator: Raw comparator token, possibly None or empty.

    Returns:
        Canonical comparator token.
    """
    if not comparator or comparator == DEFAULT_COMPARATOR:
        return LOOSE_EQUALITY_COMPARATOR
    token = comparator.strip()
    if token.upper() == "IN":
        return "IN"
    return token


def is_supported_comparator(comparator: str) -> bool:
    """Return whether a normalized comparator has an operator."""
    return comparator in SUPPORTED_COMPARATORS


def compare(entry_value: RecordValue, comparator: str, value: RecordValue) -> bool:
    """Evaluate ``entry_value <comparator> value``.

    Args:
        entry_value: Value resolved from the record.
        comparator: Normalized comparator token.
        value: Operand supplied by the caller.

    Returns:
        Whether the comparison holds. Unsupported comparators never match.
    """
    operator = _OPERATORS.get(comparator)
    if operator is None:
        return False
    return operator(entry_value, value)


def loose_equals(left: RecordValue, right: RecordValue) -> bool:
    """Compare two values with type coercion."""
    left_kind = value_kind(left)
    right_kind = value_kind(right)
    if left_kind == "absent" or right_kind == "absent":
        return _is_empty(left) and _is_empty(right)
    if left_kind == "bool" or right_kind == "bool":
        return _truthy(left) == _truthy(right)
    if left_kind == "record" and right_kind == "record":
        return _records_equal(cast(Mapping, left), cast(Mapping, right), loose_equals)
    if left_kind == "sequence" and right_kind == "sequence":
        return _sequences_equal(cast(Sequence, left), cast(Sequence, right), loose_equals)
    left_number = _as_number(left)
    right_number = _as_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number
    if "number" in (left_kind, right_kind):
        return False
    return bool(left == right)


def strict_equals(left: RecordValue, right: RecordValue) -> bool:
    """Compare two values requiring identical kinds and scalar types."""
    left_kind = value_kind(left)
    if left_kind != value_kind(right):
        return False
    if left_kind == "record":
        return _records_equal(cast(Mapping, left), cast(Mapping, right), strict_equals)
    if left_kind == "sequence":
        return _sequences_equal(cast(Sequence, left), cast(Sequence, right), strict_equals)
    return type(left) is type(right) and bool(left == right)


def contains(entry_value: RecordValue, candidates: RecordValue) -> bool:
    """Return whether ``entry_value`` loosely equals any candidate."""
    return any(loose_equals(entry_value, candidate) for candidate in _as_candidates(candidates))


def _ordering(check: Callable[[object, object], bool]) -> Operator:
    """Build an ordering operator that rejects incomparable kinds."""

    def evaluate(left: RecordValue, right: RecordValue) -> bool:
        operands = _orderable_operands(left, right)
        if operands is None:
            return False
        return check(*operands)

    return evaluate


def _orderable_operands(left: RecordValue, right: RecordValue) -> tuple[object, object] | None:
    """Return comparable operands, or None for incomparable kinds."""
    left_kind = value_kind(left)
    right_kind = value_kind(right)
    if "number" in (left_kind, right_kind) or left_kind == right_kind == "string":
        left_number = _as_number(left)
        right_number = _as_number(right)
        if left_number is not None and right_number is not None:
            return left_number, right_number
    if left_kind == right_kind and left_kind in ("string", "bool"):
        return left, right
    return None


def _records_equal(left: Mapping, right: Mapping, equals: Operator) -> bool:
    if set(left) != set(right):
        return False
    return all(equals(left[key], right[key]) for key in left)


def _sequences_equal(left: Sequence, right: Sequence, equals: Operator) -> bool:
    if len(left) != len(right):
        return False
    return all(equals(left_item, right_item) for left_item, right_item in zip(left, right))


def _truthy(value: RecordValue) -> bool:
    """Truthiness where the string "0" counts as false."""
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def _is_empty(value: RecordValue) -> bool:
    """Return whether a value loosely equals an absent value."""
    if isinstance(value, str):
        return value == ""
    return not value


def _as_number(value: RecordValue) -> int | float | None:
    """Return a numeric view of numbers and numeric strings."""
    kind = value_kind(value)
    if kind == "number":
        return cast(float, value)
    if kind != "string":
        return None
    text = cast(str, value).strip()
    if not text or "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def _as_candidates(candidates: RecordValue) -> Sequence[RecordValue]:
    """Treat the IN operand as a list of candidates."""
    kind = value_kind(candidates)
    if kind == "absent":
        return ()
    if kind == "sequence":
        return cast(Sequence[RecordValue], candidates)
    if kind == "record":
        return tuple(cast(Mapping, candidates).values())
    return (candidates,)


_OPERATORS: dict[str, Operator] = {
    "==": loose_equals,
    "===": strict_equals,
    "!=": lambda left, right: not loose_equals(left, right),
    "!==": lambda left, right: not strict_equals(left, right),
    ">": _ordering(lambda left, right: left > right),  # type: ignore[operator]
    ">=": _ordering(lambda left, right: left >= right),  # type: ignore[operator]
    "<": _ordering(lambda left, right: left < right),  # type: ignore[operator]
    "<=": _ordering(lambda left, right: left <= right),  # type: ignore[operator]
    "IN": contains,
}
