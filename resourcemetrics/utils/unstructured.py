"""Typed accessors for semi-structured workload documents.

Every accessor distinguishes three outcomes:
- found: returns ``(value, True)``
- absent: returns ``(None, False)``; callers apply the field's default
- shape mismatch: raises ``FieldShapeError`` carrying the path and value
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class FieldShapeError(ValueError):
    """Raised when a document path resolves to a value of the wrong type."""

    def __init__(self, fields: tuple[str, ...] | list[str], value: Any, expected: str) -> None:
        self.path = ".".join(fields)
        self.value = value
        self.expected = expected
        super().__init__(
            f"{self.path} accessor error: {value!r} is of the type "
            f"{type(value).__name__}, expected {expected}"
        )


def nested_field(obj: Mapping[str, Any], *fields: str) -> tuple[Any, bool]:
    """Return the value at ``fields`` inside ``obj``.

    Args:
        obj: Document to traverse
        *fields: Successive mapping keys

    Returns:
        Tuple of (value, found). An explicit null leaf is found with value None.

    Raises:
        FieldShapeError: If an intermediate value is not a mapping.
    """
    val: Any = obj
    for i, field in enumerate(fields):
        if not isinstance(val, Mapping):
            raise FieldShapeError(fields[:i], val, "map[string]interface{}")
        if field not in val:
            return None, False
        val = val[field]
    return val, True


def nested_map(obj: Mapping[str, Any], *fields: str) -> tuple[dict[str, Any] | None, bool]:
    """Return the mapping at ``fields``; a null value counts as absent."""
    val, found = nested_field(obj, *fields)
    if not found or val is None:
        return None, False
    if not isinstance(val, Mapping):
        raise FieldShapeError(fields, val, "map[string]interface{}")
    return dict(val), True


def nested_list(obj: Mapping[str, Any], *fields: str) -> tuple[list[Any] | None, bool]:
    """Return the list at ``fields``; a null value counts as absent."""
    val, found = nested_field(obj, *fields)
    if not found or val is None:
        return None, False
    if not isinstance(val, list):
        raise FieldShapeError(fields, val, "[]interface{}")
    return val, True


def nested_int(obj: Mapping[str, Any], *fields: str) -> tuple[int, bool]:
    """Return the integer at ``fields``, or ``(0, False)`` when absent or null."""
    val, found = nested_field(obj, *fields)
    if not found or val is None:
        return 0, False
    # bool is an int subclass but never a valid count
    if isinstance(val, bool) or not isinstance(val, int):
        raise FieldShapeError(fields, val, "int64")
    return val, True


def nested_count(obj: Mapping[str, Any], *fields: str) -> tuple[int, bool]:
    """Like ``nested_int`` but rejects negative values; used for replica and shard counts."""
    val, found = nested_int(obj, *fields)
    if val < 0:
        raise FieldShapeError(fields, val, "non-negative int64")
    return val, found


def nested_string(obj: Mapping[str, Any], *fields: str) -> tuple[str, bool]:
    """Return the string at ``fields``, or ``("", False)`` when absent or null."""
    val, found = nested_field(obj, *fields)
    if not found or val is None:
        return "", False
    if not isinstance(val, str):
        raise FieldShapeError(fields, val, "string")
    return val, True
