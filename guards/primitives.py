"""Scalar and structural refinements shared by every entity guard.

All predicates accept any value and never raise. Values arriving from the
document store or from parsed JSON are untyped, so nothing here assumes
the input is a mapping, a string, or even hashable.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime, timezone
from numbers import Real
from typing import Any, TypeGuard

# Permissive on purpose: scheme prefix plus at least one character.
_URL_PATTERN = re.compile(r"https?://.+")
# local@domain.tld smoke test, not RFC 5322.
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_object(value: Any) -> TypeGuard[Mapping[str, Any]]:
    """True for mappings (documents, parsed JSON objects); lists and None are not objects."""
    return isinstance(value, Mapping)


def is_string_array(value: Any) -> TypeGuard[list[str]]:
    """True for a list whose elements are all strings. Empty lists qualify."""
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def is_non_empty_array(value: Any) -> TypeGuard[list[Any]]:
    """True for a list with at least one element.

    Element types are not inspected; callers needing typed elements check
    them separately (see ``is_string_array``).
    """
    return isinstance(value, list) and len(value) > 0


def is_date(value: Any) -> TypeGuard[datetime]:
    """True for native datetime values."""
    return isinstance(value, datetime)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_timestamp_like(value: Any) -> bool:
    # Firestore/protobuf style: numeric seconds + nanoseconds and a converter.
    return (
        _is_number(getattr(value, "seconds", None))
        and _is_number(getattr(value, "nanoseconds", None))
        and callable(getattr(value, "to_datetime", None))
    )


def is_date_like(value: Any) -> bool:
    """True for a native datetime or a structurally-typed timestamp object.

    The same logical field can arrive already converted (``datetime``) or
    as the raw timestamp object the document store hands back, depending
    on where in the pipeline the caller sits.
    """
    return is_date(value) or _is_timestamp_like(value)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_datetime(value: Any) -> datetime:
    """Normalize a date-like value to a timezone-aware UTC datetime.

    Naive datetimes are taken to be UTC already.

    Raises:
        TypeError: If the value is not date-like
    """
    if is_date(value):
        return _as_utc(value)

    if not _is_timestamp_like(value):
        raise TypeError(f"Not a date-like value: {type(value).__name__}")

    converted = value.to_datetime()
    if isinstance(converted, datetime):
        return _as_utc(converted)

    # Converter returned something else; rebuild from the raw fields.
    epoch = value.seconds + value.nanoseconds / 1_000_000_000
    return datetime.fromtimestamp(epoch, tz=timezone.utc)


def is_non_empty_string(value: Any) -> TypeGuard[str]:
    """True for a string with at least one non-whitespace character."""
    return isinstance(value, str) and len(value.strip()) > 0


def is_valid_url(value: Any) -> TypeGuard[str]:
    """True for strings starting with http:// or https:// followed by anything."""
    return isinstance(value, str) and _URL_PATTERN.match(value) is not None


def is_valid_email(value: Any) -> TypeGuard[str]:
    """True for strings shaped like local@domain.tld."""
    return isinstance(value, str) and _EMAIL_PATTERN.fullmatch(value) is not None


def to_iso_string(value: datetime) -> str:
    """Render a datetime in canonical ISO-8601 UTC form with millisecond precision.

    Format: YYYY-MM-DDTHH:MM:SS.sssZ
    """
    value = _as_utc(value)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )


def is_iso_date_string(value: Any) -> TypeGuard[str]:
    """True for strings that parse as a date AND re-render to exactly the same text.

    "2024-01-01" parses but renders as "2024-01-01T00:00:00.000Z", so it is
    rejected; only the canonical form produced by ``to_iso_string`` passes.
    """
    if not isinstance(value, str):
        return False

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return False

    return to_iso_string(parsed) == value


def within_depth(value: Any, limit: int) -> bool:
    """True if mappings/lists nest no deeper than ``limit`` and contain no cycles.

    A bare scalar has depth 0, a flat mapping depth 1. The walk keeps its own
    stack, so any limit is safe regardless of the interpreter recursion limit.
    """
    # (node, depth, leaving): leaving entries pop a container off the current path.
    stack: list[tuple[Any, int, bool]] = [(value, 1, False)]
    on_path: set[int] = set()

    while stack:
        node, depth, leaving = stack.pop()
        if leaving:
            on_path.discard(id(node))
            continue

        if isinstance(node, Mapping):
            children = list(node.values())
        elif isinstance(node, (list, tuple)):
            children = list(node)
        else:
            continue

        if depth > limit:
            return False

        marker = id(node)
        if marker in on_path:
            return False

        on_path.add(marker)
        stack.append((node, depth, True))
        stack.extend((child, depth + 1, False) for child in children)

    return True
