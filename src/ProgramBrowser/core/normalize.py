"""Value normalization shared by search, filtering, sorting and facets.

Every comparison made by the query engine goes through these helpers so that
missing values and the "not available" sentinel are classified the same way
everywhere.
"""

from __future__ import annotations

from typing import Any

from ProgramBrowser.core.models import Multi, Record, Scalar
from ProgramBrowser.core.schema import JOIN_SEPARATOR, NOT_AVAILABLE

_SENTINEL = NOT_AVAILABLE.lower()


def text_of(value: Any) -> str | None:
    """Return the plain string form of a field value.

    `Multi` values use the comma-joined list form. Unexpected types fall back
    to ``str()`` instead of failing.

    Args:
        value: `Scalar`, `Multi`, plain string, None, or anything else.

    Returns:
        String form, or None when the value is absent.
    """
    if value is None:
        return None
    if isinstance(value, Scalar):
        return value.text
    if isinstance(value, Multi):
        return ",".join(value.items)
    if isinstance(value, str):
        return value
    return str(value)


def is_blank_or_unavailable(value: Any) -> bool:
    """Return True for absent, whitespace-only, or "not available" values.

    The sentinel check ignores case and surrounding whitespace.
    """
    text = text_of(value)
    if text is None:
        return True
    stripped = text.strip()
    return not stripped or stripped.lower() == _SENTINEL


def normalize_scalar(value: Any) -> str:
    """Return "" for blank values, otherwise the trimmed string form."""
    if is_blank_or_unavailable(value):
        return ""
    return (text_of(value) or "").strip()


def values_of(record: Record, key: str) -> list[str]:
    """Return the values a record holds for a field.

    Multi-valued fields yield every element as-is (untrimmed). Scalar fields
    yield their normalized form, or nothing when blank.

    Args:
        record: Program record.
        key: Field key.

    Returns:
        Field values.
    """
    value = record.get(key)
    if isinstance(value, Multi):
        return list(value.items)
    normalized = normalize_scalar(value)
    return [normalized] if normalized else []


def raw_text(record: Record, key: str) -> str:
    """Return the un-normalized string form of a field ("" when absent)."""
    text = text_of(record.get(key))
    return "" if text is None else text


def sort_text(record: Record, key: str) -> str:
    """Return the comparable string for sorting.

    Multi-valued fields are joined with ``"; "``; scalars are normalized.
    """
    value = record.get(key)
    if isinstance(value, Multi):
        return JOIN_SEPARATOR.join(value.items)
    return normalize_scalar(value)
