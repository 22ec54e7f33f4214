"""Program JSON parser.

Converts decoded JSON into immutable `Record` objects, resolving every field
into `Scalar` or `Multi` once so the query engine never inspects raw types.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from ProgramBrowser.core.models import FieldValue, Multi, Record, Scalar


class DataLoadError(RuntimeError):
    """Raised when the program collection cannot be loaded."""


def _scalar_text(value: Any) -> str:
    """Return the display text of a decoded JSON scalar.

    Args:
        value: Decoded JSON value.

    Returns:
        Text form; objects and other unexpected shapes use compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return json.dumps(value)
    try:
        return json.dumps(value, ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError):
        return str(value)


def _field_value(value: Any) -> FieldValue | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return Multi(tuple(_scalar_text(item) for item in value))
    return Scalar(_scalar_text(value))


def parse_record(raw: Mapping[str, Any]) -> Record:
    """Parse one decoded JSON object into a record.

    Args:
        raw: Decoded JSON object.

    Returns:
        Record with ``null`` fields omitted.
    """
    fields: dict[str, FieldValue] = {}
    for key, value in raw.items():
        resolved = _field_value(value)
        if resolved is not None:
            fields[str(key)] = resolved
    return Record(fields)


def parse_records(payload: Any) -> tuple[Record, ...]:
    """Parse the decoded data file into records.

    Args:
        payload: Decoded JSON root; None is treated as an empty collection.

    Returns:
        Records in file order.

    Raises:
        DataLoadError: If the root is not an array or an element is not an object.
    """
    if payload is None:
        return ()
    if not isinstance(payload, list):
        raise DataLoadError("Program data root must be a JSON array")

    records: list[Record] = []
    for idx, item in enumerate(payload):
        if not isinstance(item, Mapping):
            raise DataLoadError(f"Program data item [{idx}] must be an object")
        records.append(parse_record(item))
    return tuple(records)
