"""Shared helpers for reading config sections.

Every error names the dotted config key (``query.sort_by``) so a bad YAML
file can be fixed without reading the code.
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Return the ``key`` section of the root mapping.

    A missing optional section reads as an empty mapping, so callers fall back
    to their defaults.

    Raises:
        ValueError: If a required section is missing.
        TypeError: If the section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def get_value(section: Mapping[str, Any], config_key: str, default: Any = _MISSING) -> Any:
    """Return the value under the last part of ``config_key``.

    Args:
        section: Section mapping.
        config_key: Dotted key, e.g. ``output.formats``.
        default: Value for a missing field; without it the field is required.

    Raises:
        ValueError: If a required field is missing.
    """
    field = config_key.rsplit(".", 1)[-1]
    if field in section:
        return section[field]
    if default is _MISSING:
        raise ValueError(f"Missing required config: {config_key}")
    return default


def expect_str(value: Any, config_key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_str_values(value: Any, config_key: str) -> list[str]:
    """Read one string or a list of strings as trimmed, non-empty values.

    Raises:
        TypeError: If the value or one of its items is not a string.
    """
    if isinstance(value, str):
        items = [value]
    elif isinstance(value, list):
        items = value
    else:
        raise TypeError(f"{config_key} must be a string or a list of strings")

    values: list[str] = []
    for idx, item in enumerate(items):
        if not isinstance(item, str):
            raise TypeError(f"{config_key}[{idx}] must be a string")
        if item.strip():
            values.append(item.strip())
    return values


def expect_choice(value: Any, config_key: str, choices: Mapping[str, T]) -> T:
    """Map a case-insensitive string onto one of ``choices``.

    Raises:
        TypeError: If the value is not a string.
        ValueError: If the value is not a known choice.
    """
    name = expect_str(value, config_key).strip().lower()
    if name not in choices:
        raise ValueError(f"{config_key} must be one of {sorted(choices)}, got: {value}")
    return choices[name]
