from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Union


@dataclass(frozen=True, slots=True)
class Scalar:
    """Single-valued field content.

    Attributes:
        text: Raw text exactly as loaded (not trimmed).
    """

    text: str


@dataclass(frozen=True, slots=True)
class Multi:
    """Multi-valued field content.

    Attributes:
        items: Element texts in source order (not trimmed).
    """

    items: tuple[str, ...] = ()


FieldValue = Union[Scalar, Multi]


class FilterKind(str, Enum):
    """Cardinality of a filterable field."""

    SINGLE = "single"
    MULTI = "multi"


class SortDirection(str, Enum):
    """Sort direction for the derived view."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    def flipped(self) -> SortDirection:
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Static metadata for a filterable field.

    Attributes:
        key: Record field key.
        label: Human-readable label.
        kind: ``single`` fields filter by one exact value, ``multi`` fields
            match when any selected value is present.
    """

    key: str
    label: str
    kind: FilterKind


@dataclass(frozen=True, slots=True)
class Record:
    """One program record.

    Values are resolved into `Scalar`/`Multi` once at load time; a key absent
    from ``fields`` means the record carries no value for it.

    Attributes:
        fields: Mapping of field key to value.
    """

    fields: Mapping[str, FieldValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Records are shared by every query; keep them read-only.
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash(frozenset(self.fields.items()))

    def get(self, key: str) -> Optional[FieldValue]:
        return self.fields.get(key)

    def __getitem__(self, key: str) -> FieldValue:
        return self.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


def record_from_values(values: Mapping[str, str | Sequence[str] | None]) -> Record:
    """Build a record from plain Python values.

    Strings become `Scalar`, lists/tuples become `Multi`, ``None`` is dropped.
    Mostly useful for tests and programmatic callers; the JSON loader
    performs the full conversion of arbitrary decoded values.

    Args:
        values: Mapping of field key to a string, a sequence of strings, or None.

    Returns:
        Immutable record.
    """
    fields: dict[str, FieldValue] = {}
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, str):
            fields[key] = Scalar(value)
        else:
            fields[key] = Multi(tuple(str(item) for item in value))
    return Record(fields)
