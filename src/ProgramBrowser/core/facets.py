"""Facet option derivation.

Options are taken from the full record collection, never from a filtered
subset, so selected options stay available while the query narrows.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ProgramBrowser.core.collation import collation_key
from ProgramBrowser.core.models import FieldDescriptor, Multi, Record
from ProgramBrowser.core.normalize import is_blank_or_unavailable, normalize_scalar
from ProgramBrowser.core.schema import FILTER_FIELDS


def options_for(records: Iterable[Record] | None, key: str) -> tuple[str, ...]:
    """Return the distinct non-blank values of a field, collated ascending.

    Args:
        records: Full record collection; None is treated as empty.
        key: Field key.

    Returns:
        Sorted distinct option strings.
    """
    seen: dict[str, None] = {}
    for record in records or ():
        value = record.get(key)
        if isinstance(value, Multi):
            for item in value.items:
                text = item.strip()
                if not is_blank_or_unavailable(text):
                    seen.setdefault(text, None)
        else:
            text = normalize_scalar(value)
            if text:
                seen.setdefault(text, None)
    return tuple(sorted(seen, key=collation_key))


def build_facet_catalog(
    records: Sequence[Record] | None,
    fields: Sequence[FieldDescriptor] = FILTER_FIELDS,
) -> Mapping[str, tuple[str, ...]]:
    """Compute options for every filterable field.

    Args:
        records: Full record collection.
        fields: Filterable field descriptors.

    Returns:
        Mapping of field key to its sorted options, in descriptor order.
    """
    return {descriptor.key: options_for(records, descriptor.key) for descriptor in fields}
