"""Record-level predicates for free-text search and facet filters."""

from __future__ import annotations

from typing import Mapping, Sequence

from ProgramBrowser.core.models import FieldDescriptor, FilterKind, Multi, Record
from ProgramBrowser.core.normalize import raw_text, values_of
from ProgramBrowser.core.schema import FILTER_FIELDS, SEARCHABLE_KEYS

Selection = str | tuple[str, ...]


def matches_search(
    record: Record,
    search_term: str,
    searchable_keys: Sequence[str] = SEARCHABLE_KEYS,
) -> bool:
    """Return True when any searchable field contains the term.

    Matching is a case-insensitive substring test on raw values, so the
    literal "Not Available" text is searchable. Missing fields count as "".

    Args:
        record: Program record.
        search_term: User search text; blank matches everything.
        searchable_keys: Fields to scan.

    Returns:
        Whether the record matches.
    """
    needle = (search_term or "").strip().lower()
    if not needle:
        return True

    for key in searchable_keys:
        value = record.get(key)
        if isinstance(value, Multi):
            if any(needle in item.lower() for item in value.items):
                return True
        elif needle in raw_text(record, key).lower():
            return True
    return False


def matches_filters(
    record: Record,
    selections: Mapping[str, Selection],
    fields: Sequence[FieldDescriptor] = FILTER_FIELDS,
) -> bool:
    """Return True when the record satisfies every active facet selection.

    ``single`` fields require the raw field text to equal the selection
    exactly. ``multi`` fields require at least one shared value. Active
    fields are ANDed together.

    Args:
        record: Program record.
        selections: Field key to selected value (single) or values (multi).
        fields: Filterable field descriptors.

    Returns:
        Whether the record passes all filters.
    """
    for descriptor in fields:
        selected = selections.get(descriptor.key)
        if not selected:
            continue

        if descriptor.kind is FilterKind.SINGLE:
            if raw_text(record, descriptor.key) != selected:
                return False
        else:
            wanted = (selected,) if isinstance(selected, str) else selected
            values = set(values_of(record, descriptor.key))
            if not any(item in values for item in wanted):
                return False
    return True
