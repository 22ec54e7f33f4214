"""Initial query configuration (search text, facet selections, sort)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ProgramBrowser.config.common import expect_choice, expect_str, expect_str_values, get_section, get_value
from ProgramBrowser.core.models import FilterKind, SortDirection
from ProgramBrowser.core.schema import DEFAULT_SORT_KEY, find_filter_field, resolve_field_key

_DIRECTIONS = {
    "asc": SortDirection.ASCENDING,
    "ascending": SortDirection.ASCENDING,
    "desc": SortDirection.DESCENDING,
    "descending": SortDirection.DESCENDING,
}


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Store the query applied right after the data loads.

    Attributes:
        search: Initial search text.
        filters: Field key to selected value(s), keyed by schema key.
        sort_by: Field key to sort by.
        sort_direction: Initial sort direction.
    """

    search: str
    filters: Mapping[str, tuple[str, ...]]
    sort_by: str
    sort_direction: SortDirection


def load_query(raw: Mapping[str, Any]) -> QueryConfig:
    """Load query domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed query configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If fields or directions are unknown.
    """
    section = get_section(raw, "query", required=False)
    search = expect_str(get_value(section, "query.search", "") or "", "query.search")

    sort_name = expect_str(get_value(section, "query.sort_by", DEFAULT_SORT_KEY), "query.sort_by")
    sort_by = resolve_field_key(sort_name)
    if sort_by is None:
        raise ValueError(f"query.sort_by has unknown field: {sort_name}")

    direction = expect_choice(
        get_value(section, "query.sort_direction", "asc"), "query.sort_direction", _DIRECTIONS
    )

    return QueryConfig(
        search=search,
        filters=_parse_filters(get_value(section, "query.filters", None)),
        sort_by=sort_by,
        sort_direction=direction,
    )


def check_query(config: QueryConfig) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If a single-valued field has more than one selection.
    """
    for key, values in config.filters.items():
        descriptor = find_filter_field(key)
        if descriptor and descriptor.kind is FilterKind.SINGLE and len(values) > 1:
            raise ValueError(f"query.filters.{descriptor.label} accepts a single value")


def _parse_filters(value: Any) -> dict[str, tuple[str, ...]]:
    """Parse ``query.filters`` into schema keys and value tuples.

    Args:
        value: Mapping of field key or label to a string or list of strings.

    Returns:
        Filters keyed by schema key, without empty selections.

    Raises:
        TypeError: If the mapping or values have the wrong type.
        ValueError: If a field is not filterable.
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError("query.filters must be an object")

    filters: dict[str, tuple[str, ...]] = {}
    for name, selected in value.items():
        config_key = f"query.filters.{name}"
        descriptor = find_filter_field(str(name))
        if descriptor is None:
            raise ValueError(f"query.filters has unknown field: {name}")
        values = tuple(expect_str_values(selected, config_key))
        if values:
            filters[descriptor.key] = values
    return filters
