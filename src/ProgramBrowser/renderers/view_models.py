"""View models for output rendering.

Display-oriented structures that keep presentation concerns (the
"Not Available" placeholder, joined multi values, link labels) out of the
query engine. Used by OutputWriter implementations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence


@dataclass(frozen=True, slots=True)
class RowView:
    """One table row.

    Attributes:
        cells: Visible column key to display text.
        links: Public source URLs, rendered as "Source 1..n".
    """

    cells: Mapping[str, str]
    links: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class FacetView:
    """Selectable options of one filterable field.

    Attributes:
        key: Field key.
        label: Display label.
        kind: "single" or "multi".
        options: Sorted option values.
        selected: Currently selected values.
    """

    key: str
    label: str
    kind: str
    options: Sequence[str]
    selected: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class ResultView:
    """Everything a renderer needs for one derived view.

    Attributes:
        columns: Visible column keys in display order.
        rows: Rows in display order.
        count: Number of matching programs.
        total: Number of loaded programs.
        search: Current search text.
        sort_key: Column the rows are sorted by.
        sort_direction: "asc" or "desc".
        facets: Facet options and selections.
    """

    columns: Sequence[str]
    rows: Sequence[RowView]
    count: int
    total: int
    search: str
    sort_key: str
    sort_direction: str
    facets: Sequence[FacetView]

    @property
    def active_filters(self) -> list[FacetView]:
        return [facet for facet in self.facets if facet.selected]
