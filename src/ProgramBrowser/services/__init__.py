"""Query service layer for ProgramBrowser.

Provides the query coordinator and a factory that applies the configured
initial query.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ProgramBrowser.core.models import FilterKind, SortDirection
from ProgramBrowser.services.explorer import DerivedView, ProgramExplorer

if TYPE_CHECKING:
    from ProgramBrowser.config import QueryConfig
    from ProgramBrowser.core.models import Record


def create_explorer(records: Sequence[Record] | None, query: QueryConfig | None = None) -> ProgramExplorer:
    """Create an explorer and apply an initial query through its transitions.

    Args:
        records: Loaded program records; None is treated as empty.
        query: Optional initial query from configuration.

    Returns:
        Explorer whose view reflects ``query``.
    """
    explorer = ProgramExplorer(records=tuple(records or ()))
    if query is None:
        return explorer

    if query.search:
        explorer.set_search(query.search)
    for key, values in query.filters.items():
        descriptor = explorer.descriptor(key)
        if descriptor.kind is FilterKind.SINGLE:
            explorer.set_single_filter(key, values[0])
        else:
            for value in values:
                if value not in explorer.state.selections.get(key, ()):
                    explorer.toggle_multi_filter(key, value)
    if query.sort_by != explorer.state.sort_key:
        explorer.set_sort(query.sort_by)
    if query.sort_direction is SortDirection.DESCENDING:
        explorer.set_sort(query.sort_by)
    return explorer


__all__ = [
    "DerivedView",
    "ProgramExplorer",
    "create_explorer",
]
