"""Map records and explorer state into display view models.

Pure functions; nothing here feeds back into filtering or sorting.
"""

from __future__ import annotations

from typing import Sequence

from ProgramBrowser.core.models import Multi, Record
from ProgramBrowser.core.normalize import is_blank_or_unavailable, text_of
from ProgramBrowser.core.schema import JOIN_SEPARATOR, NOT_AVAILABLE, PUBLIC_LINKS, VISIBLE_COLUMNS
from ProgramBrowser.renderers.view_models import FacetView, ResultView, RowView
from ProgramBrowser.services.explorer import ProgramExplorer


def display_value(record: Record, key: str) -> str:
    """Format one field for display.

    Args:
        record: Program record.
        key: Field key.

    Returns:
        Joined multi values, the scalar text, or "Not Available".
    """
    value = record.get(key)
    if isinstance(value, Multi):
        return JOIN_SEPARATOR.join(value.items) if value.items else NOT_AVAILABLE
    if is_blank_or_unavailable(value):
        return NOT_AVAILABLE
    return text_of(value) or NOT_AVAILABLE


def public_links(record: Record) -> tuple[str, ...]:
    """Return non-blank public link URLs of a record."""
    value = record.get(PUBLIC_LINKS)
    if not isinstance(value, Multi):
        return ()
    return tuple(item.strip() for item in value.items if item.strip())


def map_record_to_row(record: Record, columns: Sequence[str] = VISIBLE_COLUMNS) -> RowView:
    cells = {key: display_value(record, key) for key in columns if key != PUBLIC_LINKS}
    return RowView(cells=cells, links=public_links(record))


def map_explorer_to_view(explorer: ProgramExplorer, columns: Sequence[str] = VISIBLE_COLUMNS) -> ResultView:
    """Snapshot the explorer's current derived view for rendering.

    Args:
        explorer: Query coordinator.
        columns: Visible columns.

    Returns:
        Result view with rows, counts and facets.
    """
    view = explorer.view
    state = view.state
    facets = []
    for descriptor in explorer.fields:
        selected = state.selections.get(descriptor.key, ())
        if isinstance(selected, str):
            selected = (selected,)
        facets.append(
            FacetView(
                key=descriptor.key,
                label=descriptor.label,
                kind=descriptor.kind.value,
                options=explorer.facets.get(descriptor.key, ()),
                selected=tuple(selected),
            )
        )

    return ResultView(
        columns=tuple(columns),
        rows=[map_record_to_row(record, columns) for record in view.records],
        count=view.count,
        total=view.total,
        search=state.search,
        sort_key=state.sort_key,
        sort_direction=state.sort_direction.value,
        facets=tuple(facets),
    )
