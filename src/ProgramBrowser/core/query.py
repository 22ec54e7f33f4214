from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from ProgramBrowser.core.models import SortDirection
from ProgramBrowser.core.predicates import Selection
from ProgramBrowser.core.schema import DEFAULT_SORT_KEY


@dataclass(frozen=True, slots=True)
class QueryState:
    """Current search, filter and sort intent.

    Every transition returns a new state; instances are never mutated.

    Attributes:
        search: Free-text search string (may be empty).
        selections: Field key to selection. ``single`` fields hold one
            string, ``multi`` fields a tuple of distinct values in selection
            order. A field without a constraint is absent, never empty.
        sort_key: Field key the view is ordered by.
        sort_direction: Ascending or descending.
    """

    search: str = ""
    selections: Mapping[str, Selection] = field(default_factory=dict)
    sort_key: str = DEFAULT_SORT_KEY
    sort_direction: SortDirection = SortDirection.ASCENDING

    def __post_init__(self) -> None:
        cleaned = {key: value for key, value in dict(self.selections).items() if value}
        object.__setattr__(self, "selections", MappingProxyType(cleaned))

    def __hash__(self) -> int:
        return hash((self.search, frozenset(self.selections.items()), self.sort_key, self.sort_direction))

    def with_search(self, term: str) -> QueryState:
        return replace(self, search=term)

    def with_single_filter(self, key: str, value: str | None) -> QueryState:
        """Set or clear (``None`` / "") a single-valued selection."""
        selections = dict(self.selections)
        if value:
            selections[key] = value
        else:
            selections.pop(key, None)
        return replace(self, selections=selections)

    def with_multi_toggled(self, key: str, value: str) -> QueryState:
        """Add ``value`` to a multi selection, or remove it if present.

        The field is dropped entirely once no values remain.
        """
        current = self.selections.get(key, ())
        if isinstance(current, str):
            current = (current,)
        if value in current:
            updated = tuple(item for item in current if item != value)
        else:
            updated = (*current, value)

        selections = dict(self.selections)
        if updated:
            selections[key] = updated
        else:
            selections.pop(key, None)
        return replace(self, selections=selections)

    def with_sort(self, key: str) -> QueryState:
        """Sort by ``key``; choosing the current key again flips direction."""
        if key == self.sort_key:
            return replace(self, sort_direction=self.sort_direction.flipped())
        return replace(self, sort_key=key, sort_direction=SortDirection.ASCENDING)

    @property
    def active_filter_count(self) -> int:
        return len(self.selections)
