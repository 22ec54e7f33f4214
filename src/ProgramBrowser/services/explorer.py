"""Query coordinator over the loaded program records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ProgramBrowser.core.facets import build_facet_catalog
from ProgramBrowser.core.models import FieldDescriptor, FilterKind, Record
from ProgramBrowser.core.predicates import matches_filters, matches_search
from ProgramBrowser.core.query import QueryState
from ProgramBrowser.core.schema import ALL_FIELDS, FILTER_FIELDS, SEARCHABLE_KEYS
from ProgramBrowser.core.sorting import sort_records
from ProgramBrowser.utils.log import log


@dataclass(frozen=True, slots=True)
class DerivedView:
    """Filtered and sorted projection of the record collection.

    Attributes:
        records: Matching records in display order.
        total: Size of the full collection.
        state: Query state the view was computed from.
    """

    records: tuple[Record, ...]
    total: int
    state: QueryState

    @property
    def count(self) -> int:
        return len(self.records)


@dataclass(slots=True)
class ProgramExplorer:
    """Own the query state and keep the derived view in sync with it.

    Every state change runs a full filter-then-sort pass over the records
    before returning. Facet options are computed once from the full
    collection and do not follow the current query.
    """

    records: tuple[Record, ...] = ()
    fields: tuple[FieldDescriptor, ...] = FILTER_FIELDS
    searchable_keys: tuple[str, ...] = SEARCHABLE_KEYS
    sortable_keys: tuple[str, ...] = ALL_FIELDS
    state: QueryState = field(default_factory=QueryState)
    _view: DerivedView | None = field(default=None, init=False, repr=False)
    _facets: Mapping[str, tuple[str, ...]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.records = tuple(self.records or ())
        self._facets = build_facet_catalog(self.records, self.fields)
        log.debug("Facet catalog built: %s", {key: len(opts) for key, opts in self._facets.items()})
        self.recompute()

    @property
    def view(self) -> DerivedView:
        if self._view is None:
            return self.recompute()
        return self._view

    @property
    def results(self) -> tuple[Record, ...]:
        return self.view.records

    @property
    def count(self) -> int:
        return self.view.count

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def active_filter_count(self) -> int:
        return self.state.active_filter_count

    @property
    def facets(self) -> Mapping[str, tuple[str, ...]]:
        return self._facets

    def descriptor(self, key: str) -> FieldDescriptor:
        """Return the descriptor for a filterable field.

        Raises:
            ValueError: If ``key`` is not a filterable field.
        """
        for descriptor in self.fields:
            if descriptor.key == key:
                return descriptor
        raise ValueError(f"Unknown filter field: {key}")

    def set_search(self, term: str) -> DerivedView:
        return self._apply(self.state.with_search(term or ""))

    def set_single_filter(self, key: str, value: str | None) -> DerivedView:
        """Set or clear the selection of a ``single`` field.

        Raises:
            ValueError: If the field is unknown or not ``single``.
        """
        self._expect_kind(key, FilterKind.SINGLE)
        return self._apply(self.state.with_single_filter(key, value))

    def toggle_multi_filter(self, key: str, value: str) -> DerivedView:
        """Toggle one value of a ``multi`` field selection.

        Raises:
            ValueError: If the field is unknown or not ``multi``.
        """
        self._expect_kind(key, FilterKind.MULTI)
        return self._apply(self.state.with_multi_toggled(key, value))

    def set_sort(self, key: str) -> DerivedView:
        """Sort by ``key``, flipping direction when it is already the sort key.

        Raises:
            ValueError: If ``key`` is not a known field.
        """
        if key not in self.sortable_keys:
            raise ValueError(f"Unknown sort field: {key}")
        return self._apply(self.state.with_sort(key))

    def reset(self) -> DerivedView:
        return self._apply(QueryState())

    def recompute(self) -> DerivedView:
        """Rebuild the derived view from the full record set."""
        state = self.state
        matched = [
            record
            for record in self.records
            if matches_search(record, state.search, self.searchable_keys)
            and matches_filters(record, state.selections, self.fields)
        ]
        ordered = sort_records(matched, state.sort_key, state.sort_direction)
        self._view = DerivedView(records=tuple(ordered), total=len(self.records), state=state)
        log.debug(
            "Recomputed view: %d/%d records search=%r filters=%s sort=%s %s",
            len(ordered),
            len(self.records),
            state.search,
            dict(state.selections),
            state.sort_key,
            state.sort_direction.value,
        )
        return self._view

    def _apply(self, state: QueryState) -> DerivedView:
        self.state = state
        return self.recompute()

    def _expect_kind(self, key: str, kind: FilterKind) -> None:
        descriptor = self.descriptor(key)
        if descriptor.kind is not kind:
            raise ValueError(f"Filter field {key} is {descriptor.kind.value}, not {kind.value}")

