"""Command implementations for ProgramBrowser CLI.

Encapsulates the work behind each command, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

import click

from ProgramBrowser.core.models import FilterKind
from ProgramBrowser.core.schema import find_filter_field, resolve_field_key
from ProgramBrowser.renderers import OutputWriter, render_facets, render_text
from ProgramBrowser.renderers.console import render_summary
from ProgramBrowser.renderers.mapper import map_explorer_to_view
from ProgramBrowser.services import ProgramExplorer
from ProgramBrowser.utils.log import log


def parse_assignment(text: str) -> tuple[str, str]:
    """Split ``FIELD=VALUE`` into a filter field key and value.

    Args:
        text: Assignment text; FIELD may be a field key or label.

    Returns:
        Tuple of (field key, value).

    Raises:
        ValueError: If the text has no ``=`` or names an unknown field.
    """
    name, sep, value = text.partition("=")
    if not sep:
        raise ValueError(f"Expected FIELD=VALUE, got: {text}")
    descriptor = find_filter_field(name)
    if descriptor is None:
        raise ValueError(f"Unknown filter field: {name.strip()}")
    return descriptor.key, value.strip()


def apply_filter(explorer: ProgramExplorer, key: str, value: str) -> None:
    """Apply one filter intent: set for single fields, toggle for multi."""
    if explorer.descriptor(key).kind is FilterKind.SINGLE:
        explorer.set_single_filter(key, value or None)
    else:
        explorer.toggle_multi_filter(key, value)


def resolve_sort_key(name: str) -> str:
    """Resolve a sort field name.

    Raises:
        ValueError: If the field is unknown.
    """
    key = resolve_field_key(name)
    if key is None:
        raise ValueError(f"Unknown sort field: {name}")
    return key


@dataclass(slots=True)
class SearchCommand:
    """Apply one-shot query options and write the resulting view."""

    explorer: ProgramExplorer
    output_writer: OutputWriter
    search: str | None = None
    filters: Sequence[str] = ()
    sorts: Sequence[str] = ()

    def execute(self) -> None:
        if self.search is not None:
            self.explorer.set_search(self.search)
        for item in self.filters:
            key, value = parse_assignment(item)
            apply_filter(self.explorer, key, value)
        for name in self.sorts:
            self.explorer.set_sort(resolve_sort_key(name))

        result = map_explorer_to_view(self.explorer)
        log.info("Matched %d of %d programs", result.count, result.total)
        self.output_writer.write_result(result)


@dataclass(slots=True)
class FacetsCommand:
    """Print facet options derived from the full collection."""

    explorer: ProgramExplorer
    echo: Callable[[str], None] = click.echo

    def execute(self) -> None:
        self.echo(render_facets(map_explorer_to_view(self.explorer)).rstrip("\n"))


_HELP = """Commands:
  search <text>            set the search text (empty clears it)
  set <field> = <value>    select a value of a single-valued field
  toggle <field> = <value> add/remove a value of a multi-valued field
  clear <field>            remove the selection of a field
  sort <field>             sort by field (again to flip direction)
  reset                    clear search, filters and sort
  show                     print the current results
  facets                   print filter options
  quit                     leave"""


@dataclass(slots=True)
class BrowseSession:
    """Interactive loop translating text commands into explorer intents.

    Each line is handled to completion, including the recomputation, before
    the next one is read.
    """

    explorer: ProgramExplorer
    output_writer: OutputWriter | None = None
    echo: Callable[[str], None] = click.echo
    history: list[str] = field(default_factory=list)

    def run(self, lines: Iterable[str]) -> None:
        self.echo(_HELP)
        self._summary()
        for line in lines:
            if not self.handle(line):
                break

    def handle(self, line: str) -> bool:
        """Handle one command line.

        Args:
            line: Raw input line.

        Returns:
            False when the session should end.
        """
        text = line.strip()
        if not text:
            return True
        command, _, rest = text.partition(" ")
        command = command.lower()
        rest = rest.strip()
        self.history.append(text)

        try:
            if command in {"quit", "exit", "q"}:
                return False
            if command == "help":
                self.echo(_HELP)
            elif command == "search":
                self.explorer.set_search(_unquote(rest))
                self._summary()
            elif command in {"set", "toggle"}:
                key, value = parse_assignment(rest)
                if command == "set":
                    apply_filter(self.explorer, key, value)
                else:
                    self.explorer.toggle_multi_filter(key, value)
                self._summary()
            elif command == "clear":
                self._clear(rest)
                self._summary()
            elif command == "sort":
                self.explorer.set_sort(resolve_sort_key(rest))
                self._summary()
            elif command == "reset":
                self.explorer.reset()
                self._summary()
            elif command == "show":
                result = map_explorer_to_view(self.explorer)
                self.echo(render_text(result).rstrip("\n"))
                if self.output_writer:
                    self.output_writer.write_result(result)
            elif command == "facets":
                self.echo(render_facets(map_explorer_to_view(self.explorer)).rstrip("\n"))
            else:
                self.echo(f"Unknown command: {command} (type 'help')")
        except ValueError as exc:
            log.debug("Browse command failed: %s", exc)
            self.echo(f"Error: {exc}")
        return True

    def _clear(self, name: str) -> None:
        descriptor = find_filter_field(name)
        if descriptor is None:
            raise ValueError(f"Unknown filter field: {name}")
        if descriptor.kind is FilterKind.SINGLE:
            self.explorer.set_single_filter(descriptor.key, None)
            return
        for value in tuple(self.explorer.state.selections.get(descriptor.key, ())):
            self.explorer.toggle_multi_filter(descriptor.key, value)

    def _summary(self) -> None:
        self.echo(render_summary(map_explorer_to_view(self.explorer)))


def _unquote(text: str) -> str:
    """Strip one pair of matching quotes around a search term."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in {"\"", "'"}:
        return text[1:-1]
    return text
