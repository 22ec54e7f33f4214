"""Console text output renderers.

Renders a `ResultView` into human-friendly text and emits it through the
shared logger.
"""

from __future__ import annotations

from ProgramBrowser.core.schema import NOT_AVAILABLE, PUBLIC_LINKS
from ProgramBrowser.renderers.base import EMPTY_MESSAGE, OutputWriter, column_header, sort_indicator
from ProgramBrowser.renderers.view_models import ResultView
from ProgramBrowser.utils.log import log


def render_summary(result: ResultView) -> str:
    """Render the result count line and the active query."""
    lines = [f"Programs: {result.count:,} of {result.total:,}"]
    if result.search.strip():
        lines.append(f"Search: {result.search.strip()}")
    for facet in result.active_filters:
        lines.append(f"Filter {facet.label}: {'; '.join(facet.selected)}")
    lines.append(f"Sort: {result.sort_key} {sort_indicator(result.sort_direction)}")
    return "\n".join(lines)


def render_text(result: ResultView) -> str:
    """Render the result rows into a text block.

    Args:
        result: Result view.

    Returns:
        A formatted string ready to be printed.
    """
    lines = [render_summary(result), ""]
    if not result.rows:
        lines.append(EMPTY_MESSAGE)
        return "\n".join(lines) + "\n"

    first, *rest = result.columns
    for idx, row in enumerate(result.rows, start=1):
        lines.append(f"{idx}. {row.cells.get(first, NOT_AVAILABLE)}")
        for column in rest:
            title = column_header(column, result)
            if column == PUBLIC_LINKS:
                if not row.links:
                    lines.append(f"   {title}: {NOT_AVAILABLE}")
                for number, href in enumerate(row.links, start=1):
                    lines.append(f"   Source {number}: {href}")
                continue
            lines.append(f"   {title}: {row.cells.get(column, NOT_AVAILABLE)}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def render_facets(result: ResultView) -> str:
    """Render facet options, marking selected values with ``*``."""
    lines: list[str] = []
    for facet in result.facets:
        lines.append(f"{facet.label} ({facet.kind}, {len(facet.options)} options)")
        for option in facet.options:
            marker = "*" if option in facet.selected else " "
            lines.append(f"  {marker} {option}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_result(self, result: ResultView) -> None:
        for line in render_text(result).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
