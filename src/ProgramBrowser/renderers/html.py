"""HTML output renderers.

Produces a standalone document with one results table per written view.
"""

from __future__ import annotations

import html
from datetime import datetime
from pathlib import Path
from urllib.parse import urlparse

from ProgramBrowser.core.schema import NOT_AVAILABLE, PUBLIC_LINKS
from ProgramBrowser.renderers.base import EMPTY_MESSAGE, OutputError, OutputWriter, column_header
from ProgramBrowser.renderers.console import render_summary
from ProgramBrowser.renderers.view_models import ResultView, RowView
from ProgramBrowser.utils.log import log

_DOCUMENT = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Programs</title>
  <style>
    body {{ font-family: system-ui, sans-serif; margin: 24px; }}
    table {{ border-collapse: collapse; width: 100%; margin-bottom: 32px; }}
    th, td {{ border: 1px solid #ddd; padding: 6px 8px; text-align: left; vertical-align: top; }}
    th {{ background: #f4f4f4; }}
    .summary {{ white-space: pre-line; color: #555; }}
    .links {{ display: grid; gap: 6px; }}
  </style>
</head>
<body>
  <p class="generated">Generated {timestamp}</p>
{sections}
</body>
</html>
"""


def _escape_url(url: str) -> str:
    """Validate and escape URLs used in HTML attributes.

    Args:
        url: Raw URL.

    Returns:
        Escaped URL when it uses http(s), or an empty string.
    """
    if not url:
        return ""
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        log.warning("Disallowed URL scheme: %s (URL: %s)", parsed.scheme, url)
        return ""
    return html.escape(url, quote=True)


def _render_links(row: RowView) -> str:
    safe_hrefs = [safe for safe in (_escape_url(href) for href in row.links) if safe]
    anchors = [
        f'<a href="{href}" target="_blank" rel="noreferrer">Source {number}</a>'
        for number, href in enumerate(safe_hrefs, start=1)
    ]
    if not anchors:
        return NOT_AVAILABLE
    return '<div class="links">' + "".join(anchors) + "</div>"


def render_table(result: ResultView) -> str:
    """Render one result view as an HTML section with a table.

    Args:
        result: Result view.

    Returns:
        HTML section string.
    """
    header = "".join(f"<th>{html.escape(column_header(column, result))}</th>" for column in result.columns)

    body_rows: list[str] = []
    if not result.rows:
        body_rows.append(f'<tr><td colspan="{len(result.columns)}">{html.escape(EMPTY_MESSAGE)}</td></tr>')
    for row in result.rows:
        cells = []
        for column in result.columns:
            if column == PUBLIC_LINKS:
                cells.append(f"<td>{_render_links(row)}</td>")
            else:
                cells.append(f"<td>{html.escape(row.cells.get(column, NOT_AVAILABLE))}</td>")
        body_rows.append("<tr>" + "".join(cells) + "</tr>")

    section = '<section class="result">\n'
    section += f'  <p class="summary">{html.escape(render_summary(result))}</p>\n'
    section += "  <table>\n"
    section += f"    <thead><tr>{header}</tr></thead>\n"
    section += "    <tbody>\n      " + "\n      ".join(body_rows) + "\n    </tbody>\n"
    section += "  </table>\n"
    section += "</section>"
    return section


class HtmlFileWriter(OutputWriter):
    """Render HTML and write one document during finalization."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir) / "html"
        self.pending_sections: list[str] = []
        self.timestamp_dt: datetime | None = None

    def write_result(self, result: ResultView) -> None:
        if self.timestamp_dt is None:
            self.timestamp_dt = datetime.now()
        self.pending_sections.append(render_table(result))

    def finalize(self, action: str) -> None:
        """Write the final HTML document.

        Args:
            action: CLI action name.

        Raises:
            OutputError: If output directory or file writing fails.
        """
        if not self.pending_sections:
            log.debug("No HTML sections to write")
            return

        timestamp_dt = self.timestamp_dt or datetime.now()
        content = _DOCUMENT.format(
            timestamp=timestamp_dt.strftime("%Y-%m-%d %H:%M:%S"),
            sections="\n\n".join(self.pending_sections),
        )

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputError(f"Failed to create output directory: {self.output_dir}") from exc

        output_path = self.output_dir / f"{action}_{timestamp_dt.strftime('%Y%m%d_%H%M%S')}.html"
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Failed to write HTML file: {output_path}") from exc
        log.info("HTML saved to %s", output_path)
