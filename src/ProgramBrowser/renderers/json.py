"""JSON output renderers.

Renders a `ResultView` into JSON-serializable objects and provides
JsonFileWriter, which accumulates results and writes one file on finalize.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from ProgramBrowser.core.schema import PUBLIC_LINKS
from ProgramBrowser.renderers.base import OutputError, OutputWriter
from ProgramBrowser.renderers.view_models import ResultView
from ProgramBrowser.utils.log import log


def render_json(result: ResultView) -> dict:
    """Render a result view into a JSON-serializable dict.

    Args:
        result: Result view.

    Returns:
        Dict with query summary, facets and rows.
    """
    rows = []
    for row in result.rows:
        item = {column: row.cells[column] for column in result.columns if column in row.cells}
        if PUBLIC_LINKS in result.columns:
            item[PUBLIC_LINKS] = list(row.links)
        rows.append(item)

    return {
        "query": {
            "search": result.search,
            "filters": {facet.key: list(facet.selected) for facet in result.active_filters},
            "sort": {"key": result.sort_key, "direction": result.sort_direction},
        },
        "count": result.count,
        "total": result.total,
        "facets": {facet.key: list(facet.options) for facet in result.facets},
        "programs": rows,
    }


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []

    def write_result(self, result: ResultView) -> None:
        self.all_results.append(render_json(result))

    def finalize(self, action: str) -> None:
        """Write accumulated results to JSON file.

        Args:
            action: The CLI command name (used in filename).

        Raises:
            OutputError: If the file cannot be written.
        """
        if not self.all_results:
            log.debug("No JSON results to write")
            return

        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Failed to write JSON file: {output_path}") from exc
        log.info("JSON saved to %s", output_path)
