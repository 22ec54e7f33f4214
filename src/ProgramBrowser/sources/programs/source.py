"""Load the static program collection from disk."""

from __future__ import annotations

import json
from pathlib import Path

from ProgramBrowser.core.models import Record
from ProgramBrowser.sources.programs.parser import DataLoadError, parse_records
from ProgramBrowser.utils.log import log


def load_records(path: Path) -> tuple[Record, ...]:
    """Read and parse a program JSON file.

    Args:
        path: Path to the JSON array of program objects.

    Returns:
        Parsed records in file order.

    Raises:
        DataLoadError: If the file is missing, unreadable, or malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(f"Failed to read program data: {path}") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in program data {path}: {exc}") from exc

    records = parse_records(payload)
    log.info("Loaded %d programs from %s", len(records), path)
    return records
