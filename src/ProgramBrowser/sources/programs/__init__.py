"""Program data file loader."""

from __future__ import annotations

from ProgramBrowser.sources.programs.parser import DataLoadError, parse_record, parse_records
from ProgramBrowser.sources.programs.source import load_records

__all__ = [
    "DataLoadError",
    "load_records",
    "parse_record",
    "parse_records",
]
