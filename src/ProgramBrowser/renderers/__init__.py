"""Output renderers for derived program views.

Exports the OutputWriter base for new output formats and a factory that
instantiates writers based on configuration.
"""

from __future__ import annotations

from ProgramBrowser.config import AppConfig
from ProgramBrowser.renderers.base import MultiOutputWriter, OutputError, OutputWriter
from ProgramBrowser.renderers.console import ConsoleOutputWriter, render_facets, render_text
from ProgramBrowser.renderers.html import HtmlFileWriter, render_table
from ProgramBrowser.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        Writer fanning out to every configured format.

    Raises:
        ValueError: If no known format is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))
    if "html" in config.output.formats:
        writers.append(HtmlFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "OutputError",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "HtmlFileWriter",
    "MultiOutputWriter",
    "render_facets",
    "render_json",
    "render_table",
    "render_text",
    "create_output_writer",
]
