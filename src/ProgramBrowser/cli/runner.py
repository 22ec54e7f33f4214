"""Command runner for coordinating CLI execution.

Manages logging configuration, data loading, component creation and error
handling for command execution.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Sequence

import click

from ProgramBrowser.cli.commands import BrowseSession, FacetsCommand, SearchCommand
from ProgramBrowser.config import AppConfig
from ProgramBrowser.renderers import ConsoleOutputWriter, MultiOutputWriter, OutputWriter, create_output_writer
from ProgramBrowser.services import ProgramExplorer, create_explorer
from ProgramBrowser.sources.programs import load_records
from ProgramBrowser.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, the one-time data load, explorer and
    writer creation, and converts failures into ``click.Abort``.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_search(
        self,
        action: str,
        *,
        search: str | None = None,
        filters: Sequence[str] = (),
        sorts: Sequence[str] = (),
    ) -> None:
        """Run a one-shot query and write it to the configured outputs.

        Raises:
            click.Abort: When the search fails.
        """

        def execute(explorer: ProgramExplorer) -> None:
            output_writer = create_output_writer(self.config)
            SearchCommand(
                explorer=explorer,
                output_writer=output_writer,
                search=search,
                filters=filters,
                sorts=sorts,
            ).execute()
            output_writer.finalize(action)

        self._run(action, execute)

    def run_facets(self, action: str) -> None:
        """Print facet options.

        Raises:
            click.Abort: When loading fails.
        """
        self._run(action, lambda explorer: FacetsCommand(explorer=explorer).execute())

    def run_browse(self, action: str, lines: Iterable[str]) -> None:
        """Run the interactive browse loop over ``lines``.

        Console output is printed directly; file outputs receive every
        ``show`` and are written when the session ends.

        Raises:
            click.Abort: When loading or writing fails.
        """

        def execute(explorer: ProgramExplorer) -> None:
            file_writer = self._file_writer()
            BrowseSession(explorer=explorer, output_writer=file_writer).run(lines)
            if file_writer:
                file_writer.finalize(action)

        self._run(action, execute)

    def _run(self, action: str, execute: Callable[[ProgramExplorer], None]) -> None:
        log_path = configure_logging(
            level=self.config.runtime.level_no,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if log_path:
            log.debug("Logging to %s", log_path)
        try:
            records = load_records(Path(self.config.data.path))
            explorer = create_explorer(records, self.config.query)
            execute(explorer)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action.capitalize(), e)
            raise click.Abort from e

    def _file_writer(self) -> OutputWriter | None:
        writer = create_output_writer(self.config)
        writers = writer.writers if isinstance(writer, MultiOutputWriter) else [writer]
        file_writers = [item for item in writers if not isinstance(item, ConsoleOutputWriter)]
        return MultiOutputWriter(file_writers) if file_writers else None
