"""Base classes for output writers.

Writers receive a `ResultView` after each recomputation that should be shown
and may accumulate results until `finalize`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ProgramBrowser.renderers.view_models import ResultView

EMPTY_MESSAGE = "No programs match the current filters."


class OutputError(RuntimeError):
    """Raised when output cannot be written."""


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_result(self, result: ResultView) -> None:
        """Write one derived view.

        Args:
            result: Rendered snapshot of the explorer.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'search').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_result(self, result: ResultView) -> None:
        for writer in self.writers:
            writer.write_result(result)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)


def sort_indicator(direction: str) -> str:
    return "▲" if direction == "asc" else "▼"


def column_header(column: str, result: ResultView) -> str:
    """Column title with a direction arrow on the sorted column."""
    if column == result.sort_key:
        return f"{column} {sort_indicator(result.sort_direction)}"
    return column
