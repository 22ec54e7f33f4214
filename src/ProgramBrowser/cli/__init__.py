"""CLI package for ProgramBrowser command orchestration.

Contains the click interface, the command runner, and the command
implementations.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from ProgramBrowser.cli.runner import CommandRunner
from ProgramBrowser.cli.ui import cli


def main() -> None:
    """Run ProgramBrowser CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
