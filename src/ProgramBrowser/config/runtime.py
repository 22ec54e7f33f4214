"""Logging configuration read from the ``log`` section."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ProgramBrowser.config.common import expect_bool, expect_choice, expect_str, get_section, get_value

_LEVELS = {name.lower(): name for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")}


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Logging settings.

    Attributes:
        level: Level name understood by ``logging``.
        to_file: Whether to mirror logs into ``<dir>/<action>/``.
        dir: Base directory for log files.
    """

    level: str = "INFO"
    to_file: bool = False
    dir: str = "log"

    @property
    def level_no(self) -> int:
        return logging.getLevelName(self.level)


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Read the optional ``log`` section, keeping defaults for missing keys.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If the level is unknown.
    """
    section = get_section(raw, "log", required=False)
    defaults = RuntimeConfig()
    return RuntimeConfig(
        level=expect_choice(get_value(section, "log.level", defaults.level), "log.level", _LEVELS),
        to_file=expect_bool(get_value(section, "log.to_file", defaults.to_file), "log.to_file"),
        dir=expect_str(get_value(section, "log.dir", defaults.dir), "log.dir"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Raises ValueError when file logging is on without a directory."""
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file is true")
