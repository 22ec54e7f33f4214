"""Data source configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from ProgramBrowser.config.common import expect_str, get_section, get_value

DATA_PATH_ENV = "PROGRAM_BROWSER_DATA"


@dataclass(frozen=True, slots=True)
class DataConfig:
    """Store the location of the program data file."""

    path: str


def load_data(raw: Mapping[str, Any]) -> DataConfig:
    """Load data domain config from raw mapping.

    The ``PROGRAM_BROWSER_DATA`` environment variable overrides ``data.path``.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed data configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "data", required=False)
    path = expect_str(get_value(section, "data.path", "programs.json"), "data.path")
    override = os.getenv(DATA_PATH_ENV, "").strip()
    return DataConfig(path=override or path)


def check_data(config: DataConfig) -> None:
    """Validate data domain constraints.

    Raises:
        ValueError: If the path is empty.
    """
    if not config.path.strip():
        raise ValueError("data.path must not be empty")
