"""Public configuration API for ProgramBrowser."""

from __future__ import annotations

from ProgramBrowser.config.app import (
    AppConfig,
    load_cli_config,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from ProgramBrowser.config.data import DataConfig
from ProgramBrowser.config.output import OutputConfig
from ProgramBrowser.config.query import QueryConfig
from ProgramBrowser.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "DataConfig",
    "QueryConfig",
    "OutputConfig",
    "AppConfig",
    "load_cli_config",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
