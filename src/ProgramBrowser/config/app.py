"""Application config orchestration and YAML loading entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from ProgramBrowser.config.data import DataConfig, check_data, load_data
from ProgramBrowser.config.output import OutputConfig, check_output, load_output
from ProgramBrowser.config.query import QueryConfig, check_query, load_query
from ProgramBrowser.config.runtime import RuntimeConfig, check_runtime, load_runtime

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    data: DataConfig
    query: QueryConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    data = load_data(raw)
    query = load_query(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_data(data)
    check_query(query)
    check_output(output)

    return AppConfig(runtime=runtime, data=data, query=query, output=output)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_cli_config(config_path: Path, default_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load the file given to ``--config``.

    Any file other than the defaults is layered over ``default_path`` when that
    file exists, so an override only lists the keys it changes.
    """
    if not default_path.is_file() or config_path.resolve() == default_path.resolve():
        return load_config(config_path)
    return load_config_with_defaults(config_path, default_path)


def load_config_with_defaults(
    config_path: Path,
    default_path: Path = DEFAULT_CONFIG_PATH,
    *,
    defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: Override config file.
        default_path: Defaults file, read unless ``defaults_text`` is given.
        defaults_text: Raw YAML defaults, mainly for tests.

    Returns:
        Parsed application configuration.
    """
    if defaults_text is None:
        if config_path == default_path:
            return parse_config_dict(parse_yaml(default_path.read_text(encoding="utf-8")))
        defaults_text = default_path.read_text(encoding="utf-8")
    base = parse_yaml(defaults_text)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
