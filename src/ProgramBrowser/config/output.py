"""Output configuration: where result files go and which writers run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ProgramBrowser.config.common import expect_str, expect_str_values, get_section, get_value

OUTPUT_FORMATS = ("console", "json", "html")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output writers to create.

    Attributes:
        base_dir: Directory receiving ``json/`` and ``html/`` result files.
        formats: Lowercased writer names in first-seen order.
    """

    base_dir: str
    formats: tuple[str, ...]


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Read the required ``output`` section.

    Format names are lowercased and deduplicated; validation happens in
    ``check_output``.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If the section or one of its keys is missing.
    """
    section = get_section(raw, "output", required=True)
    names = expect_str_values(get_value(section, "output.formats"), "output.formats")
    formats = dict.fromkeys(name.lower() for name in names)
    return OutputConfig(
        base_dir=expect_str(get_value(section, "output.base_dir"), "output.base_dir"),
        formats=tuple(formats),
    )


def check_output(config: OutputConfig) -> None:
    """Reject empty directories, empty format lists and unknown writers.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
    if not config.formats:
        raise ValueError(f"output.formats must list at least one of {list(OUTPUT_FORMATS)}")

    unknown = [name for name in config.formats if name not in OUTPUT_FORMATS]
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {unknown}")
