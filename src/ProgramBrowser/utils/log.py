"""ProgramBrowser logging utilities.

All modules log through the shared ``ProgramBrowser`` logger. Lines look like
``10-19 14:03:22 [INFO] Loaded 42 program records``. The console follows the
configured level; the optional per-action log file records DEBUG as well, so
query recomputations can be traced after the fact.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

LOGGER_NAME: Final = "ProgramBrowser"

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "CRIT",
}


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger(LOGGER_NAME)


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(
        _AbbrevLevelFormatter(fmt="%(asctime)s [%(levelabbr)s] %(message)s", datefmt="%m-%d %H:%M:%S")
    )
    return handler


def configure_logging(
    *,
    level: int | str = logging.INFO,
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """Reset the shared logger's handlers for one CLI action.

    Args:
        level: Console level, as a number or a level name.
        action: CLI action name; names the log file directory.
        log_to_file: Whether to also write ``<log_dir>/<action>/<action>_<ts>.log``.
        log_dir: Base directory for log files.

    Returns:
        Path of the log file, or None when file logging is off.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    log.handlers.clear()
    log.addHandler(_handler(logging.StreamHandler(), level))
    log.propagate = False

    if not (log_to_file and action):
        log.setLevel(level)
        return None

    action_dir = Path(log_dir or "log") / action
    action_dir.mkdir(parents=True, exist_ok=True)
    log_path = action_dir / f"{action}_{datetime.now():%m%d%H%M%S}.log"
    log.addHandler(_handler(logging.FileHandler(log_path, encoding="utf-8"), logging.DEBUG))
    log.setLevel(logging.DEBUG)
    return log_path
