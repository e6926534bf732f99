# src/taskmenu/logging_setup.py

from __future__ import annotations

import logging
import sys
from typing import TextIO


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive menu readable:
    - allow taskmenu logs (the handler level decides how many)
    - everything else, including captured Python warnings, only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "taskmenu" or name.startswith("taskmenu."):
            return True

        # Third-party loggers and captured warnings ('py.warnings').
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    console_level: int = logging.WARNING,
    stream: TextIO | None = None,
) -> None:
    """
    Configure the root logger with a single stderr handler.

    Logs never go to a file: the tasks file is the only file this program touches.
    Call this ONCE, very early (before first logger call).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(stream if stream is not None else sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    """Map a level name like "info" to its logging constant."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default
