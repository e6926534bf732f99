# src/taskmenu/config.py

"""Centralized settings.

Design goals:
- One Settings object for the whole app, built once by get_settings().
- Injectable: bootstrap accepts a Settings instance so tests can point the
  task file at a temporary directory.
- Nothing is read from the environment; the tasks file path is fixed.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

APP_NAME = "taskmenu"
TASKS_FILE_NAME = "tasks.json"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str = APP_NAME
    log_level: str = "WARNING"

    # ---- Persistence ----
    tasks_path: Path = Path(TASKS_FILE_NAME)


SETTINGS = Settings()


def get_settings() -> Settings:
    return SETTINGS
