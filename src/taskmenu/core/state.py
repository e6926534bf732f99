# src/taskmenu/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings
from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Owned by the session loop; passed explicitly, never a module global.
    settings: Settings
    task_store: TaskStore
    task_file: TaskFile
