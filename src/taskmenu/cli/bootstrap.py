# src/taskmenu/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (or loads them once),
- reads the task file,
- wires the store and file into AppState.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.ports import Emitter
from ..core.state import AppState
from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings: Settings | None = None, emit: Emitter = print) -> AppState:
    """
    Create AppState with the tasks from the previous run.

    Keeping settings injectable makes the app easy to test against a temp directory.
    A corrupt task file raises TaskFileCorruptError; nothing is written in that case.
    """
    if settings is None:
        settings = get_settings()

    task_file = TaskFile(settings.tasks_path)
    result = task_file.load()

    name = task_file.path.name
    if result.found:
        emit(f"loaded tasks from `{name}`")
    else:
        emit(f"`{name}` is empty, no tasks loaded.")

    return AppState(
        settings=settings,
        task_store=TaskStore(result.tasks),
        task_file=task_file,
    )
