# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskmenu.config import Settings
from taskmenu.core.state import AppState
from taskmenu.tasks.task_file import TaskFile
from taskmenu.tasks.task_models import Task
from taskmenu.tasks.task_store import TaskStore

from .fakes import RecordingEmitter


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Real Settings, with the task file redirected into the per-test tmp dir."""
    return Settings(tasks_path=tmp_path / "tasks.json")


@pytest.fixture()
def state(settings: Settings) -> AppState:
    return AppState(
        settings=settings,
        task_store=TaskStore(),
        task_file=TaskFile(settings.tasks_path),
    )


@pytest.fixture()
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(name="Write report", description="Quarterly summary", due_date="2024-05-01"),
        Task(name="Call bank", description="", due_date="friday", done=True),
        Task(name="Buy milk", description="2 litres, semi-skimmed", due_date=""),
    ]
