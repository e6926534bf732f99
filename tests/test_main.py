# tests/test_main.py

from __future__ import annotations

import logging

from taskmenu.cli.bootstrap import create_initial_state
from taskmenu.cli.main import EXIT_LOAD_FAILED, main
from taskmenu.logging_setup import level_from_name
from taskmenu.tasks.task_file import TaskFile
from taskmenu.tasks.task_models import Task

from .fakes import RecordingEmitter, ScriptedLineSource


def test_fresh_run_without_file_starts_empty(settings, emitter) -> None:
    state = create_initial_state(settings=settings, emit=emitter)

    assert state.task_store.list() == []
    assert emitter.chunks == ["`tasks.json` is empty, no tasks loaded."]


def test_existing_file_is_loaded(settings, emitter, sample_tasks) -> None:
    TaskFile(settings.tasks_path).save(sample_tasks)

    state = create_initial_state(settings=settings, emit=emitter)

    assert state.task_store.list() == sample_tasks
    assert emitter.chunks == ["loaded tasks from `tasks.json`"]


def test_main_runs_session_and_saves(settings) -> None:
    emitter = RecordingEmitter()
    source = ScriptedLineSource(["2", "Write report", "Quarterly summary", "2024-05-01", "q"])

    code = main(settings=settings, source=source, emit=emitter)

    assert code == 0
    assert TaskFile(settings.tasks_path).load().tasks == [
        Task(name="Write report", description="Quarterly summary", due_date="2024-05-01")
    ]


def test_main_refuses_to_start_on_corrupt_file(settings) -> None:
    settings.tasks_path.write_text("[{broken", "utf-8")
    emitter = RecordingEmitter()
    source = ScriptedLineSource(["q"])

    code = main(settings=settings, source=source, emit=emitter)

    assert code == EXIT_LOAD_FAILED
    assert "Refusing to start" in emitter.text
    assert source.reads == 0
    assert settings.tasks_path.read_text("utf-8") == "[{broken"


def test_level_from_name() -> None:
    assert level_from_name("info") == logging.INFO
    assert level_from_name(" WARNING ") == logging.WARNING
    assert level_from_name("nonsense") == logging.WARNING
    assert level_from_name("nonsense", default=logging.ERROR) == logging.ERROR


def test_main_refuses_to_start_on_undecodable_file(settings) -> None:
    content = b'[{"name":"caf\xe9","desc":"","due_date":"","done":false}]'
    settings.tasks_path.write_bytes(content)
    emitter = RecordingEmitter()
    source = ScriptedLineSource(["q"])

    code = main(settings=settings, source=source, emit=emitter)

    assert code == EXIT_LOAD_FAILED
    assert "Refusing to start" in emitter.text
    assert settings.tasks_path.read_bytes() == content
