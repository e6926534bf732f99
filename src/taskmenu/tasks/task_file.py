# src/taskmenu/tasks/task_file.py

"""
JSON persistence for the task list.

The whole list lives in one file (a JSON array of task objects). It is read once
at startup and replaced in full once at exit:
- serialize everything in memory first,
- write it to a sibling temp file,
- os.replace() the temp file over the real one.
A failure at any point leaves the previous file as it was.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskFileError(Exception):
    """Base class for task file failures."""


class TaskFileCorruptError(TaskFileError):
    """The file exists but its content is not a valid task list."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class TaskSerializationError(TaskFileError):
    """The in-memory task list could not be encoded."""


class TaskFileWriteError(TaskFileError):
    """The encoded task list could not be written to disk."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(slots=True)
class LoadResult:
    tasks: list[Task] = field(default_factory=list)
    found: bool = False


def serialize_tasks(tasks: Iterable[Task]) -> str:
    try:
        return json.dumps([t.to_record() for t in tasks], ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        raise TaskSerializationError(str(e)) from e


def parse_tasks(raw: str, *, path: Path) -> list[Task]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise TaskFileCorruptError(path, f"not valid JSON ({e})") from e

    if not isinstance(data, list):
        raise TaskFileCorruptError(path, "top-level value must be an array of tasks")

    tasks: list[Task] = []
    for i, item in enumerate(data, start=1):
        try:
            tasks.append(Task.from_record(item))
        except ValueError as e:
            raise TaskFileCorruptError(path, f"entry {i}: {e}") from e
    return tasks


class TaskFile:
    """The single file that holds a full snapshot of the task list between runs."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> LoadResult:
        """
        Read the whole file.

        Missing, unreadable or blank file -> empty result with found=False.
        Undecodable bytes or anything else that does not parse -> TaskFileCorruptError.
        """
        try:
            raw = self.path.read_text("utf-8")
        except FileNotFoundError:
            logger.info("No task file at %s.", self.path)
            return LoadResult()
        except UnicodeDecodeError as e:
            raise TaskFileCorruptError(self.path, f"not valid UTF-8 ({e})") from e
        except OSError as e:
            logger.warning("Could not read task file %s: %s", self.path, e)
            return LoadResult()

        if not raw.strip():
            logger.info("Task file %s is blank.", self.path)
            return LoadResult()

        tasks = parse_tasks(raw, path=self.path)
        logger.info("Loaded %d task(s) from %s", len(tasks), self.path)
        return LoadResult(tasks=tasks, found=True)

    @contextlib.contextmanager
    def replacing(self) -> Iterator[TextIO]:
        """
        Yield a handle to a fresh temp file next to the target.

        On a clean exit the temp file is moved over the target; on any error it is
        removed and TaskFileWriteError is raised.
        """
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fh = open(tmp, "w", encoding="utf-8")
        except OSError as e:
            raise TaskFileWriteError(self.path, f"cannot create {tmp.name} ({e})") from e

        try:
            with fh:
                yield fh
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise TaskFileWriteError(self.path, str(e)) from e
        except BaseException:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise

    def write(self, payload: str) -> None:
        with self.replacing() as fh:
            fh.write(payload)
        logger.info("Wrote %d bytes to %s", len(payload.encode("utf-8")), self.path)

    def save(self, tasks: Iterable[Task]) -> None:
        """Serialize fully, then replace the file in one step."""
        self.write(serialize_tasks(tasks))
