# src/taskmenu/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .task_models import Task

logger = logging.getLogger(__name__)


class InvalidTaskIndexError(IndexError):
    """Raised when a position does not name an existing task."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"invalid task index {index} (store has {length} tasks)")
        self.index = index
        self.length = length


class TaskStore:
    """
    In-memory, ordered task list for one session.

    Indices are 0-based here; the console shows 1-based positions and converts.
    Insertion order is display order and persistence order.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks is not None else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def is_valid_index(self, index: int) -> bool:
        # Negative indices never wrap around.
        return 0 <= index < len(self._tasks)

    def _check_index(self, index: int) -> None:
        if not self.is_valid_index(index):
            raise InvalidTaskIndexError(index, len(self._tasks))

    # ---- public API ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added name=%r total=%d", task.name, len(self._tasks))

    def complete(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks[index]
        task.done = True
        logger.debug("Task completed index=%d name=%r", index, task.name)
        return task

    def delete(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task deleted index=%d name=%r total=%d", index, task.name, len(self._tasks))
        return task

    def purge_completed(self) -> int:
        """Drop every done task, keeping the order of the rest. Returns how many were removed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.done]
        removed = before - len(self._tasks)
        if removed:
            logger.info("Purged %d completed task(s); %d remain.", removed, len(self._tasks))
        return removed

    def list(self) -> list[Task]:
        return list(self._tasks)
