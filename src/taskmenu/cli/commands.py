# src/taskmenu/cli/commands.py

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, StrEnum

from ..tasks.task_models import Task

MENU_TEXT = (
    "\nWhat would you like to? (eg: '1')\n"
    "1. View tasks\n"
    "2. Add a task\n"
    "3. Complete task\n"
    "4. Delete task"
)

MSG_NOT_A_NUMBER = "\nInput must be a valid index!"
MSG_INVALID_INDEX = "\nInvalid task index!"


class MenuCommand(StrEnum):
    """
    Menu selections.

    Notes:
    - EXIT is the catch-all: any input that is not "1".."4" (blank, "5", "q", ...)
      means "save and quit". It is a regular command, not an error.
    """

    VIEW = "1"
    ADD = "2"
    COMPLETE = "3"
    DELETE = "4"
    EXIT = "exit"

    @classmethod
    def from_input(cls, raw: str | None) -> MenuCommand:
        key = (raw or "").strip()
        for cmd in (cls.VIEW, cls.ADD, cls.COMPLETE, cls.DELETE):
            if cmd.value == key:
                return cmd
        return cls.EXIT


class SessionPhase(Enum):
    MENU = "menu"
    AWAITING_TASK_FIELDS = "awaiting_task_fields"
    AWAITING_INDEX_SELECTION = "awaiting_index_selection"
    EXITING = "exiting"


class PositionError(ValueError):
    """User input did not name a task position."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def parse_position(raw: str, length: int) -> int:
    """
    Turn a 1-based position typed by the user into a 0-based index.

    Raises PositionError carrying the message to show.
    """
    text = raw.strip()
    # One leading "+" is allowed; "-1", "++1" and "1.0" are not positions.
    digits = text[1:] if text.startswith("+") else text
    if not digits.isdigit() or not digits.isascii():
        raise PositionError(MSG_NOT_A_NUMBER)

    index = int(digits) - 1
    if index < 0 or index >= length:
        raise PositionError(MSG_INVALID_INDEX)
    return index


def render_task(position: int, task: Task) -> str:
    done = "true" if task.done else "false"
    return (
        f"\t{position}. {task.name} : {task.due_date} : Done - {done}\n"
        f"\t{task.description}\n"
    )


def render_tasks(tasks: Iterable[Task]) -> str:
    """Numbered listing, one block per task (empty list -> blank line only)."""
    lines = [""]
    for i, task in enumerate(tasks, start=1):
        lines.append(render_task(i, task))
    return "\n".join(lines)
