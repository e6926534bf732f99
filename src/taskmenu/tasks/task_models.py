# src/taskmenu/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# On-disk key names. "desc" is what earlier versions wrote for the description.
FIELD_NAME = "name"
FIELD_DESCRIPTION = "desc"
FIELD_DUE_DATE = "due_date"
FIELD_DONE = "done"


@dataclass(slots=True)
class Task:
    """
    One to-do item.

    Notes:
    - due_date is free-form text; it is never parsed or validated.
    - only `done` changes after creation (TaskStore.complete).
    """

    name: str
    description: str
    due_date: str
    done: bool = False

    def to_record(self) -> dict[str, Any]:
        return {
            FIELD_NAME: self.name,
            FIELD_DESCRIPTION: self.description,
            FIELD_DUE_DATE: self.due_date,
            FIELD_DONE: self.done,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """Build a Task from a decoded JSON object; ValueError on a bad shape."""
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")

        text_fields: dict[str, str] = {}
        for key in (FIELD_NAME, FIELD_DESCRIPTION, FIELD_DUE_DATE):
            if key not in raw:
                raise ValueError(f"task entry is missing field {key!r}")
            value = raw[key]
            if not isinstance(value, str):
                raise ValueError(f"task field {key!r} must be a string")
            text_fields[key] = value

        if FIELD_DONE not in raw:
            raise ValueError(f"task entry is missing field {FIELD_DONE!r}")
        done = raw[FIELD_DONE]
        if not isinstance(done, bool):
            raise ValueError(f"task field {FIELD_DONE!r} must be a boolean")

        return cls(
            name=text_fields[FIELD_NAME],
            description=text_fields[FIELD_DESCRIPTION],
            due_date=text_fields[FIELD_DUE_DATE],
            done=done,
        )
