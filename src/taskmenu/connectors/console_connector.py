# src/taskmenu/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from ..cli.commands import (
    MENU_TEXT,
    MSG_INVALID_INDEX,
    MenuCommand,
    PositionError,
    SessionPhase,
    parse_position,
    render_tasks,
)
from ..core.ports import Emitter, LineSource
from ..core.state import AppState
from ..tasks.task_file import (
    TaskFileWriteError,
    TaskSerializationError,
    serialize_tasks,
)
from ..tasks.task_models import Task
from ..tasks.task_store import InvalidTaskIndexError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SAVE_FAILED = 1


class StdinLineSource:
    """LineSource over a text stream (stdin by default)."""

    def __init__(self, stream: TextIO | None = None, emit: Emitter = print) -> None:
        self._stream = stream
        self._emit = emit

    def read_line(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        try:
            line = stream.readline()
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, treating as end of input.")
            # Finish the line the ^C was echoed on.
            self._emit("")
            return ""
        if line == "":
            logger.debug("Console EOF received.")
        return line.strip()


class ConsoleSession:
    """
    Menu-driven read/dispatch loop.

    The loop runs until the EXIT command; the exit path purges completed tasks,
    writes the file and returns the process exit code.
    """

    def __init__(self, state: AppState, source: LineSource, emit: Emitter = print) -> None:
        self.state = state
        self.source = source
        self.emit = emit
        self.phase = SessionPhase.MENU

    def run(self) -> int:
        logger.info("Console session started (%d tasks).", len(self.state.task_store))
        while True:
            self.phase = SessionPhase.MENU
            self.emit(MENU_TEXT)
            cmd = MenuCommand.from_input(self.source.read_line())
            logger.debug("Menu command %s", cmd.name)

            if cmd is MenuCommand.VIEW:
                self._view()
            elif cmd is MenuCommand.ADD:
                self._add()
            elif cmd is MenuCommand.COMPLETE:
                self._select_and_apply("\nSelect a task to mark as complete:", self.state.task_store.complete)
            elif cmd is MenuCommand.DELETE:
                self._select_and_apply("\nSelect a task to delete:", self.state.task_store.delete)
            else:
                return self._exit()

    # ---- menu actions ----

    def _view(self) -> None:
        self.emit(render_tasks(self.state.task_store.list()))

    def _add(self) -> None:
        self.phase = SessionPhase.AWAITING_TASK_FIELDS

        self.emit("\nEnter a name for 'new_task':")
        name = self.source.read_line()

        self.emit(f"\nEnter a short description for '{name}':")
        description = self.source.read_line()

        self.emit(f"\nEnter a due date for '{name}':")
        due_date = self.source.read_line()

        self.state.task_store.add(Task(name=name, description=description, due_date=due_date))

    def _select_and_apply(self, prompt: str, action: Callable[[int], Task]) -> None:
        store = self.state.task_store
        self._view()
        self.emit(prompt)

        self.phase = SessionPhase.AWAITING_INDEX_SELECTION
        raw = self.source.read_line()
        try:
            index = parse_position(raw, len(store))
        except PositionError as e:
            logger.debug("Rejected position %r: %s", raw, e.message.strip())
            self.emit(e.message)
            return

        try:
            action(index)
        except InvalidTaskIndexError:
            self.emit(MSG_INVALID_INDEX)

    # ---- exit path ----

    def _exit(self) -> int:
        """purge -> serialize -> create file -> write/replace; one status line per step."""
        self.phase = SessionPhase.EXITING
        store = self.state.task_store
        task_file = self.state.task_file

        self.emit("\nRemoving completed tasks...")
        store.purge_completed()
        self.emit("Completed tasks removed")

        self.emit("\nSerializing data...")
        try:
            payload = serialize_tasks(store.list())
        except TaskSerializationError as e:
            logger.error("Serialization failed: %s", e)
            self.emit(f"\nError: serialization failed ({e}). Your tasks were NOT saved.")
            return EXIT_SAVE_FAILED
        self.emit("Data serialized")

        try:
            self.emit("\nCreating file...")
            with task_file.replacing() as fh:
                self.emit("File created")
                self.emit("\nSaving work...")
                fh.write(payload)
        except TaskFileWriteError as e:
            logger.error("Saving tasks failed: %s", e)
            self.emit(f"\nError: could not write {e.path} ({e.reason}). Your tasks were NOT saved.")
            return EXIT_SAVE_FAILED
        self.emit("Work saved")

        logger.info("Saved %d task(s) to %s", len(store), task_file.path)
        self.emit("\nExiting successfully")
        return EXIT_OK


def run_console_loop(state: AppState, source: LineSource | None = None, emit: Emitter = print) -> int:
    if source is None:
        source = StdinLineSource(emit=emit)
    session = ConsoleSession(state, source, emit)
    return session.run()
