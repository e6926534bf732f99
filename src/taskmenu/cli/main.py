# src/taskmenu/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task file into AppState, then runs the console
menu in the main thread until the user exits. Command-line arguments are ignored.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import Settings, get_settings
from ..connectors.console_connector import EXIT_SAVE_FAILED, run_console_loop
from ..core.ports import Emitter, LineSource
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_file import TaskFileCorruptError

logger = logging.getLogger(__name__)

EXIT_LOAD_FAILED = 1


def main(
    *,
    settings: Settings | None = None,
    source: LineSource | None = None,
    emit: Emitter = print,
) -> int:
    if settings is None:
        settings = get_settings()

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings, emit=emit)
    except TaskFileCorruptError as e:
        logger.error("Task file is corrupt: %s", e)
        emit(
            f"Error: `{e.path}` exists but could not be read as a task list ({e.reason}).\n"
            "Refusing to start so the file is not overwritten. Fix or move it and try again."
        )
        return EXIT_LOAD_FAILED

    code = run_console_loop(state, source, emit)
    if code == EXIT_SAVE_FAILED:
        logger.error("Exited without saving tasks.")
    else:
        logger.info("Bye.")
    return code


def run() -> None:
    settings = get_settings()
    setup_logging(console_level=level_from_name(settings.log_level))
    sys.exit(main(settings=settings))


if __name__ == "__main__":
    run()
