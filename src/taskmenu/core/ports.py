# src/taskmenu/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the session loop.

The loop depends on these instead of stdin/stdout directly,
so tests can drive it with scripted input and capture its output.
"""

from collections.abc import Callable
from typing import Protocol

Emitter = Callable[[str], None]
# Receives one chunk of user-facing text (print() in production).


class LineSource(Protocol):
    """Blocking source of input lines."""

    def read_line(self) -> str:
        """
        Return the next line with surrounding whitespace trimmed.
        End of input is reported as an empty string.
        """
        ...
