# src/nolearn/connectors/terminal.py

from __future__ import annotations

import logging
import subprocess
import sys
from typing import TextIO

logger = logging.getLogger(__name__)

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
# Used only when the platform clear command cannot be run.
ANSI_CLEAR = "\033[2J\033[H"


class AnsiTerminal:
    """Terminal port over stdout/stdin with ANSI cursor control."""

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        inp: TextIO | None = None,
        clear_command: str = "clear",
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._inp = inp if inp is not None else sys.stdin
        self._clear_command = clear_command

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def clear(self) -> None:
        self._out.flush()
        try:
            # `cls` is a shell builtin on Windows, so go through the shell.
            subprocess.run(self._clear_command, shell=True, check=True)
        except (OSError, subprocess.CalledProcessError):
            logger.debug("Clear command %r failed, using ANSI clear.", self._clear_command, exc_info=True)
            self.write(ANSI_CLEAR)

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def read_line(self, prompt: str) -> str:
        """Print `prompt` and read one line. Returns "" at end of input."""
        self.write(prompt)
        return self._inp.readline().rstrip("\r\n")
