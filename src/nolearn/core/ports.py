# src/nolearn/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on Protocols instead of the concrete tty/termios
implementations in connectors/. This keeps the platform layer swappable and
lets tests script key presses and capture screen output.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Key(Enum):
    """Named (non-printable) keys the keyboard reader can report."""

    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    BACKSPACE = "backspace"
    TAB = "tab"
    SPACE = "space"
    # Only reported when the tty delivers \x03 as a byte (ISIG off).
    CTRL_C = "ctrl_c"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """One key press: either a printable `char` or a named `key`."""

    char: str = ""
    key: Key | None = None


class KeyboardReader(Protocol):
    """
    Single-key-event input.

    open() switches the input into key-at-a-time mode and raises
    KeyboardOpenError if that is impossible. close() undoes it and is safe to
    call when not open. read_key() blocks until one key is available and
    raises KeyReadError if the stream breaks.
    """

    def open(self) -> None: ...
    def close(self) -> None: ...
    def read_key(self) -> KeyEvent: ...


class Terminal(Protocol):
    """Screen output plus line-buffered input for prompts."""

    def write(self, text: str) -> None: ...
    def clear(self) -> None: ...
    def hide_cursor(self) -> None: ...
    def show_cursor(self) -> None: ...
    def read_line(self, prompt: str) -> str: ...
