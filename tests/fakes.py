# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable

from nolearn.core.errors import KeyboardOpenError, KeyReadError
from nolearn.core.ports import Key, KeyEvent


def char(c: str) -> KeyEvent:
    return KeyEvent(char=c)


def key(k: Key) -> KeyEvent:
    return KeyEvent(key=k)


class FakeKeyboard:
    """
    Scripted KeyboardReader for unit tests.

    - Replays queued events (or raises queued exceptions) in order
    - Raises KeyReadError once the script runs out, like a closed stdin
    - Records open/close calls for assertions
    """

    def __init__(self, events: Iterable[KeyEvent | BaseException] = ()) -> None:
        self.events: list[KeyEvent | BaseException] = list(events)
        self.calls: list[str] = []
        self.is_open = False
        self.fail_open = False
        self.fail_reopen = False

    def open(self) -> None:
        self.calls.append("open")
        reopening = "close" in self.calls
        if self.fail_open or (reopening and self.fail_reopen):
            raise KeyboardOpenError("no tty")
        self.is_open = True

    def close(self) -> None:
        self.calls.append("close")
        self.is_open = False

    def read_key(self) -> KeyEvent:
        if not self.events:
            raise KeyReadError("end of input")
        ev = self.events.pop(0)
        if isinstance(ev, BaseException):
            raise ev
        return ev


class FakeTerminal:
    """
    Recording Terminal for unit tests.

    - `output` collects everything written (cursor sequences included)
    - `screens` holds the text written after each clear()
    - read_line() returns queued lines, or raises a queued exception
    """

    def __init__(self, lines: Iterable[str | BaseException] = ()) -> None:
        self.lines: list[str | BaseException] = list(lines)
        self.output: list[str] = []
        self.screens: list[str] = []
        self.events: list[str] = []
        self.prompts: list[str] = []
        self.cursor_visible = True

    def write(self, text: str) -> None:
        self.output.append(text)
        if self.screens:
            self.screens[-1] += text

    def clear(self) -> None:
        self.events.append("clear")
        self.screens.append("")

    def hide_cursor(self) -> None:
        self.events.append("hide_cursor")
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.events.append("show_cursor")
        self.cursor_visible = True

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            return ""
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line

    @property
    def text(self) -> str:
        return "".join(self.output)

    @property
    def last_screen(self) -> str:
        return self.screens[-1] if self.screens else ""
