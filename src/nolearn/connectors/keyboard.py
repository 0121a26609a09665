# src/nolearn/connectors/keyboard.py

"""
Single-key input from the controlling terminal.

On POSIX the tty is put into cbreak mode (no echo, no line buffering, signals
still delivered so Ctrl-C raises KeyboardInterrupt). Arrow keys arrive as
escape sequences and are folded back into named keys here.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from ..core.errors import KeyboardOpenError, KeyReadError
from ..core.ports import Key, KeyEvent

IS_WINDOWS = sys.platform == "win32"

if IS_WINDOWS:
    import msvcrt
else:
    import select
    import termios
    import tty

logger = logging.getLogger(__name__)

# Time to wait for the rest of an escape sequence after a bare ESC byte.
ESCAPE_TIMEOUT = 0.05
# Upper bound on bytes after ESC; real CSI sequences are far shorter.
MAX_ESCAPE_LENGTH = 16

_ESCAPE_SEQUENCES: dict[bytes, Key] = {
    b"\x1b[A": Key.UP,
    b"\x1b[B": Key.DOWN,
    b"\x1b[C": Key.RIGHT,
    b"\x1b[D": Key.LEFT,
    b"\x1bOA": Key.UP,
    b"\x1bOB": Key.DOWN,
    b"\x1bOC": Key.RIGHT,
    b"\x1bOD": Key.LEFT,
}

_CONTROL_BYTES: dict[bytes, Key] = {
    b"\x1b": Key.ESC,
    b"\r": Key.ENTER,
    b"\n": Key.ENTER,
    b"\x7f": Key.BACKSPACE,
    b"\x08": Key.BACKSPACE,
    b"\t": Key.TAB,
    b" ": Key.SPACE,
    # Only seen with ISIG off; in cbreak mode Ctrl-C raises KeyboardInterrupt instead.
    b"\x03": Key.CTRL_C,
}

# Second byte after a 0x00/0xE0 prefix from msvcrt.getwch().
_WINDOWS_SCAN_CODES: dict[str, Key] = {
    "H": Key.UP,
    "P": Key.DOWN,
    "M": Key.RIGHT,
    "K": Key.LEFT,
}


def decode_key(seq: bytes) -> KeyEvent:
    """Turn the raw bytes of one key press into a KeyEvent."""
    if seq in _ESCAPE_SEQUENCES:
        return KeyEvent(key=_ESCAPE_SEQUENCES[seq])
    if seq in _CONTROL_BYTES:
        return KeyEvent(key=_CONTROL_BYTES[seq])
    if seq.startswith(b"\x1b"):
        # Some other escape sequence (F-keys, Home, ...): nothing we bind.
        return KeyEvent()
    return KeyEvent(char=seq.decode("utf-8", errors="replace"))


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


class TtyKeyboard:
    """KeyboardReader backed by the process's stdin tty."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._fd: int | None = None
        self._saved_attrs: list | None = None
        # Bytes read ahead of the current key, consumed before the fd.
        self._pending = b""

    @property
    def is_open(self) -> bool:
        return self._fd is not None

    def open(self) -> None:
        if self._fd is not None:
            return

        stream = self._stream if self._stream is not None else sys.stdin
        try:
            fd = stream.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise KeyboardOpenError(f"stdin has no file descriptor: {e}") from e

        if not os.isatty(fd):
            raise KeyboardOpenError("stdin is not a terminal")

        if IS_WINDOWS:
            self._fd = fd
            return

        try:
            saved = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except (termios.error, OSError) as e:
            raise KeyboardOpenError(f"cannot switch terminal to cbreak mode: {e}") from e

        self._fd = fd
        self._saved_attrs = saved
        logger.debug("Keyboard opened fd=%s", fd)

    def close(self) -> None:
        fd, saved = self._fd, self._saved_attrs
        self._fd = None
        self._saved_attrs = None
        if fd is None or saved is None:
            return
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        except (termios.error, ValueError, OSError):
            logger.warning("Failed to restore terminal attributes.", exc_info=True)
        else:
            logger.debug("Keyboard closed fd=%s", fd)

    def read_key(self) -> KeyEvent:
        if self._fd is None:
            raise KeyReadError("keyboard is not open")
        if IS_WINDOWS:
            return self._read_key_windows()
        return self._read_key_unix(self._fd)

    def _read_key_unix(self, fd: int) -> KeyEvent:
        try:
            first = self._read_byte(fd)
            if first is None:
                raise KeyReadError("end of input")

            if first == b"\x1b":
                seq = first + self._read_escape_tail(fd)
            else:
                seq = first
                for _ in range(_utf8_length(first[0]) - 1):
                    b = self._read_byte(fd)
                    if b is None:
                        break
                    seq += b
        except OSError as e:
            raise KeyReadError(str(e)) from e

        return decode_key(seq)

    def _read_byte(self, fd: int, timeout: float | None = None) -> bytes | None:
        """
        Next input byte, pushed-back bytes first.

        With a timeout, returns None if nothing arrives in time. Without one,
        blocks and returns None only at end of input.
        """
        if self._pending:
            b, self._pending = self._pending[:1], self._pending[1:]
            return b
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return None
        b = os.read(fd, 1)
        return b or None

    def _read_escape_tail(self, fd: int) -> bytes:
        """
        Bytes after ESC that belong to the same key.

        Stops at the final byte of a CSI (ESC [ ... final) or SS3 (ESC O final)
        sequence, so keys queued behind it (held-down arrows) stay unread.
        Anything else after ESC is pushed back and ESC stands alone.
        """
        intro = self._read_byte(fd, ESCAPE_TIMEOUT)
        if intro is None:
            return b""
        if intro not in (b"[", b"O"):
            self._pending = intro + self._pending
            return b""

        tail = intro
        while len(tail) < MAX_ESCAPE_LENGTH:
            b = self._read_byte(fd, ESCAPE_TIMEOUT)
            if b is None:
                break
            tail += b
            if 0x40 <= b[0] <= 0x7E:
                break
            if intro == b"O":
                break
        return tail

    @staticmethod
    def _read_key_windows() -> KeyEvent:
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            key = _WINDOWS_SCAN_CODES.get(msvcrt.getwch())
            return KeyEvent(key=key)
        return decode_key(ch.encode("utf-8"))
