# src/nolearn/core/errors.py

"""
Error taxonomy.

Fatal before the interactive loop starts:
- DecodeError: the persisted task file exists but cannot be understood
- KeyboardOpenError: raw key input is not available

Handled inside the loop:
- KeyReadError: the key stream broke; treated as a quit request

Save failures are plain OSError and are reported, never fatal.
"""

from __future__ import annotations

from pathlib import Path


class NolearnError(Exception):
    """Base class for errors raised by nolearn itself."""


class DecodeError(NolearnError, ValueError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class KeyboardOpenError(NolearnError):
    pass


class KeyReadError(NolearnError):
    pass
