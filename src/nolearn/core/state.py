# src/nolearn/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import KeyboardReader, Terminal


@dataclass
class AppState:
    # Settings object (nolearn.config.Settings or a test stand-in).
    settings: object

    store: TaskStore
    keyboard: KeyboardReader
    terminal: Terminal

    # One-shot message shown on the next render (e.g. a failed save).
    notice: str | None = None
