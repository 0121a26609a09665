# src/nolearn/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- picks the task file (command line beats settings),
- wires the concrete keyboard/terminal implementations into AppState.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ..config import get_settings
from ..connectors.keyboard import TtyKeyboard
from ..connectors.terminal import AnsiTerminal
from ..core.ports import KeyboardReader, Terminal
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def resolve_tasks_path(argv: Sequence[str], settings) -> Path:
    """The single optional positional argument is the task file."""
    if len(argv) > 1:
        logger.warning("Ignoring extra arguments: %s", " ".join(argv[1:]))
    if argv:
        return Path(argv[0]).expanduser()
    return Path(settings.tasks_path)


def create_initial_state(
    tasks_path: str | Path,
    *,
    settings=None,
    keyboard: KeyboardReader | None = None,
    terminal: Terminal | None = None,
) -> AppState:
    """
    Create AppState for one session. Nothing is read from disk here.

    Keeping settings and the platform ports injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if terminal is None:
        terminal = AnsiTerminal(clear_command=getattr(settings, "clear_command", "clear"))
    if keyboard is None:
        keyboard = TtyKeyboard()

    return AppState(
        settings=settings,
        store=TaskStore(tasks_path),
        keyboard=keyboard,
        terminal=terminal,
    )
