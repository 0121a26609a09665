# src/nolearn/core/prompt.py

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator

from .errors import KeyboardOpenError
from .state import AppState

logger = logging.getLogger(__name__)

NEW_TASK_LABEL = "Enter new task: "


@contextlib.contextmanager
def line_input_mode(state: AppState) -> Iterator[None]:
    """
    Temporarily leave single-key mode for line-buffered input.

    Shows the text cursor and releases the keyboard on entry. On every exit
    path the keyboard is reacquired and the cursor hidden again. A failed
    reacquire is logged and ignored: the next read_key() reports it.
    """
    state.terminal.show_cursor()
    state.keyboard.close()
    try:
        yield
    finally:
        try:
            state.keyboard.open()
        except KeyboardOpenError:
            logger.warning("Could not reacquire keyboard after line input.", exc_info=True)
        state.terminal.hide_cursor()


def read_text_line(state: AppState, label: str) -> str:
    """Read one stripped line; a broken or closed stdin reads as ""."""
    with line_input_mode(state):
        try:
            line = state.terminal.read_line(label)
        except (EOFError, OSError):
            logger.info("Line input failed, treating as empty.", exc_info=True)
            return ""
    return line.strip()


def prompt_for_new_task(state: AppState) -> None:
    text = read_text_line(state, "\n" + NEW_TASK_LABEL)
    if not text:
        logger.debug("New task prompt: nothing entered.")
        return
    state.store.add_task(text)
    logger.info("Added task #%d.", state.store.count_tasks())
