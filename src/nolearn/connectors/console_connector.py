# src/nolearn/connectors/console_connector.py

"""
Interactive read-render-dispatch loop.

Every turn: render the whole list, block for one key, run its binding,
save if the binding mutates. The loop ends on a quit binding, a broken key
stream, or Ctrl-C. Terminal restore and the final save belong to the
caller (cli.main).
"""

from __future__ import annotations

import logging

from ..cli.keys import KeyRegistry
from ..cli.keys import registry as key_registry
from ..core.errors import KeyReadError
from ..core.ports import KeyEvent
from ..core.state import AppState

logger = logging.getLogger(__name__)

CURSOR_MARKER = "▶ "
NO_CURSOR = "  "
EMPTY_HINT = "No tasks. Press 'n' to add a new task."


def _app_name(state: AppState) -> str:
    return str(getattr(state.settings, "app_name", "Nolearn"))


def render(state: AppState, registry: KeyRegistry = key_registry) -> None:
    term = state.terminal
    store = state.store

    term.clear()

    lines = [
        f"{_app_name(state)}. Press 'q' or ESC to quit.",
        registry.build_legend(),
    ]

    if state.notice:
        lines.append(state.notice)
        state.notice = None

    if store.count_tasks() == 0:
        lines.append(EMPTY_HINT)
        term.write("\n".join(lines) + "\n")
        return

    lines.append(f"Tasks ({store.count_tasks()} total):")
    lines.append("")

    for i, task in enumerate(store.tasks):
        prefix = CURSOR_MARKER if i == store.cursor else NO_CURSOR
        lines.append(f"{prefix}{task.status.glyph} {task.text}")

    term.write("\n".join(lines) + "\n")


def persist(state: AppState) -> bool:
    """Save the store; on failure log it and leave a notice for the next render."""
    try:
        state.store.save()
    except OSError as e:
        logger.exception("Failed to save tasks to %s", state.store.path)
        state.notice = f"Error saving tasks: {e}"
        return False
    return True


def handle_key(state: AppState, event: KeyEvent, registry: KeyRegistry = key_registry) -> bool:
    """Dispatch one key event. Returns True when the loop should stop."""
    binding = registry.lookup(event)
    if binding is None:
        logger.debug("Ignored key %r", event)
        return False

    if binding.quits:
        logger.info("Quit requested.")
        return True

    if binding.action is not None:
        binding.action(state)
    if binding.persist:
        persist(state)
    return False


def run_console_loop(state: AppState, registry: KeyRegistry = key_registry) -> None:
    logger.info("Console loop started (%d tasks).", state.store.count_tasks())

    while True:
        render(state, registry)

        try:
            event = state.keyboard.read_key()
        except KeyReadError as e:
            logger.warning("Key read failed: %s", e)
            state.terminal.write(f"Error reading key: {e}\n")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        if handle_key(state, event, registry):
            break

    logger.info("Console loop finished.")
