# src/nolearn/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs one interactive session:
load -> open keyboard -> console loop -> restore terminal -> final save.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import DecodeError, KeyboardOpenError
from ..core.state import AppState
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state, resolve_tasks_path

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1


def _restore_terminal(state: AppState) -> None:
    """Best-effort restore (no exceptions should escape)."""
    try:
        state.keyboard.close()
    except Exception:
        logger.exception("Failed to release keyboard.")

    try:
        state.terminal.show_cursor()
    except Exception:
        logger.debug("Show cursor failed.", exc_info=True)


def _final_save(state: AppState) -> None:
    try:
        state.store.save()
    except OSError as e:
        logger.exception("Final save to %s failed.", state.store.path)
        state.terminal.write(f"Error saving tasks: {e}\n")
        return
    logger.info("Saved %d task(s) to %s", state.store.count_tasks(), state.store.path)
    state.terminal.write("Tasks saved successfully.\n")


def run(state: AppState) -> int:
    """Run one session against an already wired AppState. Returns the exit code."""
    try:
        state.store.load()
    except (DecodeError, OSError) as e:
        logger.error("Failed to load tasks: %s", e)
        state.terminal.write(f"Error loading tasks: {e}\n")
        return EXIT_FATAL

    try:
        state.keyboard.open()
    except KeyboardOpenError as e:
        logger.error("Failed to open keyboard: %s", e)
        state.terminal.write(f"Error opening keyboard: {e}\n")
        return EXIT_FATAL

    try:
        state.terminal.hide_cursor()
        run_console_loop(state)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    finally:
        _restore_terminal(state)

    _final_save(state)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    log_dir = settings.log_dir if settings.file_logging else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    tasks_path = resolve_tasks_path(args, settings)
    logger.info("Starting %s with %s", settings.app_name, tasks_path)

    state = create_initial_state(tasks_path, settings=settings)
    code = run(state)
    logger.info("Bye (exit=%d).", code)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
