# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from nolearn.core.state import AppState
from nolearn.tasks.task_store import TaskStore

from .fakes import FakeKeyboard, FakeTerminal


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the controller.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Nolearn",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        file_logging=False,
        tasks_path=tmp_path / "tasks.json",
        clear_command="clear",
    )


@pytest.fixture()
def tasks_path(settings: SimpleNamespace) -> Path:
    return settings.tasks_path


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def keyboard() -> FakeKeyboard:
    return FakeKeyboard()


@pytest.fixture()
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    store: TaskStore,
    keyboard: FakeKeyboard,
    terminal: FakeTerminal,
) -> AppState:
    """
    AppState wired with scripted keyboard/terminal fakes.

    NOTE: The store is real and writes to tmp_path, because save-after-mutate
    is part of what we want to test.
    """
    return AppState(settings=settings, store=store, keyboard=keyboard, terminal=terminal)
