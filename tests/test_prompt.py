# tests/test_prompt.py

from __future__ import annotations

import pytest

from nolearn.core.prompt import NEW_TASK_LABEL, line_input_mode, prompt_for_new_task
from nolearn.core.state import AppState

from .fakes import FakeKeyboard, FakeTerminal


def test_prompt_adds_trimmed_task(state: AppState, keyboard: FakeKeyboard, terminal: FakeTerminal) -> None:
    keyboard.open()
    terminal.hide_cursor()
    terminal.lines = ["  write tests \r"]

    prompt_for_new_task(state)

    assert [t.text for t in state.store.tasks] == ["write tests"]
    assert state.store.cursor == 0
    assert terminal.prompts == ["\n" + NEW_TASK_LABEL]


def test_prompt_hands_keyboard_over_and_back(
    state: AppState, keyboard: FakeKeyboard, terminal: FakeTerminal
) -> None:
    keyboard.open()
    terminal.lines = ["x"]

    prompt_for_new_task(state)

    assert keyboard.calls == ["open", "close", "open"]
    assert keyboard.is_open
    assert terminal.events == ["show_cursor", "hide_cursor"]
    assert not terminal.cursor_visible


def test_empty_prompt_adds_nothing_but_restores(
    state: AppState, keyboard: FakeKeyboard, terminal: FakeTerminal
) -> None:
    keyboard.open()
    terminal.lines = ["   "]

    prompt_for_new_task(state)

    assert state.store.count_tasks() == 0
    assert keyboard.is_open
    assert not terminal.cursor_visible


@pytest.mark.parametrize("exc", [EOFError(), OSError("stdin gone")])
def test_failed_line_read_counts_as_empty(
    state: AppState, keyboard: FakeKeyboard, terminal: FakeTerminal, exc: BaseException
) -> None:
    keyboard.open()
    terminal.lines = [exc]

    prompt_for_new_task(state)

    assert state.store.count_tasks() == 0
    assert keyboard.calls == ["open", "close", "open"]
    assert not terminal.cursor_visible


def test_reacquire_failure_is_ignored(state: AppState, keyboard: FakeKeyboard, terminal: FakeTerminal) -> None:
    keyboard.open()
    keyboard.fail_reopen = True
    terminal.lines = ["still added"]

    prompt_for_new_task(state)

    assert [t.text for t in state.store.tasks] == ["still added"]
    assert not keyboard.is_open
    assert not terminal.cursor_visible


def test_line_input_mode_restores_on_unexpected_error(
    state: AppState, keyboard: FakeKeyboard, terminal: FakeTerminal
) -> None:
    keyboard.open()

    with pytest.raises(KeyboardInterrupt):
        with line_input_mode(state):
            assert not keyboard.is_open
            assert terminal.cursor_visible
            raise KeyboardInterrupt

    assert keyboard.is_open
    assert not terminal.cursor_visible
