# tests/test_task_models.py

from __future__ import annotations

import pytest

from nolearn.tasks.task_models import Task, TaskStatus


@pytest.mark.parametrize(
    ("status", "forward", "backward"),
    [
        (TaskStatus.TODO, TaskStatus.SEEN, TaskStatus.TODO),
        (TaskStatus.SEEN, TaskStatus.DONE, TaskStatus.TODO),
        (TaskStatus.DONE, TaskStatus.DONE, TaskStatus.SEEN),
    ],
)
def test_status_steps_saturate_at_the_ends(status, forward, backward) -> None:
    assert status.advance() is forward
    assert status.regress() is backward


def test_status_values_and_glyphs() -> None:
    assert [s.value for s in TaskStatus] == ["todo", "seen", "done"]
    assert TaskStatus.TODO.glyph == "[ ]"
    assert TaskStatus.SEEN.glyph == "[~]"
    assert TaskStatus.DONE.glyph == "[✓]"


def test_status_from_json_rejects_unknown_values() -> None:
    assert TaskStatus.from_json("seen") is TaskStatus.SEEN
    assert TaskStatus.from_json("DONE") is None
    assert TaskStatus.from_json("") is None
    assert TaskStatus.from_json(None) is None
    assert TaskStatus.from_json(2) is None


def test_task_defaults_to_todo_and_serializes() -> None:
    t = Task("Learn Go")
    assert t.status is TaskStatus.TODO
    assert t.to_json() == {"text": "Learn Go", "status": "todo"}
