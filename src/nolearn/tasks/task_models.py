# src/nolearn/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task progress marker.

    The three states form a line, not a ring:
        TODO <-> SEEN <-> DONE
    Stepping past either end leaves the status unchanged.
    """

    TODO = "todo"
    SEEN = "seen"
    DONE = "done"

    def advance(self) -> TaskStatus:
        order = _ORDER
        i = order.index(self)
        return order[min(i + 1, len(order) - 1)]

    def regress(self) -> TaskStatus:
        order = _ORDER
        i = order.index(self)
        return order[max(i - 1, 0)]

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    @classmethod
    def from_json(cls, raw: object) -> TaskStatus | None:
        """Return the status for a persisted value, or None if it is not one of ours."""
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


_ORDER: tuple[TaskStatus, ...] = (TaskStatus.TODO, TaskStatus.SEEN, TaskStatus.DONE)

_GLYPHS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "[ ]",
    TaskStatus.SEEN: "[~]",
    TaskStatus.DONE: "[✓]",
}


@dataclass(slots=True)
class Task:
    text: str
    status: TaskStatus = TaskStatus.TODO

    def to_json(self) -> dict[str, str]:
        return {"text": self.text, "status": self.status.value}
