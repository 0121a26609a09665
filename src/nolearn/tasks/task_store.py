# src/nolearn/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from ..core.errors import DecodeError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered task list plus a cursor, persisted as a JSON array.

    Invariants:
    - non-empty list: 0 <= cursor < len(tasks)
    - empty list: cursor == 0 (not a valid index)

    Mutations never raise: acting on nothing (empty list, blank text,
    out-of-range cursor) is a silent no-op. Only load/save can fail.
    The cursor is session state and is never written to disk.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []
        self._cursor = 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def cursor(self) -> int:
        return self._cursor

    def count_tasks(self) -> int:
        return len(self._tasks)

    def current_task(self) -> Task | None:
        if not self._cursor_valid():
            return None
        return self._tasks[self._cursor]

    def _cursor_valid(self) -> bool:
        return 0 <= self._cursor < len(self._tasks)

    # ---- persistence ----

    def load(self, path: str | Path | None = None) -> None:
        """
        Replace the in-memory list with the contents of `path`.

        A missing file is the first-run case and yields an empty list.
        Malformed content raises DecodeError and leaves the store untouched.
        """
        path = self._path if path is None else Path(path)

        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            logger.info("No task file at %s, starting empty.", path)
            self._tasks = []
            self._cursor = 0
            return

        tasks = self._decode(path, raw)
        self._tasks = tasks
        self._cursor = 0
        logger.info("Loaded %d task(s) from %s", len(tasks), path)

    @staticmethod
    def _decode(path: Path, raw: bytes) -> list[Task]:
        try:
            data: Any = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise DecodeError(path, f"not valid UTF-8 ({e.reason})") from e
        except json.JSONDecodeError as e:
            raise DecodeError(path, f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise DecodeError(path, f"expected a JSON array, got {type(data).__name__}")

        out: list[Task] = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise DecodeError(path, f"item {i} is not an object")
            text = item.get("text")
            if not isinstance(text, str):
                raise DecodeError(path, f"item {i} has no string 'text' field")
            status = TaskStatus.from_json(item.get("status"))
            if status is None:
                raise DecodeError(path, f"item {i} has unknown status {item.get('status')!r}")
            out.append(Task(text=text, status=status))
        return out

    def save(self, path: str | Path | None = None) -> None:
        """Write the full task list to `path`. Raises OSError on failure."""
        path = self._path if path is None else Path(path)

        doc = json.dumps([t.to_json() for t in self._tasks], ensure_ascii=False, indent=2)

        # Replace the link target, not the link itself.
        target = path.resolve()
        tmp = target.with_name(target.name + ".tmp")
        try:
            tmp.write_text(doc + "\n", "utf-8")
            os.replace(tmp, target)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise
        logger.debug("Saved %d task(s) to %s", len(self._tasks), target)

    # ---- mutations ----

    def add_task(self, text: str) -> None:
        text = text.strip()
        if not text:
            return
        self._tasks.append(Task(text=text))
        self._cursor = len(self._tasks) - 1

    def delete_current_task(self) -> None:
        if not self._cursor_valid():
            return

        del self._tasks[self._cursor]

        # The next task slides under the cursor unless we removed the last one.
        if not self._tasks:
            self._cursor = 0
        elif self._cursor >= len(self._tasks):
            self._cursor = len(self._tasks) - 1

    def move_cursor_up(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_cursor_down(self) -> None:
        if self._cursor < len(self._tasks) - 1:
            self._cursor += 1

    def cycle_status_forward(self) -> None:
        task = self.current_task()
        if task is not None:
            task.status = task.status.advance()

    def cycle_status_backward(self) -> None:
        task = self.current_task()
        if task is not None:
            task.status = task.status.regress()
