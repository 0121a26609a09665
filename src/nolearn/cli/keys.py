# src/nolearn/cli/keys.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..core.ports import Key, KeyEvent
from ..core.prompt import prompt_for_new_task
from ..core.state import AppState

KeyAction = Callable[[AppState], None]

logger = logging.getLogger(__name__)

_KEY_LABELS: dict[Key, str] = {
    Key.UP: "↑",
    Key.DOWN: "↓",
    Key.LEFT: "←",
    Key.RIGHT: "→",
    Key.ESC: "ESC",
}


@dataclass(frozen=True, slots=True)
class Binding:
    name: str
    action: KeyAction | None
    help_text: str
    chars: tuple[str, ...] = ()
    keys: tuple[Key, ...] = ()
    persist: bool = False
    quits: bool = False
    show: bool = True

    def matches(self, event: KeyEvent) -> bool:
        if event.key is not None and event.key in self.keys:
            return True
        return bool(event.char) and event.char in self.chars

    @property
    def label(self) -> str:
        parts = list(self.chars) + [_KEY_LABELS.get(k, k.value) for k in self.keys]
        return "/".join(parts)


class KeyRegistry:
    """
    Ordered single-key binding table used by the controller.

    Lookup walks bindings in registration order; the first match wins.
    """

    def __init__(self) -> None:
        self._bindings: list[Binding] = []

    def register(
        self,
        name: str,
        action: KeyAction | None,
        help_text: str,
        *,
        chars: Iterable[str] = (),
        keys: Iterable[Key] = (),
        persist: bool = False,
        quits: bool = False,
        show: bool = True,
    ) -> Binding:
        if action is None and not quits:
            raise ValueError(f"binding {name!r} needs an action")
        binding = Binding(
            name=name,
            action=action,
            help_text=help_text,
            chars=tuple(chars),
            keys=tuple(keys),
            persist=persist,
            quits=quits,
            show=show,
        )
        self._bindings.append(binding)
        return binding

    def lookup(self, event: KeyEvent) -> Binding | None:
        for binding in self._bindings:
            if binding.matches(event):
                return binding
        return None

    @property
    def bindings(self) -> tuple[Binding, ...]:
        return tuple(self._bindings)

    def build_legend(self) -> str:
        items = [f"{b.label}={b.help_text}" for b in self._bindings if b.show]
        return "Controls: " + ", ".join(items)


def key_up(state: AppState) -> None:
    state.store.move_cursor_up()


def key_down(state: AppState) -> None:
    state.store.move_cursor_down()


def key_forward(state: AppState) -> None:
    state.store.cycle_status_forward()


def key_backward(state: AppState) -> None:
    state.store.cycle_status_backward()


def key_new(state: AppState) -> None:
    prompt_for_new_task(state)


def key_delete(state: AppState) -> None:
    task = state.store.current_task()
    state.store.delete_current_task()
    if task is not None:
        logger.info("Deleted task %r.", task.text)


def build_default_registry() -> KeyRegistry:
    reg = KeyRegistry()
    reg.register("quit", None, "quit", chars="q", keys=[Key.ESC], quits=True, show=False)
    reg.register("up", key_up, "up", chars="e", keys=[Key.UP])
    reg.register("down", key_down, "down", chars="d", keys=[Key.DOWN])
    reg.register("forward", key_forward, "cycle status forward", chars="f", persist=True)
    reg.register("backward", key_backward, "cycle status backward", chars="s", persist=True)
    reg.register("new", key_new, "new task", chars="n", persist=True)
    reg.register("delete", key_delete, "delete", chars="x", persist=True)
    return reg


registry = build_default_registry()
