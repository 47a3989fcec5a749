"""
Keyboard routing for study modes.

A `KeyboardSurface` stands in for the page-level key listener list. Each mode
attaches one `KeyboardScope` on entry and detaches it on exit, so handlers
never outlive the mode that registered them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


class Key(str, Enum):
    """Keys consumed by the study modes (KeyboardEvent.key values)."""
    ARROW_RIGHT = "ArrowRight"
    ARROW_LEFT = "ArrowLeft"
    ARROW_UP = "ArrowUp"
    SPACE = " "
    ENTER = "Enter"


# Browsers report the space bar as " "; some hosts send the code name instead
KEY_ALIASES = {
    "Space": Key.SPACE.value,
    "Spacebar": Key.SPACE.value,
}


def normalize_key(key: str) -> str:
    return KEY_ALIASES.get(key, key)


@dataclass
class KeyEvent:
    """
    A single key press.

    `target` names the focused element (e.g. "answer" for the recall input).
    """
    key: str
    target: Optional[str] = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


KeyHandler = Callable[[KeyEvent], None]


class KeyboardSurface:
    """
    The set of currently attached key listeners.
    """

    def __init__(self):
        self._listeners: list[Callable[[KeyEvent], bool]] = []

    def add_listener(self, listener: Callable[[KeyEvent], bool]) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[KeyEvent], bool]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def dispatch(self, event: KeyEvent) -> bool:
        """Deliver `event` to every listener. Returns True if any handled it."""
        handled = False
        for listener in list(self._listeners):
            handled = listener(event) or handled
        return handled

    def press(self, key: str, target: Optional[str] = None) -> KeyEvent:
        """Convenience: build an event, dispatch it and return it."""
        event = KeyEvent(key=key, target=target)
        self.dispatch(event)
        return event


@dataclass(frozen=True)
class KeyBinding:
    handler: Callable[[], None]
    prevent_default: bool = True
    target: Optional[str] = None  # only fire when this element has focus


class KeyboardScope:
    """
    Key bindings owned by one mode component.
    """

    def __init__(self, bindings: Optional[dict[str, KeyBinding]] = None):
        self.bindings: dict[str, KeyBinding] = {}
        for key, binding in (bindings or {}).items():
            self.bind(key, binding)
        self._surface: Optional[KeyboardSurface] = None

    def bind(self, key: str, binding: KeyBinding) -> None:
        self.bindings[normalize_key(key)] = binding

    @property
    def attached(self) -> bool:
        return self._surface is not None

    def attach(self, surface: KeyboardSurface) -> None:
        if self._surface is surface:
            return
        self.detach()
        surface.add_listener(self.handle)
        self._surface = surface

    def detach(self) -> None:
        if self._surface is not None:
            self._surface.remove_listener(self.handle)
            self._surface = None

    def page_keys(self) -> list[str]:
        """Keys bound without a focus target, i.e. page-level shortcuts."""
        return [key for key, binding in self.bindings.items() if binding.target is None]

    def handle(self, event: KeyEvent) -> bool:
        binding = self.bindings.get(normalize_key(event.key))
        if binding is None:
            return False
        if binding.target is not None and event.target != binding.target:
            return False
        if binding.prevent_default:
            event.prevent_default()
        binding.handler()
        return True
