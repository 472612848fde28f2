"""Keyboard codes, their display names and the player's configurable bindings."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from enum import Enum, IntEnum

_KEY_NAMES = (
    "A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M",
    "N", "O", "P", "Q", "R", "S", "T", "U", "V", "W", "X", "Y", "Z",
    "Num0", "Num1", "Num2", "Num3", "Num4", "Num5", "Num6", "Num7", "Num8",
    "Num9", "Escape", "LControl", "LShift", "LAlt", "LSystem", "RControl",
    "RShift", "RAlt", "RSystem", "Menu", "LBracket", "RBracket", "Semicolon",
    "Comma", "Period", "Quote", "Slash", "Backslash", "Tilde", "Equal",
    "Hyphen", "Space", "Enter", "Backspace", "Tab", "PageUp", "PageDown",
    "End", "Home", "Insert", "Delete", "Add", "Subtract", "Multiply",
    "Divide", "Left", "Right", "Up", "Down", "Numpad0", "Numpad1", "Numpad2",
    "Numpad3", "Numpad4", "Numpad5", "Numpad6", "Numpad7", "Numpad8",
    "Numpad9", "F1", "F2", "F3", "F4", "F5", "F6", "F7", "F8", "F9", "F10",
    "F11", "F12", "F13", "F14", "F15", "Pause",
)

UNKNOWN_NAME = "Unknown"

Key = IntEnum(  # type: ignore[misc]
    "Key",
    [(name, code) for code, name in enumerate(_KEY_NAMES)] + [(UNKNOWN_NAME, -1)],
)
Key.__doc__ = "Keyboard key codes, numbered in the order of their names."


def key_name(code: int) -> str:
    """Return the display name of a key code, or ``"Unknown"``."""
    try:
        return Key(code).name
    except ValueError:
        return UNKNOWN_NAME


class Action(Enum):
    """Game actions that can be bound to a key, in rebinding order."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    USE = "use"
    SPRINT = "sprint"


_MOVES = (Action.UP, Action.LEFT, Action.DOWN, Action.RIGHT)


def _default_bindings() -> dict[Action, Key]:
    return {
        Action.UP: Key.Z,
        Action.DOWN: Key.S,
        Action.RIGHT: Key.D,
        Action.LEFT: Key.Q,
        Action.SPRINT: Key.LShift,
        Action.USE: Key.E,
    }


@dataclass
class Keybinds:
    """Current key for each action, plus the actions waiting for a new key."""

    bindings: dict[Action, Key] = field(default_factory=_default_bindings)
    pending: set[Action] = field(default_factory=set)

    def __getitem__(self, action: Action) -> Key:
        return self.bindings[action]

    def request(self, action: Action) -> None:
        """Mark ``action`` as waiting for the next key press."""
        self.pending.add(action)

    def handle_key(self, code: int) -> dict[Action, str]:
        """Bind every waiting action to the pressed key.

        Returns the rebound actions with the name now shown for them.
        """
        key = Key(code)
        changed: dict[Action, str] = {}
        for action in Action:
            if action in self.pending:
                self.bindings[action] = key
                changed[action] = key_name(key)
        self.pending.clear()
        return changed

    def is_moving(self, pressed: Collection[int]) -> bool:
        """True when any movement key is held."""
        return any(self.bindings[action] in pressed for action in _MOVES)

    def is_sprinting(self, pressed: Collection[int]) -> bool:
        """True when the sprint key is held together with a movement key."""
        return self.bindings[Action.SPRINT] in pressed and self.is_moving(pressed)

    def is_idle(self, pressed: Collection[int]) -> bool:
        """True when neither a movement key nor the sprint key is held."""
        return not self.is_moving(pressed) and self.bindings[Action.SPRINT] not in pressed