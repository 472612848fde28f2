"""Pause menu, player statistics, save-file checks and the volume sliders."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .geometry import FrameAnimation, Rect, Vector
from .textutil import count_word, is_numeric, read_file, split_words

DEFAULT_SAVE = Path("save") / "save.txt"
SAVE_FIELDS = 27
SAVE_DELIMITER = ";"

XP_BAR_LIMIT = 325
START_HEALTH = 45
START_SPEED = 25
START_ATTACK = 25
START_XP = 200

SLIDER_RANGE = 200
VOLUME_DIVISOR = 2

NORMAL_SCALE = 1.0
HOVER_SCALE = 1.05

BUTTON_X = 735
BUTTON_TEXT_SIZE = 35
BUTTON_CHAR_WIDTH = 25
PORTRAIT_DELAY = 0.1


class Button(Enum):
    """The pause menu entries, top to bottom, with their label."""

    RESUME = "RESUME"
    SAVE = "SAVE"
    LOAD = "LOAD"
    SETTINGS = "SETTINGS"
    BACK = "BACK TO MENU"


class MenuAction(Enum):
    """What a click on the pause menu asks the game to do."""

    RESUME = "resume"
    BACK_TO_MENU = "back_to_menu"
    SETTINGS = "settings"
    LOAD = "load"


_BUTTON_Y = {
    Button.RESUME: 375,
    Button.SAVE: 425,
    Button.LOAD: 475,
    Button.SETTINGS: 525,
    Button.BACK: 575,
}

SELECTOR_POSITIONS = {
    Button.RESUME: Vector(700, 325),
    Button.SAVE: Vector(700, 375),
    Button.LOAD: Vector(700, 425),
    Button.SETTINGS: Vector(700, 475),
    Button.BACK: Vector(700, 525),
}


def _default_hitboxes() -> dict[Button, Rect]:
    return {
        button: Rect(
            BUTTON_X,
            _BUTTON_Y[button],
            len(button.value) * BUTTON_CHAR_WIDTH,
            BUTTON_TEXT_SIZE,
        )
        for button in Button
    }


@dataclass
class Stats:
    """Character statistics shown in the pause menu."""

    health: int = START_HEALTH
    speed: int = START_SPEED
    attack: int = START_ATTACK
    xp: int = START_XP

    def __post_init__(self) -> None:
        self._xp_width = self.xp

    def xp_bar_width(self) -> int:
        """Width of the experience bar; it stops growing once xp reaches the limit."""
        if self.xp < XP_BAR_LIMIT:
            self._xp_width = self.xp
        return self._xp_width


def validate_save(text: str) -> bool:
    """True when ``text`` holds exactly the expected number of numeric fields."""
    if count_word(text, SAVE_DELIMITER) != SAVE_FIELDS:
        return False
    return all(is_numeric(word) for word in split_words(text, SAVE_DELIMITER))


def save_available(path: str | Path = DEFAULT_SAVE) -> bool:
    """True when a readable, well-formed save file exists at ``path``."""
    try:
        text = read_file(path)
    except OSError:
        return False
    return validate_save(text)


def slider_volume(mouse_x: float, mouse_y: float, bar: Rect) -> float | None:
    """Volume selected by pressing the mouse on a slider bar.

    Returns ``None`` when the mouse is outside the bar (edges included).
    """
    if not (bar.left <= mouse_x <= bar.right and bar.top <= mouse_y <= bar.bottom):
        return None
    cursor = min(max(mouse_x, bar.left), bar.left + SLIDER_RANGE)
    return (cursor - bar.left) / VOLUME_DIVISOR


def _portrait() -> FrameAnimation:
    return FrameAnimation(step=175, limit=5400, width=175, height=175)


@dataclass
class PauseMenu:
    """The in-game pause menu: highlighted entry, selector and clicks."""

    hitboxes: dict[Button, Rect] = field(default_factory=_default_hitboxes)
    can_load: Callable[[], bool] = field(default=save_available, repr=False)
    open: bool = False
    settings_open: bool = False
    selector: Vector = field(default_factory=lambda: SELECTOR_POSITIONS[Button.RESUME])
    scales: dict[Button, float] = field(
        default_factory=lambda: {button: NORMAL_SCALE for button in Button}
    )
    portrait: FrameAnimation = field(default_factory=_portrait)

    def _over(self, button: Button, x: float, y: float) -> bool:
        return self.hitboxes[button].contains(x, y)

    def hover(self, x: float, y: float) -> Button | None:
        """Highlight the entry under the mouse and move the selector to it.

        The load entry only lights up when a valid save exists. Returns the
        highlighted entry, or ``None``.
        """
        hovered: Button | None = None
        for button in Button:
            active = self._over(button, x, y)
            if active and button is Button.LOAD:
                active = self.can_load()
            if active:
                self.scales[button] = HOVER_SCALE
                self.selector = SELECTOR_POSITIONS[button]
                hovered = button
            else:
                self.scales[button] = NORMAL_SCALE
        return hovered

    def click(self, x: float, y: float) -> list[MenuAction]:
        """Act on a mouse release at ``(x, y)`` and return what was triggered."""
        actions: list[MenuAction] = []
        if self._over(Button.RESUME, x, y):
            actions.append(MenuAction.RESUME)
        if self._over(Button.BACK, x, y):
            actions.append(MenuAction.BACK_TO_MENU)
        if self._over(Button.SETTINGS, x, y):
            self.settings_open = True
            actions.append(MenuAction.SETTINGS)
        if self._over(Button.LOAD, x, y) and self.can_load():
            actions.append(MenuAction.LOAD)
        return actions