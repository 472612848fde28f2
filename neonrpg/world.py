"""Scenes, the doors between them and the story triggers found in them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .geometry import Vector
from .story import Story

ZOOM_START = 0.3
ZOOM_STEP = 0.1
ZOOM_MIN = 0.4
ZOOM_MAX = 0.5
GUI_SHIFT = Vector(95, 55)
MINIMAP_SHIFT = Vector(98, 55)

SCRIPT_MOTHER = 11
SCRIPT_LEAVE_HOUSE = 4
SCRIPT_FACTORY = 5


class Scene(IntEnum):
    """The places the player can be in."""

    CITY = 0
    BAR = 1
    FACTORY = 2
    HOUSE = 3
    STORE = 4
    HACK = 5
    MANOR = 6


@dataclass(frozen=True)
class Transition:
    """Where a door leads: the new scene and the player's arrival point."""

    scene: Scene
    x: float
    y: float
    reset_factory: bool = False
    robot: Vector | None = None

    @property
    def position(self) -> Vector:
        return Vector(self.x, self.y)


def _door_open(rule: str, story: Story) -> bool:
    if rule == "factory":
        return story.first_factory == 2
    if rule == "house":
        return story.exit_house == 1
    if rule == "manor":
        return story.history >= 3
    return True


_DOORS: tuple[tuple[tuple[int, int, int], str, Transition], ...] = (
    ((255, 0, 0), "", Transition(Scene.BAR, 160.0, 360.0)),
    ((254, 0, 0), "", Transition(Scene.CITY, 3289.0, 380.0)),
    ((0, 255, 0), "factory", Transition(Scene.FACTORY, 90.0, 406.0)),
    ((0, 254, 0), "", Transition(Scene.CITY, 4160.0, 2116.0, reset_factory=True)),
    ((0, 0, 255), "", Transition(Scene.HOUSE, 447.25, 300.0)),
    ((0, 0, 254), "house", Transition(Scene.CITY, 3665.71, 878.22)),
    ((255, 255, 0), "", Transition(Scene.STORE, 250.0, 605.0)),
    ((255, 254, 0), "", Transition(Scene.CITY, 1238.0, 339.0)),
    (
        (0, 255, 255),
        "manor",
        Transition(Scene.MANOR, 218.0, 400.0, robot=Vector(218.0, 400.0)),
    ),
    ((0, 255, 254), "", Transition(Scene.CITY, 1974.0, 2173.0)),
)


def transition(colour: Sequence[int] | None, story: Story) -> Transition | None:
    """The door matching a collision-map colour, if it is open at this point of the story."""
    if colour is None:
        return None
    rgb = tuple(colour)[:3]
    for door_colour, rule, target in _DOORS:
        if rgb == door_colour and _door_open(rule, story):
            return target
    return None


def house_interaction(x: float, y: float, pressed_e: bool, story: Story) -> int | None:
    """Talk to the mother or leave the house when the use key is released.

    Updates the prompt flag and story progress; returns the script started, or ``None``.
    """
    started: int | None = None
    if 390 < x < 405 and 340 < y < 400:
        story.show_prompt = True
        if pressed_e and story.exit_house == 0:
            started = SCRIPT_MOTHER
            story.exit_house = 1
    else:
        story.show_prompt = False
    if 95 < x < 115 and 330 < y < 370:
        story.show_prompt = True
        if pressed_e and story.first_factory == 1:
            started = SCRIPT_LEAVE_HOUSE
            story.first_factory = 2
    else:
        story.show_prompt = False
    return started


def factory_interaction(x: float, y: float, pressed_e: bool, story: Story) -> int | None:
    """Start the factory script the first time the use key is released at its gate."""
    if 4150 < x < 41250 and 2040 < y < 2200:
        story.show_prompt = True
        if pressed_e and story.first_factory == 0:
            story.first_factory = 1
            return SCRIPT_FACTORY
    return None


@dataclass
class Zoom:
    """View size and the offsets of the overlays that follow it."""

    screensize: float = ZOOM_START
    gui_offset: Vector = field(default_factory=Vector)
    minimap_offset: Vector = field(default_factory=Vector)

    def scroll(self, delta: float) -> float:
        """Zoom in on a wheel step of 1, out on -1, within limits; returns the size."""
        if delta == 1 and self.screensize >= ZOOM_MIN:
            self.screensize = round(self.screensize - ZOOM_STEP, 1)
            self.gui_offset = self.gui_offset - GUI_SHIFT
            self.minimap_offset = self.minimap_offset - MINIMAP_SHIFT
        elif delta == -1 and self.screensize < ZOOM_MAX:
            self.screensize = round(self.screensize + ZOOM_STEP, 1)
            self.gui_offset = self.gui_offset + GUI_SHIFT
            self.minimap_offset = self.minimap_offset + MINIMAP_SHIFT
        return self.screensize