"""Life and energy bars, the interaction prompt and the death screen."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .effects import Effects
from .geometry import Clock, FrameAnimation, Vector
from .player import START, Player
from .story import Story

MAX_LIFE = 45
MAX_ENERGY = 267
ENERGY_MALUS = 2
REGEN_DELAY = 0.02
RECHARGE_DELAY = 0.05
RECHARGE_STEP = 3
LIFE_BAR_DIVISOR = 4.37
ENERGY_BAR_DIVISOR = 3
SYRINGE_STOP_MARGIN = 10

PROMPT_HIDDEN = Vector(-3000, 0)
PROMPT_FACTORY = Vector(4213, 2106)
PROMPT_DRONE = Vector(1520, 2980)
PROMPT_MOTHER = Vector(400, 380)
PROMPT_FRAME_DELAY = 0.5

DEATH_TEXT = "You are dead"
DEATH_DELAY = 3.0
RESPAWN_SCENE = 3
STREET_SCENE = 1
HOUSE_SCENE = 3


def _prompt_frames() -> FrameAnimation:
    return FrameAnimation(step=49, limit=49, width=49, height=51)


@dataclass
class Hud:
    """Life, energy and money shown on the heads-up display."""

    max_life: int = MAX_LIFE
    energy: int = MAX_ENERGY
    energy_malus: int = ENERGY_MALUS
    dollar: int = 0
    current_life: int | None = None
    current_energy: int | None = None
    key_prompt: FrameAnimation = field(default_factory=_prompt_frames)
    now: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.current_life is None:
            self.current_life = self.max_life
        if self.current_energy is None:
            self.current_energy = self.energy
        self._regen_clock = Clock(self.now)
        self._energy_clock = Clock(self.now)
        self._prompt_clock = Clock(self.now)

    @property
    def dollar_text(self) -> str:
        return str(self.dollar)

    def regenerate(self, effects: Effects) -> int:
        """Heal one point per tick while the syringe effect runs.

        The effect stops once life is within ten points of the maximum.
        """
        if not effects.syringe_active:
            return self.current_life
        if self._regen_clock.elapsed() > REGEN_DELAY and self.current_life < self.max_life:
            self.current_life += 1
            self._regen_clock.restart()
            if self.max_life - self.current_life < SYRINGE_STOP_MARGIN:
                effects.syringe_active = False
        return self.current_life

    def recharge(self) -> int:
        """Refill energy by a few points per tick until it is full."""
        if (
            self._energy_clock.elapsed() > RECHARGE_DELAY
            and self.current_energy < self.energy
        ):
            self.current_energy += RECHARGE_STEP
            self._energy_clock.restart()
        return self.current_energy

    def life_bar_width(self) -> float:
        return self.current_life / LIFE_BAR_DIVISOR

    def energy_bar_width(self) -> int:
        return self.current_energy // ENERGY_BAR_DIVISOR

    def animate_prompt(self) -> int:
        """Flip the interaction prompt between its two frames every half second."""
        if self._prompt_clock.elapsed() > PROMPT_FRAME_DELAY:
            self.key_prompt.advance()
            self._prompt_clock.restart()
        return self.key_prompt.left


def prompt_position(x: float, y: float, scene: int, story: Story) -> Vector | None:
    """Where the "press E" prompt goes for a player at ``(x, y)``.

    Returns ``None`` when the prompt is to stay where it is.
    """
    if 4150 < x < 4250 and 2040 < y < 2200 and story.first_factory == 0:
        return PROMPT_FACTORY
    if 1467 <= x <= 1575 and 2954 <= y <= 2988 and story.history == 2:
        return PROMPT_DRONE
    if 385 <= x <= 430 and y >= 330 and scene == HOUSE_SCENE and story.exit_house == 0:
        return PROMPT_MOTHER
    if scene != STREET_SCENE:
        return PROMPT_HIDDEN
    return None


@dataclass
class Death:
    """Shows the death screen for a while, then respawns the player."""

    timing: bool = False
    now: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._clock = Clock(self.now)

    def update(self, hud: Hud, player: Player) -> int | None:
        """Handle a player out of life.

        Once the death screen has shown for three seconds, life is restored,
        the player goes back to the start point and the respawn scene is
        returned; otherwise ``None``.
        """
        if hud.current_life > 0:
            return None
        if not self.timing:
            self._clock.restart()
            self.timing = True
        if self._clock.elapsed() > DEATH_DELAY:
            hud.current_life = hud.max_life
            player.x = START.x
            player.y = START.y
            self.timing = False
            self._clock.restart()
            return RESPAWN_SCENE
        return None