"""The haunted-manor boss and its life bar."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .geometry import Clock, Rect, Vector, shape_bounds
from .story import Story

BOSS_START = Vector(300.0, 300.0)
BOSS_HEALTH = 1000
STEP_DELAY = 0.03
REACH = 35
ATTACK_DELAY = 1.0
ATTACK_DAMAGE = 5
WALK_FRAME = 143
WALK_FRAME_LIMIT = 9857
ATTACK_FRAME = 200
ATTACK_FRAME_LIMIT = 9000
HITBOX_SIZE = Vector(50.0, 50.0)
HITBOX_ORIGIN = Vector(25.0, 25.0)

FACE_RIGHT = 0
FACE_LEFT = 1
FACE_DOWN = 2
FACE_UP = 3

WALK_TEXTURES = {
    FACE_RIGHT: "boss_walk_right.png",
    FACE_LEFT: "boss_walk_left.png",
    FACE_DOWN: "boss_walk_down.png",
    FACE_UP: "boss_walk_up.png",
}
ATTACK_TEXTURES = {
    FACE_RIGHT: "boss_attack_right.png",
    FACE_LEFT: "boss_attack_left.png",
    FACE_DOWN: "boss_attack_down.png",
    FACE_UP: "boss_attack_up.png",
}

BOSS_BAR_LIFE = 525
BOSS_BAR_DIVISOR = 3
BOSS_CHAPTER = 3


@dataclass
class Boss:
    """The boss: chases the player and hits when in reach."""

    x: float = BOSS_START.x
    y: float = BOSS_START.y
    health: int = BOSS_HEALTH
    direction: int = FACE_RIGHT
    walking: bool = True
    walk_texture: str = WALK_TEXTURES[FACE_LEFT]
    attack_texture: str = ATTACK_TEXTURES[FACE_LEFT]
    walk_left: int = 0
    attack_left: int = 0
    now: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._clock = Clock(self.now)
        self._attack_clock = Clock(self.now)

    @property
    def hitbox(self) -> Rect:
        return shape_bounds(Vector(self.x, self.y), HITBOX_SIZE, HITBOX_ORIGIN)

    @property
    def walk_frame(self) -> Rect:
        return Rect(self.walk_left, 0, WALK_FRAME, WALK_FRAME)

    @property
    def attack_frame(self) -> Rect:
        return Rect(self.attack_left, 0, ATTACK_FRAME, ATTACK_FRAME)

    def face(self, dx: float, dy: float) -> int:
        """Turn towards the dominant axis of ``(dx, dy)``; ties keep the facing."""
        x = dx * 100
        y = dy * 100
        ax = abs(int(x))
        ay = abs(int(y))
        if x > 0 and ax > ay:
            self.direction = FACE_RIGHT
        if x < 0 and ax > ay:
            self.direction = FACE_LEFT
        if y > 0 and ax < ay:
            self.direction = FACE_DOWN
        if y < 0 and ax < ay:
            self.direction = FACE_UP
        self.walk_texture = WALK_TEXTURES[self.direction]
        return self.direction

    def update(self, target_x: float, target_y: float) -> int:
        """Walk towards or strike the target and return the damage dealt to it."""
        distance = math.hypot(target_x - self.x, target_y - self.y)
        seconds = self._clock.elapsed()
        if seconds > STEP_DELAY and distance > REACH:
            self.walking = True
            dx = (target_x - self.x) / distance
            dy = (target_y - self.y) / distance
            self.face(dx, dy)
            self.x += dx
            self.y += dy
            if self.walk_left > WALK_FRAME_LIMIT:
                self.walk_left = 0
            self.walk_left += WALK_FRAME
            self._clock.restart()
        if seconds > STEP_DELAY and distance < REACH:
            self.walking = False
            self.attack_texture = ATTACK_TEXTURES[self.direction]
            self.attack_left += ATTACK_FRAME
            if self.attack_left > ATTACK_FRAME_LIMIT:
                self.attack_left = 0
            self._clock.restart()
        if (
            self._attack_clock.elapsed() > ATTACK_DELAY
            and self.health > 0
            and distance < REACH
        ):
            self._attack_clock.restart()
            return ATTACK_DAMAGE
        return 0


@dataclass
class BossBar:
    """The boss's remaining life as shown on screen."""

    life: int = BOSS_BAR_LIFE

    def width(self) -> int:
        """Width of the life bar in pixels."""
        return self.life // BOSS_BAR_DIVISOR if self.life > 0 else 0

    def check_defeat(self, story: Story) -> bool:
        """Advance the story once when the boss falls during its chapter."""
        if self.life <= 0 and story.history == BOSS_CHAPTER:
            story.history += 1
            return True
        return False