"""The player character: movement, wall checks and walk animation."""

from __future__ import annotations

import time
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .geometry import Clock, Rect, Vector, shape_bounds
from .keys import Action, Key, Keybinds

WALK_SPEED = 0.5
SPRINT_MULTIPLIER = 5.3
START = Vector(95.0, 45.0)
FRAME_DELAY = 0.0305
MOVE_DELAY = 0.01
FRAME_STEP = 120
FRAME_SIZE = 120
WALK_FRAME_LIMIT = 4320
SPRINT_FRAME_LIMIT = 2520
HITBOX_SIZE = Vector(6.0, 6.0)
HITBOX_ORIGIN = Vector(4.0, 4.0)
HITBOX_REACH = 12.0
WALL_MARGIN = 15.0

Colour = tuple[int, int, int]
PixelSampler = Callable[[int, int], Sequence[int]]


class Direction(IntEnum):
    """The eight facing directions, clockwise from up."""

    UP = 0
    UP_RIGHT = 1
    RIGHT = 2
    DOWN_RIGHT = 3
    DOWN = 4
    DOWN_LEFT = 5
    LEFT = 6
    UP_LEFT = 7

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step along each axis; y grows downwards."""
        return _DELTAS[self]

    @property
    def is_diagonal(self) -> bool:
        dx, dy = self.delta
        return dx != 0 and dy != 0


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.UP_RIGHT: (1, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.DOWN: (0, 1),
    Direction.DOWN_LEFT: (-1, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP_LEFT: (-1, -1),
}

WALK_TEXTURES = {
    Direction.UP: "m_devant.png",
    Direction.UP_RIGHT: "m_rightup.png",
    Direction.RIGHT: "m_droite.png",
    Direction.DOWN_RIGHT: "m_rightdown.png",
    Direction.DOWN: "m_bas.png",
    Direction.DOWN_LEFT: "m_leftdown.png",
    Direction.LEFT: "m_gauche.png",
    Direction.UP_LEFT: "m_leftup.png",
}

SPRINT_TEXTURES = {
    Direction.UP: "top_sprint.png",
    Direction.UP_RIGHT: "rightsprintup.png",
    Direction.RIGHT: "rightsprint.png",
    Direction.DOWN_RIGHT: "rightsprintdown.png",
    Direction.DOWN: "downsprint.png",
    Direction.DOWN_LEFT: "leftsprintdown.png",
    Direction.LEFT: "leftsprint.png",
    Direction.UP_LEFT: "leftsprintup.png",
}


def _movement_rules(
    keybinds: Keybinds,
) -> list[tuple[Direction, tuple[int, ...], tuple[int, ...], tuple[int, int]]]:
    """Key combinations, in the order they are checked, with the probe offset."""
    up = keybinds[Action.UP]
    down = keybinds[Action.DOWN]
    left = keybinds[Action.LEFT]
    right = keybinds[Action.RIGHT]
    return [
        (Direction.UP, (up,), (right, left, down), (0, -1)),
        (Direction.DOWN, (down,), (right, left, up), (0, 1)),
        (Direction.LEFT, (left,), (up, down, right), (-1, 0)),
        # The right move is blocked by G rather than by the left key.
        (Direction.RIGHT, (right,), (up, down, Key.G), (1, 0)),
        (Direction.UP_RIGHT, (right, up), (down, left), (1, -1)),
        # Moving up-left probes the wall on the up-right side.
        (Direction.UP_LEFT, (left, up), (down, right), (1, -1)),
        (Direction.DOWN_LEFT, (left, down), (up, right), (-1, 1)),
        (Direction.DOWN_RIGHT, (right, down), (up, left), (1, 1)),
    ]


@dataclass
class Player:
    """Position, speed and animation state of the player."""

    x: float = START.x
    y: float = START.y
    speed: float = WALK_SPEED
    sprint_multiplier: float = SPRINT_MULTIPLIER
    sprinting: bool = False
    attacking: bool = False
    facing: Direction = Direction.UP
    texture: str = WALK_TEXTURES[Direction.UP]
    frame_left: int = 0
    current_colour: Colour | None = None
    now: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)
    hitbox_position: Vector = field(init=False)

    def __post_init__(self) -> None:
        self.hitbox_position = Vector(self.x, self.y)
        self._frame_clock = Clock(self.now)
        self._move_clock = Clock(self.now)

    @property
    def position(self) -> Vector:
        return Vector(self.x, self.y)

    @property
    def step(self) -> float:
        """Distance covered by one straight move at the current pace."""
        return self.speed * self.sprint_multiplier if self.sprinting else self.speed

    @property
    def hitbox(self) -> Rect:
        """World bounds of the weapon hitbox."""
        return shape_bounds(self.hitbox_position, HITBOX_SIZE, HITBOX_ORIGIN)

    @property
    def frame(self) -> Rect:
        """Current texture rectangle of the sprite sheet."""
        return Rect(self.frame_left, 0, FRAME_SIZE, FRAME_SIZE)

    def move(self, direction: Direction) -> Vector:
        """Take one step towards ``direction`` and return the new position."""
        dx, dy = direction.delta
        distance = self.step / 2 if direction.is_diagonal else self.step
        self.x += dx * distance
        self.y += dy * distance
        if self.sprinting:
            self.texture = SPRINT_TEXTURES[direction]
            self.advance_frame(FRAME_STEP, SPRINT_FRAME_LIMIT)
        else:
            self.texture = WALK_TEXTURES[direction]
            self.advance_frame(FRAME_STEP, WALK_FRAME_LIMIT)
        self.facing = direction
        self.hitbox_position = Vector(
            self.x + dx * HITBOX_REACH, self.y + dy * HITBOX_REACH
        )
        return self.position

    def try_move(
        self,
        pressed: Collection[int],
        keybinds: Keybinds,
        pixel_at: PixelSampler,
    ) -> Colour | None:
        """Move according to the held keys unless the collision map blocks it.

        ``pixel_at`` returns the colour of the collision map at a point; any
        colour with a zero channel is a wall. Returns the colour sampled, or
        ``None`` when it is too early to move or no move key combination is held.
        """
        if self._move_clock.elapsed() <= MOVE_DELAY:
            return None
        self.sprinting = keybinds.is_sprinting(pressed)
        sampled: Colour | None = None
        for direction, needed, forbidden, (sx, sy) in _movement_rules(keybinds):
            if not all(key in pressed for key in needed):
                continue
            if any(key in pressed for key in forbidden):
                continue
            reach = self.speed * self.sprint_multiplier + WALL_MARGIN
            r, g, b = tuple(pixel_at(int(self.x + sx * reach), int(self.y + sy * reach)))[:3]
            sampled = (r, g, b)
            self.current_colour = sampled
            if r and g and b:
                self.move(direction)
        self._move_clock.restart()
        return sampled

    def advance_frame(self, step: int, limit: int) -> int:
        """Advance the sprite sheet by ``step`` once the frame delay has passed."""
        if self._frame_clock.elapsed() > FRAME_DELAY:
            self.frame_left += step
            self._frame_clock.restart()
            if self.frame_left > limit:
                self.frame_left = 0
        return self.frame_left

    def idle_direction(self) -> Direction:
        """Show the standing pose for the last direction moved and return it."""
        self.texture = WALK_TEXTURES[self.facing]
        self.advance_frame(0, 0)
        return self.facing