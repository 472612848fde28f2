"""Street enemies: loading them, their aggression and the katana strike."""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .geometry import Clock, Rect, Vector, shape_bounds
from .story import Story
from .textutil import read_file, split_words

ENEMY_HEALTH = 50
ENEMY_ATTACK = 1
START_DISTANCE = 10000.0
AGGRO_RANGE = 150
HIT_RANGE = 30
TALK_RANGE = 50
ATTACK_DELAY = 0.5
KILL_DOLLARS = 75
KILL_XP = 20
HITBOX_SIZE = Vector(20.0, 30.0)
HITBOX_ORIGIN = Vector(10.0, 15.0)
FIELD_COUNT = 6
SPRITE = "ennemi/walk_up.png"


@dataclass
class Enemy:
    """One non-player character placed in a scene."""

    x: float
    y: float
    dialogue: str = ""
    scene: int = 0
    when: int = 0
    agro: int = 0
    health: int = ENEMY_HEALTH
    attack: int = ENEMY_ATTACK
    dead: bool = False
    display: bool = False
    tracking: bool = False
    distance: float = START_DISTANCE
    wait_att: int = 0
    now: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._attack_clock = Clock(self.now)

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def hitbox(self) -> Rect:
        """World bounds of the enemy's body."""
        return shape_bounds(Vector(self.x, self.y), HITBOX_SIZE, HITBOX_ORIGIN)

    def is_active(self, scene: int, story: Story) -> bool:
        """True when the enemy belongs to ``scene`` at this point of the story."""
        if scene != self.scene:
            return False
        return self.when in (0, story.first_factory, story.history)

    def engage(self, x: float, y: float) -> int:
        """React to a player standing at ``(x, y)``.

        Updates tracking and the dialogue toggle, and returns the damage dealt
        to the player this frame.
        """
        self.distance = math.hypot(x - self.x, y - self.y)
        self.tracking = self.distance < AGGRO_RANGE and self.agro == 1
        damage = 0
        if (
            self.distance < HIT_RANGE
            and self._attack_clock.elapsed() > ATTACK_DELAY
            and self.health > 0
        ):
            damage = self.attack
            self._attack_clock.restart()
        if self.distance <= TALK_RANGE:
            self.display = not self.display
        self.wait_att += 1
        return damage


def parse_enemies(text: str) -> list[Enemy]:
    """Read enemies from ``x,y,dialogue,scene,when,agro`` lines.

    The last line read comes first in the result. Raises ``ValueError`` on a
    line that is short of fields or holds a bad number.
    """
    enemies: list[Enemy] = []
    for number, line in enumerate(text.splitlines(), 1):
        fields = split_words(line, ",")
        if len(fields) < FIELD_COUNT:
            raise ValueError(
                f"line {number}: expected {FIELD_COUNT} fields, got {len(fields)}"
            )
        try:
            enemy = Enemy(
                x=float(fields[0]),
                y=float(fields[1]),
                dialogue=fields[2],
                scene=int(fields[3]),
                when=int(fields[4]),
                agro=int(fields[5]),
            )
        except ValueError as exc:
            raise ValueError(f"line {number}: {exc}") from None
        enemies.append(enemy)
    enemies.reverse()
    return enemies


def load_enemies(path: str | Path) -> list[Enemy]:
    """Read the enemy configuration file at ``path``."""
    return parse_enemies(read_file(path))


@dataclass
class StrikeResult:
    """Rewards and boss damage produced by one katana strike."""

    dollars: int = 0
    xp: int = 0
    boss_damage: int = 0
    killed: list[Enemy] = field(default_factory=list)


def katana_strike(
    enemies: Iterable[Enemy], weapon_box: Rect, boss_box: Rect
) -> StrikeResult:
    """Hit every enemy and the boss overlapping the weapon hitbox."""
    result = StrikeResult()
    for enemy in enemies:
        if weapon_box.intersects(enemy.hitbox):
            enemy.health -= 1
        if not enemy.dead and enemy.health <= 0:
            result.dollars += KILL_DOLLARS
            result.xp += KILL_XP
            enemy.dead = True
            result.killed.append(enemy)
    if weapon_box.intersects(boss_box):
        result.boss_damage += 1
    return result