import pytest

from neonrpg.geometry import Vector
from neonrpg.keys import Key, Keybinds
from neonrpg.player import (
    HITBOX_REACH,
    SPRINT_FRAME_LIMIT,
    WALK_FRAME_LIMIT,
    Direction,
    Player,
)

WHITE = (255, 255, 255)


class FakeTime:
    def __init__(self):
        self.t = 0.0

    def __call__(self):
        return self.t


@pytest.fixture
def clock():
    return FakeTime()


@pytest.fixture
def player(clock):
    return Player(now=clock)


def test_starting_state(player):
    assert player.position == Vector(95.0, 45.0)
    assert player.facing is Direction.UP
    assert player.texture == "m_devant.png"
    assert player.hitbox_position == player.position


def test_diagonal_round_trip(player):
    start = player.position
    player.move(Direction.UP_LEFT)
    assert player.x < start.x and player.y < start.y
    player.move(Direction.DOWN_RIGHT)
    assert player.x == pytest.approx(start.x)
    assert player.y == pytest.approx(start.y)


def test_diagonal_is_half_a_straight_step_per_axis(clock):
    straight = Player(now=clock)
    diagonal = Player(now=clock)
    straight.move(Direction.RIGHT)
    diagonal.move(Direction.DOWN_RIGHT)
    assert (diagonal.x - 95.0) * 2 == pytest.approx(straight.x - 95.0)
    assert diagonal.y - 45.0 == pytest.approx(diagonal.x - 95.0)


def test_sprint_scales_step(clock):
    walker = Player(now=clock)
    runner = Player(now=clock, sprinting=True)
    walker.move(Direction.UP_RIGHT)
    runner.move(Direction.UP_RIGHT)
    ratio = (runner.x - 95.0) / (walker.x - 95.0)
    assert ratio == pytest.approx(runner.sprint_multiplier)


def test_textures_follow_pace(clock):
    walker = Player(now=clock)
    runner = Player(now=clock, sprinting=True)
    walker.move(Direction.UP_LEFT)
    runner.move(Direction.UP_LEFT)
    assert walker.texture == "m_leftup.png"
    assert runner.texture == "leftsprintup.png"


def test_hitbox_follows_direction(player):
    player.move(Direction.DOWN_RIGHT)
    assert player.hitbox_position == Vector(player.x + HITBOX_REACH, player.y + HITBOX_REACH)
    player.move(Direction.UP_LEFT)
    assert player.hitbox_position == Vector(player.x - HITBOX_REACH, player.y - HITBOX_REACH)


def test_hitbox_bounds_contain_hitbox_position(player):
    player.move(Direction.LEFT)
    assert player.hitbox.contains(player.hitbox_position.x, player.hitbox_position.y)


def test_advance_frame_waits_for_delay(player, clock):
    assert player.advance_frame(120, WALK_FRAME_LIMIT) == 0
    clock.t = 1.0
    assert player.advance_frame(120, WALK_FRAME_LIMIT) == 120
    assert player.advance_frame(120, WALK_FRAME_LIMIT) == 120


def test_advance_frame_wraps(player, clock):
    player.frame_left = SPRINT_FRAME_LIMIT
    clock.t = 1.0
    assert player.advance_frame(120, SPRINT_FRAME_LIMIT) == 0


def test_idle_direction_shows_last_facing(player, clock):
    player.move(Direction.LEFT)
    player.frame_left = 240
    clock.t = 1.0
    assert player.idle_direction() is Direction.LEFT
    assert player.texture == "m_gauche.png"
    assert player.frame_left == 0


def test_try_move_too_early_does_nothing(player):
    assert player.try_move({Key.Z}, Keybinds(), lambda x, y: WHITE) is None
    assert player.position == Vector(95.0, 45.0)


def test_try_move_up_on_floor(player, clock):
    clock.t = 1.0
    colour = player.try_move({Key.Z}, Keybinds(), lambda x, y: WHITE)
    assert colour == WHITE
    assert player.y < 45.0
    assert player.facing is Direction.UP
    assert player.current_colour == WHITE


@pytest.mark.parametrize("wall", [(0, 0, 0), (255, 0, 255), (0, 255, 254)])
def test_try_move_blocked_by_wall(player, clock, wall):
    clock.t = 1.0
    assert player.try_move({Key.S}, Keybinds(), lambda x, y: wall) == wall
    assert player.position == Vector(95.0, 45.0)


def test_try_move_samples_ahead(player, clock):
    calls = []

    def sample(x, y):
        calls.append((x, y))
        return WHITE

    clock.t = 1.0
    colour = player.try_move({Key.S}, Keybinds(), sample)
    (sx, sy), = calls
    assert colour == WHITE
    assert sx == 95
    assert sy > 45
    assert player.y > 45.0
    assert player.facing is Direction.DOWN


def test_up_left_probes_right_side(player, clock):
    calls = []

    def sample(x, y):
        calls.append((x, y))
        return WHITE

    clock.t = 1.0
    player.try_move({Key.Z, Key.Q}, Keybinds(), sample)
    (sx, sy), = calls
    assert sx > 95
    assert sy < 45
    assert player.facing is Direction.UP_LEFT


def test_right_wins_when_left_also_held(player, clock):
    clock.t = 1.0
    player.try_move({Key.D, Key.Q}, Keybinds(), lambda x, y: WHITE)
    assert player.x > 95.0
    assert player.facing is Direction.RIGHT


def test_sprint_key_makes_bigger_step(clock):
    walker = Player(now=clock)
    runner = Player(now=clock)
    clock.t = 1.0
    walker.try_move({Key.D}, Keybinds(), lambda x, y: WHITE)
    runner.try_move({Key.D, Key.LShift}, Keybinds(), lambda x, y: WHITE)
    assert runner.sprinting and not walker.sprinting
    assert runner.x - 95.0 > walker.x - 95.0


def test_try_move_without_move_keys(player, clock):
    clock.t = 1.0
    assert player.try_move({Key.E}, Keybinds(), lambda x, y: WHITE) is None
    assert player.position == Vector(95.0, 45.0)