import pytest

from neonrpg.geometry import Clock, FrameAnimation, Rect, Vector, shape_bounds


def test_vector_arithmetic_round_trip():
    a = Vector(3.5, -2.0)
    b = Vector(1.0, 4.0)
    assert (a + b) - b == a


def test_rect_contains_is_half_open():
    rect = Rect(10, 20, 30, 40)
    assert rect.contains(10, 20)
    assert rect.contains(rect.right - 0.5, rect.bottom - 0.5)
    assert not rect.contains(rect.right, 25)
    assert not rect.contains(15, rect.bottom)
    assert not rect.contains(9.9, 25)


def test_rect_contains_negative_size():
    rect = Rect(40, 60, -30, -40)
    assert rect.contains(15, 30)
    assert not rect.contains(40, 30)


def test_rect_intersects_overlap():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_rect_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    assert not a.intersects(Rect(10, 0, 5, 5))
    assert not a.intersects(Rect(0, 10, 5, 5))
    assert not a.intersects(Rect(50, 50, 5, 5))


def test_rect_intersects_itself():
    rect = Rect(1, 2, 3, 4)
    assert rect.intersects(rect)


def test_shape_bounds_centred_on_position():
    position = Vector(300, 300)
    size = Vector(50, 50)
    bounds = shape_bounds(position, size, Vector(25, 25), 2.0)
    assert bounds.left + bounds.width / 2 == position.x
    assert bounds.top + bounds.height / 2 == position.y
    assert bounds.width == size.x + 4.0
    assert bounds.contains(position.x, position.y)


def test_shape_bounds_default_outline_and_origin():
    bounds = shape_bounds(Vector(0, 0), Vector(6, 6))
    assert bounds == shape_bounds(Vector(0, 0), Vector(6, 6), Vector(0, 0), 2.0)
    assert bounds.left == -2.0


def test_shape_bounds_without_outline_matches_size():
    bounds = shape_bounds(Vector(95, 45), Vector(20, 30), Vector(10, 15), 0.0)
    assert (bounds.width, bounds.height) == (20, 30)
    assert (bounds.left, bounds.top) == (85, 30)


class _FakeTime:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_clock_elapsed_and_restart():
    fake = _FakeTime()
    clock = Clock(fake)
    assert clock.elapsed() == 0.0
    fake.now += 1.5
    assert clock.elapsed() == pytest.approx(1.5)
    assert clock.restart() == pytest.approx(1.5)
    assert clock.elapsed() == 0.0
    fake.now += 0.25
    assert clock.elapsed() == pytest.approx(0.25)


def test_frame_animation_wraps_past_limit():
    anim = FrameAnimation(step=49, limit=49, width=49, height=51)
    assert anim.advance() == 49
    assert anim.advance() == 0


def test_frame_animation_never_exceeds_limit():
    anim = FrameAnimation(step=175, limit=5400, width=175, height=175)
    seen = [anim.advance() for _ in range(100)]
    assert max(seen) <= 5400
    assert all(left % 175 == 0 for left in seen)
    assert 0 in seen


def test_frame_animation_reset_and_frame():
    anim = FrameAnimation(step=200, limit=9600, width=207, height=200, top=0)
    anim.advance()
    anim.advance()
    assert anim.frame == Rect(400, 0, 207, 200)
    anim.reset()
    assert anim.left == 0
    assert anim.frame.left == 0