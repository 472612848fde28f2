"""Plain geometry, timing and sprite-sheet animation helpers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

OUTLINE_THICKNESS = 2.0


@dataclass(frozen=True)
class Vector:
    """A 2D point or offset."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _span_x(self) -> tuple[float, float]:
        return min(self.left, self.right), max(self.left, self.right)

    def _span_y(self) -> tuple[float, float]:
        return min(self.top, self.bottom), max(self.top, self.bottom)

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside; the right and bottom edges are excluded."""
        min_x, max_x = self._span_x()
        min_y, max_y = self._span_y()
        return min_x <= x < max_x and min_y <= y < max_y

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap by a non-zero area."""
        a_min_x, a_max_x = self._span_x()
        a_min_y, a_max_y = self._span_y()
        b_min_x, b_max_x = other._span_x()
        b_min_y, b_max_y = other._span_y()
        return max(a_min_x, b_min_x) < min(a_max_x, b_max_x) and max(
            a_min_y, b_min_y
        ) < min(a_max_y, b_max_y)


def shape_bounds(
    position: Vector,
    size: Vector,
    origin: Vector = Vector(),
    outline: float = OUTLINE_THICKNESS,
) -> Rect:
    """World bounds of an outlined rectangle placed at ``position`` around ``origin``."""
    return Rect(
        position.x - origin.x - outline,
        position.y - origin.y - outline,
        size.x + 2 * outline,
        size.y + 2 * outline,
    )


class Clock:
    """Measures seconds elapsed since creation or the last restart."""

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._start = now()

    def elapsed(self) -> float:
        """Seconds since the clock was started or restarted."""
        return self._now() - self._start

    def restart(self) -> float:
        """Start counting again from zero and return the time elapsed before."""
        current = self._now()
        elapsed = current - self._start
        self._start = current
        return elapsed


@dataclass
class FrameAnimation:
    """Walks a texture rectangle across a horizontal sprite sheet."""

    step: int
    limit: int
    width: int
    height: int
    left: int = 0
    top: int = 0

    def advance(self) -> int:
        """Move to the next frame, wrapping to 0 once past ``limit``."""
        self.left += self.step
        if self.left > self.limit:
            self.left = 0
        return self.left

    def reset(self) -> None:
        """Go back to the first frame."""
        self.left = 0

    @property
    def frame(self) -> Rect:
        """The current texture rectangle."""
        return Rect(self.left, self.top, self.width, self.height)