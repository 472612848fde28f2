"""Story progress flags and the dialogue lines shown on screen."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Vector

LINE_GAP = 10.0
TEXT_SHIFT_X = -30.0
TEXT_SHIFT_Y = 60.0


@dataclass
class StoryLine:
    """One line of dialogue and its offset from the view centre."""

    text: str
    position: Vector


@dataclass
class Story:
    """Progress through the story and the dialogue currently displayed."""

    history: int = 0
    first_factory: int = 0
    exit_house: int = 0
    show_prompt: bool = False
    lines: list[StoryLine] = field(default_factory=list)

    def add_line(self, text: str, position: Vector) -> StoryLine:
        """Append a dialogue line below the ones already shown."""
        line = StoryLine(text, position)
        self.lines.append(line)
        return line

    def clear(self) -> None:
        """Remove every displayed line."""
        self.lines.clear()

    def layout(self, center: Vector, gui_offset: Vector) -> list[tuple[str, Vector]]:
        """Screen position of each line, stacking successive lines downwards."""
        placed = []
        for index, line in enumerate(self.lines):
            gap = index * LINE_GAP
            placed.append(
                (
                    line.text,
                    Vector(
                        center.x + (line.position.x + TEXT_SHIFT_X) + gui_offset.x,
                        center.y - ((line.position.y + TEXT_SHIFT_Y) - gap) + gui_offset.y,
                    ),
                )
            )
        return placed