"""The drone-hacking terminal and the answer banner of the mini-game."""

from __future__ import annotations

import re
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .geometry import Clock
from .story import Story
from .textutil import read_file

DRONE_STORY_STEP = 2
HACK_SCENE = 5
FIRST_SCRIPT_LINES = 9
LINE_BUFFER = 256
PAUSE_MARK = "^"
END_MARK = "%"

ERROR_TEXT = "Error"
PASSED_TEXT = "Passed"
BANNER_SECONDS = 1.5

_LINE = re.compile(r"[^\n]*\n|[^\n]+")


def near_drone(x: float, y: float, story: Story) -> bool:
    """True when the player stands by the drone at the story step that allows hacking."""
    return 1467 <= x <= 1575 and 2954 <= y <= 2988 and story.history == DRONE_STORY_STEP


def _read_chunks(text: str) -> Iterator[str]:
    """Lines as read through a fixed buffer: long lines come in several pieces."""
    piece = LINE_BUFFER - 1
    for line in _LINE.findall(text):
        for start in range(0, len(line), piece):
            yield line[start : start + piece]


@dataclass
class HackTerminal:
    """Two scripts revealed in turn: one as the player types, one as the reply."""

    script_one: str
    script_two: str
    last_scene: int = 0
    waiting: bool = False
    finished: bool = False
    _one: int = field(default=0, repr=False)
    _two: int = field(default=0, repr=False)
    _shown_one: list[str] = field(default_factory=list, repr=False)
    _shown_two: list[str] = field(default_factory=list, repr=False)

    @classmethod
    def from_text(cls, text: str) -> HackTerminal:
        """Build a terminal from a script: nine lines typed, the rest replied."""
        first: list[str] = []
        second: list[str] = []
        for count, line in enumerate(_read_chunks(text)):
            (first if count < FIRST_SCRIPT_LINES else second).append(line)
        return cls("".join(first), "".join(second))

    @classmethod
    def load(cls, path: str | Path) -> HackTerminal:
        """Build a terminal from the script file at ``path``."""
        return cls.from_text(read_file(path))

    @property
    def text_one(self) -> str:
        return "".join(self._shown_one)

    @property
    def text_two(self) -> str:
        return "".join(self._shown_two)

    def type_key(self) -> str:
        """Reveal the next character of the typed script.

        A pause mark shows as a space and hands over to the reply. Nothing
        happens while a reply is pending. Returns the typed text so far.
        """
        if self.waiting or self._one >= len(self.script_one):
            return self.text_one
        if self.script_one[self._one] == PAUSE_MARK:
            self.waiting = True
            self._shown_one.append(" ")
            self._one += 1
        if self._one < len(self.script_one):
            self._shown_one.append(self.script_one[self._one])
            self._one += 1
        return self.text_one

    def reply(self) -> bool:
        """Reveal the reply up to its next pause mark.

        Returns ``True`` once the end mark is reached, which finishes the hack.
        """
        if self.finished:
            return True
        if not self.waiting:
            return False
        script = self.script_two
        while self._two < len(script) and script[self._two] != PAUSE_MARK:
            char = script[self._two]
            self._shown_two.append(char)
            if char == END_MARK:
                self.finished = True
                return True
            self._two += 1
        if self._two < len(script) and script[self._two] == PAUSE_MARK:
            self._shown_two.append(" ")
            self._two += 1
        self.waiting = False
        return False


@dataclass
class AnswerBanner:
    """Shows "Error" or "Passed" for a moment after an answer."""

    state: int = 0
    now: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._clock = Clock(self.now)

    def show(self, passed: bool) -> None:
        """Display the verdict for an answer, starting now."""
        self.state = 2 if passed else 1
        self._clock.restart()

    def visible_text(self) -> str | None:
        """The banner text to draw now, or ``None`` once it has expired."""
        elapsed = self._clock.elapsed()
        if elapsed > BANNER_SECONDS:
            self.state = 0
            return None
        if elapsed < BANNER_SECONDS:
            if self.state == 1:
                return ERROR_TEXT
            if self.state == 2:
                return PASSED_TEXT
        return None