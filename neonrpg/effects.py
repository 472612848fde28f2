"""Consumable item effects and the sugar countdown."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .geometry import Clock
from .inventory import Inventory, Item

SUGAR_DURATION = 30
TICK_SECONDS = 1.0


@dataclass
class Effects:
    """Which item effects are running and how long the sugar one lasts."""

    sugar_active: bool = False
    syringe_active: bool = False
    seconds_left: int = SUGAR_DURATION
    now: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._clock = Clock(self.now)
        self._text = "0"

    def use_selected(self, inventory: Inventory) -> Item | None:
        """Consume the selected item if its effect is not already running.

        Returns the item consumed, or ``None``.
        """
        slot = inventory.selected
        used: Item | None = None
        if slot.item == Item.SUGAR and slot.count >= 1 and not self.sugar_active:
            slot.count -= 1
            self.sugar_active = True
            used = Item.SUGAR
        if slot.item == Item.SYRINGE and slot.count >= 1 and not self.syringe_active:
            slot.count -= 1
            self.syringe_active = True
            used = Item.SYRINGE
        inventory.clear_empty()
        return used

    def tick(self) -> int:
        """Count the sugar effect down once a second has passed.

        The effect ends when the countdown reaches zero. Returns the seconds left.
        """
        if not self.sugar_active:
            return self.seconds_left
        if self._clock.elapsed() > TICK_SECONDS:
            self.seconds_left -= 1
            self._text = str(self.seconds_left)
            self._clock.restart()
            if self.seconds_left == 0:
                self.sugar_active = False
                self.seconds_left = SUGAR_DURATION
        return self.seconds_left

    def countdown_text(self) -> str:
        """The countdown as last displayed."""
        return self._text