"""The four-slot quick inventory shown in the corner of the screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

SLOT_COUNT = 4
FIRST_POSITION = 1
LAST_POSITION = SLOT_COUNT


class Item(IntEnum):
    """Item kinds that can occupy an inventory slot."""

    NONE = 0
    SYRINGE = 1
    SUGAR = 2
    KATANA = 3
    PC = 4


@dataclass
class Slot:
    """One inventory slot: what it holds and how many."""

    item: Item = Item.NONE
    count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.item == Item.NONE


def _empty_slots() -> list[Slot]:
    return [Slot() for _ in range(SLOT_COUNT)]


@dataclass
class Inventory:
    """Four stacked item slots and the currently selected one (1 to 4)."""

    slots: list[Slot] = field(default_factory=_empty_slots)
    position: int = FIRST_POSITION

    @property
    def selected(self) -> Slot:
        """The slot under the selection square."""
        return self.slots[self.position - 1]

    def add_item(self, item: int) -> bool:
        """Stack ``item`` onto the first slot already holding it.

        Returns ``False`` when no slot holds that item.
        """
        wanted = Item(item)
        for slot in self.slots:
            if slot.item == wanted:
                slot.count += 1
                return True
        return False

    def load(self, item: int) -> bool:
        """Put one ``item`` into the inventory.

        An item code of 0 stands for the PC. The item is stacked when a slot
        already holds it, otherwise placed in the first empty slot. Returns
        ``False`` when every slot is taken by something else.
        """
        kind = Item(item)
        if kind == Item.NONE:
            kind = Item.PC
        if self.add_item(kind):
            return True
        for slot in self.slots:
            if slot.is_empty:
                slot.item = kind
                slot.count += 1
                return True
        return False

    def select_left(self) -> int:
        """Move the selection one slot left, stopping at the first."""
        if self.position > FIRST_POSITION:
            self.position -= 1
        return self.position

    def select_right(self) -> int:
        """Move the selection one slot right, stopping at the last."""
        if self.position < LAST_POSITION:
            self.position += 1
        return self.position

    def clear_empty(self) -> None:
        """Forget the item of every slot whose count fell to zero."""
        for slot in self.slots:
            if slot.count == 0:
                slot.item = Item.NONE

    def counts(self) -> tuple[int, ...]:
        """The count of each slot, left to right."""
        return tuple(slot.count for slot in self.slots)