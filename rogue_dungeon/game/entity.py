"""Positioned, drawable actors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..common.grid import Grid


@dataclass(eq=False)
class Entity:
    """A generic object on the map: the player, an NPC, an item.

    It is always drawn as a single glyph; ``color`` is a blessed color name
    like "white" or "yellow".
    """

    x: int
    y: int
    glyph: str
    color: str

    def move_by(self, dx: int, dy: int, grid: Grid) -> bool:
        """Try to move by delta. Returns True if successful.

        A blocked target leaves the entity where it was.
        """
        new_x = self.x + dx
        new_y = self.y + dy
        if grid.is_blocked(new_x, new_y):
            return False
        self.x = new_x
        self.y = new_y
        return True
