"""Type definitions shared by the game loop and display adapters."""

from __future__ import annotations

from enum import Enum


class Intent(Enum):
    """Player intents produced by an input adapter."""

    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    EXIT = "exit"
    NONE = "none"

    @property
    def delta(self) -> tuple[int, int] | None:
        """Movement (dx, dy) for this intent, or None if it does not move."""
        return _DELTAS.get(self)


_DELTAS: dict[Intent, tuple[int, int]] = {
    Intent.MOVE_UP: (0, -1),
    Intent.MOVE_DOWN: (0, 1),
    Intent.MOVE_LEFT: (-1, 0),
    Intent.MOVE_RIGHT: (1, 0),
}
