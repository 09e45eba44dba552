"""Type definitions for dungeon generation."""

from __future__ import annotations

from dataclasses import dataclass

from ..common.constants import (
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_ROOMS,
    ROOM_MAX_SIZE,
    ROOM_MIN_SIZE,
)


@dataclass(frozen=True)
class DungeonConfig:
    """Parameters for a single generation pass."""

    width: int = MAP_WIDTH
    height: int = MAP_HEIGHT
    max_rooms: int = MAX_ROOMS
    room_min_size: int = ROOM_MIN_SIZE
    room_max_size: int = ROOM_MAX_SIZE

    def validate(self) -> None:
        """Raise ValueError if no room could ever be placed with these parameters."""
        if self.max_rooms < 1:
            raise ValueError(f"max_rooms must be at least 1, got {self.max_rooms}")
        # A room needs an interior cell for its center to be floor
        if self.room_min_size < 2:
            raise ValueError(
                f"room_min_size must be at least 2, got {self.room_min_size}"
            )
        if self.room_min_size > self.room_max_size:
            raise ValueError(
                f"room_min_size ({self.room_min_size}) is larger than "
                f"room_max_size ({self.room_max_size})"
            )
        if self.room_max_size >= self.width or self.room_max_size >= self.height:
            raise ValueError(
                f"room_max_size ({self.room_max_size}) does not fit a "
                f"{self.width}x{self.height} map"
            )
