"""Room-and-corridor dungeon generator."""

from __future__ import annotations

import logging
import random

from ..common.grid import Grid
from ..common.rect import Rect
from .types import DungeonConfig

logger = logging.getLogger(__name__)


class DungeonGenerator:
    """Carves randomly placed, non-overlapping rooms into a solid grid.

    Each accepted room is joined to the previously accepted one by an
    L-shaped corridor between their centers. The player spawns at the
    center of the first room. All randomness comes from ``rng``, so the
    same seed always produces the same level.
    """

    def __init__(self, config: DungeonConfig, rng: random.Random) -> None:
        config.validate()
        self.config = config
        self.rng = rng

    def place_rooms(self, grid: Grid) -> list[Rect]:
        """Carve rooms and corridors into ``grid`` and return the accepted rooms."""
        cfg = self.config
        rng = self.rng
        rooms: list[Rect] = []

        for _ in range(cfg.max_rooms):
            w = rng.randint(cfg.room_min_size, cfg.room_max_size)
            h = rng.randint(cfg.room_min_size, cfg.room_max_size)
            # Keep the room clear of the last column and row
            x = rng.randrange(0, cfg.width - w)
            y = rng.randrange(0, cfg.height - h)

            new_room = Rect.from_size(x, y, w, h)
            if any(new_room.intersects_with(other) for other in rooms):
                continue

            grid.carve_rect(new_room)
            new_x, new_y = new_room.center()

            if rooms:
                prev_x, prev_y = rooms[-1].center()
                if rng.random() < 0.5:
                    grid.carve_h_corridor(prev_x, new_x, prev_y)
                    grid.carve_v_corridor(prev_y, new_y, new_x)
                else:
                    grid.carve_v_corridor(prev_y, new_y, prev_x)
                    grid.carve_h_corridor(prev_x, new_x, new_y)

            logger.debug(f"Room {len(rooms)} at {new_room}, center ({new_x}, {new_y})")
            rooms.append(new_room)

        return rooms

    def generate(self) -> tuple[Grid, int, int]:
        """Generate a level.

        Returns:
            Tuple of (grid, spawn_x, spawn_y).
        """
        cfg = self.config
        grid = Grid.new_solid(cfg.width, cfg.height)
        rooms = self.place_rooms(grid)

        # The first candidate can never overlap anything, so rooms is never empty
        spawn_x, spawn_y = rooms[0].center()

        logger.info(
            f"Generated {cfg.width}x{cfg.height} dungeon: "
            f"{len(rooms)}/{cfg.max_rooms} rooms, spawn at ({spawn_x}, {spawn_y})"
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Generated map:\n{grid.render_ascii()}")
        return grid, spawn_x, spawn_y


def generate(
    width: int,
    height: int,
    max_rooms: int,
    room_min_size: int,
    room_max_size: int,
    rng: random.Random,
) -> tuple[Grid, int, int]:
    """Generate a dungeon level.

    Raises:
        ValueError: If the parameters cannot fit a single room.
    """
    config = DungeonConfig(
        width=width,
        height=height,
        max_rooms=max_rooms,
        room_min_size=room_min_size,
        room_max_size=room_max_size,
    )
    return DungeonGenerator(config, rng).generate()
