"""State of a running level: the carved grid and the entities on it."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from ..common.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from ..common.grid import Grid
from ..mapgen import DungeonConfig, DungeonGenerator
from .entity import Entity
from .types import Intent

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    grid: Grid
    # The player is always the first entity
    entities: list[Entity] = field(default_factory=list)
    seed: int | None = None

    @property
    def player(self) -> Entity:
        return self.entities[0]

    def apply_intent(self, intent: Intent) -> bool:
        """Apply a player intent. Returns True if the player moved."""
        delta = intent.delta
        if delta is None:
            return False
        dx, dy = delta
        return self.player.move_by(dx, dy, self.grid)


def new_game(
    config: DungeonConfig, rng: random.Random, seed: int | None = None
) -> GameState:
    """Generate a level and place the player and an NPC on it."""
    grid, spawn_x, spawn_y = DungeonGenerator(config, rng).generate()

    player = Entity(spawn_x, spawn_y, "@", "white")
    npc = Entity(SCREEN_WIDTH // 2 - 5, SCREEN_HEIGHT // 2, "@", "yellow")
    logger.info(f"Player spawned at ({player.x}, {player.y})")

    return GameState(grid=grid, entities=[player, npc], seed=seed)
