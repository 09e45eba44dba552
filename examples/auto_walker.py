#!/usr/bin/env python3
"""Auto walker example - generates a level and walks the player to the last room.

Usage:
    python examples/auto_walker.py --seed 42

The walker plugs into the regular game loop as a display adapter: it plans an
A* path from the spawn to the center of the room farthest away and replays it
as movement intents, then prints the map with the walked path marked.
"""

import argparse
import logging
import random
from collections.abc import Sequence

from rogue_dungeon.common.grid import Grid
from rogue_dungeon.common.pathfinding import find_path
from rogue_dungeon.game.adapter import DisplayAdapter
from rogue_dungeon.game.entity import Entity
from rogue_dungeon.game.loop import run
from rogue_dungeon.game.state import new_game
from rogue_dungeon.game.types import Intent
from rogue_dungeon.mapgen import DungeonConfig, DungeonGenerator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("auto_walker")

_INTENTS = {
    (0, -1): Intent.MOVE_UP,
    (0, 1): Intent.MOVE_DOWN,
    (-1, 0): Intent.MOVE_LEFT,
    (1, 0): Intent.MOVE_RIGHT,
}


class ScriptedWalker(DisplayAdapter):
    """Replays a path as intents and records where the player has been."""

    def __init__(self, path: list[tuple[int, int]]) -> None:
        self._intents = [
            _INTENTS[(b[0] - a[0], b[1] - a[1])] for a, b in zip(path, path[1:])
        ]
        self.visited: list[tuple[int, int]] = []

    def render(self, grid: Grid, entities: Sequence[Entity]) -> None:
        player = entities[0]
        self.visited.append((player.x, player.y))

    def poll_intent(self) -> Intent:
        if not self._intents:
            return Intent.EXIT
        return self._intents.pop(0)


def main() -> None:
    parser = argparse.ArgumentParser(description="Walk the player to the farthest room")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    config = DungeonConfig()

    # Replay the same seed once to learn the room layout
    rooms = DungeonGenerator(config, random.Random(args.seed)).place_rooms(
        Grid.new_solid(config.width, config.height)
    )
    state = new_game(config, random.Random(args.seed), seed=args.seed)
    start = (state.player.x, state.player.y)
    goal = max(
        (room.center() for room in rooms),
        key=lambda c: abs(c[0] - start[0]) + abs(c[1] - start[1]),
    )

    path = find_path(start, goal, state.grid)
    if path is None:
        logger.error(f"No path from {start} to {goal}")
        return

    walker = ScriptedWalker(path)
    turns = run(state, walker)
    logger.info(f"Walked {turns} steps from {start} to ({state.player.x}, {state.player.y})")

    lines = [list(row) for row in state.grid.render_ascii().split("\n")]
    for x, y in walker.visited:
        lines[y][x] = "*"
    lines[state.player.y][state.player.x] = "@"
    print("\n".join("".join(row) for row in lines))


if __name__ == "__main__":
    main()
