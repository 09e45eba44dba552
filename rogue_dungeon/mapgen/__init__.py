"""Procedural dungeon generation.

Example usage:

    import random

    from rogue_dungeon.mapgen import generate

    grid, spawn_x, spawn_y = generate(80, 45, 30, 6, 10, random.Random(42))
"""

from .dungeon import DungeonGenerator, generate
from .types import DungeonConfig

__all__ = [
    "DungeonConfig",
    "DungeonGenerator",
    "generate",
]
