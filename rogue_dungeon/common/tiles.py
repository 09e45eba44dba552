"""Tile definitions with gameplay and visual properties."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import COLOR_DARK_GROUND, COLOR_DARK_WALL

if TYPE_CHECKING:
    from blessed import Terminal


@dataclass(frozen=True)
class Tile:
    """A single map cell."""

    blocked: bool
    block_sight: bool


WALL = Tile(blocked=True, block_sight=True)
EMPTY = Tile(blocked=False, block_sight=False)


def background_color(tile: Tile) -> tuple[int, int, int]:
    """Get the background color used to draw a tile."""
    if tile.block_sight:
        return COLOR_DARK_WALL
    return COLOR_DARK_GROUND


def render_tile(tile: Tile, term: "Terminal", char: str = " ") -> str:
    """Render a character on the tile's background color using blessed Terminal."""
    r, g, b = background_color(tile)
    return str(term.on_color_rgb(r, g, b)(char))
