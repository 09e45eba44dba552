"""Fixed-size tile grid that rooms and corridors are carved into."""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from .rect import Rect
from .tiles import EMPTY, WALL, Tile

logger = logging.getLogger(__name__)


class Grid:
    """Map of tiles stored as flat per-flag buffers.

    Cell (x, y) lives at index ``y * width + x``. Every accessor checks bounds
    and raises IndexError for coordinates outside the map; callers are
    expected to stay inside it.
    """

    __slots__ = ("width", "height", "_blocked", "_block_sight")

    def __init__(self, width: int, height: int, fill: Tile = WALL) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        size = width * height
        self._blocked: npt.NDArray[np.bool_] = np.full(size, fill.blocked, dtype=np.bool_)
        self._block_sight: npt.NDArray[np.bool_] = np.full(
            size, fill.block_sight, dtype=np.bool_
        )

    @classmethod
    def new_solid(cls, width: int, height: int) -> Grid:
        """Create a grid where every cell is a wall."""
        return cls(width, height, WALL)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self._blocked, other._blocked)
            and np.array_equal(self._block_sight, other._block_sight)
        )

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, floor={self.floor_count()})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Coordinates out of bounds: ({x}, {y}) for grid {self.width}x{self.height}"
            )
        return y * self.width + x

    def is_blocked(self, x: int, y: int) -> bool:
        """Check if the cell at (x, y) blocks movement."""
        return bool(self._blocked[self._index(x, y)])

    def blocks_sight(self, x: int, y: int) -> bool:
        """Check if the cell at (x, y) blocks sight."""
        return bool(self._block_sight[self._index(x, y)])

    def tile(self, x: int, y: int) -> Tile:
        """Get the tile value at (x, y)."""
        i = self._index(x, y)
        return Tile(blocked=bool(self._blocked[i]), block_sight=bool(self._block_sight[i]))

    def _set_empty(self, start: int, stop: int, step: int = 1) -> None:
        self._blocked[start:stop:step] = EMPTY.blocked
        self._block_sight[start:stop:step] = EMPTY.block_sight

    def carve_rect(self, rect: Rect) -> None:
        """Turn the interior of a rect into floor, leaving its border as walls."""
        # x2/y2 themselves are never written, so a rect may end exactly on the edge
        self._index(rect.x1, rect.y1)
        if rect.x2 > self.width or rect.y2 > self.height:
            raise IndexError(f"{rect} does not fit grid {self.width}x{self.height}")
        for y in range(rect.y1 + 1, rect.y2):
            row = y * self.width
            self._set_empty(row + rect.x1 + 1, row + rect.x2)

    def carve_h_corridor(self, x1: int, x2: int, y: int) -> None:
        """Carve a horizontal corridor between x1 and x2 inclusive."""
        start = self._index(min(x1, x2), y)
        stop = self._index(max(x1, x2), y) + 1
        self._set_empty(start, stop)

    def carve_v_corridor(self, y1: int, y2: int, x: int) -> None:
        """Carve a vertical corridor between y1 and y2 inclusive."""
        start = self._index(x, min(y1, y2))
        stop = self._index(x, max(y1, y2)) + 1
        self._set_empty(start, stop, self.width)

    def blocked_view(self) -> npt.NDArray[np.bool_]:
        """Read-only (height, width) view of the blocked flags."""
        view = self._blocked.reshape(self.height, self.width).view()
        view.flags.writeable = False
        return view

    def block_sight_view(self) -> npt.NDArray[np.bool_]:
        """Read-only (height, width) view of the sight-blocking flags."""
        view = self._block_sight.reshape(self.height, self.width).view()
        view.flags.writeable = False
        return view

    def floor_count(self) -> int:
        return int(np.count_nonzero(~self._blocked))

    def render_ascii(self) -> str:
        """Render the grid as text: '#' for walls, '.' for floor."""
        rows = np.where(self.blocked_view(), "#", ".")
        return "\n".join("".join(row) for row in rows)
