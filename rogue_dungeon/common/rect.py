"""Axis-aligned rectangles describing rooms."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A rectangle on the map, used to characterise a room.

    (x1, y1) is the top-left corner, (x2, y2) the bottom-right one.
    """

    x1: int
    y1: int
    x2: int
    y2: int

    def __post_init__(self) -> None:
        if self.x1 >= self.x2 or self.y1 >= self.y2:
            raise ValueError(
                f"Degenerate rect ({self.x1}, {self.y1})-({self.x2}, {self.y2})"
            )

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Rect:
        """Build a rect from its top-left corner and size."""
        return cls(x, y, x + w, y + h)

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def height(self) -> int:
        return self.y2 - self.y1

    def center(self) -> tuple[int, int]:
        """Get the center point, truncated to whole tiles."""
        return (self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2

    def intersects_with(self, other: Rect) -> bool:
        """Check if this rectangle overlaps or touches another one."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )
