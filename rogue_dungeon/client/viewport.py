"""Viewport management for rendering maps larger than the terminal."""

from dataclasses import dataclass


@dataclass
class Viewport:
    """Manages camera position for viewport rendering."""

    width: int
    height: int

    def calculate_camera(
        self, player_x: int, player_y: int, map_width: int, map_height: int
    ) -> tuple[int, int]:
        """
        Calculate camera position to keep the player in view.

        Returns (cam_x, cam_y) - the top-left corner of the viewport in map coordinates.
        Maps that fit the viewport are pinned to the top-left corner.
        """
        if map_width <= self.width:
            cam_x = 0
        else:
            cam_x = max(0, min(player_x - self.width // 2, map_width - self.width))

        if map_height <= self.height:
            cam_y = 0
        else:
            cam_y = max(0, min(player_y - self.height // 2, map_height - self.height))

        return cam_x, cam_y

    def contains(self, cam_x: int, cam_y: int, x: int, y: int) -> bool:
        """Check if map position (x, y) is visible with the camera at (cam_x, cam_y)."""
        return cam_x <= x < cam_x + self.width and cam_y <= y < cam_y + self.height
