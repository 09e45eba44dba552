"""Terminal UI rendering with blessed."""

from __future__ import annotations

from collections.abc import Sequence

from blessed import Terminal

from ..common.constants import STATUS_LINES
from ..common.grid import Grid
from ..common.tiles import render_tile
from ..game.adapter import DisplayAdapter
from ..game.entity import Entity
from ..game.types import Intent
from .input_handler import get_intent
from .log_buffer import LogBuffer
from .viewport import Viewport


class TerminalUI(DisplayAdapter):
    def __init__(
        self,
        terminal: Terminal,
        log_buffer: LogBuffer | None = None,
        seed: int | None = None,
    ) -> None:
        self.term = terminal
        self.log_buffer = log_buffer
        self.seed = seed

    def _viewport(self) -> Viewport:
        return Viewport(
            max(1, self.term.width), max(1, self.term.height - STATUS_LINES)
        )

    def render(self, grid: Grid, entities: Sequence[Entity]) -> None:
        """Render the level to the terminal."""
        print("\n".join(self.render_lines(grid, entities)), end="", flush=True)

    def render_lines(self, grid: Grid, entities: Sequence[Entity]) -> list[str]:
        """Build the screen contents, one string per terminal line."""
        output: list[str] = []

        viewport = self._viewport()
        player = entities[0] if entities else None
        if player is not None:
            cam_x, cam_y = viewport.calculate_camera(
                player.x, player.y, grid.width, grid.height
            )
        else:
            cam_x, cam_y = 0, 0

        # Earlier entities are drawn on top, so the player wins shared cells
        by_position: dict[tuple[int, int], Entity] = {}
        for entity in reversed(entities):
            if not viewport.contains(cam_x, cam_y, entity.x, entity.y):
                continue
            by_position[(entity.x, entity.y)] = entity

        for y in range(cam_y, min(cam_y + viewport.height, grid.height)):
            row = []
            for x in range(cam_x, min(cam_x + viewport.width, grid.width)):
                tile = grid.tile(x, y)
                entity = by_position.get((x, y))
                if entity is None:
                    row.append(render_tile(tile, self.term))
                    continue
                # Foreground first; the tile's background wraps the glyph
                color = getattr(self.term, entity.color, "")
                row.append(f"{color}{render_tile(tile, self.term, entity.glyph)}")
            output.append("".join(row))

        output.extend(self._status_lines(player))
        # Clear on the first row itself so the frame is no taller than the terminal
        output[0] = self.term.home + self.term.clear + output[0]
        return output

    def _status_lines(self, player: Entity | None) -> list[str]:
        status = "Controls: WASD/HJKL/Arrows=Move, Q/Esc=Quit"
        if player is not None:
            status = f"Position: ({player.x}, {player.y}) | {status}"
        if self.seed is not None:
            status += f" | Seed: {self.seed}"
        lines = [status[: self.term.width]]

        if self.log_buffer:
            for entry in self.log_buffer.get_entries(STATUS_LINES - 1):
                lines.append(f"{entry.name}: {entry.message}"[: self.term.width])
        return lines

    def poll_intent(self) -> Intent:
        """Block until a key is pressed and map it to an intent."""
        key = self.term.inkey()
        return get_intent(key)

    def cleanup(self) -> None:
        """Restore terminal state."""
        print(self.term.normal + self.term.clear, end="")
