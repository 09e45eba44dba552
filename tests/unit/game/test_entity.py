"""Tests for entity movement and collision."""

from __future__ import annotations

import pytest

from rogue_dungeon.common.grid import Grid
from rogue_dungeon.game.entity import Entity


@pytest.fixture
def grid() -> Grid:
    grid = Grid.new_solid(10, 10)
    # Floor at (1..4, 5), wall at (5, 5), floor at (5..6, 6)
    grid.carve_h_corridor(1, 4, 5)
    grid.carve_h_corridor(5, 6, 6)
    return grid


class TestMoveBy:
    def test_blocked_by_wall(self, grid: Grid) -> None:
        entity = Entity(4, 5, "@", "white")
        assert entity.move_by(1, 0, grid) is False
        assert (entity.x, entity.y) == (4, 5)

    def test_move_onto_floor(self, grid: Grid) -> None:
        entity = Entity(5, 6, "@", "white")
        assert entity.move_by(1, 0, grid) is True
        assert (entity.x, entity.y) == (6, 6)

    def test_move_back_and_forth(self, grid: Grid) -> None:
        entity = Entity(2, 5, "@", "white")
        assert entity.move_by(-1, 0, grid)
        assert entity.move_by(1, 0, grid)
        assert (entity.x, entity.y) == (2, 5)

    def test_all_or_nothing(self, grid: Grid) -> None:
        # Diagonal from (4, 5) to (5, 6) lands on floor, so it succeeds as one step
        entity = Entity(4, 5, "@", "white")
        assert entity.move_by(1, 1, grid)
        assert (entity.x, entity.y) == (5, 6)
        # Any blocked target leaves both coordinates untouched
        assert not entity.move_by(0, -1, grid)
        assert (entity.x, entity.y) == (5, 6)

    def test_repeated_blocked_moves(self, grid: Grid) -> None:
        entity = Entity(1, 5, "@", "white")
        for _ in range(3):
            entity.move_by(0, -1, grid)
        assert (entity.x, entity.y) == (1, 5)

    def test_off_grid_is_an_error(self) -> None:
        grid = Grid.new_solid(3, 3)
        grid.carve_h_corridor(0, 2, 1)
        entity = Entity(0, 1, "@", "white")
        with pytest.raises(IndexError):
            entity.move_by(-1, 0, grid)
        assert (entity.x, entity.y) == (0, 1)
