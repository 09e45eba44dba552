"""Tests for tile values and tile rendering."""

from __future__ import annotations

import dataclasses

import pytest

from rogue_dungeon.common.constants import COLOR_DARK_GROUND, COLOR_DARK_WALL
from rogue_dungeon.common.tiles import EMPTY, WALL, Tile, background_color, render_tile


class TestTile:
    def test_wall_blocks_everything(self) -> None:
        assert WALL.blocked
        assert WALL.block_sight

    def test_empty_blocks_nothing(self) -> None:
        assert not EMPTY.blocked
        assert not EMPTY.block_sight

    def test_value_semantics(self) -> None:
        assert Tile(blocked=True, block_sight=True) == WALL
        assert WALL != EMPTY

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            WALL.blocked = False  # type: ignore[misc]


class TestRendering:
    def test_background_color(self) -> None:
        assert background_color(WALL) == COLOR_DARK_WALL
        assert background_color(EMPTY) == COLOR_DARK_GROUND

    def test_render_tile_contains_char(self, term) -> None:
        assert "@" in render_tile(EMPTY, term, "@")
        assert " " in render_tile(WALL, term)
