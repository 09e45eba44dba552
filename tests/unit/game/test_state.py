"""Tests for game state setup and intent handling."""

from __future__ import annotations

import random

import pytest

from rogue_dungeon.common.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from rogue_dungeon.common.grid import Grid
from rogue_dungeon.game.entity import Entity
from rogue_dungeon.game.state import GameState, new_game
from rogue_dungeon.game.types import Intent
from rogue_dungeon.mapgen import DungeonConfig, generate


class TestIntent:
    def test_movement_deltas(self) -> None:
        assert Intent.MOVE_UP.delta == (0, -1)
        assert Intent.MOVE_DOWN.delta == (0, 1)
        assert Intent.MOVE_LEFT.delta == (-1, 0)
        assert Intent.MOVE_RIGHT.delta == (1, 0)

    def test_non_movement(self) -> None:
        assert Intent.EXIT.delta is None
        assert Intent.NONE.delta is None


class TestNewGame:
    def test_player_at_spawn(self) -> None:
        config = DungeonConfig()
        state = new_game(config, random.Random(17), seed=17)
        grid, spawn_x, spawn_y = generate(80, 45, 30, 6, 10, random.Random(17))
        assert state.grid == grid
        assert (state.player.x, state.player.y) == (spawn_x, spawn_y)
        assert state.player.glyph == "@"
        assert state.player.color == "white"
        assert state.seed == 17

    def test_npc(self) -> None:
        state = new_game(DungeonConfig(), random.Random(0))
        npc = state.entities[1]
        assert (npc.x, npc.y) == (SCREEN_WIDTH // 2 - 5, SCREEN_HEIGHT // 2)
        assert npc.color == "yellow"


class TestApplyIntent:
    @pytest.fixture
    def state(self, small_grid: Grid) -> GameState:
        return GameState(grid=small_grid, entities=[Entity(2, 2, "@", "white")])

    def test_move(self, state: GameState) -> None:
        assert state.apply_intent(Intent.MOVE_RIGHT)
        assert state.apply_intent(Intent.MOVE_DOWN)
        assert (state.player.x, state.player.y) == (3, 3)

    def test_blocked(self, state: GameState) -> None:
        assert not state.apply_intent(Intent.MOVE_UP)
        assert not state.apply_intent(Intent.MOVE_LEFT)
        assert (state.player.x, state.player.y) == (2, 2)

    def test_non_movement_intents(self, state: GameState) -> None:
        assert not state.apply_intent(Intent.NONE)
        assert not state.apply_intent(Intent.EXIT)
        assert (state.player.x, state.player.y) == (2, 2)

    def test_grid_untouched(self, state: GameState, small_grid: Grid) -> None:
        before = small_grid.render_ascii()
        for intent in [Intent.MOVE_RIGHT, Intent.MOVE_UP, Intent.MOVE_DOWN]:
            state.apply_intent(intent)
        assert small_grid.render_ascii() == before
