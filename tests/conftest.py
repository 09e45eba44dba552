"""Shared fixtures."""

from __future__ import annotations

import pytest
from blessed import Terminal

from rogue_dungeon.common.grid import Grid


@pytest.fixture(scope="session")
def term() -> Terminal:
    """A styling terminal that does not need a tty."""
    return Terminal(kind="xterm-256color", force_styling=True)


@pytest.fixture
def small_grid() -> Grid:
    """10x10 grid with one carved 4x4 room spanning (2, 2)-(5, 5)."""
    grid = Grid.new_solid(10, 10)
    for y in range(2, 6):
        grid.carve_h_corridor(2, 5, y)
    return grid
