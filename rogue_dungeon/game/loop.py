"""Turn-based game loop."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .types import Intent

if TYPE_CHECKING:
    from .adapter import DisplayAdapter
    from .state import GameState

logger = logging.getLogger(__name__)


def run(state: GameState, adapter: DisplayAdapter) -> int:
    """Render, wait for one intent, apply it; repeat until an exit intent.

    Returns:
        Number of intents processed, not counting the exit.
    """
    turns = 0
    while True:
        adapter.render(state.grid, state.entities)
        intent = adapter.poll_intent()
        if intent is Intent.EXIT:
            logger.info(f"Exit requested after {turns} turns")
            return turns
        state.apply_intent(intent)
        turns += 1
