"""Display/input adapter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..common.grid import Grid
    from .entity import Entity
    from .types import Intent


class DisplayAdapter(ABC):
    """Base class for front ends that draw the level and report player input."""

    @abstractmethod
    def render(self, grid: Grid, entities: Sequence[Entity]) -> None:
        """Draw the grid and the entities on top of it.

        Implementations must treat both as read-only.
        """
        pass

    @abstractmethod
    def poll_intent(self) -> Intent:
        """Wait for the next player input and translate it to an intent."""
        pass
