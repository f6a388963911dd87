"""Base strategy interface for autopilot input sources."""

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator

from ...constants import PLAYFIELD_MARGIN
from ..controls import InputSnapshot
from ..sprites import PLAYER

if TYPE_CHECKING:
    from ..game_state import GameState

IDLE = InputSnapshot()


class BaseStrategy(ABC):
    """Abstract base class for strategies that steer the player."""

    def set_rng(self, rng: random.Random) -> None:
        """Inject RNG source for deterministic simulations."""
        del rng

    @abstractmethod
    def generate_inputs(self, game_state: "GameState") -> Iterator[InputSnapshot]:
        """
        Generate one input snapshot per frame, indefinitely.

        Args:
            game_state: The live game state, read between frames

        Yields:
            InputSnapshot objects consumed by successive simulation steps
        """
        raise NotImplementedError

    def _player_limits(self, game_state: "GameState") -> tuple[float, float]:
        """Leftmost and rightmost x the player can occupy."""
        player_width = game_state.sprites[PLAYER].width
        return PLAYFIELD_MARGIN, game_state.width - PLAYFIELD_MARGIN - player_width
