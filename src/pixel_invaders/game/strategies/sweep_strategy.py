"""Sweep strategy: Patrol the playfield edge to edge, firing at a fixed cadence."""

from typing import TYPE_CHECKING, Iterator

from ..controls import InputSnapshot
from .base_strategy import BaseStrategy

if TYPE_CHECKING:
    from ..game_state import GameState


class SweepStrategy(BaseStrategy):
    """Player sweeps left and right, turning around at the margins."""

    def __init__(self, fire_interval: int = 6) -> None:
        if fire_interval <= 0:
            raise ValueError("Fire interval must be positive")
        self.fire_interval = fire_interval

    def generate_inputs(self, game_state: "GameState") -> Iterator[InputSnapshot]:
        direction = 1
        frame = 0
        while True:
            low, high = self._player_limits(game_state)
            player_x = game_state.player.x
            if player_x >= high:
                direction = -1
            elif player_x <= low:
                direction = 1
            fire = frame % self.fire_interval == 0 and game_state.alive_count() > 0
            yield InputSnapshot(move_direction=direction, fire=fire)
            frame += 1
