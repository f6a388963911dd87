"""Random strategy: Pick random alien columns and shoot them down."""

import random
from typing import TYPE_CHECKING, Iterator

from ...constants import ALIEN_SPACING_X
from ..controls import InputSnapshot
from .base_strategy import IDLE, BaseStrategy

if TYPE_CHECKING:
    from ..game_state import Enemy, GameState


class RandomStrategy(BaseStrategy):
    """
    Player uses weighted random selection to pick columns based on distance.

    Takes the 4 closest columns with living aliens and applies distance-based
    weights for selection, creating a balanced mix of efficiency and
    unpredictability.
    """
    _MAX_CANDIDATE_COLUMNS = 4
    _FIRE_INTERVAL = 8  # Frames between consecutive shots at one column

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def set_rng(self, rng: random.Random) -> None:
        self._rng = rng

    def generate_inputs(self, game_state: "GameState") -> Iterator[InputSnapshot]:
        """
        Generate inputs that walk the player under a chosen column and fire.

        Weights by distance in columns:
        - Distance 0 (already underneath): weight 10
        - Distance 1-3: weight 100 (highest priority)
        - Distance 4+: weight 1 (lowest priority)

        Args:
            game_state: The current game state with living aliens

        Yields:
            InputSnapshot objects, one per frame
        """
        while True:
            if game_state.alive_count() == 0:
                yield IDLE
                continue
            candidate_columns = self._candidate_columns(game_state)
            target_x = self._choose_target_column(game_state, candidate_columns)
            yield from self._move_under(game_state, target_x)
            target_enemy = self._lowest_enemy_in_column(game_state, target_x)
            if target_enemy is None:
                continue
            yield from self._shoot_column(shots=target_enemy.hit_points)

    def _candidate_columns(self, game_state: "GameState") -> list[float]:
        columns_with_enemies = {enemy.x for _, enemy in game_state.alive_enemies()}
        player_x = game_state.player.x
        columns_by_distance = sorted(columns_with_enemies, key=lambda col: abs(col - player_x))
        return columns_by_distance[: self._MAX_CANDIDATE_COLUMNS]

    def _choose_target_column(
        self, game_state: "GameState", candidate_columns: list[float]
    ) -> float:
        player_x = game_state.player.x
        weights = [
            self._distance_weight(round(abs(col - player_x) / ALIEN_SPACING_X))
            for col in candidate_columns
        ]
        return self._rng.choices(candidate_columns, weights=weights, k=1)[0]

    def _distance_weight(self, distance: int) -> int:
        if distance == 0:
            return 10
        if 1 <= distance <= 3:
            return 100
        return 1

    def _move_under(self, game_state: "GameState", target_x: float) -> Iterator[InputSnapshot]:
        low, high = self._player_limits(game_state)
        target_x = min(max(target_x, low), high)
        while abs(game_state.player.x - target_x) > 1:
            direction = 1 if target_x > game_state.player.x else -1
            yield InputSnapshot(move_direction=direction)

    def _lowest_enemy_in_column(self, game_state: "GameState", target_x: float) -> "Enemy | None":
        enemies_in_column = [
            enemy for _, enemy in game_state.alive_enemies() if enemy.x == target_x
        ]
        if not enemies_in_column:
            return None
        return min(enemies_in_column, key=lambda enemy: enemy.y)

    def _shoot_column(self, shots: int) -> Iterator[InputSnapshot]:
        for _ in range(shots):
            yield InputSnapshot(fire=True)
            for _ in range(self._FIRE_INTERVAL - 1):
                yield IDLE
