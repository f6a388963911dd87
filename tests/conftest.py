"""Shared fixtures for the simulation tests."""

import pytest

from pixel_invaders.game.game_state import GameState
from pixel_invaders.game.simulation import Simulation
from pixel_invaders.game.sprites import SpriteStore


@pytest.fixture
def sprites() -> SpriteStore:
    return SpriteStore.default()


@pytest.fixture
def default_game_state(sprites: SpriteStore) -> GameState:
    """Full 5x11 alien grid."""
    return GameState(sprites)


@pytest.fixture
def single_alien_state(sprites: SpriteStore) -> GameState:
    """One alien at hit-points 1."""
    return GameState(sprites, rows=1, columns=1)


@pytest.fixture
def simulation(default_game_state: GameState) -> Simulation:
    return Simulation(default_game_state)
