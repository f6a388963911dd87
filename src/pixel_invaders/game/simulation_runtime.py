"""Simulation runtime helpers used by Animator."""

import hashlib
import json
import random

from .game_state import GameState
from .render_context import RenderContext
from .simulation import Simulation
from .strategies.base_strategy import BaseStrategy


def derive_simulation_seed(
    strategy: BaseStrategy,
    fps: int,
    max_frames: int,
) -> int:
    """Create a stable seed based on simulation inputs."""
    payload = {
        "fps": fps,
        "max_frames": max_frames,
        "strategy": strategy.__class__.__name__,
    }
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    digest = hashlib.sha256(encoded).digest()
    return int.from_bytes(digest[:8], "big")


def create_seeded_simulation(
    strategy: BaseStrategy,
    seed: int,
    render_context: RenderContext,
) -> Simulation:
    """Create a simulation with a deterministic RNG stream for the strategy."""
    master_rng = random.Random(seed)
    strategy.set_rng(random.Random(master_rng.getrandbits(64)))
    return Simulation(GameState(), render_context=render_context)
