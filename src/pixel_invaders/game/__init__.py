"""Arcade shooter simulation, collision and rasterization engine."""

from .animation import SpriteAnimation
from .animator import Animator
from .collision import overlap
from .controls import InputLatch, InputSnapshot, Key
from .frame_buffer import FrameBuffer, pack_rgba
from .game_state import Enemy, EnemyState, GameState, Player, Projectile, ProjectilePool
from .raster_animation import generate_raster_frames
from .render_context import RenderContext, create_render_context
from .renderer import Renderer
from .scene import draw_scene
from .simulation import Simulation, StepReport
from .sprites import MissingAssetError, Sprite, SpriteDataError, SpriteStore
from .stats import SessionStats
from .strategies.base_strategy import BaseStrategy
from .strategies.random_strategy import RandomStrategy
from .strategies.sweep_strategy import SweepStrategy

__all__ = [
    "Animator",
    "BaseStrategy",
    "create_render_context",
    "draw_scene",
    "Enemy",
    "EnemyState",
    "FrameBuffer",
    "GameState",
    "generate_raster_frames",
    "InputLatch",
    "InputSnapshot",
    "Key",
    "MissingAssetError",
    "overlap",
    "pack_rgba",
    "Player",
    "Projectile",
    "ProjectilePool",
    "RandomStrategy",
    "RenderContext",
    "Renderer",
    "SessionStats",
    "Simulation",
    "Sprite",
    "SpriteAnimation",
    "SpriteDataError",
    "SpriteStore",
    "StepReport",
    "SweepStrategy",
]
