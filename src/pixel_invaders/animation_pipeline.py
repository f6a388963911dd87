"""Shared animation orchestration used by CLI and web app entry points."""

from .constants import DEFAULT_MAX_FRAMES
from .game.animator import Animator
from .game.raster_animation import generate_raster_frames
from .game.render_context import RenderContext
from .game.stats import SessionStats
from .game.strategies.base_strategy import BaseStrategy
from .output import resolve_output_provider
from .output.base import AnimatedImageProvider


def encode_animation(
    strategy: BaseStrategy,
    output_path: str,
    *,
    fps: int,
    max_frames: int = DEFAULT_MAX_FRAMES,
    render_context: RenderContext | None = None,
    seed: int | None = None,
    provider: AnimatedImageProvider | None = None,
    stats: SessionStats | None = None,
) -> bytes:
    """Simulate a session with ``strategy`` and encode it for ``output_path``."""
    target_provider = provider or resolve_output_provider(output_path)
    animator = Animator(
        strategy,
        fps=fps,
        render_context=render_context,
        max_frames=max_frames,
        seed=seed,
    )
    frame_stream = generate_raster_frames(animator, stats=stats)
    return target_provider.encode(frame_stream, frame_duration=animator.frame_duration)
