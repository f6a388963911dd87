"""Raster (Pillow) animation frame generators built on top of Animator timelines."""

from typing import Iterator

from PIL import Image

from .animator import Animator
from .renderer import Renderer
from .stats import SessionStats


def generate_raster_frames(
    animator: Animator, stats: SessionStats | None = None
) -> Iterator[Image.Image]:
    """Render raster frame payloads from an animator timeline."""
    renderer: Renderer | None = None
    for simulation, buffer, report in animator.iter_timeline():
        if renderer is None:
            renderer = Renderer(buffer.width, buffer.height, animator.render_context)
        if stats is not None:
            stats.record(report, simulation.game_state)
        yield renderer.render_frame(buffer)
