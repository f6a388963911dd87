"""Rendering configuration and color themes."""

from dataclasses import dataclass

from ..constants import (
    CLASSIC_BACKGROUND,
    CLASSIC_INK,
    DARK_ALIEN,
    DARK_BACKGROUND,
    DARK_DEATH,
    DARK_PLAYER,
    DARK_PROJECTILE,
)
from .frame_buffer import pack_rgba


@dataclass(frozen=True)
class RenderContext:
    """Packed colors for every drawable plus the output upscale factor."""
    background_color: int
    alien_color: int
    death_color: int
    player_color: int
    projectile_color: int
    scale: int = 2

    @classmethod
    def classic(cls, scale: int = 2) -> "RenderContext":
        ink = pack_rgba(*CLASSIC_INK)
        return cls(
            background_color=pack_rgba(*CLASSIC_BACKGROUND),
            alien_color=ink,
            death_color=ink,
            player_color=ink,
            projectile_color=ink,
            scale=scale,
        )

    @classmethod
    def darkmode(cls, scale: int = 2) -> "RenderContext":
        return cls(
            background_color=pack_rgba(*DARK_BACKGROUND),
            alien_color=pack_rgba(*DARK_ALIEN),
            death_color=pack_rgba(*DARK_DEATH),
            player_color=pack_rgba(*DARK_PLAYER),
            projectile_color=pack_rgba(*DARK_PROJECTILE),
            scale=scale,
        )


THEMES = {
    "classic": RenderContext.classic,
    "dark": RenderContext.darkmode,
}


def create_render_context(theme: str, scale: int = 2) -> RenderContext:
    """Create a render context by theme name."""
    factory = THEMES.get(theme)
    if factory is None:
        available = ", ".join(THEMES)
        raise ValueError(f"Unknown theme '{theme}'. Available: {available}")
    if scale < 1:
        raise ValueError("Scale must be at least 1")
    return factory(scale=scale)
