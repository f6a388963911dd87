"""GIF output provider."""

from .base import AnimatedImageProvider


class GifOutputProvider(AnimatedImageProvider):
    """Palette GIF; keeps every frame so pixel art is not merged away."""

    @property
    def output_format(self) -> str:
        return "gif"

    @property
    def save_options(self) -> dict[str, object]:
        return {"optimize": False, "disposal": 1}
