"""Renderer for turning frame buffers into Pillow images."""

from PIL import Image

from .frame_buffer import FrameBuffer
from .render_context import RenderContext


class Renderer:
    """Converts rendered frame buffers into scaled PIL Images."""
    def __init__(self, width: int, height: int, render_context: RenderContext):
        """
        Initialize renderer.

        Args:
            width: Frame buffer width in pixels
            height: Frame buffer height in pixels
            render_context: Rendering configuration and theming
        """
        self.context = render_context
        self.width = width * self.context.scale
        self.height = height * self.context.scale

    def render_frame(self, buffer: FrameBuffer) -> Image.Image:
        """
        Render a frame buffer as an image.

        Returns:
            PIL Image of the current frame
        """
        img = buffer.to_image()
        if self.context.scale != 1:
            img = img.resize((self.width, self.height), Image.Resampling.NEAREST)

        return img.convert("RGB").convert("P", palette=Image.Palette.ADAPTIVE)
