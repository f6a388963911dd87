"""Off-screen pixel buffer that sprites are composited into."""

import math
import sys
from array import array

from PIL import Image

from .sprites import Sprite


def pack_rgba(r: int, g: int, b: int, a: int = 255) -> int:
    """Pack an RGBA color into a single 32-bit integer."""
    return (r << 24) | (g << 16) | (b << 8) | a


class FrameBuffer:
    """
    Row-major grid of packed RGBA pixels.

    Row 0 is the bottom of the displayed image. Sprites are authored top row
    first, so ``blit`` flips them: the sprite's last row lands on ``origin_y``
    and its first row on ``origin_y + height - 1``.
    """

    def __init__(self, width: int, height: int, color: int = 0):
        self.width = width
        self.height = height
        self.pixels = array("I", [color]) * (width * height)
        self._blank = array("I", self.pixels)
        self._blank_color = color

    def clear(self, color: int) -> None:
        """Set every pixel to ``color``."""
        if color != self._blank_color:
            self._blank = array("I", [color]) * (self.width * self.height)
            self._blank_color = color
        self.pixels[:] = self._blank

    def blit(self, sprite: Sprite, origin_x: float, origin_y: float, color: int) -> None:
        """Write ``color`` under every ink pixel of ``sprite``, clipping to bounds."""
        x0 = math.floor(origin_x)
        y0 = math.floor(origin_y)
        for row in range(sprite.height):
            buffer_y = y0 + sprite.height - 1 - row
            if buffer_y < 0 or buffer_y >= self.height:
                continue
            row_offset = buffer_y * self.width
            for col in range(sprite.width):
                if not sprite.is_ink(col, row):
                    continue
                buffer_x = x0 + col
                if 0 <= buffer_x < self.width:
                    self.pixels[row_offset + buffer_x] = color

    def pixel(self, x: int, y: int) -> int:
        return self.pixels[y * self.width + x]

    def to_rgba_bytes(self) -> bytes:
        """Serialize pixels as RGBA bytes, bottom row first."""
        packed = array("I", self.pixels)
        if sys.byteorder == "little":
            packed.byteswap()
        return packed.tobytes()

    def to_image(self) -> Image.Image:
        """Convert to a Pillow image with buffer row 0 at the image bottom."""
        image = Image.frombytes("RGBA", (self.width, self.height), self.to_rgba_bytes())
        return image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
