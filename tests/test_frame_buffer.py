"""Tests for frame buffer clearing and sprite compositing."""

from pixel_invaders.game.frame_buffer import FrameBuffer, pack_rgba
from pixel_invaders.game.sprites import Sprite

RED = pack_rgba(255, 0, 0)
BLACK = pack_rgba(0, 0, 0)

# Top row is a single pixel on the left, bottom row is full.
WEDGE = Sprite.from_rows([
    "@..",
    "@@.",
    "@@@",
])


def ink_pixels(buffer: FrameBuffer, color: int = RED) -> set[tuple[int, int]]:
    return {
        (x, y)
        for y in range(buffer.height)
        for x in range(buffer.width)
        if buffer.pixel(x, y) == color
    }


def test_pack_rgba_layout() -> None:
    assert pack_rgba(0x12, 0x34, 0x56) == 0x123456FF


def test_clear_sets_every_pixel() -> None:
    buffer = FrameBuffer(4, 3)
    buffer.clear(RED)
    assert len(ink_pixels(buffer)) == 12


def test_clear_erases_previous_frame() -> None:
    buffer = FrameBuffer(4, 4, BLACK)
    for _ in range(2):
        buffer.blit(WEDGE, 0, 0, RED)
        buffer.clear(BLACK)
        assert ink_pixels(buffer) == set()

    buffer.clear(RED)
    assert len(ink_pixels(buffer)) == 16
    buffer.clear(BLACK)
    assert ink_pixels(buffer) == set()


def test_blit_flips_rows_so_origin_is_bottom() -> None:
    buffer = FrameBuffer(8, 8, BLACK)
    buffer.blit(WEDGE, 2, 1, RED)

    # Bottom sprite row (full) at y=1, top sprite row (single pixel) at y=3.
    assert ink_pixels(buffer) == {
        (2, 1), (3, 1), (4, 1),
        (2, 2), (3, 2),
        (2, 3),
    }


def test_blit_leaves_transparent_pixels_untouched() -> None:
    buffer = FrameBuffer(3, 3, BLACK)
    buffer.blit(WEDGE, 0, 0, RED)
    assert buffer.pixel(2, 2) == BLACK
    assert buffer.pixel(1, 2) == BLACK


def test_blit_clips_partially_out_of_bounds() -> None:
    buffer = FrameBuffer(4, 4, BLACK)
    buffer.blit(WEDGE, -1, 2, RED)

    # Column -1 and rows 4+ are dropped.
    assert ink_pixels(buffer) == {(0, 2), (1, 2), (0, 3)}


def test_blit_fully_out_of_bounds_writes_nothing() -> None:
    buffer = FrameBuffer(4, 4, BLACK)
    for x, y in [(-10, 0), (10, 0), (0, -10), (0, 10), (4, 4)]:
        buffer.blit(WEDGE, x, y, RED)

    assert ink_pixels(buffer) == set()
    assert len(buffer.pixels) == 16


def test_blit_floors_fractional_origin() -> None:
    buffer = FrameBuffer(4, 4, BLACK)
    buffer.blit(Sprite.from_rows(["@"]), 1.5, 2.9, RED)
    assert ink_pixels(buffer) == {(1, 2)}


def test_to_image_puts_row_zero_at_bottom() -> None:
    buffer = FrameBuffer(2, 2, BLACK)
    buffer.blit(Sprite.from_rows(["@"]), 0, 0, RED)

    image = buffer.to_image()

    assert image.size == (2, 2)
    assert image.getpixel((0, 1)) == (255, 0, 0, 255)
    assert image.getpixel((0, 0)) == (0, 0, 0, 255)
