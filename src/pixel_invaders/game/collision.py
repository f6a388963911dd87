"""Axis-aligned bounding-box overlap between placed sprites."""

from .sprites import Sprite


def overlap(
    sprite_a: Sprite,
    x_a: float,
    y_a: float,
    sprite_b: Sprite,
    x_b: float,
    y_b: float,
) -> bool:
    """Check whether two placed sprite rectangles intersect on both axes."""
    return (
        x_a < x_b + sprite_b.width
        and x_b < x_a + sprite_a.width
        and y_a < y_b + sprite_b.height
        and y_b < y_a + sprite_a.height
    )
