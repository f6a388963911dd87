"""Time-driven sprite animation."""

import math
from collections.abc import Sequence

from .sprites import Sprite


class SpriteAnimation:
    """Selects the active frame of a sprite sequence from elapsed time."""

    def __init__(self, frames: Sequence[Sprite], frame_duration: float, loop: bool = True):
        """
        Initialize the animation.

        Args:
            frames: Sprites played in order
            frame_duration: Seconds each frame stays on screen
            loop: Whether the sequence restarts after the last frame
        """
        if not frames:
            raise ValueError("Animation needs at least one frame")
        if frame_duration <= 0:
            raise ValueError("Frame duration must be positive")
        self.frames = tuple(frames)
        self.frame_duration = frame_duration
        self.loop = loop
        self.elapsed = 0.0
        self.active = True

    @property
    def cycle_duration(self) -> float:
        return self.frame_duration * len(self.frames)

    def advance(self, delta_time: float) -> None:
        """Add elapsed time, then wrap or finish the sequence once.

        Args:
            delta_time: Time elapsed since last frame in seconds.
        """
        if not self.active:
            return
        self.elapsed += delta_time
        if self.elapsed < self.cycle_duration:
            return
        if self.loop:
            self.elapsed %= self.cycle_duration
        else:
            self.elapsed = 0.0
            self.active = False

    def current_frame_index(self) -> int:
        index = math.floor(self.elapsed / self.frame_duration)
        return min(index, len(self.frames) - 1)

    def current_sprite(self) -> Sprite:
        return self.frames[self.current_frame_index()]
