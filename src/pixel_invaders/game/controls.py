"""Per-frame input snapshots and the latch that builds them from key edges."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    """Normalized input consumed by one simulation step."""
    move_direction: int = 0
    fire: bool = False


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"


class InputLatch:
    """
    Accumulates press/release edges between frames.

    Holding LEFT contributes -1 and RIGHT +1 to the move direction. Fire is
    edge-triggered on release and cleared by ``snapshot``.
    """

    def __init__(self) -> None:
        self.move_direction = 0
        self.fire_requested = False

    def press(self, key: Key) -> None:
        if key is Key.LEFT:
            self.move_direction -= 1
        elif key is Key.RIGHT:
            self.move_direction += 1

    def release(self, key: Key) -> None:
        if key is Key.LEFT:
            self.move_direction += 1
        elif key is Key.RIGHT:
            self.move_direction -= 1
        elif key is Key.FIRE:
            self.fire_requested = True

    def snapshot(self) -> InputSnapshot:
        """Return this frame's input and consume the fire request."""
        snapshot = InputSnapshot(self.move_direction, self.fire_requested)
        self.fire_requested = False
        return snapshot
