"""Game state management for tracking aliens, the player, and projectiles."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, cast

from ..constants import (
    ALIEN_COLUMNS,
    ALIEN_HIT_POINTS,
    ALIEN_ORIGIN_X,
    ALIEN_ORIGIN_Y,
    ALIEN_ROWS,
    ALIEN_SPACING_X,
    ALIEN_SPACING_Y,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEATH_TIMER_FRAMES,
    PLAYER_LIVES,
    PLAYER_START_X,
    PLAYER_START_Y,
    PROJECTILE_CAPACITY,
)
from .sprites import ALIEN_DEATH, ALIEN_FRAME_0, SpriteStore


class EnemyState(Enum):
    ALIVE = "alive"
    DEAD = "dead"


@dataclass(slots=True)
class Enemy:
    """An alien slot in the roster."""
    x: float
    y: float
    hit_points: int
    state: EnemyState = EnemyState.ALIVE

    @property
    def is_alive(self) -> bool:
        return self.state is EnemyState.ALIVE


@dataclass(slots=True)
class Player:
    """The player's ship."""
    x: float
    y: float
    lives: int = PLAYER_LIVES
    velocity: int = 0  # Horizontal step applied in the last frame


@dataclass(slots=True)
class Projectile:
    x: float
    y: float
    direction: int  # Signed vertical step per frame, positive is up


class ProjectilePool:
    """
    Fixed-capacity projectile storage with unordered removal.

    Removing swaps the last active projectile into the freed slot, so order is
    not stable across removals. Scans that remove while iterating should keep
    their index in place after a removal to visit the swapped-in projectile.
    """

    def __init__(self, capacity: int = PROJECTILE_CAPACITY):
        if capacity <= 0:
            raise ValueError("Projectile capacity must be positive")
        self.capacity = capacity
        self._slots: List[Projectile | None] = [None] * capacity
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> Projectile:
        if not 0 <= index < self._count:
            raise IndexError("projectile index out of range")
        return cast(Projectile, self._slots[index])

    def __iter__(self) -> Iterator[Projectile]:
        for index in range(self._count):
            yield self[index]

    def is_full(self) -> bool:
        return self._count >= self.capacity

    def spawn(self, x: float, y: float, direction: int) -> bool:
        """Add a projectile; returns False when the pool is full."""
        if self.is_full():
            return False
        self._slots[self._count] = Projectile(x, y, direction)
        self._count += 1
        return True

    def remove_unordered(self, index: int) -> None:
        """Remove the projectile at ``index`` by swapping in the last one."""
        if not 0 <= index < self._count:
            raise IndexError("projectile index out of range")
        last = self._count - 1
        self._slots[index] = self._slots[last]
        self._slots[last] = None
        self._count = last


class GameState:
    """Manages the current state of the game."""

    def __init__(
        self,
        sprites: SpriteStore | None = None,
        *,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        rows: int = ALIEN_ROWS,
        columns: int = ALIEN_COLUMNS,
        hit_points: int = ALIEN_HIT_POINTS,
        projectile_capacity: int = PROJECTILE_CAPACITY,
    ):
        """
        Initialize game state with a full alien grid.

        Args:
            sprites: Sprite store used to center aliens inside their death footprint
            width: Board width in pixels
            height: Board height in pixels
            rows: Alien grid rows
            columns: Alien grid columns
            hit_points: Hits each alien absorbs before dying
            projectile_capacity: Maximum concurrent projectiles
        """
        self.sprites = sprites or SpriteStore.default()
        self.width = width
        self.height = height
        self.rows = rows
        self.columns = columns
        self.player = Player(x=PLAYER_START_X, y=PLAYER_START_Y)
        self.projectiles = ProjectilePool(projectile_capacity)
        self.enemies: List[Enemy] = []
        self.death_timers: List[int] = []

        self._initialize_enemies(rows, columns, hit_points)

    def _initialize_enemies(self, rows: int, columns: int, hit_points: int) -> None:
        """Lay out the alien grid, each alien centered in its death footprint."""
        alive_width = self.sprites[ALIEN_FRAME_0].width
        death_width = self.sprites[ALIEN_DEATH].width
        x_offset = (death_width - alive_width) / 2
        for row in range(rows):
            for col in range(columns):
                enemy = Enemy(
                    x=ALIEN_SPACING_X * col + ALIEN_ORIGIN_X + x_offset,
                    y=ALIEN_SPACING_Y * row + ALIEN_ORIGIN_Y,
                    hit_points=hit_points,
                )
                self.enemies.append(enemy)
                self.death_timers.append(DEATH_TIMER_FRAMES)

    def is_visible(self, index: int) -> bool:
        """An alien is drawn and collidable until its death timer runs out."""
        return self.death_timers[index] > 0

    def alive_enemies(self) -> Iterator[tuple[int, Enemy]]:
        for index, enemy in enumerate(self.enemies):
            if enemy.is_alive:
                yield index, enemy

    def alive_count(self) -> int:
        return sum(1 for enemy in self.enemies if enemy.is_alive)

    def is_complete(self) -> bool:
        """Check if every alien is destroyed and its death animation has finished."""
        return not any(self.is_visible(index) for index in range(len(self.enemies)))
