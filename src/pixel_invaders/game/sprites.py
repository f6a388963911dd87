"""Immutable sprite masks and the store that serves them by name."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

INK = "@"

ALIEN_FRAME_0 = "alien_0"
ALIEN_FRAME_1 = "alien_1"
ALIEN_DEATH = "alien_death"
PLAYER = "player"
PROJECTILE = "projectile"

REQUIRED_SPRITES = (ALIEN_FRAME_0, ALIEN_FRAME_1, ALIEN_DEATH, PLAYER, PROJECTILE)


class SpriteDataError(ValueError):
    """Raised when sprite pixel data does not match its declared dimensions."""
    pass


class MissingAssetError(KeyError):
    """Raised when a required sprite is absent from the store."""
    pass


@dataclass(frozen=True, slots=True)
class Sprite:
    """A rectangular ink mask stored row-major, row 0 being the visual top."""
    width: int
    height: int
    mask: tuple[bool, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise SpriteDataError(
                f"Sprite dimensions must be positive (got {self.width}x{self.height})"
            )
        if len(self.mask) != self.width * self.height:
            raise SpriteDataError(
                f"Sprite data has {len(self.mask)} pixels, "
                f"expected {self.width}x{self.height}={self.width * self.height}"
            )

    @classmethod
    def from_bits(cls, width: int, height: int, bits: Iterable[int]) -> "Sprite":
        """Build a sprite from a flat sequence of 0/1 values."""
        return cls(width, height, tuple(bool(bit) for bit in bits))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Sprite":
        """Build a sprite from ASCII art rows where ``@`` is ink."""
        width = len(rows[0]) if rows else 0
        mask: list[bool] = []
        for row in rows:
            mask.extend(char == INK for char in row)
        return cls(width, len(rows), tuple(mask))

    def is_ink(self, col: int, row: int) -> bool:
        return self.mask[row * self.width + col]


class SpriteStore:
    """Read-only lookup of named sprites."""

    def __init__(
        self,
        sprites: Mapping[str, Sprite],
        required: Iterable[str] = REQUIRED_SPRITES,
    ) -> None:
        missing = [name for name in required if name not in sprites]
        if missing:
            raise MissingAssetError(f"Missing required sprites: {', '.join(missing)}")
        self._sprites = dict(sprites)

    def __getitem__(self, name: str) -> Sprite:
        try:
            return self._sprites[name]
        except KeyError:
            raise MissingAssetError(f"Unknown sprite '{name}'") from None

    def __contains__(self, name: object) -> bool:
        return name in self._sprites

    def get(self, name: str, default: Sprite | None = None) -> Sprite | None:
        return self._sprites.get(name, default)

    @classmethod
    def default(cls) -> "SpriteStore":
        """Store holding the built-in arcade sprites."""
        return cls({name: Sprite.from_rows(rows) for name, rows in _BUILTIN_ART.items()})


_BUILTIN_ART: dict[str, tuple[str, ...]] = {
    ALIEN_FRAME_0: (
        "..@.....@..",
        "...@...@...",
        "..@@@@@@@..",
        ".@@.@@@.@@.",
        "@@@@@@@@@@@",
        "@.@@@@@@@.@",
        "@.@.....@.@",
        "...@@.@@...",
    ),
    ALIEN_FRAME_1: (
        "..@.....@..",
        "@..@...@..@",
        "@.@@@@@@@.@",
        "@@@.@@@.@@@",
        "@@@@@@@@@@@",
        ".@@@@@@@@@.",
        "..@.....@..",
        ".@.......@.",
    ),
    ALIEN_DEATH: (
        ".@..@...@..@.",
        "..@..@.@..@..",
        "...@.....@...",
        "@@.........@@",
        "...@.....@...",
        "..@..@.@..@..",
        ".@..@...@..@.",
    ),
    PLAYER: (
        ".....@.....",
        "....@@@....",
        "....@@@....",
        ".@@@@@@@@@.",
        "@@@@@@@@@@@",
        "@@@@@@@@@@@",
        "@@@@@@@@@@@",
    ),
    PROJECTILE: (
        "@",
        "@",
        "@",
    ),
}
