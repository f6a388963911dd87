"""Running totals collected while a session is animated."""

from dataclasses import dataclass, field

from .game_state import EnemyState, GameState
from .simulation import StepReport


@dataclass
class SessionStats:
    frames: int = 0
    shots_fired: int = 0
    shots_dropped: int = 0
    hits: int = 0
    kills: int = 0
    roster: list[EnemyState] = field(default_factory=list)
    columns: int = 0
    lives: int = 0

    def record(self, report: StepReport, game_state: GameState) -> None:
        """Fold one step report in and remember the latest roster."""
        self.frames += 1
        self.shots_fired += report.projectiles_fired
        self.shots_dropped += int(report.fire_dropped)
        self.hits += report.enemies_hit
        self.kills += report.enemies_destroyed
        self.roster = [enemy.state for enemy in game_state.enemies]
        self.columns = game_state.columns
        self.lives = game_state.player.lives

    @property
    def accuracy(self) -> float:
        if self.shots_fired == 0:
            return 0.0
        return self.hits / self.shots_fired
