"""Per-frame simulation step: render, animate, resolve hits, move, fire."""

from dataclasses import dataclass

from ..constants import (
    ALIEN_FRAME_DURATION,
    DEATH_TIMER_FRAMES,
    PLAYER_SPEED,
    PLAYFIELD_MARGIN,
    PROJECTILE_FLOOR_Y,
    PROJECTILE_SPEED,
)
from .animation import SpriteAnimation
from .collision import overlap
from .controls import InputSnapshot
from .frame_buffer import FrameBuffer
from .game_state import EnemyState, GameState
from .render_context import RenderContext
from .scene import draw_scene
from .sprites import ALIEN_DEATH, ALIEN_FRAME_0, ALIEN_FRAME_1, PLAYER, PROJECTILE, Sprite


@dataclass(slots=True)
class StepReport:
    """What happened during one simulation step."""
    frame_index: int = 0
    enemies_hit: int = 0
    enemies_destroyed: int = 0
    projectiles_fired: int = 0
    projectiles_removed: int = 0
    fire_dropped: bool = False


class Simulation:
    """Owns the game state and advances it one frame at a time."""

    def __init__(
        self,
        game_state: GameState,
        animation: SpriteAnimation | None = None,
        render_context: RenderContext | None = None,
        margin: int = PLAYFIELD_MARGIN,
    ):
        """
        Initialize the simulation.

        Args:
            game_state: State mutated by every step
            animation: Shared alien animation, defaults to the two-frame loop
            render_context: Colors used when a frame buffer is supplied
            margin: Horizontal inset the player may not cross
        """
        self.game_state = game_state
        sprites = game_state.sprites
        self.animation = animation or SpriteAnimation(
            [sprites[ALIEN_FRAME_0], sprites[ALIEN_FRAME_1]],
            frame_duration=ALIEN_FRAME_DURATION,
            loop=True,
        )
        self.render_context = render_context or RenderContext.classic()
        self.margin = margin
        self.frame_count = 0

    def new_frame_buffer(self) -> FrameBuffer:
        return FrameBuffer(self.game_state.width, self.game_state.height)

    def step(
        self,
        delta_time: float,
        inputs: InputSnapshot,
        frame_buffer: FrameBuffer | None = None,
    ) -> StepReport:
        """Advance the game by one frame.

        Args:
            delta_time: Time elapsed since last frame in seconds.
            inputs: Move direction and fire request for this frame.
            frame_buffer: Optional target for the render pass.

        Returns:
            Summary of the hits, spawns and removals in this frame
        """
        # Both the render pass and collision read this one index.
        frame_index = self.animation.current_frame_index()
        report = StepReport(frame_index=frame_index)

        if frame_buffer is not None:
            draw_scene(self.game_state, self.animation, frame_index, frame_buffer, self.render_context)
        self._tick_death_timers()

        self.animation.advance(delta_time)
        self._update_projectiles(self.animation.frames[frame_index], report)
        self._move_player(inputs.move_direction)
        self._fire(inputs.fire, report)

        self.frame_count += 1
        return report

    def _tick_death_timers(self) -> None:
        timers = self.game_state.death_timers
        for index, enemy in enumerate(self.game_state.enemies):
            if enemy.state is EnemyState.DEAD and timers[index] > 0:
                timers[index] -= 1

    def _update_projectiles(self, alive_sprite: Sprite, report: StepReport) -> None:
        """Move projectiles and resolve hits, removing spent ones in place."""
        game_state = self.game_state
        projectiles = game_state.projectiles
        projectile_sprite = game_state.sprites[PROJECTILE]

        index = 0
        while index < len(projectiles):
            projectile = projectiles[index]
            projectile.y += projectile.direction
            if projectile.y >= game_state.height or projectile.y < PROJECTILE_FLOOR_Y:
                projectiles.remove_unordered(index)
                report.projectiles_removed += 1
                continue

            if self._resolve_hit(projectile_sprite, projectile.x, projectile.y, alive_sprite, report):
                projectiles.remove_unordered(index)
                report.projectiles_removed += 1
                continue
            index += 1

    def _resolve_hit(
        self,
        projectile_sprite: Sprite,
        x: float,
        y: float,
        alive_sprite: Sprite,
        report: StepReport,
    ) -> bool:
        """Damage the first alive alien the projectile overlaps."""
        game_state = self.game_state
        for index, enemy in game_state.alive_enemies():
            if not overlap(projectile_sprite, x, y, alive_sprite, enemy.x, enemy.y):
                continue
            report.enemies_hit += 1
            if enemy.hit_points <= 1:
                death_sprite = game_state.sprites[ALIEN_DEATH]
                enemy.state = EnemyState.DEAD
                enemy.hit_points = 0
                enemy.x -= (death_sprite.width - alive_sprite.width) / 2
                game_state.death_timers[index] = DEATH_TIMER_FRAMES
                report.enemies_destroyed += 1
            else:
                enemy.hit_points -= 1
            return True
        return False

    def _move_player(self, move_direction: int) -> None:
        """Move the player, bouncing off the playfield margins."""
        game_state = self.game_state
        player = game_state.player
        player_width = game_state.sprites[PLAYER].width
        velocity = 2 * move_direction * PLAYER_SPEED

        right_limit = game_state.width - self.margin - player_width
        if velocity != 0 and player.x + player_width + velocity >= game_state.width - self.margin:
            player.x = right_limit
            velocity = -velocity
        elif velocity != 0 and player.x + velocity <= self.margin:
            player.x = self.margin
            velocity = -velocity
        else:
            player.x += velocity
        player.velocity = velocity

    def _fire(self, fire_requested: bool, report: StepReport) -> None:
        if not fire_requested:
            return
        game_state = self.game_state
        player = game_state.player
        player_sprite = game_state.sprites[PLAYER]
        spawned = game_state.projectiles.spawn(
            x=player.x + player_sprite.width // 2,
            y=player.y + player_sprite.height,
            direction=PROJECTILE_SPEED,
        )
        if spawned:
            report.projectiles_fired += 1
        else:
            report.fire_dropped = True
