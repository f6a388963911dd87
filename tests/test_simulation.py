"""Tests for the per-frame simulation step."""

import pytest

from pixel_invaders.constants import (
    DEATH_TIMER_FRAMES,
    DEFAULT_FPS,
    PLAYFIELD_MARGIN,
    PROJECTILE_SPEED,
)
from pixel_invaders.game.animation import SpriteAnimation
from pixel_invaders.game.controls import InputSnapshot
from pixel_invaders.game.game_state import EnemyState, GameState
from pixel_invaders.game.render_context import RenderContext
from pixel_invaders.game.simulation import Simulation
from pixel_invaders.game.sprites import ALIEN_FRAME_0, PLAYER, Sprite

# Delta time for tests (1/fps seconds per frame)
TEST_DELTA_TIME = 1.0 / DEFAULT_FPS
IDLE = InputSnapshot()


def place_projectile_under(game_state: GameState, enemy_index: int = 0) -> None:
    """Put a projectile one step below overlapping the alien's bottom rows."""
    enemy = game_state.enemies[enemy_index]
    game_state.projectiles.spawn(enemy.x + 4, enemy.y - 4, PROJECTILE_SPEED)


class TestProjectileHits:
    def test_single_hit_kills_alien(self, single_alien_state: GameState) -> None:
        simulation = Simulation(single_alien_state)
        enemy = single_alien_state.enemies[0]
        start_x = enemy.x
        place_projectile_under(single_alien_state)

        report = simulation.step(TEST_DELTA_TIME, IDLE)

        assert enemy.state is EnemyState.DEAD
        assert single_alien_state.death_timers[0] == DEATH_TIMER_FRAMES
        assert len(single_alien_state.projectiles) == 0
        assert report.enemies_hit == 1
        assert report.enemies_destroyed == 1
        assert report.projectiles_removed == 1
        # Shifted left by half of the 13 - 11 width difference.
        assert enemy.x == pytest.approx(start_x - 1)

    def test_hit_points_decrement_before_death(self, sprites) -> None:
        game_state = GameState(sprites, rows=1, columns=1, hit_points=3)
        simulation = Simulation(game_state)
        enemy = game_state.enemies[0]

        place_projectile_under(game_state)
        report = simulation.step(TEST_DELTA_TIME, IDLE)

        assert enemy.hit_points == 2
        assert enemy.state is EnemyState.ALIVE
        assert report.enemies_destroyed == 0
        assert len(game_state.projectiles) == 0

        for _ in range(2):
            place_projectile_under(game_state)
            simulation.step(TEST_DELTA_TIME, IDLE)

        assert enemy.state is EnemyState.DEAD

    def test_first_matching_alien_wins(self, sprites) -> None:
        game_state = GameState(sprites, rows=1, columns=2)
        first, second = game_state.enemies
        second.x = first.x
        simulation = Simulation(game_state)

        place_projectile_under(game_state)
        report = simulation.step(TEST_DELTA_TIME, IDLE)

        assert report.enemies_hit == 1
        assert first.state is EnemyState.DEAD
        assert second.state is EnemyState.ALIVE

    def test_one_projectile_per_alien_per_frame(self, single_alien_state: GameState) -> None:
        simulation = Simulation(single_alien_state)
        place_projectile_under(single_alien_state)
        place_projectile_under(single_alien_state)

        report = simulation.step(TEST_DELTA_TIME, IDLE)

        # The second projectile finds no alive alien once the first kills it.
        assert report.enemies_hit == 1
        assert len(single_alien_state.projectiles) == 1

    def test_collision_uses_frame_sampled_at_step_start(self, single_alien_state: GameState) -> None:
        sprites = single_alien_state.sprites
        tiny = Sprite.from_rows(["@"])
        animation = SpriteAnimation(
            [sprites[ALIEN_FRAME_0], tiny], frame_duration=TEST_DELTA_TIME * 0.75
        )
        simulation = Simulation(single_alien_state, animation=animation)
        enemy = single_alien_state.enemies[0]
        single_alien_state.projectiles.spawn(enemy.x + 8, enemy.y, PROJECTILE_SPEED)

        report = simulation.step(TEST_DELTA_TIME, IDLE)

        assert report.frame_index == 0
        assert enemy.state is EnemyState.DEAD


class TestProjectileBounds:
    def test_leaves_through_top(self, simulation: Simulation) -> None:
        game_state = simulation.game_state
        game_state.projectiles.spawn(0, game_state.height - 2, PROJECTILE_SPEED)

        report = simulation.step(TEST_DELTA_TIME, IDLE)

        assert len(game_state.projectiles) == 0
        assert report.projectiles_removed == 1

    def test_leaves_through_floor(self, simulation: Simulation) -> None:
        game_state = simulation.game_state
        game_state.projectiles.spawn(0, 8, -PROJECTILE_SPEED)

        simulation.step(TEST_DELTA_TIME, IDLE)

        assert len(game_state.projectiles) == 0

    def test_moves_by_direction(self, simulation: Simulation) -> None:
        game_state = simulation.game_state
        game_state.projectiles.spawn(0, 50, PROJECTILE_SPEED)

        simulation.step(TEST_DELTA_TIME, IDLE)

        assert game_state.projectiles[0].y == 50 + PROJECTILE_SPEED

    def test_mixed_removals_keep_survivors(self, simulation: Simulation) -> None:
        game_state = simulation.game_state
        game_state.projectiles.spawn(0, game_state.height - 1, PROJECTILE_SPEED)
        game_state.projectiles.spawn(1, 60, PROJECTILE_SPEED)
        game_state.projectiles.spawn(2, game_state.height - 1, PROJECTILE_SPEED)
        game_state.projectiles.spawn(3, 70, PROJECTILE_SPEED)

        simulation.step(TEST_DELTA_TIME, IDLE)

        assert sorted((p.x, p.y) for p in game_state.projectiles) == [(1, 62), (3, 72)]


class TestDeathTimer:
    def test_counts_down_once_per_frame(self, single_alien_state: GameState) -> None:
        simulation = Simulation(single_alien_state)
        place_projectile_under(single_alien_state)
        simulation.step(TEST_DELTA_TIME, IDLE)

        for expected in range(DEATH_TIMER_FRAMES - 1, -1, -1):
            simulation.step(TEST_DELTA_TIME, IDLE)
            assert single_alien_state.death_timers[0] == expected

        simulation.step(TEST_DELTA_TIME, IDLE)
        assert single_alien_state.death_timers[0] == 0
        assert single_alien_state.is_complete()

    def test_alive_timers_never_tick(self, simulation: Simulation) -> None:
        for _ in range(20):
            simulation.step(TEST_DELTA_TIME, IDLE)
        assert all(t == DEATH_TIMER_FRAMES for t in simulation.game_state.death_timers)

    def test_exhausted_alien_is_not_drawn(self, single_alien_state: GameState) -> None:
        context = RenderContext.darkmode(scale=1)
        simulation = Simulation(single_alien_state, render_context=context)
        place_projectile_under(single_alien_state)
        simulation.step(TEST_DELTA_TIME, IDLE)

        buffer = simulation.new_frame_buffer()
        simulation.step(TEST_DELTA_TIME, IDLE, buffer)
        assert context.death_color in buffer.pixels

        for _ in range(DEATH_TIMER_FRAMES):
            simulation.step(TEST_DELTA_TIME, IDLE)
        simulation.step(TEST_DELTA_TIME, IDLE, buffer)
        assert context.death_color not in buffer.pixels
        assert context.alien_color not in buffer.pixels


class TestPlayerMovement:
    def test_velocity_is_doubled_signal(self, simulation: Simulation) -> None:
        player = simulation.game_state.player
        start = player.x

        simulation.step(TEST_DELTA_TIME, InputSnapshot(move_direction=1))
        assert player.x == start + 2

        simulation.step(TEST_DELTA_TIME, InputSnapshot(move_direction=-2))
        assert player.x == start - 2

    def test_clamped_at_left_margin(self, simulation: Simulation) -> None:
        player = simulation.game_state.player
        player.x = PLAYFIELD_MARGIN

        simulation.step(TEST_DELTA_TIME, InputSnapshot(move_direction=-1))
        assert player.x == PLAYFIELD_MARGIN
        assert player.velocity == 2  # bounced

        simulation.step(TEST_DELTA_TIME, InputSnapshot(move_direction=1))
        assert player.x == PLAYFIELD_MARGIN + 2

    def test_clamped_at_right_margin(self, simulation: Simulation) -> None:
        game_state = simulation.game_state
        player = game_state.player
        right_limit = game_state.width - PLAYFIELD_MARGIN - game_state.sprites[PLAYER].width
        player.x = right_limit - 1

        simulation.step(TEST_DELTA_TIME, InputSnapshot(move_direction=1))
        assert player.x == right_limit

        simulation.step(TEST_DELTA_TIME, InputSnapshot(move_direction=1))
        assert player.x == right_limit

        simulation.step(TEST_DELTA_TIME, InputSnapshot(move_direction=-1))
        assert player.x == right_limit - 2

    def test_never_leaves_playfield(self, simulation: Simulation) -> None:
        game_state = simulation.game_state
        player = game_state.player
        player_width = game_state.sprites[PLAYER].width
        for direction in [-2] * 80 + [2] * 80:
            simulation.step(TEST_DELTA_TIME, InputSnapshot(move_direction=direction))
            assert PLAYFIELD_MARGIN <= player.x <= game_state.width - PLAYFIELD_MARGIN - player_width


class TestFiring:
    def test_spawns_at_player_nose(self, simulation: Simulation) -> None:
        game_state = simulation.game_state
        player = game_state.player

        report = simulation.step(TEST_DELTA_TIME, InputSnapshot(fire=True))

        assert report.projectiles_fired == 1
        projectile = game_state.projectiles[0]
        assert projectile.x == player.x + 5
        assert projectile.y == player.y + 7
        assert projectile.direction == PROJECTILE_SPEED

    def test_fire_at_capacity_is_dropped(self, sprites) -> None:
        game_state = GameState(sprites, projectile_capacity=2)
        simulation = Simulation(game_state)
        game_state.projectiles.spawn(0, 50, PROJECTILE_SPEED)
        game_state.projectiles.spawn(0, 60, PROJECTILE_SPEED)

        report = simulation.step(TEST_DELTA_TIME, InputSnapshot(fire=True))

        assert len(game_state.projectiles) == 2
        assert report.fire_dropped
        assert report.projectiles_fired == 0

    def test_no_fire_no_projectile(self, simulation: Simulation) -> None:
        simulation.step(TEST_DELTA_TIME, IDLE)
        assert len(simulation.game_state.projectiles) == 0


class TestRenderPass:
    def test_draws_aliens_and_player(self, simulation: Simulation) -> None:
        context = simulation.render_context
        game_state = simulation.game_state
        buffer = simulation.new_frame_buffer()

        simulation.step(TEST_DELTA_TIME, IDLE, buffer)

        first = game_state.enemies[0]
        # Bottom row of the first alien frame starts with "...@@".
        assert buffer.pixel(int(first.x) + 3, first.y) == context.alien_color
        assert buffer.pixel(int(first.x), first.y) == context.background_color
        player = game_state.player
        assert buffer.pixel(int(player.x), player.y) == context.player_color

    def test_render_shows_state_before_the_step(self, simulation: Simulation) -> None:
        context = RenderContext.darkmode(scale=1)
        simulation = Simulation(simulation.game_state, render_context=context)
        buffer = simulation.new_frame_buffer()

        simulation.step(TEST_DELTA_TIME, InputSnapshot(fire=True), buffer)
        assert context.projectile_color not in buffer.pixels

        simulation.step(TEST_DELTA_TIME, IDLE, buffer)
        assert context.projectile_color in buffer.pixels

    def test_frame_counter(self, simulation: Simulation) -> None:
        for _ in range(3):
            simulation.step(TEST_DELTA_TIME, IDLE)
        assert simulation.frame_count == 3
