"""Scene composition: rasterize game state into a frame buffer."""

from typing import TYPE_CHECKING

from .game_state import GameState
from .sprites import ALIEN_DEATH, PLAYER, PROJECTILE

if TYPE_CHECKING:
    from .animation import SpriteAnimation
    from .frame_buffer import FrameBuffer
    from .render_context import RenderContext


def draw_scene(
    game_state: GameState,
    animation: "SpriteAnimation",
    frame_index: int,
    buffer: "FrameBuffer",
    context: "RenderContext",
) -> None:
    """Render the game state in painter order: aliens, projectiles, player.

    Reads state only; death timers are ticked by the simulation step.
    """
    sprites = game_state.sprites
    buffer.clear(context.background_color)

    alive_sprite = animation.frames[frame_index]
    death_sprite = sprites[ALIEN_DEATH]
    for index, enemy in enumerate(game_state.enemies):
        if not game_state.is_visible(index):
            continue
        if enemy.is_alive:
            buffer.blit(alive_sprite, enemy.x, enemy.y, context.alien_color)
        else:
            buffer.blit(death_sprite, enemy.x, enemy.y, context.death_color)

    projectile_sprite = sprites[PROJECTILE]
    for projectile in game_state.projectiles:
        buffer.blit(projectile_sprite, projectile.x, projectile.y, context.projectile_color)

    player = game_state.player
    buffer.blit(sprites[PLAYER], player.x, player.y, context.player_color)
