"""Animator for driving a simulation from an input strategy."""

from typing import Callable, Iterator

from ..constants import DEFAULT_MAX_FRAMES, TRAILING_FRAMES
from .frame_buffer import FrameBuffer
from .render_context import RenderContext
from .simulation import Simulation, StepReport
from .simulation_runtime import create_seeded_simulation, derive_simulation_seed
from .strategies.base_strategy import BaseStrategy


class Animator:
    """Generates frame timelines by stepping a simulation at a fixed rate."""

    def __init__(
        self,
        strategy: BaseStrategy,
        fps: int,
        render_context: RenderContext | None = None,
        max_frames: int = DEFAULT_MAX_FRAMES,
        seed: int | None = None,
        seed_factory: Callable[[BaseStrategy, int, int], int] = derive_simulation_seed,
        simulation_factory: Callable[[BaseStrategy, int, RenderContext], Simulation] = create_seeded_simulation,
    ):
        """
        Initialize animator.

        Args:
            strategy: The input strategy steering the player
            fps: Frames per second for the animation
            render_context: Colors and upscale factor for rendered frames
            max_frames: Hard cap on the number of frames produced
            seed: Optional deterministic seed for random-driven behavior
            seed_factory: Seed policy callable used when seed is not provided
            simulation_factory: Runtime factory for deterministic Simulation setup
        """
        if fps <= 0:
            raise ValueError("FPS must be positive")
        self.strategy = strategy
        self.fps = fps
        self.render_context = render_context or RenderContext.classic()
        self.max_frames = max_frames
        self.seed_factory = seed_factory
        self.simulation_factory = simulation_factory
        self.seed = seed if seed is not None else self.seed_factory(
            self.strategy, self.fps, self.max_frames
        )
        self.frame_duration = 1000 // fps
        # Fixed delta time in seconds per frame
        self.delta_time = 1.0 / fps

    def create_simulation(self) -> Simulation:
        return self.simulation_factory(self.strategy, self.seed, self.render_context)

    def iter_timeline(
        self, simulation: Simulation | None = None
    ) -> Iterator[tuple[Simulation, FrameBuffer, StepReport]]:
        """Yield the simulation, the frame rendered this step, and the step report."""
        simulation = simulation or self.create_simulation()
        game_state = simulation.game_state
        inputs = self.strategy.generate_inputs(game_state)
        trailing = TRAILING_FRAMES
        # The same buffer is yielded every step; copy it before advancing.
        buffer = simulation.new_frame_buffer()

        for _ in range(self.max_frames):
            report = simulation.step(self.delta_time, next(inputs), buffer)
            yield simulation, buffer, report

            if game_state.is_complete():
                trailing -= 1
                if trailing <= 0:
                    break
