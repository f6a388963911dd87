"""CLI interface for pixel-invaders."""

import os
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .animation_pipeline import encode_animation
from .console_printer import SessionConsolePrinter
from .constants import DEFAULT_FPS, DEFAULT_MAX_FRAMES
from .game.render_context import THEMES, RenderContext, create_render_context
from .game.sprites import MissingAssetError, SpriteDataError
from .game.stats import SessionStats
from .game.strategies import (
    DEFAULT_STRATEGY_NAME,
    create_strategy,
    supported_strategy_names,
)
from .game.strategies.base_strategy import BaseStrategy
from .output import resolve_output_provider, supported_output_formats

# Load environment variables from .env file
load_dotenv()

SEED_ENV_VAR = "PIXEL_INVADERS_SEED"

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    out: str = typer.Option(
        "pixel-invaders.gif",
        "--output",
        "-out",
        "-o",
        help=f"Animated output file ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    strategy: str = typer.Option(
        DEFAULT_STRATEGY_NAME,
        "--strategy",
        "-s",
        help=f"Autopilot steering the player ({', '.join(supported_strategy_names())})",
    ),
    fps: int = typer.Option(
        DEFAULT_FPS,
        "--fps",
        help="Frames per second for the simulation and animation",
    ),
    max_frames: int = typer.Option(
        DEFAULT_MAX_FRAMES,
        "--max-frame",
        help="Maximum number of frames to simulate",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help=f"Seed for random strategies (defaults to ${SEED_ENV_VAR})",
    ),
    scale: int = typer.Option(
        2,
        "--scale",
        help="Integer upscale factor for output frames",
    ),
    theme: str = typer.Option(
        "classic",
        "--theme",
        help=f"Color theme ({', '.join(THEMES)})",
    ),
) -> None:
    """
    Simulate an arcade invaders session and save it as an animation.

    Examples:
      # Default random autopilot to a GIF
      pixel-invaders -o invaders.gif

      # Sweeping autopilot, dark theme, WebP
      pixel-invaders -s sweep --theme dark -o invaders.webp
    """
    try:
        if fps <= 0:
            raise CLIError("FPS must be positive")
        if max_frames <= 0:
            raise CLIError("--max-frame must be positive")

        strategy_instance = _resolve_strategy(strategy)
        render_context = _resolve_render_context(theme, scale)
        stats = SessionStats()

        _generate_output(
            strategy_instance,
            out,
            fps=fps,
            max_frames=max_frames,
            seed=_resolve_seed(seed),
            render_context=render_context,
            stats=stats,
        )

        printer = SessionConsolePrinter(console)
        printer.display_stats(stats)
        printer.display_roster(stats)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _resolve_seed(seed: int | None) -> int | None:
    """Prefer the CLI seed, then the environment, else derive one."""
    if seed is not None:
        return seed
    raw = os.getenv(SEED_ENV_VAR)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise CLIError(f"{SEED_ENV_VAR} must be an integer (got '{raw}')")


def _resolve_strategy(strategy_name: str) -> BaseStrategy:
    try:
        return create_strategy(strategy_name)
    except ValueError as exc:
        raise CLIError(str(exc))


def _resolve_render_context(theme: str, scale: int) -> RenderContext:
    try:
        return create_render_context(theme, scale)
    except ValueError as exc:
        raise CLIError(str(exc))


def _generate_output(
    strategy: BaseStrategy,
    output_path: str,
    *,
    fps: int,
    max_frames: int,
    seed: int | None,
    render_context: RenderContext,
    stats: SessionStats,
) -> None:
    """Generate the animation in the format given by the output extension."""
    ext = Path(output_path).suffix[1:].upper()
    if ext.lower() not in supported_output_formats():
        raise CLIError(
            f"Unsupported output format '{ext or output_path}'. "
            f"Choose from: {SUPPORTED_OUTPUT_FORMATS_TEXT}"
        )

    if ext == "GIF" and fps > 50:
        console.print(
            f"[yellow]Warning:[/yellow] FPS > 50 may not display correctly in browsers "
            f"(GIF delay will be {1000 // fps}ms, but browsers clamp delays < 20ms to ~100ms)"
        )

    console.print(f"[bold blue]Simulating {ext} animation...[/bold blue]")
    provider = resolve_output_provider(output_path)
    try:
        encoded = encode_animation(
            strategy,
            output_path,
            fps=fps,
            max_frames=max_frames,
            render_context=render_context,
            seed=seed,
            provider=provider,
            stats=stats,
        )
    except (SpriteDataError, MissingAssetError) as e:
        raise CLIError(f"Invalid sprite assets: {e}")

    console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
    try:
        provider.write(encoded)
    except OSError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")
    console.print(f"[green]✓[/green] {ext} saved to {output_path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
