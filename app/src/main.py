"""FastAPI web app for pixel-invaders animation generation."""

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from pixel_invaders.animation_pipeline import encode_animation
from pixel_invaders.game.render_context import create_render_context
from pixel_invaders.game.strategies import DEFAULT_STRATEGY_NAME, create_strategy
from pixel_invaders.output import lookup_output_format

load_dotenv()

app = FastAPI(title="Pixel Invaders")

WEB_FPS = 25
WEB_MAX_FRAMES = 500


@app.get("/api/render")
async def render(
    strategy: str = Query(DEFAULT_STRATEGY_NAME, description="Autopilot strategy"),
    output_format: str = Query("gif", alias="format", description="Output format: gif or webp"),
    theme: str = Query("classic", description="Color theme"),
    seed: int | None = Query(None, description="Seed for random strategies"),
    max_frames: int = Query(WEB_MAX_FRAMES, ge=1, le=WEB_MAX_FRAMES, description="Frames to simulate"),
):
    """Simulate a session and return it as an animated image."""
    try:
        strategy_instance = create_strategy(strategy)
        fmt = lookup_output_format(output_format)
        render_context = create_render_context(theme)
        encoded = encode_animation(
            strategy_instance,
            f"output{fmt.extension}",
            fps=WEB_FPS,
            max_frames=max_frames,
            render_context=render_context,
            seed=seed,
        )
        return Response(
            content=encoded,
            media_type=fmt.media_type,
            headers={
                "Content-Disposition": f"inline; filename=pixel-invaders{fmt.extension}",
            },
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to generate animation: {e}")
