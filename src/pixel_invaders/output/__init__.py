"""Output providers for animated image formats."""

from pathlib import Path
from typing import NamedTuple

from .base import AnimatedImageProvider
from .gif_provider import GifOutputProvider
from .webp_provider import WebPOutputProvider


class OutputFormat(NamedTuple):
    name: str
    media_type: str
    provider_class: type[AnimatedImageProvider]

    @property
    def extension(self) -> str:
        return f".{self.name}"


OUTPUT_FORMATS: dict[str, OutputFormat] = {
    "gif": OutputFormat("gif", "image/gif", GifOutputProvider),
    "webp": OutputFormat("webp", "image/webp", WebPOutputProvider),
}


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(OUTPUT_FORMATS)


def lookup_output_format(name: str) -> OutputFormat:
    """Find a format by name or extension, case-insensitively.

    Raises:
        ValueError: If the format is not supported
    """
    key = name.lower().removeprefix(".")
    output_format = OUTPUT_FORMATS.get(key)
    if output_format is None:
        supported = ", ".join(fmt.extension for fmt in OUTPUT_FORMATS.values())
        raise ValueError(f"Unsupported output format: {name}. Supported formats: {supported}")
    return output_format


def resolve_output_provider(file_path: str) -> AnimatedImageProvider:
    """Create the provider matching the extension of ``file_path``."""
    output_format = lookup_output_format(Path(file_path).suffix)
    return output_format.provider_class(file_path)


__all__ = [
    "AnimatedImageProvider",
    "GifOutputProvider",
    "OUTPUT_FORMATS",
    "OutputFormat",
    "WebPOutputProvider",
    "lookup_output_format",
    "resolve_output_provider",
    "supported_output_formats",
]
