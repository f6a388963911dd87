"""Fixed-timestep arcade invaders simulation rendered to animated images."""

__version__ = "0.1.0"
