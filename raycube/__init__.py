"""Textured raycasting maze game with doors and a minimap, played from .cub scene files."""

__version__ = "0.1.0"