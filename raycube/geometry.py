"""Angle, distance and colour helpers used by the ray caster."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = [
    "normalize_angle",
    "is_facing_down",
    "is_facing_up",
    "is_facing_right",
    "is_facing_left",
    "distance",
    "rgba",
    "grid_width",
]

TWO_PI = 2 * math.pi


def normalize_angle(angle: float) -> float:
    """Bring ``angle`` (radians) into the range ``[0, 2*pi)``."""
    angle = math.fmod(angle, TWO_PI)
    if angle < 0:
        angle += TWO_PI
    return angle


def is_facing_down(angle: float) -> bool:
    """Tell whether ``angle`` points towards growing y (screen down)."""
    return 0 < angle < math.pi


def is_facing_up(angle: float) -> bool:
    """Tell whether ``angle`` points towards shrinking y (screen up)."""
    return math.pi < angle < 2 * math.pi


def is_facing_right(angle: float) -> bool:
    """Tell whether ``angle`` points towards growing x."""
    return angle > 3 * math.pi / 2 or angle < math.pi / 2


def is_facing_left(angle: float) -> bool:
    """Tell whether ``angle`` points towards shrinking x."""
    return math.pi / 2 < angle < 3 * math.pi / 2


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the straight-line distance between two points."""
    dx = x2 - x1
    dy = y2 - y1
    return math.sqrt(dx * dx + dy * dy)


def rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four channels into a 32-bit ``0xRRGGBBAA`` colour."""
    return ((r << 24) | (g << 16) | (b << 8) | a) & 0xFFFFFFFF


def grid_width(grid: Sequence[Sequence[str]]) -> int:
    """Return the length of the longest row of ``grid``."""
    return max((len(row) for row in grid), default=0)