"""Core game constants and the plain data records shared by the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

__all__ = [
    "UNIT_SIZE",
    "FOV",
    "MOVE_SPEED",
    "ROTATE_SPEED",
    "WIDTH",
    "HEIGHT",
    "MINIMAP_SCALE",
    "ZOOM",
    "Player",
    "Ray",
    "Door",
    "Frame",
]

UNIT_SIZE = 30
FOV = 1.04719755
MOVE_SPEED = 5
ROTATE_SPEED = 5 * (math.pi / 180)
WIDTH = 2000
HEIGHT = 1200
MINIMAP_SCALE = 0.2
ZOOM = 0.5


@dataclass
class Player:
    """Position (in world units), view angle and motion settings."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    rotate_speed: float = ROTATE_SPEED
    move_speed: float = MOVE_SPEED
    rotate_direction: int = 0
    move_direction: int = 0


@dataclass
class Ray:
    """The result of casting one ray through the map."""

    wall_hit_x: float = 0.0
    wall_hit_y: float = 0.0
    angle: float = 0.0
    distance: float = 0.0
    found_horz: bool = False
    found_vert: bool = False
    found_horz_door: bool = False
    found_vert_door: bool = False
    open_horz_door: bool = False
    open_vert_door: bool = False
    h_open_x: int = 0
    h_open_y: int = 0
    v_open_x: int = 0
    v_open_y: int = 0
    found_no: bool = False
    found_so: bool = False
    found_ea: bool = False
    found_we: bool = False

    def reset(self, angle: float) -> None:
        """Clear the door and face flags and aim the ray at ``angle``."""
        self.found_horz_door = False
        self.found_vert_door = False
        self.open_horz_door = False
        self.open_vert_door = False
        self.found_no = False
        self.found_so = False
        self.found_ea = False
        self.found_we = False
        self.angle = angle


@dataclass
class Door:
    """A door cell on the map and whether it is currently closed."""

    x: int
    y: int
    is_closed: bool = True


@dataclass
class Frame:
    """An RGBA pixel buffer; colours are 32-bit ``0xRRGGBBAA`` integers."""

    width: int
    height: int
    pixels: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"frame size must not be negative: {self.width}x{self.height}"
            )
        self.pixels = bytearray(self.width * self.height * 4)

    def _offset(self, x: int, y: int) -> int | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return (y * self.width + x) * 4
        return None

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; pixels outside the frame are ignored."""
        offset = self._offset(int(x), int(y))
        if offset is None:
            return
        self.pixels[offset:offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, "big")

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour of one pixel."""
        offset = self._offset(int(x), int(y))
        if offset is None:
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return int.from_bytes(self.pixels[offset:offset + 4], "big")