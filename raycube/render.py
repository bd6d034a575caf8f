"""Textures and drawing of the 3D view: floor, ceiling and textured walls."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from .geometry import rgba
from .model import FOV, UNIT_SIZE, Frame, Ray
from .scene import Scene

__all__ = [
    "Texture",
    "TextureSet",
    "texel_color",
    "draw_background",
    "wall_bounds",
    "render_walls",
]

DOOR_IMAGE = "door.png"
WEAPON_IMAGES = ("w1.png", "w2.png")
CROSSHAIR_IMAGE = "crosshair.png"


def texel_color(pixels: bytes | bytearray, index: int) -> int:
    """Read the RGB bytes at ``index`` as an opaque ``0xRRGGBBFF`` colour."""
    return (
        (pixels[index] << 24)
        | (pixels[index + 1] << 16)
        | (pixels[index + 2] << 8)
        | 0xFF
    )


@dataclass(frozen=True)
class Texture:
    """An RGBA image held as raw bytes, four per pixel, row by row."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"texture size must be positive: {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height * 4:
            raise ValueError(
                f"texture of {self.width}x{self.height} needs "
                f"{self.width * self.height * 4} bytes, got {len(self.pixels)}"
            )

    @classmethod
    def from_png(cls, path: str | Path) -> Texture:
        """Load an image file; raises ``OSError`` when it cannot be read."""
        with Image.open(path) as image:
            converted = image.convert("RGBA")
            return cls(converted.width, converted.height, converted.tobytes())

    def texel(self, x: int, y: int) -> int:
        """Return the opaque colour of the texel at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) is outside the texture")
        return texel_color(self.pixels, (y * self.width + x) * 4)

    def _sample(self, index: int) -> int:
        last = len(self.pixels) - 4
        return texel_color(self.pixels, min(max(index, 0), last))


@dataclass(frozen=True)
class TextureSet:
    """The wall and door textures, plus the weapon and crosshair images."""

    north: Texture
    south: Texture
    east: Texture
    west: Texture
    door: Texture
    weapons: tuple[Texture, ...] = ()
    crosshair: Texture | None = None

    @classmethod
    def load(cls, scene: Scene, asset_dir: str | Path) -> TextureSet:
        """Load the scene's wall textures and the images kept in ``asset_dir``.

        Raises ``OSError`` when any image cannot be read.
        """
        assets = Path(asset_dir)
        return cls(
            north=Texture.from_png(scene.north_texture),
            south=Texture.from_png(scene.south_texture),
            east=Texture.from_png(scene.east_texture),
            west=Texture.from_png(scene.west_texture),
            door=Texture.from_png(assets / DOOR_IMAGE),
            weapons=tuple(Texture.from_png(assets / name) for name in WEAPON_IMAGES),
            crosshair=Texture.from_png(assets / CROSSHAIR_IMAGE),
        )


def draw_background(
    frame: Frame, floor: Sequence[int], ceiling: Sequence[int]
) -> None:
    """Paint the top half of ``frame`` with ``ceiling`` and the rest with ``floor``."""
    half = frame.height // 2
    split = half * frame.width * 4
    ceiling_bytes = rgba(ceiling[0], ceiling[1], ceiling[2], 255).to_bytes(4, "big")
    floor_bytes = rgba(floor[0], floor[1], floor[2], 255).to_bytes(4, "big")
    frame.pixels[:split] = ceiling_bytes * (half * frame.width)
    frame.pixels[split:] = floor_bytes * ((frame.height - half) * frame.width)


def wall_bounds(distance: float, height: int, width: int) -> tuple[float, int, int]:
    """Return the projected wall height and its top and bottom screen rows.

    A wall at zero or negative distance fills the whole column.
    """
    if distance <= 0:
        return math.inf, 0, height
    projection = (width // 2) / math.tan(FOV / 2)
    wall_height = UNIT_SIZE / distance * projection
    top = int(height // 2 - wall_height / 2)
    bottom = int(height // 2 + wall_height / 2)
    return wall_height, top, bottom


_Sampler = Callable[[int, float], int]


def _fraction(hit: float) -> float:
    cell = hit / UNIT_SIZE
    return cell - math.floor(cell)


def _wall_sampler(texture: Texture, hit: float) -> _Sampler:
    column = int(_fraction(hit) * texture.width)

    def sample(offset: int, wall_height: float) -> int:
        row = int(offset / wall_height * texture.height)
        return texture._sample((row * texture.width + column) * 4)

    return sample


def _vertical_door_sampler(texture: Texture, hit: float) -> _Sampler:
    # Vertical door faces scale and index with width and height swapped.
    column = int(_fraction(hit) * texture.width)

    def sample(offset: int, wall_height: float) -> int:
        row = int(offset / wall_height * texture.width)
        return texture._sample((row * texture.height + column) * 4)

    return sample


def _column_sampler(ray: Ray, textures: TextureSet) -> _Sampler | None:
    """Pick the texture drawn last for this ray, as later faces overwrite earlier ones."""
    candidates = (
        (ray.found_vert_door, lambda: _vertical_door_sampler(textures.door, ray.wall_hit_y)),
        (ray.found_horz_door, lambda: _wall_sampler(textures.door, ray.wall_hit_x)),
        (ray.found_we, lambda: _wall_sampler(textures.west, ray.wall_hit_y)),
        (ray.found_ea, lambda: _wall_sampler(textures.east, ray.wall_hit_y)),
        (ray.found_so, lambda: _wall_sampler(textures.south, ray.wall_hit_x)),
        (ray.found_no, lambda: _wall_sampler(textures.north, ray.wall_hit_x)),
    )
    for found, build in candidates:
        if found:
            return build()
    return None


def render_walls(frame: Frame, rays: Sequence[Ray], textures: TextureSet) -> None:
    """Draw one textured wall column per ray across ``frame``."""
    for column, ray in zip(range(frame.width), rays):
        sampler = _column_sampler(ray, textures)
        if sampler is None:
            continue
        wall_height, top, bottom = wall_bounds(ray.distance, frame.height, frame.width)
        for y in range(max(top, 0), min(bottom, frame.height)):
            frame.put_pixel(column, y, sampler(y - top, wall_height))