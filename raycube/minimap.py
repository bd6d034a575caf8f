"""The top-down minimap drawn around the player."""

from __future__ import annotations

import math

from .geometry import rgba
from .model import UNIT_SIZE, ZOOM, Frame, Player
from .world import World

__all__ = ["cell_status", "status_color", "draw_minimap"]

OUTSIDE = -1
FLOOR = 0
WALL = 1
CLOSED_DOOR = 2
OPEN_DOOR = 3

PLAYER_COLOR = rgba(155, 77, 214, 255)
_STATUS_COLORS = {
    WALL: rgba(27, 27, 27, 255),
    OUTSIDE: rgba(67, 67, 67, 255),
    CLOSED_DOOR: rgba(107, 229, 184, 255),
    OPEN_DOOR: rgba(204, 204, 255, 255),
}
_FLOOR_COLOR = rgba(255, 255, 255, 255)
_PLAYER_HALF = 3
_LINE_LENGTH = 12


def cell_status(
    world: World, player: Player, x: int, y: int, width: int, height: int
) -> int:
    """Classify minimap pixel ``(x, y)`` of a ``width`` x ``height`` minimap.

    The minimap is centred on the player and zoomed; the result is one of
    -1 (outside the map), 0 (floor), 1 (wall or space), 2 (closed door)
    and 3 (open door).
    """
    centre_x = width // 2
    centre_y = height // 2
    world_x = int(player.x + int((x - centre_x) / ZOOM))
    world_y = int(player.y + int((y - centre_y) / ZOOM))
    if world_x < 0 or world_y < 0 or world_y >= world.height * UNIT_SIZE:
        return OUTSIDE
    cell = world.cell(world_x // UNIT_SIZE, world_y // UNIT_SIZE)
    if cell in ("", "\n", "\t"):
        return OUTSIDE
    if cell in ("1", " "):
        return WALL
    if cell == "C":
        return CLOSED_DOOR
    if cell == "O":
        return OPEN_DOOR
    return FLOOR


def status_color(status: int) -> int:
    """Return the ``0xRRGGBBAA`` colour for a minimap cell status."""
    return _STATUS_COLORS.get(status, _FLOOR_COLOR)


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _draw_heading(frame: Frame, player: Player, x: float, y: float) -> None:
    dx = _LINE_LENGTH * math.cos(player.angle)
    dy = _LINE_LENGTH * math.sin(player.angle)
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        frame.put_pixel(_round_half_away(x), _round_half_away(y), PLAYER_COLOR)
        return
    x_inc = dx / steps
    y_inc = dy / steps
    step = 0
    while step <= steps:
        frame.put_pixel(_round_half_away(x), _round_half_away(y), PLAYER_COLOR)
        # The vertical bound is checked against the width, as the original does.
        if x < 0 or y < 0 or x >= frame.width or y >= frame.width:
            break
        x += x_inc
        y += y_inc
        step += 1


def draw_minimap(frame: Frame, world: World, player: Player) -> None:
    """Draw the map around the player, the player marker and its heading."""
    for y in range(frame.height):
        for x in range(frame.width):
            status = cell_status(world, player, x, y, frame.width, frame.height)
            frame.put_pixel(x, y, status_color(status))
    centre_x = frame.width // 2
    centre_y = frame.height // 2
    for dy in range(-_PLAYER_HALF, _PLAYER_HALF):
        for dx in range(-_PLAYER_HALF, _PLAYER_HALF):
            frame.put_pixel(centre_x + dx, centre_y + dy, PLAYER_COLOR)
    _draw_heading(frame, player, float(centre_x), float(centre_y))