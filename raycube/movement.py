"""Turning the player and moving it through the map without entering walls."""

from __future__ import annotations

import math

from .geometry import normalize_angle
from .model import MOVE_SPEED, UNIT_SIZE, Player
from .world import World

__all__ = [
    "can_stand",
    "rotate_right",
    "rotate_left",
    "move_forward",
    "move_backward",
    "strafe_right",
    "strafe_left",
]

_VERTICAL_BLOCKERS = frozenset("1C")
_HORIZONTAL_BLOCKERS = frozenset("1")


def _cell_index(value: int) -> int:
    """Divide a world coordinate by the cell size, truncating towards zero."""
    return int(value / UNIT_SIZE)


def can_stand(world: World, x: float, y: float) -> bool:
    """Tell whether the player may stand at world point ``(x, y)``.

    The cells within ``MOVE_SPEED`` units above and below the point must
    hold neither a wall nor a closed door. The cells within the same reach
    to the left and right must not hold a wall; closed doors there do not
    block.
    """
    base_x = math.floor(x)
    base_y = math.floor(y)
    reach = range(-MOVE_SPEED, MOVE_SPEED + 1)
    column = _cell_index(base_x)
    if any(
        world.cell(column, _cell_index(base_y + offset)) in _VERTICAL_BLOCKERS
        for offset in reach
    ):
        return False
    row = _cell_index(base_y)
    return not any(
        world.cell(_cell_index(base_x + offset), row) in _HORIZONTAL_BLOCKERS
        for offset in reach
    )


def _rotate(player: Player, direction: int) -> None:
    player.rotate_direction = direction
    player.angle = normalize_angle(
        player.angle + direction * player.rotate_speed
    )


def rotate_right(player: Player) -> None:
    """Turn the player clockwise by its rotation speed."""
    _rotate(player, 1)


def rotate_left(player: Player) -> None:
    """Turn the player counter-clockwise by its rotation speed."""
    _rotate(player, -1)


def _step_to(world: World, player: Player, x: float, y: float) -> bool:
    if not can_stand(world, x, y):
        return False
    player.x = x
    player.y = y
    return True


def _walk(world: World, player: Player, direction: int) -> bool:
    player.move_direction = direction
    steps = direction * player.move_speed
    return _step_to(
        world,
        player,
        player.x + math.cos(player.angle) * steps,
        player.y + math.sin(player.angle) * steps,
    )


def move_forward(world: World, player: Player) -> bool:
    """Step along the view direction; tell whether the player moved."""
    return _walk(world, player, 1)


def move_backward(world: World, player: Player) -> bool:
    """Step against the view direction; tell whether the player moved."""
    return _walk(world, player, -1)


def _strafe(world: World, player: Player, sign: int) -> bool:
    side = player.angle + math.pi / 2
    steps = player.move_speed
    return _step_to(
        world,
        player,
        player.x + sign * math.cos(side) * steps,
        player.y + sign * math.sin(side) * steps,
    )


def strafe_right(world: World, player: Player) -> bool:
    """Step sideways to the player's right; tell whether the player moved."""
    return _strafe(world, player, 1)


def strafe_left(world: World, player: Player) -> bool:
    """Step sideways to the player's left; tell whether the player moved."""
    return _strafe(world, player, -1)