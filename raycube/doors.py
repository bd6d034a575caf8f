"""Opening and closing doors the player is looking at."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .geometry import distance
from .model import UNIT_SIZE, Player, Ray
from .raycaster import cast_ray
from .world import World

__all__ = ["can_close", "try_open", "open_door", "close_door"]

OPEN_REACH = 65
CLOSE_REACH = 2


def can_close(player: Player, door_x: int, door_y: int) -> bool:
    """Tell whether the door cell lies within two cells of the player."""
    player_x = math.floor(player.x / UNIT_SIZE)
    player_y = math.floor(player.y / UNIT_SIZE)
    return (
        abs(door_x - player_x) <= CLOSE_REACH
        and abs(door_y - player_y) <= CLOSE_REACH
    )


def try_open(world: World, grid_x: int, grid_y: int) -> bool:
    """Open the closed door at ``(grid_x, grid_y)``; tell whether one was opened."""
    for door in world.doors:
        if door.x == grid_x and door.y == grid_y and door.is_closed:
            world.grid[grid_y][grid_x] = "O"
            door.is_closed = False
            return True
    return False


def _middle(rays: Sequence[Ray]) -> Ray:
    if not rays:
        raise ValueError("no rays have been cast")
    return rays[len(rays) // 2]


def open_door(world: World, player: Player, rays: Sequence[Ray]) -> bool:
    """Open the closed door hit by the centre ray if it is close enough."""
    ray = _middle(rays)
    reach = distance(player.x, player.y, ray.wall_hit_x, ray.wall_hit_y)
    if not (ray.found_vert_door or ray.found_horz_door) or reach > OPEN_REACH:
        return False
    return try_open(world, int(ray.wall_hit_x / UNIT_SIZE), int(ray.wall_hit_y / UNIT_SIZE))


def _close(world: World, x: int, y: int) -> bool:
    closed = False
    for door in world.doors:
        if door.x == x and door.y == y:
            world.grid[y][x] = "C"
            door.is_closed = True
            closed = True
    return closed


def close_door(world: World, player: Player, rays: Sequence[Ray]) -> bool:
    """Close the open door straight ahead if it lies near the player."""
    ray = _middle(rays)
    cast_ray(world, player, ray, player.angle)
    closed = False
    if ray.open_vert_door and can_close(player, ray.v_open_x, ray.v_open_y):
        closed = _close(world, ray.v_open_x, ray.v_open_y) or closed
    if ray.open_horz_door and can_close(player, ray.h_open_x, ray.h_open_y):
        closed = _close(world, ray.h_open_x, ray.h_open_y) or closed
    return closed