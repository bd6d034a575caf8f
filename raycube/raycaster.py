"""Grid ray casting: horizontal and vertical intersection marching."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import (
    distance,
    is_facing_down,
    is_facing_left,
    is_facing_right,
    is_facing_up,
    normalize_angle,
)
from .model import FOV, UNIT_SIZE, Player, Ray
from .world import World

__all__ = ["cast_ray", "cast_rays", "mark_faces"]

_NO_HIT = float(2**31 - 1)
_NUDGE = 0.0001


@dataclass
class _Crossing:
    found_wall: bool = False
    hit_x: float = 0.0
    hit_y: float = 0.0
    closed_door: bool = False
    open_door: bool = False
    open_x: int = 0
    open_y: int = 0


def _divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do, giving infinities or NaN for zero divisors."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _march(
    world: World,
    player: Player,
    angle: float,
    x: float,
    y: float,
    x_step: float,
    y_step: float,
) -> _Crossing:
    crossing = _Crossing()
    max_x = world.width * UNIT_SIZE
    max_y = world.height * UNIT_SIZE
    while 0 <= x <= max_x and 0 <= y <= max_y:
        closed = world.is_closed_door(x, y)
        if closed:
            crossing.closed_door = True
        if (
            not crossing.open_door
            and angle == player.angle
            and world.is_open_door(x, y)
        ):
            crossing.open_door = True
            crossing.open_x = int(x / UNIT_SIZE)
            crossing.open_y = int(y / UNIT_SIZE)
        if closed or world.is_wall(x, y):
            crossing.found_wall = True
            crossing.hit_x = x
            crossing.hit_y = y
            break
        x += x_step
        y += y_step
    return crossing


def _horizontal(world: World, player: Player, angle: float) -> _Crossing:
    tangent = math.tan(angle)
    y = math.floor(player.y / UNIT_SIZE) * UNIT_SIZE
    y += UNIT_SIZE if is_facing_down(angle) else -_NUDGE
    x = _divide(y - player.y, tangent) + player.x
    y_step = -UNIT_SIZE if is_facing_up(angle) else UNIT_SIZE
    x_step = _divide(UNIT_SIZE, tangent)
    if (is_facing_left(angle) and x_step > 0) or (
        is_facing_right(angle) and x_step < 0
    ):
        x_step = -x_step
    return _march(world, player, angle, x, y, x_step, y_step)


def _vertical(world: World, player: Player, angle: float) -> _Crossing:
    tangent = math.tan(angle)
    x = math.floor(player.x / UNIT_SIZE) * UNIT_SIZE
    x += UNIT_SIZE if is_facing_right(angle) else -_NUDGE
    y = player.y + (x - player.x) * tangent
    x_step = -UNIT_SIZE if is_facing_left(angle) else UNIT_SIZE
    y_step = UNIT_SIZE * tangent
    if (is_facing_up(angle) and y_step > 0) or (
        is_facing_down(angle) and y_step < 0
    ):
        y_step = -y_step
    return _march(world, player, angle, x, y, x_step, y_step)


def cast_ray(world: World, player: Player, ray: Ray, angle: float) -> Ray:
    """Cast ``ray`` from the player at ``angle`` and store the nearest hit in it.

    The stored distance is corrected for fish-eye against the player's view
    angle. Returns the same ``ray``.
    """
    horz = _horizontal(world, player, angle)
    vert = _vertical(world, player, angle)
    horz_distance = (
        distance(player.x, player.y, horz.hit_x, horz.hit_y)
        if horz.found_wall
        else _NO_HIT
    )
    vert_distance = (
        distance(player.x, player.y, vert.hit_x, vert.hit_y)
        if vert.found_wall
        else _NO_HIT
    )
    if horz_distance < vert_distance:
        ray.wall_hit_x = horz.hit_x
        ray.wall_hit_y = horz.hit_y
        ray.distance = horz_distance
        ray.found_horz = True
        ray.found_vert = False
        ray.found_horz_door = horz.closed_door
        ray.open_horz_door = horz.open_door
        ray.h_open_x = horz.open_x
        ray.h_open_y = horz.open_y
    else:
        ray.wall_hit_x = vert.hit_x
        ray.wall_hit_y = vert.hit_y
        ray.distance = vert_distance
        ray.found_vert = True
        ray.found_horz = False
        ray.found_vert_door = vert.closed_door
        ray.open_vert_door = vert.open_door
        ray.v_open_x = vert.open_x
        ray.v_open_y = vert.open_y
    ray.distance *= math.cos(player.angle - angle)
    return ray


def mark_faces(ray: Ray) -> Ray:
    """Set which wall face (north, south, east, west) the ray hit."""
    if is_facing_up(ray.angle) and ray.found_horz:
        ray.found_no = True
    if is_facing_down(ray.angle) and ray.found_horz:
        ray.found_so = True
    if is_facing_right(ray.angle) and ray.found_vert:
        ray.found_ea = True
    if is_facing_left(ray.angle) and ray.found_vert:
        ray.found_we = True
    return ray


def cast_rays(world: World, player: Player, count: int) -> list[Ray]:
    """Cast ``count`` rays spread evenly across the field of view."""
    rays = []
    angle = player.angle - FOV / 2
    for _ in range(count):
        ray = Ray()
        ray.reset(normalize_angle(angle))
        cast_ray(world, player, ray, ray.angle)
        mark_faces(ray)
        rays.append(ray)
        angle += FOV / count
    return rays