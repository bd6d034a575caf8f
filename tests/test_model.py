import math

import pytest

from raycube.model import (
    FOV,
    HEIGHT,
    MOVE_SPEED,
    UNIT_SIZE,
    WIDTH,
    Door,
    Frame,
    Player,
    Ray,
)


def test_screen_sized_frame_matches_header_constants():
    assert UNIT_SIZE == 30
    assert (WIDTH, HEIGHT) == (2000, 1200)
    assert FOV == pytest.approx(math.pi / 3, abs=1e-8)
    frame = Frame(WIDTH, HEIGHT)
    assert len(frame.pixels) == 2000 * 1200 * 4
    frame.put_pixel(WIDTH - 1, HEIGHT - 1, 0x01020304)
    assert frame.get_pixel(WIDTH - 1, HEIGHT - 1) == 0x01020304
    assert frame.get_pixel(0, 0) == 0


def test_player_defaults_follow_settings():
    player = Player()
    assert player.move_speed == MOVE_SPEED
    assert player.rotate_speed == pytest.approx(math.radians(5))
    assert (player.rotate_direction, player.move_direction) == (0, 0)


def test_door_closed_by_default():
    assert Door(3, 4).is_closed is True


def test_ray_reset_clears_flags_and_sets_angle():
    ray = Ray(
        found_horz_door=True,
        found_vert_door=True,
        open_horz_door=True,
        open_vert_door=True,
        found_no=True,
        found_so=True,
        found_ea=True,
        found_we=True,
        distance=12.5,
    )
    ray.reset(1.25)
    assert ray.angle == 1.25
    assert not any(
        (
            ray.found_horz_door,
            ray.found_vert_door,
            ray.open_horz_door,
            ray.open_vert_door,
            ray.found_no,
            ray.found_so,
            ray.found_ea,
            ray.found_we,
        )
    )
    assert ray.distance == 12.5


def test_frame_starts_blank():
    frame = Frame(3, 2)
    assert len(frame.pixels) == 3 * 2 * 4
    assert frame.get_pixel(2, 1) == 0


def test_frame_put_get_round_trip():
    frame = Frame(4, 4)
    frame.put_pixel(1, 2, 0x9B4DD6FF)
    assert frame.get_pixel(1, 2) == 0x9B4DD6FF
    assert frame.get_pixel(2, 1) == 0


def test_frame_stores_rgba_bytes_in_order():
    frame = Frame(1, 1)
    frame.put_pixel(0, 0, 0x11223344)
    assert bytes(frame.pixels) == b"\x11\x22\x33\x44"


def test_frame_ignores_pixels_outside():
    frame = Frame(2, 2)
    frame.put_pixel(-1, 0, 0xFFFFFFFF)
    frame.put_pixel(2, 0, 0xFFFFFFFF)
    frame.put_pixel(0, 5, 0xFFFFFFFF)
    values = [frame.get_pixel(x, y) for y in range(2) for x in range(2)]
    assert values == [0, 0, 0, 0]
    frame.put_pixel(1, 1, 0xAABBCCDD)
    values = [frame.get_pixel(x, y) for y in range(2) for x in range(2)]
    assert values == [0, 0, 0, 0xAABBCCDD]


def test_frame_get_outside_raises():
    frame = Frame(2, 2)
    with pytest.raises(IndexError):
        frame.get_pixel(2, 0)


def test_frame_negative_size_rejected():
    with pytest.raises(ValueError):
        Frame(-1, 3)