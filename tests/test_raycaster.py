import math

import pytest

from raycube.geometry import normalize_angle
from raycube.model import FOV, UNIT_SIZE, Player, Ray
from raycube.raycaster import cast_ray, cast_rays, mark_faces
from raycube.scene import Scene
from raycube.world import World


def make_world(*rows):
    scene = Scene(
        north_texture="no.png",
        south_texture="so.png",
        west_texture="we.png",
        east_texture="ea.png",
        floor=(0, 0, 0),
        ceiling=(0, 0, 0),
        grid=list(rows),
        player_direction="N",
    )
    return World.from_scene(scene)


def centre(cell):
    return cell * UNIT_SIZE + UNIT_SIZE / 2


ROOM = ("11111", "10001", "10N01", "10001", "11111")
FACES = ("found_no", "found_so", "found_ea", "found_we")


@pytest.mark.parametrize(
    ("angle", "face", "horizontal"),
    [
        (0.0, "found_ea", False),
        (math.pi / 2, "found_so", True),
        (math.pi, "found_we", False),
        (3 * math.pi / 2, "found_no", True),
    ],
)
def test_axis_rays_hit_the_nearest_wall(angle, face, horizontal):
    world = make_world(*ROOM)
    player = Player(x=centre(2), y=centre(2), angle=angle)
    ray = Ray()
    ray.reset(angle)
    cast_ray(world, player, ray, angle)
    mark_faces(ray)
    assert ray.distance == pytest.approx(1.5 * UNIT_SIZE, abs=1e-3)
    assert ray.found_horz is horizontal
    assert ray.found_vert is not horizontal
    assert [name for name in FACES if getattr(ray, name)] == [face]


def test_east_ray_hit_point():
    world = make_world(*ROOM)
    player = Player(x=centre(2), y=centre(2), angle=0.0)
    ray = cast_ray(world, player, Ray(), 0.0)
    assert ray.wall_hit_x == pytest.approx(4 * UNIT_SIZE)
    assert ray.wall_hit_y == pytest.approx(centre(2))


def test_closed_door_stops_the_ray():
    world = make_world("11111", "1N0C1", "11111")
    player = Player(x=centre(1), y=centre(1), angle=0.0)
    ray = cast_ray(world, player, Ray(), 0.0)
    assert ray.found_vert_door
    assert ray.wall_hit_x == pytest.approx(3 * UNIT_SIZE)


def test_open_door_is_recorded_and_passed_through():
    world = make_world("1111111", "1N0O001", "1111111")
    player = Player(x=centre(1), y=centre(1), angle=0.0)
    ray = cast_ray(world, player, Ray(), 0.0)
    assert ray.open_vert_door
    assert (ray.v_open_x, ray.v_open_y) == (3, 1)
    assert not ray.found_vert_door
    assert ray.wall_hit_x == pytest.approx(6 * UNIT_SIZE)


def test_open_door_only_recorded_along_view_direction():
    world = make_world("1111111", "1N0O001", "1111111")
    player = Player(x=centre(1), y=centre(1), angle=0.0)
    ray = cast_ray(world, player, Ray(), 0.01)
    assert not ray.open_vert_door
    assert not ray.open_horz_door


def test_cast_rays_spreads_over_field_of_view():
    world = make_world(*ROOM)
    player = Player(x=centre(2), y=centre(2), angle=0.3)
    rays = cast_rays(world, player, 16)
    assert len(rays) == 16
    assert rays[0].angle == pytest.approx(normalize_angle(0.3 - FOV / 2))
    limit = math.hypot(world.width * UNIT_SIZE, world.height * UNIT_SIZE)
    for ray in rays:
        assert 0 <= ray.angle < 2 * math.pi
        assert 0 < ray.distance <= limit
        assert sum(getattr(ray, name) for name in FACES) == 1


def test_cast_rays_with_no_count_returns_nothing():
    world = make_world(*ROOM)
    assert cast_rays(world, Player(x=centre(2), y=centre(2)), 0) == []


def test_mark_faces_ignores_unset_hits():
    ray = Ray(angle=math.pi / 4)
    mark_faces(ray)
    assert [name for name in FACES if getattr(ray, name)] == []