"""The playable game: state, per-frame update, rendering and the window loop."""

from __future__ import annotations

import argparse
import enum
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import pygame

from .doors import close_door, open_door
from .minimap import draw_minimap
from .model import HEIGHT, UNIT_SIZE, WIDTH, Frame, Player, Ray
from .movement import (
    move_backward,
    move_forward,
    rotate_left,
    rotate_right,
    strafe_left,
    strafe_right,
)
from .raycaster import cast_rays
from .render import TextureSet, draw_background, render_walls
from .scene import Scene, load_scene
from .validation import ParseError
from .world import World

__all__ = ["Action", "Game", "main"]

MINIMAP_WIDTH = 7 * UNIT_SIZE
MINIMAP_HEIGHT = 5 * UNIT_SIZE
MINIMAP_POSITION = (10, 10)
WEAPON_POSITION = (int(HEIGHT + HEIGHT / 2.4), int(WIDTH / 2.855))
FIRING_WEAPON_POSITION = (int(HEIGHT + HEIGHT / 2.4 - 150), int(WIDTH / 2.855))
CROSSHAIR_POSITION = (WIDTH // 2, HEIGHT // 2)

_START_ANGLES = {
    "E": 0.0,
    "S": math.pi / 2,
    "W": math.pi,
    "N": 3 * math.pi / 2,
}
_PLAYER_CHARS = frozenset(_START_ANGLES)


class Action(enum.Enum):
    """Things the player can ask for during one frame."""

    ROTATE_RIGHT = enum.auto()
    ROTATE_LEFT = enum.auto()
    STRAFE_RIGHT = enum.auto()
    STRAFE_LEFT = enum.auto()
    BACKWARD = enum.auto()
    FORWARD = enum.auto()
    OPEN_DOOR = enum.auto()
    CLOSE_DOOR = enum.auto()
    FIRE = enum.auto()
    QUIT = enum.auto()


def _start_position(grid: Sequence[Sequence[str]]) -> tuple[float, float]:
    """Return the centre of the last player start cell, in world units."""
    position = (0.0, 0.0)
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char in _PLAYER_CHARS:
                position = (
                    float(x * UNIT_SIZE + UNIT_SIZE // 2),
                    float(y * UNIT_SIZE + UNIT_SIZE // 2),
                )
    return position


@dataclass
class Game:
    """Everything needed to run and draw one game session."""

    scene: Scene
    world: World
    player: Player
    textures: TextureSet | None = None
    frame: Frame = field(default_factory=lambda: Frame(WIDTH, HEIGHT))
    minimap: Frame = field(
        default_factory=lambda: Frame(MINIMAP_WIDTH, MINIMAP_HEIGHT)
    )
    rays: list[Ray] = field(default_factory=list)
    firing: bool = False
    running: bool = True

    @classmethod
    def from_scene(cls, scene: Scene, textures: TextureSet | None) -> Game:
        """Start a game on ``scene`` with the player at its start cell."""
        x, y = _start_position(scene.grid)
        player = Player(x=x, y=y, angle=_START_ANGLES[scene.player_direction])
        return cls(
            scene=scene,
            world=World.from_scene(scene),
            player=player,
            textures=textures,
        )

    def _rotate(self, actions: frozenset[Action]) -> None:
        if Action.ROTATE_RIGHT in actions:
            rotate_right(self.player)
        elif Action.ROTATE_LEFT in actions:
            rotate_left(self.player)

    def _move(self, actions: frozenset[Action]) -> None:
        if Action.STRAFE_RIGHT in actions:
            strafe_right(self.world, self.player)
        elif Action.STRAFE_LEFT in actions:
            strafe_left(self.world, self.player)
        elif Action.BACKWARD in actions:
            move_backward(self.world, self.player)
        elif Action.FORWARD in actions:
            move_forward(self.world, self.player)

    def _use_doors(self, actions: frozenset[Action]) -> None:
        if not {Action.OPEN_DOOR, Action.CLOSE_DOOR} & actions:
            return
        if not self.rays:
            self.rays = cast_rays(self.world, self.player, self.frame.width)
        if Action.OPEN_DOOR in actions:
            open_door(self.world, self.player, self.rays)
        elif Action.CLOSE_DOOR in actions:
            close_door(self.world, self.player, self.rays)

    def update(self, actions: Iterable[Action]) -> Frame:
        """Apply one frame of player input, then redraw; returns the view."""
        requested = frozenset(actions)
        if Action.QUIT in requested:
            self.running = False
        self._rotate(requested)
        self._move(requested)
        self._use_doors(requested)
        self.player.rotate_direction = 0
        self.player.move_direction = 0
        frame = self.render()
        self.firing = Action.FIRE in requested
        return frame

    def render(self) -> Frame:
        """Draw floor, ceiling, walls and the minimap; returns the view."""
        draw_background(self.frame, self.scene.floor, self.scene.ceiling)
        self.rays = cast_rays(self.world, self.player, self.frame.width)
        if self.textures is not None:
            render_walls(self.frame, self.rays, self.textures)
        draw_minimap(self.minimap, self.world, self.player)
        return self.frame


_KEY_ACTIONS = (
    (pygame.K_RIGHT, Action.ROTATE_RIGHT),
    (pygame.K_LEFT, Action.ROTATE_LEFT),
    (pygame.K_d, Action.STRAFE_RIGHT),
    (pygame.K_a, Action.STRAFE_LEFT),
    (pygame.K_s, Action.BACKWARD),
    (pygame.K_w, Action.FORWARD),
    (pygame.K_f, Action.OPEN_DOOR),
    (pygame.K_c, Action.CLOSE_DOOR),
    (pygame.K_RETURN, Action.FIRE),
    (pygame.K_ESCAPE, Action.QUIT),
)


def _surface(pixels: bytes, width: int, height: int) -> pygame.Surface:
    return pygame.image.frombuffer(pixels, (width, height), "RGBA")


def _run_window(game: Game) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.frame.width, game.frame.height))
        pygame.display.set_caption("cub3d")
        textures = game.textures
        weapons = [
            _surface(texture.pixels, texture.width, texture.height)
            for texture in (textures.weapons if textures else ())
        ]
        crosshair = None
        if textures is not None and textures.crosshair is not None:
            crosshair = _surface(
                textures.crosshair.pixels,
                textures.crosshair.width,
                textures.crosshair.height,
            )
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
            if not game.running:
                break
            keys = pygame.key.get_pressed()
            game.update(action for key, action in _KEY_ACTIONS if keys[key])
            screen.blit(
                _surface(bytes(game.frame.pixels), game.frame.width, game.frame.height),
                (0, 0),
            )
            screen.blit(
                _surface(
                    bytes(game.minimap.pixels),
                    game.minimap.width,
                    game.minimap.height,
                ),
                MINIMAP_POSITION,
            )
            if len(weapons) >= 2:
                if game.firing:
                    screen.blit(weapons[1], FIRING_WEAPON_POSITION)
                else:
                    screen.blit(weapons[0], WEAPON_POSITION)
            if crosshair is not None:
                screen.blit(crosshair, CROSSHAIR_POSITION)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load a scene file and play it in a window; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="raycube", description="Walk through a .cub scene."
    )
    parser.add_argument("scene", help="path of the .cub scene file")
    parser.add_argument(
        "--assets",
        default="images",
        help="directory holding door.png, w1.png, w2.png and crosshair.png",
    )
    args = parser.parse_args(argv)
    try:
        scene = load_scene(args.scene)
        textures = TextureSet.load(scene, args.assets)
    except (ParseError, OSError):
        print("Error")
        return 1
    _run_window(Game.from_scene(scene, textures))
    return 0