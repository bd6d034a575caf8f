# raycube

A small first-person maze game drawn with raycasting. A scene file gives
the wall textures, the floor and ceiling colours and a map of walls, doors and
the player's starting point. raycube draws the map as textured walls in a
2000x1200 window and shows a minimap in the top-left corner. You can walk
around, open and close doors, and raise your weapon.

## Installing

```
pip install .
```

## Running

```
raycube path/to/level.cub
raycube path/to/level.cub --assets path/to/images
```

`--assets` names the directory that holds `door.png`, `w1.png`, `w2.png` and
`crosshair.png`. The default is `images`, relative to where you start the
game. The wall textures come from the paths written in the scene file.

The scene file name must end in `.cub` and contain exactly one dot. If the
scene is invalid or an image cannot be read, `Error` is printed and the
program exits with status 1.

### Controls

| Key          | Action                                               |
|--------------|------------------------------------------------------|
| W / S        | move forward / backward                              |
| A / D        | strafe left / right                                  |
| Left / Right | turn                                                 |
| F            | open the closed door in the centre of the view, if it is close |
| C            | close an open door straight ahead within two cells   |
| Enter        | fire (shows the firing weapon image)                 |
| Escape       | quit                                                 |

You cannot walk into walls or into closed doors.

## Scene files

A scene starts with six elements, in any order, each on its own line:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- **Colours** are three numbers from 0 to 255, written with at most three
  digits each and separated by commas.
- **Element count:** the scene must hold exactly six element lines.
- **Unknown words:** any other word at the start of an element line is an
  error.
- **Where the map starts:** the map begins at the first line that holds a run
  of at least four characters drawn from `1`, space and tab.

The map is made of these characters:

- `1` wall
- `0` empty floor
- `N`, `S`, `E`, `W` the player's start and facing (exactly one)
- `C` a closed door, `O` an open door
- spaces for the void outside the map

The map must follow these rules:

- **Closed map:** no floor, door or player cell may lie on the first or last
  row or in the first column. None may sit next to a space or the end of a
  row.
- **Doors:** closed doors that stand in open floor are rejected (see
  `raycube.validation.has_bad_doors`).
- **No gaps:** no blank line may be followed by a non-blank one inside the
  map.

## Using it as a library

```python
from raycube.scene import load_scene
from raycube.world import World
from raycube.model import Player
from raycube.raycaster import cast_rays

scene = load_scene("level.cub")
world = World.from_scene(scene)
print(world.is_wall(45.0, 15.0))

player = Player(x=45.0, y=45.0, angle=0.0)
for ray in cast_rays(world, player, 5):
    print(ray.distance, ray.found_no, ray.found_so, ray.found_ea, ray.found_we)
```

The main entry points are these:

- `raycube.scene.parse_scene` takes the text of a scene directly and returns a
  `Scene`. It raises `raycube.validation.ParseError` when the scene is
  invalid.
- `raycube.app.Game` holds a session. Build one with
  `Game.from_scene(scene, textures)`, where `textures` may be `None` to skip
  wall texturing. `Game.update` takes a set of `Action` values for one frame
  and returns the drawn `Frame`. This works without opening a window.
- `raycube.movement`, `raycube.doors`, `raycube.minimap` and `raycube.render`
  hold the movement, door, minimap and drawing steps that `Game` uses.

## What it does not do

- **Input:** the game is played with the keyboard only. There is no mouse
  look.
- **Window:** the window size is fixed.
- **Game play:** there are no enemies, no sound and no saving. Firing only
  changes the weapon image.

## Tests

```
pip install .[test]
pytest
```