"""Reading ``.cub`` scene files: texture paths, colours and the map."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .strings import atoi, split_any, trim
from .validation import ParseError, check_map

__all__ = [
    "Scene",
    "is_map_line",
    "check_filename",
    "parse_color",
    "read_elements",
    "read_map",
    "count_doors",
    "parse_scene",
    "load_scene",
]

_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_COLOR_KEYS = ("F", "C")
_REQUIRED_ELEMENTS = len(_TEXTURE_KEYS) + len(_COLOR_KEYS)


@dataclass
class Scene:
    """A validated scene: wall textures, floor and ceiling colours, and map."""

    north_texture: str
    south_texture: str
    west_texture: str
    east_texture: str
    floor: tuple[int, int, int]
    ceiling: tuple[int, int, int]
    grid: list[str]
    player_direction: str

    @property
    def width(self) -> int:
        """Length of the longest map row."""
        return max((len(row) for row in self.grid), default=0)

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.grid)


def is_map_line(line: str | None) -> bool:
    """Tell whether ``line`` looks like a map row.

    A map row holds a run of at least four characters drawn from ``1``,
    space and tab.
    """
    if line is None:
        return False
    run = 0
    for char in line:
        if char in "1 \t":
            run += 1
            if run >= 4:
                return True
        else:
            run = 0
    return False


def check_filename(name: str) -> bool:
    """Tell whether ``name`` holds exactly one dot, followed by ``cub`` at the end."""
    dots = name.count(".")
    return dots == 1 and name.endswith(".cub")


def parse_color(text: str | None) -> tuple[int, int, int]:
    """Parse an ``R,G,B`` colour whose parts are 0-255 written in 1-3 digits."""
    if text is None:
        raise ParseError("colour is missing")
    if text.count(",") != 2:
        raise ParseError(f"colour must have three comma separated parts: {text!r}")
    parts = split_any(text, ",\n")
    for part in parts:
        if len(part) > 3 or not all("0" <= char <= "9" for char in part):
            raise ParseError(f"colour part is not a number: {part!r}")
        if atoi(part) > 255:
            raise ParseError(f"colour part is out of range: {part!r}")
    if len(parts) != 3:
        raise ParseError(f"colour must have three parts: {text!r}")
    red, green, blue = (atoi(part) for part in parts)
    return red, green, blue


def _strip_lines(lines: Iterable[str]) -> list[str]:
    return [line.rstrip("\n") for line in lines]


def read_elements(lines: Iterable[str]) -> list[str]:
    """Return the lines that come before the first map row."""
    elements = []
    for line in _strip_lines(lines):
        if is_map_line(line):
            break
        elements.append(line)
    return elements


def read_map(lines: Iterable[str]) -> list[str]:
    """Return the lines from the first map row to the end."""
    stripped = _strip_lines(lines)
    for index, line in enumerate(stripped):
        if is_map_line(line):
            return stripped[index:]
    return []


def count_doors(grid: Sequence[str]) -> int:
    """Count the door cells, open (``O``) or closed (``C``)."""
    return sum(row.count("C") + row.count("O") for row in grid)


def _collect_elements(
    lines: Iterable[str],
) -> tuple[dict[str, str | None], int, str | None]:
    """Read identifier lines into values, counting known keys and noting stray words."""
    values: dict[str, str | None] = {}
    found = 0
    stray = None
    for line in lines:
        words = split_any(line, " \t")
        if not words:
            continue
        key = words[0]
        value = trim(words[1], "\n") if len(words) > 1 else None
        if key in _TEXTURE_KEYS or key in _COLOR_KEYS:
            values[key] = value
            found += 1
        elif 33 <= ord(key[0]) <= 126:
            stray = key
    return values, found, stray


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_scene(text: str) -> Scene:
    """Parse the contents of a scene file into a validated :class:`Scene`."""
    lines = _split_lines(text)
    element_lines = read_elements(lines)
    grid = read_map(lines)
    if not element_lines:
        raise ParseError("scene has no elements before the map")
    values, found, stray = _collect_elements(element_lines)
    if found != _REQUIRED_ELEMENTS:
        raise ParseError(
            f"scene needs {_REQUIRED_ELEMENTS} elements, found {found}"
        )
    if not grid:
        raise ParseError("scene has no map")
    direction = check_map(grid)
    if stray:
        raise ParseError(f"unknown element: {stray!r}")
    floor = parse_color(values.get("F"))
    ceiling = parse_color(values.get("C"))
    paths = {key: values.get(key) for key in _TEXTURE_KEYS}
    missing = [key for key, path in paths.items() if not path]
    if missing:
        raise ParseError(f"texture path missing for {', '.join(missing)}")
    return Scene(
        north_texture=paths["NO"],
        south_texture=paths["SO"],
        west_texture=paths["WE"],
        east_texture=paths["EA"],
        floor=floor,
        ceiling=ceiling,
        grid=grid,
        player_direction=direction,
    )


def load_scene(path: str | Path) -> Scene:
    """Read and validate the scene file at ``path``."""
    if not check_filename(str(path)):
        raise ParseError(f"scene file must be named like 'name.cub': {path}")
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ParseError(f"cannot read scene file {path}: {exc}") from exc
    return parse_scene(text)