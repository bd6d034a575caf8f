"""Structural checks on the map grid of a scene file."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "ParseError",
    "is_blank_line",
    "has_invalid_chars",
    "find_player_direction",
    "has_bad_doors",
    "has_inner_blank_line",
    "touches_void",
    "check_map",
]

ALLOWED_CHARS = frozenset("10NSWEOC \n\t")
WALKABLE_CHARS = frozenset("0NSWEOC")
PLAYER_CHARS = "NSWE"
VOID_CHARS = frozenset(" \n")


class ParseError(ValueError):
    """Raised when a scene file or its map is not valid."""


def _at(grid: Sequence[str], y: int, x: int) -> str:
    """Return the character at ``(y, x)``, or ``""`` when outside the grid."""
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return ""


def is_blank_line(line: str | None) -> bool:
    """Tell whether ``line`` holds only spaces, tabs and newlines."""
    if line is None:
        return True
    return all(char in " \n\t" for char in line)


def has_invalid_chars(grid: Sequence[str]) -> bool:
    """Tell whether any cell holds a character a map may not contain."""
    return any(char not in ALLOWED_CHARS for row in grid for char in row)


def find_player_direction(grid: Sequence[str]) -> str | None:
    """Return the player's start direction, or ``None`` unless exactly one exists."""
    starts = [char for row in grid for char in row if char in PLAYER_CHARS]
    if len(starts) != 1:
        return None
    return starts[0]


def has_bad_doors(grid: Sequence[str]) -> bool:
    """Tell whether a row holds doors standing in open floor.

    Each closed door (``C``) scores one point when floor lies on both its
    left and right, and another when floor lies both above and below. The
    score is kept per row and the map is rejected as soon as it reads
    exactly two after a cell.
    """
    for y, row in enumerate(grid):
        score = 0
        for x, char in enumerate(row):
            if char == "C":
                if _at(grid, y, x + 1) == "0" and _at(grid, y, x - 1) == "0":
                    score += 1
                if _at(grid, y + 1, x) == "0" and _at(grid, y - 1, x) == "0":
                    score += 1
            if score == 2:
                return True
    return False


def has_inner_blank_line(grid: Sequence[str]) -> bool:
    """Tell whether a blank line is followed by a non-blank one."""
    return any(
        is_blank_line(line) and not is_blank_line(following)
        for line, following in zip(grid, grid[1:])
    )


def touches_void(grid: Sequence[str], y: int, x: int) -> bool:
    """Tell whether the walkable cell at ``(y, x)`` is open to the outside.

    A walkable cell is open when it lies on the first or last row, in the
    first column, or next to a space, a newline or the end of the grid.
    Walls and blanks are never open.
    """
    if _at(grid, y, x) not in WALKABLE_CHARS or _at(grid, y, x) == "":
        return False
    if y == 0 or y == len(grid) - 1 or x == 0:
        return True
    neighbours = (
        _at(grid, y, x + 1),
        _at(grid, y, x - 1),
        _at(grid, y - 1, x),
        _at(grid, y + 1, x),
    )
    return any(cell == "" or cell in VOID_CHARS for cell in neighbours)


def check_map(grid: Sequence[str]) -> str:
    """Validate a map grid and return the player's start direction."""
    if has_invalid_chars(grid):
        raise ParseError("map contains an invalid character")
    direction = find_player_direction(grid)
    if direction is None:
        raise ParseError("map must hold exactly one player start")
    if has_bad_doors(grid):
        raise ParseError("map holds a door that is not set in a wall")
    if has_inner_blank_line(grid):
        raise ParseError("map contains an empty line")
    for y, row in enumerate(grid):
        for x in range(len(row)):
            if touches_void(grid, y, x):
                raise ParseError(f"map is not closed at row {y}, column {x}")
    return direction