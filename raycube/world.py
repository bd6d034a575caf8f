"""The mutable map the game is played on, with its doors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .geometry import grid_width
from .model import UNIT_SIZE, Door
from .scene import Scene

__all__ = ["World"]


@dataclass
class World:
    """Map cells as rows of characters, plus the doors found on them."""

    grid: list[list[str]]
    doors: list[Door] = field(default_factory=list)

    @classmethod
    def from_scene(cls, scene: Scene) -> World:
        """Build a world from a scene, registering every door cell."""
        grid = [list(row) for row in scene.grid]
        doors = [
            Door(x, y, char == "C")
            for y, row in enumerate(grid)
            for x, char in enumerate(row)
            if char in ("C", "O")
        ]
        return cls(grid, doors)

    @property
    def width(self) -> int:
        """Length of the longest row, in cells."""
        return grid_width(self.grid)

    @property
    def height(self) -> int:
        """Number of rows, in cells."""
        return len(self.grid)

    def cell(self, x: int, y: int) -> str:
        """Return the character at grid cell ``(x, y)``, or ``""`` outside the map."""
        if 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y]):
            return self.grid[y][x]
        return ""

    def _cell_at(self, x: float, y: float) -> str:
        if not (math.isfinite(x) and math.isfinite(y)):
            return ""
        return self.cell(math.floor(x / UNIT_SIZE), math.floor(y / UNIT_SIZE))

    def is_wall(self, x: float, y: float) -> bool:
        """Tell whether the world point ``(x, y)`` lies inside a wall."""
        return self._cell_at(x, y) == "1"

    def is_closed_door(self, x: float, y: float) -> bool:
        """Tell whether the world point ``(x, y)`` lies inside a closed door."""
        return self._cell_at(x, y) == "C"

    def is_open_door(self, x: float, y: float) -> bool:
        """Tell whether the world point ``(x, y)`` lies inside an open door."""
        return self._cell_at(x, y) == "O"