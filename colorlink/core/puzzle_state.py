"""Per-color path storage and derived occupancy."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from colorlink.core.models import Cell, Color

EMPTY_CELL = -1


@dataclass(slots=True)
class PuzzleState:
    """Current path of every color that has one.

    Occupancy is always derived from ``paths``; nothing else is stored.
    """

    paths: dict[Color, list[Cell]] = field(default_factory=dict)

    def path_for(self, color: Color) -> list[Cell]:
        """Return the color's path, or an empty list when it has none."""
        return self.paths.get(color, [])

    def set_path(self, color: Color, path: list[Cell]) -> None:
        self.paths[color] = list(path)

    def append_cell(self, color: Color, cell: Cell) -> None:
        self.paths.setdefault(color, []).append(cell)

    def truncate_last(self, color: Color) -> None:
        path = self.paths.get(color)
        if path:
            path.pop()

    def remove_path(self, color: Color) -> None:
        self.paths.pop(color, None)

    def clear(self) -> None:
        self.paths.clear()

    def occupancy_index(self) -> dict[Cell, Color]:
        """Map each covered cell to the color whose path covers it."""
        occupancy: dict[Cell, Color] = {}
        for color, path in self.paths.items():
            for cell in path:
                occupancy[cell] = color
        return occupancy

    def occupant(self, cell: Cell) -> Color | None:
        return self.occupancy_index().get(cell)

    def occupancy_grid(self, width: int, height: int) -> np.ndarray:
        """Render-facing grid of owning colors, ``EMPTY_CELL`` where uncovered."""
        grid = np.full((height, width), EMPTY_CELL, dtype=np.int16)
        for cell, color in self.occupancy_index().items():
            if 0 <= cell.row < height and 0 <= cell.col < width:
                grid[cell.row, cell.col] = color
        return grid

    def snapshot(self) -> dict[Color, list[Cell]]:
        """Return a copy of all paths that callers may keep or mutate."""
        return {color: list(path) for color, path in self.paths.items()}
