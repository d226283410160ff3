from __future__ import annotations

from colorlink.core.models import Board, Cell
from colorlink.core.path_editor import PathEditor


def make_strip_board() -> Board:
    """2x2 board: color 0 along the top row, color 1 along the bottom row."""
    return Board(
        width=2,
        height=2,
        pairs=(
            (Cell(0, 0), Cell(0, 1)),
            (Cell(1, 0), Cell(1, 1)),
        ),
        name="strip",
    )


def make_square_board() -> Board:
    """3x3 board: color 0 corner to corner, color 1 a short right-edge pair."""
    return Board(
        width=3,
        height=3,
        pairs=(
            (Cell(0, 0), Cell(2, 2)),
            (Cell(0, 2), Cell(1, 2)),
        ),
        name="square",
    )


SQUARE_SOLUTION_COLOR_0 = [
    Cell(0, 0),
    Cell(0, 1),
    Cell(1, 1),
    Cell(1, 0),
    Cell(2, 0),
    Cell(2, 1),
    Cell(2, 2),
]
SQUARE_SOLUTION_COLOR_1 = [Cell(0, 2), Cell(1, 2)]


def draw(editor: PathEditor, cells: list[Cell]) -> None:
    """Press the first cell and drag across the rest."""
    editor.on_cell_press(cells[0])
    for cell in cells[1:]:
        editor.on_cell_enter(cell)
