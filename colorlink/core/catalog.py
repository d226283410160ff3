"""Board variant catalog built from hand-authored base boards."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from colorlink.core.geometry import cell_key, in_bounds
from colorlink.core.models import Board, Cell


def mirror_horizontal(board: Board) -> Board:
    """Mirror endpoints left-to-right (column x -> width-1-x)."""
    return Board(
        width=board.width,
        height=board.height,
        pairs=tuple(
            (
                Cell(first.row, board.width - 1 - first.col),
                Cell(second.row, board.width - 1 - second.col),
            )
            for first, second in board.pairs
        ),
        name=board.name,
    )


def mirror_vertical(board: Board) -> Board:
    """Mirror endpoints top-to-bottom (row y -> height-1-y)."""
    return Board(
        width=board.width,
        height=board.height,
        pairs=tuple(
            (
                Cell(board.height - 1 - first.row, first.col),
                Cell(board.height - 1 - second.row, second.col),
            )
            for first, second in board.pairs
        ),
        name=board.name,
    )


def mirror_both(board: Board) -> Board:
    return mirror_vertical(mirror_horizontal(board))


def expand_boards(base: Sequence[Board]) -> list[Board]:
    """Return each base board followed by its three mirrored variants."""
    out: list[Board] = []
    for board in base:
        out.extend(
            (board, mirror_horizontal(board), mirror_vertical(board), mirror_both(board))
        )
    return out


def find_authoring_defects(board: Board) -> list[str]:
    """List data-authoring problems that would make a board unplayable."""
    defects: list[str] = []
    if board.width <= 0 or board.height <= 0:
        defects.append(f"Invalid board size {board.width}x{board.height}.")
        return defects
    if not board.pairs:
        defects.append("Board has no color pairs.")
    owners: dict[Cell, int] = {}
    for color, pair in enumerate(board.pairs):
        first, second = pair
        if first == second:
            defects.append(f"Color {color} endpoints are the same cell {cell_key(first)}.")
        for cell in pair:
            if not in_bounds(cell, board.width, board.height):
                defects.append(f"Color {color} endpoint {cell_key(cell)} is out of bounds.")
            previous = owners.get(cell)
            if previous is not None and previous != color:
                defects.append(
                    f"Endpoint {cell_key(cell)} is shared by colors {previous} and {color}."
                )
            owners.setdefault(cell, color)
    return defects


class BoardCatalog:
    """Immutable list of playable board variants."""

    def __init__(self, base_boards: Sequence[Board]) -> None:
        self._base_count = len(base_boards)
        self._variants: tuple[Board, ...] = tuple(expand_boards(base_boards))

    @property
    def base_count(self) -> int:
        return self._base_count

    def __len__(self) -> int:
        return len(self._variants)

    def __getitem__(self, index: int) -> Board:
        return self._variants[index]

    def __iter__(self) -> Iterator[Board]:
        return iter(self._variants)
