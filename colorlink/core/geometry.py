"""Coordinate and adjacency math over a rectangular grid."""

from __future__ import annotations

from colorlink.core.models import Cell


def same_cell(a: Cell, b: Cell) -> bool:
    return a.row == b.row and a.col == b.col


def adjacent(a: Cell, b: Cell) -> bool:
    """Return whether two cells are orthogonal neighbors (Manhattan distance 1)."""
    return abs(a.row - b.row) + abs(a.col - b.col) == 1


def in_bounds(cell: Cell, width: int, height: int) -> bool:
    return 0 <= cell.row < height and 0 <= cell.col < width


def neighbors(cell: Cell, width: int, height: int) -> list[Cell]:
    """Return in-bounds orthogonal neighbors: up, down, left, right."""
    result: list[Cell] = []
    if cell.row > 0:
        result.append(Cell(cell.row - 1, cell.col))
    if cell.row < height - 1:
        result.append(Cell(cell.row + 1, cell.col))
    if cell.col > 0:
        result.append(Cell(cell.row, cell.col - 1))
    if cell.col < width - 1:
        result.append(Cell(cell.row, cell.col + 1))
    return result


def cell_key(cell: Cell) -> str:
    return f"{cell.row},{cell.col}"
