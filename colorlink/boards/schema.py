"""Board library schema and validation helpers."""

from __future__ import annotations

from colorlink.core.models import Board, Cell

LIBRARY_VERSION = 1


def board_to_payload(board: Board) -> dict[str, object]:
    """Convert a board to a JSON-serializable record (points are ``[col, row]``)."""
    return {
        "name": board.name,
        "width": board.width,
        "height": board.height,
        "pairs": [
            [[first.col, first.row], [second.col, second.row]] for first, second in board.pairs
        ],
    }


def payload_to_board(payload: dict[str, object]) -> Board:
    """Convert a loaded board record into a board."""
    width = _positive_int(payload.get("width"), "width")
    height = _positive_int(payload.get("height"), "height")
    raw_name = payload.get("name")
    name = "" if raw_name is None else str(raw_name).strip()

    raw_pairs = payload.get("pairs")
    if not isinstance(raw_pairs, list):
        raise ValueError("Board pairs must be a list.")

    pairs: list[tuple[Cell, Cell]] = []
    for item in raw_pairs:
        if not isinstance(item, list) or len(item) != 2:
            raise ValueError("Each board pair must be a 2-item list.")
        pairs.append((_point_to_cell(item[0]), _point_to_cell(item[1])))
    return Board(width=width, height=height, pairs=tuple(pairs), name=name)


def library_to_payload(boards: list[Board]) -> dict[str, object]:
    return {
        "version": LIBRARY_VERSION,
        "boards": [board_to_payload(board) for board in boards],
    }


def payload_to_library(payload: object) -> list[Board]:
    """Convert a loaded library document into its boards, in authoring order."""
    if not isinstance(payload, dict):
        raise ValueError("Board library must be an object.")
    raw_version = payload.get("version", -1)
    if not isinstance(raw_version, (int, str)):
        raise ValueError("Board library version must be int-compatible.")
    try:
        version = int(raw_version)
    except ValueError as exc:
        raise ValueError("Board library version must be int-compatible.") from exc
    if version != LIBRARY_VERSION:
        raise ValueError("Unsupported board library version.")

    raw_boards = payload.get("boards")
    if not isinstance(raw_boards, list):
        raise ValueError("Board library boards must be a list.")
    boards: list[Board] = []
    for item in raw_boards:
        if not isinstance(item, dict):
            raise ValueError("Each board must be an object.")
        boards.append(payload_to_board(item))
    return boards

def _point_to_cell(point: object) -> Cell:
    if not isinstance(point, list) or len(point) != 2:
        raise ValueError("Board endpoint must be a [col, row] list.")
    col, row = point
    # bool is an int subclass; JSON true/false are not coordinates.
    if not isinstance(col, int) or isinstance(col, bool):
        raise ValueError("Malformed board endpoint.")
    if not isinstance(row, int) or isinstance(row, bool):
        raise ValueError("Malformed board endpoint.")
    return Cell(row=row, col=col)


def _positive_int(value: object, field_name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Board {field_name} must be an integer.")
    if value <= 0:
        raise ValueError(f"Board {field_name} must be positive.")
    return value
