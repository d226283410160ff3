"""Full-board solve validation."""

from __future__ import annotations

import numpy as np

from colorlink.core.geometry import adjacent, cell_key, in_bounds
from colorlink.core.models import Board, ValidationFailure, ValidationResult
from colorlink.core.puzzle_state import PuzzleState


def validate(board: Board, state: PuzzleState) -> ValidationResult:
    """Return whether the paths solve the board, with the first failure found.

    Every rule is re-checked from the stored paths alone, so state built
    outside the editor is judged the same way. The state is never mutated.
    """
    endpoints = board.endpoint_index()
    used = np.zeros((board.height, board.width), dtype=bool)

    for color in range(board.color_count):
        path = state.paths.get(color)
        if not path or len(path) < 2:
            return ValidationResult.failed(ValidationFailure.MISSING, f"color {color} missing")

        pair = board.endpoints_for(color)
        if pair is None:
            return ValidationResult.failed(
                ValidationFailure.ENDPOINTS_MISSING, f"color {color} endpoints missing"
            )
        first, second = pair
        start, end = path[0], path[-1]
        if (start, end) not in ((first, second), (second, first)):
            return ValidationResult.failed(
                ValidationFailure.NOT_CONNECTED, f"color {color} not connected to endpoints"
            )

        for index, cell in enumerate(path):
            if not in_bounds(cell, board.width, board.height):
                return ValidationResult.failed(
                    ValidationFailure.OUT_OF_BOUNDS, f"out of bounds in color {color}"
                )
            if used[cell.row, cell.col]:
                return ValidationResult.failed(
                    ValidationFailure.OVERLAP, f"overlap at {cell_key(cell)}"
                )
            used[cell.row, cell.col] = True
            if index > 0 and not adjacent(path[index - 1], cell):
                return ValidationResult.failed(
                    ValidationFailure.NON_ADJACENT, f"non-adjacent step in color {color}"
                )

        if endpoints.get(start) != color:
            return ValidationResult.failed(
                ValidationFailure.START_NOT_ENDPOINT, f"color {color} start not endpoint"
            )
        if endpoints.get(end) != color:
            return ValidationResult.failed(
                ValidationFailure.END_NOT_ENDPOINT, f"color {color} end not endpoint"
            )

    for color in sorted(state.paths):
        if board.endpoints_for(color) is None and state.paths[color]:
            return ValidationResult.failed(
                ValidationFailure.UNKNOWN_COLOR, f"color {color} not on board"
            )

    covered = int(used.sum())
    if covered != board.cell_count:
        return ValidationResult.failed(
            ValidationFailure.NOT_FILLED, f"grid not filled ({covered}/{board.cell_count})"
        )
    return ValidationResult.solved()
