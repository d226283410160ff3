"""Puzzle session: the engine boundary used by a host UI."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from colorlink.app.events import CellEntered, CellPressed, PointerReleased, PuzzleEvent
from colorlink.core.geometry import in_bounds
from colorlink.core.models import Board, Cell, Color, ValidationResult
from colorlink.core.path_editor import EditOutcome, EditorMode, PathEditor
from colorlink.core.puzzle_state import PuzzleState
from colorlink.core.validator import validate

logger = logging.getLogger(__name__)

SolvedListener = Callable[[ValidationResult], None]


class PuzzleSession:
    """Owns the puzzle state for one board and re-validates after each change."""

    def __init__(self, board: Board) -> None:
        self._state = PuzzleState()
        self._editor = PathEditor(board, self._state)
        self._solved_listeners: list[SolvedListener] = []
        self._solved = validate(board, self._state)
        self._announced = self._solved.ok

    @property
    def board(self) -> Board:
        return self._editor.board

    @property
    def mode(self) -> EditorMode:
        return self._editor.mode

    @property
    def active_color(self) -> Color | None:
        return self._editor.active_color

    @property
    def current_paths(self) -> dict[Color, list[Cell]]:
        return self._state.snapshot()

    @property
    def solved(self) -> ValidationResult:
        return self._solved

    def occupancy_grid(self) -> np.ndarray:
        return self._state.occupancy_grid(self.board.width, self.board.height)

    def add_solved_listener(self, listener: SolvedListener) -> None:
        """Register a callback fired once each time the board becomes solved."""
        self._solved_listeners.append(listener)

    def new_board(self, board: Board) -> None:
        self._editor.reset(board)
        logger.info(
            "puzzle_new_board name=%s size=%dx%d colors=%d",
            board.name or "-",
            board.width,
            board.height,
            board.color_count,
        )
        self._revalidate()

    def on_cell_press(self, row: int, col: int) -> EditOutcome:
        cell = Cell(row, col)
        if not in_bounds(cell, self.board.width, self.board.height):
            return EditOutcome.OUT_OF_BOUNDS
        return self._apply(self._editor.on_cell_press(cell), cell)

    def on_cell_enter(self, row: int, col: int) -> EditOutcome:
        cell = Cell(row, col)
        if not in_bounds(cell, self.board.width, self.board.height):
            return EditOutcome.OUT_OF_BOUNDS
        return self._apply(self._editor.on_cell_enter(cell), cell)

    def on_release(self) -> EditOutcome:
        return self._editor.on_release()

    def clear_all(self) -> EditOutcome:
        return self._apply(self._editor.clear_all(), None)

    def handle(self, event: PuzzleEvent) -> EditOutcome:
        """Dispatch a host input event."""
        if isinstance(event, CellPressed):
            return self.on_cell_press(event.row, event.col)
        if isinstance(event, CellEntered):
            return self.on_cell_enter(event.row, event.col)
        if isinstance(event, PointerReleased):
            return self.on_release()
        raise TypeError(f"Unsupported puzzle event: {event!r}")

    def _apply(self, outcome: EditOutcome, cell: Cell | None) -> EditOutcome:
        if outcome.mutates:
            self._revalidate()
        else:
            logger.debug("puzzle_move_ignored outcome=%s cell=%s", outcome.value, cell)
        return outcome

    def _revalidate(self) -> None:
        self._solved = validate(self.board, self._state)
        if not self._solved.ok:
            self._announced = False
            return
        if self._announced:
            return
        self._announced = True
        logger.info("puzzle_solved name=%s", self.board.name or "-")
        for listener in list(self._solved_listeners):
            listener(self._solved)
