"""Pointer-driven path editing state machine.

The editor is either idle or drawing exactly one color. Press, enter and
release events arrive already resolved to grid cells; every event either
commits one legal change to the puzzle state or leaves it untouched. Illegal
moves are routine while dragging, so they are reported as outcomes rather
than raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from colorlink.core.geometry import adjacent
from colorlink.core.models import Board, Cell, Color
from colorlink.core.puzzle_state import PuzzleState


class EditorMode(StrEnum):
    """Path editor mode."""

    IDLE = "IDLE"
    DRAWING = "DRAWING"


class EditOutcome(StrEnum):
    """What a single input event did."""

    STARTED = "STARTED"
    CLEARED = "CLEARED"
    NO_TARGET = "NO_TARGET"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    NOT_DRAWING = "NOT_DRAWING"
    ALREADY_COMPLETE = "ALREADY_COMPLETE"
    NOT_ADJACENT = "NOT_ADJACENT"
    BACKTRACKED = "BACKTRACKED"
    OCCUPIED = "OCCUPIED"
    FOREIGN_ENDPOINT = "FOREIGN_ENDPOINT"
    SELF_INTERSECTION = "SELF_INTERSECTION"
    EXTENDED = "EXTENDED"
    COMPLETED = "COMPLETED"
    RELEASED = "RELEASED"
    RESET = "RESET"

    @property
    def mutates(self) -> bool:
        """Return whether this outcome changed the puzzle paths."""
        return self in _MUTATING_OUTCOMES


_MUTATING_OUTCOMES = frozenset(
    {
        EditOutcome.STARTED,
        EditOutcome.CLEARED,
        EditOutcome.BACKTRACKED,
        EditOutcome.EXTENDED,
        EditOutcome.COMPLETED,
        EditOutcome.RESET,
    }
)


@dataclass(frozen=True, slots=True)
class EditorState:
    """Idle, or drawing a single active color."""

    mode: EditorMode = EditorMode.IDLE
    color: Color | None = None

    @classmethod
    def idle(cls) -> EditorState:
        return cls()

    @classmethod
    def drawing(cls, color: Color) -> EditorState:
        return cls(mode=EditorMode.DRAWING, color=color)


def resolve_press(
    cell: Cell,
    endpoints: dict[Cell, Color],
    occupancy: dict[Cell, Color],
) -> tuple[EditOutcome, Color | None]:
    """Decide what a press on ``cell`` does, and to which color."""
    dot_color = endpoints.get(cell)
    if dot_color is not None:
        return EditOutcome.STARTED, dot_color
    occupant = occupancy.get(cell)
    if occupant is not None:
        return EditOutcome.CLEARED, occupant
    return EditOutcome.NO_TARGET, None


def resolve_enter(
    board: Board,
    color: Color,
    path: list[Cell],
    cell: Cell,
    endpoints: dict[Cell, Color],
    occupancy: dict[Cell, Color],
) -> EditOutcome:
    """Decide what entering ``cell`` does to the active color's path.

    Checks run in a fixed order and the first match wins.
    """
    if not path:
        return EditOutcome.NOT_DRAWING
    last = path[-1]
    dest = board.other_endpoint(color, path[0])
    if last == dest:
        return EditOutcome.ALREADY_COMPLETE
    if not adjacent(last, cell):
        return EditOutcome.NOT_ADJACENT
    if len(path) >= 2 and path[-2] == cell:
        return EditOutcome.BACKTRACKED
    occupant = occupancy.get(cell)
    if occupant is not None and occupant != color:
        return EditOutcome.OCCUPIED
    owner = endpoints.get(cell)
    if owner is not None and owner != color:
        return EditOutcome.FOREIGN_ENDPOINT
    if cell in path:
        return EditOutcome.SELF_INTERSECTION
    if cell == dest:
        return EditOutcome.COMPLETED
    return EditOutcome.EXTENDED


class PathEditor:
    """Applies press/enter/release events to a puzzle state."""

    def __init__(self, board: Board, state: PuzzleState | None = None) -> None:
        self._board = board
        self._endpoints = board.endpoint_index()
        self._state = state if state is not None else PuzzleState()
        self._editor_state = EditorState.idle()

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> PuzzleState:
        return self._state

    @property
    def editor_state(self) -> EditorState:
        return self._editor_state

    @property
    def mode(self) -> EditorMode:
        return self._editor_state.mode

    @property
    def active_color(self) -> Color | None:
        return self._editor_state.color

    def reset(self, board: Board) -> EditOutcome:
        """Switch to a new board with no paths."""
        self._board = board
        self._endpoints = board.endpoint_index()
        self._state.clear()
        self._editor_state = EditorState.idle()
        return EditOutcome.RESET

    def on_cell_press(self, cell: Cell) -> EditOutcome:
        outcome, color = resolve_press(cell, self._endpoints, self._state.occupancy_index())
        if outcome is EditOutcome.STARTED and color is not None:
            self._state.set_path(color, [cell])
            self._editor_state = EditorState.drawing(color)
        elif outcome is EditOutcome.CLEARED and color is not None:
            self._state.remove_path(color)
            self._editor_state = EditorState.idle()
        return outcome

    def on_cell_enter(self, cell: Cell) -> EditOutcome:
        color = self._editor_state.color
        if self._editor_state.mode is not EditorMode.DRAWING or color is None:
            return EditOutcome.NOT_DRAWING
        outcome = resolve_enter(
            self._board,
            color,
            self._state.path_for(color),
            cell,
            self._endpoints,
            self._state.occupancy_index(),
        )
        if outcome is EditOutcome.BACKTRACKED:
            self._state.truncate_last(color)
        elif outcome is EditOutcome.EXTENDED:
            self._state.append_cell(color, cell)
        elif outcome is EditOutcome.COMPLETED:
            self._state.append_cell(color, cell)
            self._editor_state = EditorState.idle()
        return outcome

    def on_release(self) -> EditOutcome:
        self._editor_state = EditorState.idle()
        return EditOutcome.RELEASED

    def clear_all(self) -> EditOutcome:
        self._state.clear()
        self._editor_state = EditorState.idle()
        return EditOutcome.RESET
