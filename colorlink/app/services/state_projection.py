"""Projection of session state into a render-facing view."""

from __future__ import annotations

from dataclasses import dataclass

from colorlink.app.session import PuzzleSession
from colorlink.core.models import Cell, Color, EndpointPair
from colorlink.core.path_editor import EditorMode


@dataclass(frozen=True, slots=True)
class PuzzleView:
    """Everything a renderer needs to draw one frame."""

    width: int
    height: int
    endpoints: dict[Color, EndpointPair]
    paths: dict[Color, list[Cell]]
    solved: bool
    reason: str
    status: str
    drawing_color: Color | None
    variant_count: int

    def has_dot(self, cell: Cell) -> bool:
        return any(cell in pair for pair in self.endpoints.values())

    def has_line(self, cell: Cell) -> bool:
        return any(cell in path for path in self.paths.values())


def build_view(session: PuzzleSession, variant_count: int) -> PuzzleView:
    board = session.board
    result = session.solved
    drawing = session.active_color if session.mode is EditorMode.DRAWING else None
    return PuzzleView(
        width=board.width,
        height=board.height,
        endpoints=dict(enumerate(board.pairs)),
        paths=session.current_paths,
        solved=result.ok,
        reason=result.reason,
        status="Solved" if result.ok else "Not solved",
        drawing_color=drawing,
        variant_count=variant_count,
    )
