"""Application service-layer helpers."""

from colorlink.app.services.board_selection import BoardSelectionService
from colorlink.app.services.state_projection import PuzzleView, build_view

__all__ = [
    "BoardSelectionService",
    "PuzzleView",
    "build_view",
]
