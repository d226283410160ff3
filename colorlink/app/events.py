"""Application event model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CellPressed:
    """Pointer went down on a grid cell."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class CellEntered:
    """Pointer moved onto a grid cell."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class PointerReleased:
    """Pointer up or cancel anywhere in the host."""


PuzzleEvent = CellPressed | CellEntered | PointerReleased
