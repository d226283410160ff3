"""Core domain models used by puzzle logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

Color = int


@dataclass(frozen=True, slots=True)
class Cell:
    """Grid cell coordinate."""

    row: int
    col: int


EndpointPair = tuple[Cell, Cell]


@dataclass(frozen=True, slots=True)
class Board:
    """Board dimensions and one endpoint pair per color (index = color id)."""

    width: int
    height: int
    pairs: tuple[EndpointPair, ...]
    name: str = ""

    @property
    def color_count(self) -> int:
        return len(self.pairs)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def endpoints_for(self, color: Color) -> EndpointPair | None:
        """Return the endpoint pair for a color, if the board defines one."""
        if 0 <= color < len(self.pairs):
            return self.pairs[color]
        return None

    def endpoint_index(self) -> dict[Cell, Color]:
        """Map every endpoint cell to its owning color.

        A cell listed by two colors resolves to the later one.
        """
        index: dict[Cell, Color] = {}
        for color, (first, second) in enumerate(self.pairs):
            index[first] = color
            index[second] = color
        return index

    def other_endpoint(self, color: Color, start: Cell) -> Cell:
        """Return the endpoint of ``color`` opposite to ``start``."""
        first, second = self.pairs[color]
        return second if start == first else first


class ValidationFailure(StrEnum):
    """Reason classification for an unsolved board."""

    MISSING = "MISSING"
    ENDPOINTS_MISSING = "ENDPOINTS_MISSING"
    NOT_CONNECTED = "NOT_CONNECTED"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    OVERLAP = "OVERLAP"
    NON_ADJACENT = "NON_ADJACENT"
    START_NOT_ENDPOINT = "START_NOT_ENDPOINT"
    END_NOT_ENDPOINT = "END_NOT_ENDPOINT"
    UNKNOWN_COLOR = "UNKNOWN_COLOR"
    NOT_FILLED = "NOT_FILLED"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Solve check outcome."""

    ok: bool
    reason: str
    failure: ValidationFailure | None = None

    @classmethod
    def solved(cls) -> ValidationResult:
        return cls(ok=True, reason="ok")

    @classmethod
    def failed(cls, failure: ValidationFailure, reason: str) -> ValidationResult:
        return cls(ok=False, reason=reason, failure=failure)
