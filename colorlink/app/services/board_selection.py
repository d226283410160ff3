"""Board selection for new puzzles."""

from __future__ import annotations

import random


class BoardSelectionService:
    """Random catalog index selection."""

    @staticmethod
    def initial_index(rng: random.Random, count: int) -> int:
        if count <= 0:
            raise ValueError("Board catalog is empty.")
        return rng.randrange(count)

    @staticmethod
    def next_index(rng: random.Random, current: int, count: int) -> int:
        """Pick a random index that differs from ``current`` when possible."""
        if count <= 0:
            raise ValueError("Board catalog is empty.")
        if count == 1:
            return 0
        candidate = current
        while candidate == current:
            candidate = rng.randrange(count)
        return candidate
