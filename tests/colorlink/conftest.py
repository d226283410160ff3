from __future__ import annotations

import random

import pytest

from colorlink.app.session import PuzzleSession
from colorlink.core.models import Board
from colorlink.core.path_editor import PathEditor
from tests.colorlink.helpers import make_square_board, make_strip_board


@pytest.fixture
def strip_board() -> Board:
    return make_strip_board()


@pytest.fixture
def square_board() -> Board:
    return make_square_board()


@pytest.fixture
def editor(square_board: Board) -> PathEditor:
    return PathEditor(square_board)


@pytest.fixture
def session(square_board: Board) -> PuzzleSession:
    return PuzzleSession(square_board)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)
