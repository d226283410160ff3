import json

import pytest

from colorlink.boards.repository import BoardRepository
from colorlink.boards.schema import library_to_payload
from colorlink.boards.service import BoardLibraryService
from colorlink.core.catalog import find_authoring_defects, mirror_horizontal
from colorlink.core.models import Board, Cell


def test_bundled_catalog_has_thirty_six_variants() -> None:
    catalog = BoardLibraryService(BoardRepository()).load_catalog()
    assert catalog.base_count == 9
    assert len(catalog) == 36
    assert (catalog[0].width, catalog[0].height, catalog[0].color_count) == (7, 11, 7)
    assert catalog[1] == mirror_horizontal(catalog[0])
    for board in catalog:
        assert find_authoring_defects(board) == []
        assert 6 <= board.color_count <= 8


def test_user_libraries_extend_bundled_boards(tmp_path, strip_board: Board) -> None:
    (tmp_path / "extra.json").write_text(
        json.dumps(library_to_payload([strip_board])), encoding="utf-8"
    )
    service = BoardLibraryService(BoardRepository(tmp_path))
    boards = service.load_base_boards()
    assert len(boards) == 10
    assert boards[-1] == strip_board
    assert len(service.load_catalog()) == 40


def test_library_with_defects_is_rejected(tmp_path) -> None:
    bad = Board(width=2, height=2, pairs=((Cell(0, 0), Cell(0, 1)), (Cell(0, 1), Cell(1, 1))), name="bad")
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(library_to_payload([bad])), encoding="utf-8")
    service = BoardLibraryService(BoardRepository(tmp_path))
    with pytest.raises(ValueError, match="bad: Endpoint 0,1 is shared"):
        service.load_library(path)
    with pytest.raises(ValueError):
        service.load_catalog()


def test_check_library_labels_unnamed_boards() -> None:
    unnamed = Board(width=1, height=1, pairs=((Cell(0, 0), Cell(0, 0)),))
    assert BoardLibraryService.check_library([unnamed]) == [
        "#0: Color 0 endpoints are the same cell 0,0."
    ]
