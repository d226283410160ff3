"""Board library use cases."""

from __future__ import annotations

import logging
from pathlib import Path

from colorlink.boards.repository import BoardRepository
from colorlink.boards.schema import payload_to_library
from colorlink.core.catalog import BoardCatalog, find_authoring_defects
from colorlink.core.models import Board

logger = logging.getLogger(__name__)


class BoardLibraryService:
    """Loads board libraries, rejects authoring defects, builds the catalog."""

    def __init__(self, repository: BoardRepository) -> None:
        self._repository = repository

    def load_base_boards(self) -> list[Board]:
        """Load bundled boards followed by every user library, in order."""
        boards = self._checked(payload_to_library(self._repository.load_bundled_payload()), "bundled")
        for path in self._repository.list_user_libraries():
            boards.extend(self.load_library(path))
        return boards

    def load_library(self, path: Path) -> list[Board]:
        """Load and check a single library file."""
        return self._checked(payload_to_library(self._repository.load_payload(path)), path.name)

    def load_catalog(self) -> BoardCatalog:
        base = self.load_base_boards()
        catalog = BoardCatalog(base)
        logger.info("board_catalog_loaded base=%d variants=%d", catalog.base_count, len(catalog))
        return catalog

    @staticmethod
    def check_library(boards: list[Board]) -> list[str]:
        """Return every authoring defect across a library, prefixed by board."""
        problems: list[str] = []
        for index, board in enumerate(boards):
            label = board.name or f"#{index}"
            problems.extend(f"{label}: {defect}" for defect in find_authoring_defects(board))
        return problems

    def _checked(self, boards: list[Board], source: str) -> list[Board]:
        problems = self.check_library(boards)
        if problems:
            logger.error("board_library_rejected source=%s defects=%d", source, len(problems))
            raise ValueError(f"Board library '{source}' is invalid: {'; '.join(problems)}")
        return boards
