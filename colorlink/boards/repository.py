"""Persistence layer for loading board libraries."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path

BUNDLED_LIBRARY = "base_boards.json"


class BoardRepository:
    """Reads the bundled board library and optional user library files."""

    def __init__(self, user_root: Path | None = None) -> None:
        self._user_root = user_root

    def load_bundled_payload(self) -> object:
        """Load the board library shipped with the package."""
        source = resources.files("colorlink.boards") / "data" / BUNDLED_LIBRARY
        with source.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    def list_user_libraries(self) -> list[Path]:
        """List user library files, sorted by file name."""
        if self._user_root is None or not self._user_root.is_dir():
            return []
        return sorted(self._user_root.glob("*.json"), key=lambda path: path.name.lower())

    def load_payload(self, path: Path) -> object:
        """Load one library file."""
        if not path.exists():
            raise FileNotFoundError(f"Board library '{path}' not found.")
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Board library '{path.name}' is not valid JSON.") from exc
