"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence
from pathlib import Path

from colorlink.app.services.board_selection import BoardSelectionService
from colorlink.boards.repository import BoardRepository
from colorlink.boards.service import BoardLibraryService
from colorlink.infra.app_data import apply_runtime_path_defaults
from colorlink.infra.config import env_int, load_default_env_files
from colorlink.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="colorlink", description="Color-link puzzle engine tools.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("catalog", help="List every playable board variant.")
    check = commands.add_parser("check", help="Check board library files for authoring defects.")
    check.add_argument("paths", nargs="+", type=Path)
    pick = commands.add_parser("pick", help="Print a random board variant index.")
    pick.add_argument("--previous", type=int, default=None, help="Index to avoid repeating.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the colorlink command-line tools."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    paths = apply_runtime_path_defaults()
    setup_logging()
    logger.info("app_data_paths root=%s logs=%s boards=%s", paths["root"], paths["logs"], paths["boards"])

    service = BoardLibraryService(BoardRepository(paths["boards"]))
    if args.command == "check":
        return _check(service, args.paths)

    try:
        catalog = service.load_catalog()
    except (OSError, ValueError) as exc:
        logger.exception("board_catalog_load_failed")
        print(f"error: {exc}")
        return 1

    if args.command == "catalog":
        for index, board in enumerate(catalog):
            print(
                f"{index:3d}  {board.name or '-':<12} {board.width}x{board.height}  colors={board.color_count}"
            )
        print(f"variants: {len(catalog)} (from {catalog.base_count} base boards)")
        return 0

    seed = env_int("COLORLINK_SEED")
    rng = random.Random(seed)
    if args.previous is None:
        index = BoardSelectionService.initial_index(rng, len(catalog))
    else:
        index = BoardSelectionService.next_index(rng, args.previous, len(catalog))
    print(index)
    return 0


def _check(service: BoardLibraryService, paths: Sequence[Path]) -> int:
    failed = False
    for path in paths:
        try:
            boards = service.load_library(path)
        except (OSError, ValueError) as exc:
            failed = True
            print(f"{path}: {exc}")
            continue
        print(f"{path}: ok ({len(boards)} boards)")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
