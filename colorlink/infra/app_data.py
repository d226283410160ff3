"""Unified colorlink app-data paths."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory for runtime state."""
    configured = os.getenv("COLORLINK_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return Path.cwd() / candidate
    return Path.cwd() / "appdata"


def resolve_logs_dir() -> Path:
    return resolve_app_data_root() / "logs"


def resolve_boards_dir() -> Path:
    """Resolve the directory holding user board libraries."""
    return resolve_app_data_root() / "boards"


def apply_runtime_path_defaults() -> dict[str, Path]:
    """Create app-data directories and pin path env vars to them."""
    root = resolve_app_data_root()
    root.mkdir(parents=True, exist_ok=True)
    logs = _normalize_runtime_path_env("COLORLINK_LOG_DIR", resolve_logs_dir())
    boards = _normalize_runtime_path_env("COLORLINK_BOARDS_DIR", resolve_boards_dir())
    logs.mkdir(parents=True, exist_ok=True)
    boards.mkdir(parents=True, exist_ok=True)
    return {"root": root, "logs": logs, "boards": boards}


def _normalize_runtime_path_env(var_name: str, default_path: Path) -> Path:
    raw = os.getenv(var_name, "").strip()
    if not raw:
        os.environ[var_name] = str(default_path)
        return default_path
    candidate = Path(raw)
    if candidate.is_absolute():
        return candidate
    normalized = resolve_app_data_root() / candidate
    os.environ[var_name] = str(normalized)
    return normalized
