from __future__ import annotations

import os

from colorlink.infra.config import env_int, load_default_env_files, load_env_file


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "A=1\nB='two'\n#comment\nINVALID\nC=three\n=orphan\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("C", "already")
    monkeypatch.setenv("A", "stale")
    monkeypatch.setenv("B", "stale")
    load_env_file(str(env_file))
    assert os.environ.get("A") == "1"
    assert os.environ.get("B") == "two"
    assert os.environ.get("C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("C=three\n", encoding="utf-8")
    monkeypatch.setenv("C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("C") == "already"


def test_load_env_file_missing_is_noop(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("COLORLINK_SEED", raising=False)
    load_env_file(str(tmp_path / ".env.missing"))
    assert "COLORLINK_SEED" not in os.environ


def test_load_default_env_files_honors_order(tmp_path, monkeypatch) -> None:
    app_env = tmp_path / ".env.app"
    app_local_env = tmp_path / ".env.app.local"
    app_env.write_text("A=app\nB=app\n", encoding="utf-8")
    app_local_env.write_text("B=app_local\n", encoding="utf-8")
    monkeypatch.setenv("A", "stale")
    monkeypatch.setenv("B", "stale")

    load_default_env_files(paths=(str(app_env), str(app_local_env)))
    assert os.environ.get("A") == "app"
    assert os.environ.get("B") == "app_local"


def test_env_int_parses_or_ignores(monkeypatch) -> None:
    monkeypatch.setenv("COLORLINK_SEED", " 42 ")
    assert env_int("COLORLINK_SEED") == 42
    monkeypatch.setenv("COLORLINK_SEED", "forty-two")
    assert env_int("COLORLINK_SEED") is None
    monkeypatch.delenv("COLORLINK_SEED", raising=False)
    assert env_int("COLORLINK_SEED") is None


def test_load_env_file_resolves_relative_path_from_cwd(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env.app").write_text("COLORLINK_SEED=9\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("COLORLINK_SEED", "1")
    load_env_file(".env.app")
    assert env_int("COLORLINK_SEED") == 9
