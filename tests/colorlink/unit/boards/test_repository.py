import json

import pytest

from colorlink.boards.repository import BoardRepository


def test_bundled_payload_is_versioned_library() -> None:
    payload = BoardRepository().load_bundled_payload()
    assert isinstance(payload, dict)
    assert payload["version"] == 1
    assert len(payload["boards"]) == 9


def test_user_libraries_sorted_and_optional(tmp_path) -> None:
    assert BoardRepository().list_user_libraries() == []
    assert BoardRepository(tmp_path / "missing").list_user_libraries() == []
    (tmp_path / "b.json").write_text("{}", encoding="utf-8")
    (tmp_path / "A.json").write_text("{}", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("skip", encoding="utf-8")
    names = [path.name for path in BoardRepository(tmp_path).list_user_libraries()]
    assert names == ["A.json", "b.json"]


def test_load_payload_errors(tmp_path) -> None:
    repo = BoardRepository(tmp_path)
    with pytest.raises(FileNotFoundError):
        repo.load_payload(tmp_path / "missing.json")
    broken = tmp_path / "broken.json"
    broken.write_text("{invalid", encoding="utf-8")
    with pytest.raises(ValueError):
        repo.load_payload(broken)
    good = tmp_path / "good.json"
    good.write_text(json.dumps({"version": 1, "boards": []}), encoding="utf-8")
    assert repo.load_payload(good) == {"version": 1, "boards": []}
