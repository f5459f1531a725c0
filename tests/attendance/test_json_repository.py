from __future__ import annotations

import json

import pytest

from uniattend.attendance.json_repository import JsonFileAttendanceRepository
from uniattend.core.exceptions import StorageError


def test_missing_file_loads_as_empty(tmp_path):
    repo = JsonFileAttendanceRepository(tmp_path / "attendance.json")

    assert repo.load() == {}


def test_save_writes_pretty_json_document(tmp_path):
    path = tmp_path / "nested" / "attendance.json"
    repo = JsonFileAttendanceRepository(path)

    repo.save({"w1": {"mon_1": "AB12"}})

    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == {"w1": {"mon_1": "AB12"}}
    assert '\n  "w1": {' in text
    assert repo.load() == {"w1": {"mon_1": "AB12"}}
    assert [p.name for p in path.parent.iterdir()] == ["attendance.json"]


def test_corrupt_file_loads_as_empty(tmp_path, caplog):
    path = tmp_path / "attendance.json"
    path.write_text("{not json", encoding="utf-8")

    assert JsonFileAttendanceRepository(path).load() == {}
    assert "Could not read attendance file" in caplog.text


def test_non_object_document_loads_as_empty(tmp_path):
    path = tmp_path / "attendance.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert JsonFileAttendanceRepository(path).load() == {}


def test_write_failure_raises_storage_error(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    repo = JsonFileAttendanceRepository(blocker / "attendance.json")

    with pytest.raises(StorageError):
        repo.save({"w1": {}})
