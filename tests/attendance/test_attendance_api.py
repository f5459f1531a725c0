from __future__ import annotations

import json

from uniattend.core.exceptions import StorageError


def test_get_attendance_when_nothing_saved(client):
    res = client.get("/api/attendance")

    assert res.status_code == 200
    assert res.get_json() == {}


def test_update_merges_single_field(client, data_file):
    res = client.post("/api/attendance/update", json={"weekId": "w1", "sessionId": "mon_1", "value": "ab12"})
    assert res.status_code == 200
    assert res.get_json() == {"success": True}

    client.post("/api/attendance/update", json={"weekId": "w1", "sessionId": "tue_1", "value": "Z"})

    assert client.get("/api/attendance").get_json() == {"w1": {"mon_1": "AB12", "tue_1": "Z"}}
    assert json.loads(data_file.read_text(encoding="utf-8")) == {"w1": {"mon_1": "AB12", "tue_1": "Z"}}


def test_update_missing_ids_is_rejected(client, data_file):
    res = client.post("/api/attendance/update", json={"sessionId": "mon_1", "value": "A"})
    assert res.status_code == 400
    assert "weekId" in res.get_json()["error"]

    res = client.post("/api/attendance/update", json={"weekId": "w1", "value": "A"})
    assert res.status_code == 400
    assert "sessionId" in res.get_json()["error"]

    assert not data_file.exists()


def test_update_with_non_object_body_is_rejected(client):
    res = client.post("/api/attendance/update", json=["w1", "mon_1", "A"])

    assert res.status_code == 400


def test_full_overwrite_replaces_everything(client):
    client.post("/api/attendance/update", json={"weekId": "w1", "sessionId": "mon_1", "value": "AB12"})

    res = client.post("/api/attendance", json={"w2": {"wed_1": "HELLO"}})

    assert res.status_code == 200
    assert res.get_json() == {"success": True}
    assert client.get("/api/attendance").get_json() == {"w2": {"wed_1": "HELLO"}}


def test_full_overwrite_rejects_non_object(client):
    client.post("/api/attendance", json={"w1": {"mon_1": "KEEP"}})

    res = client.post("/api/attendance", json=[1, 2])
    assert res.status_code == 400

    res = client.post("/api/attendance", data="not json", content_type="application/json")
    assert res.status_code == 400

    assert client.get("/api/attendance").get_json() == {"w1": {"mon_1": "KEEP"}}


def test_storage_failure_returns_server_error(app, client, monkeypatch):
    container = app.extensions["uniattend"]

    def _fail(store):
        raise StorageError("disk full")

    monkeypatch.setattr(container.attendance_repo, "save", _fail)

    res = client.post("/api/attendance/update", json={"weekId": "w1", "sessionId": "mon_1", "value": "A"})

    assert res.status_code == 500
    assert res.get_json() == {"error": "Failed to save attendance data"}


def test_export_downloads_store(client):
    client.post("/api/attendance", json={"w2": {"wed_1": "HELLO"}})

    res = client.get("/api/attendance/export")

    assert res.status_code == 200
    assert "attachment" in res.headers["Content-Disposition"]
    assert "uni_attendance_backup_" in res.headers["Content-Disposition"]
    assert json.loads(res.data) == {"w2": {"wed_1": "HELLO"}}
