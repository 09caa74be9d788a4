from datetime import datetime

from fastapi.testclient import TestClient

from tests.conftest import add_points, add_student


def test_health(app_client: TestClient):
    response = app_client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_alice_scenario_total(app_client: TestClient):
    alice = add_student(app_client, "Alice", "1A")
    assert alice["class"] == "1A"
    assert alice["total_points"] == 0

    first = add_points(app_client, alice["id"], 5, reason="homework")
    assert first.status_code == 201, first.text
    second = add_points(app_client, alice["id"], -2, reason="late")
    assert second.status_code == 201, second.text

    students = app_client.get("/students").json()
    by_name = {item["name"]: item for item in students}
    assert by_name["Alice"]["total_points"] == 3


def test_point_record_payload(app_client: TestClient):
    student = add_student(app_client, "Bob")
    response = add_points(app_client, student["id"], 4, reason="quiz", operator="teacher2")
    assert response.status_code == 201
    record = response.json()
    assert record["id"] > 0
    assert record["student_id"] == student["id"]
    assert record["points"] == 4
    assert record["reason"] == "quiz"
    assert record["operator"] == "teacher2"
    assert record["timestamp"]


def test_students_sorted_by_name(app_client: TestClient):
    for name in ("Charlie", "alice-lower", "Alice", "Bob"):
        add_student(app_client, name)

    names = [item["name"] for item in app_client.get("/students").json()]
    assert names == sorted(names)


def test_point_records_newest_first_and_filtered(app_client: TestClient):
    alice = add_student(app_client, "Alice")
    bob = add_student(app_client, "Bob")
    add_points(app_client, alice["id"], 1, reason="first")
    add_points(app_client, bob["id"], 2, reason="second")
    add_points(app_client, alice["id"], 3, reason="third")

    all_records = app_client.get("/points").json()
    assert [item["reason"] for item in all_records] == ["third", "second", "first"]
    timestamps = [datetime.fromisoformat(item["timestamp"]) for item in all_records]
    assert timestamps == sorted(timestamps, reverse=True)

    alice_records = app_client.get("/points", params={"student_id": alice["id"]}).json()
    assert [item["reason"] for item in alice_records] == ["third", "first"]


def test_add_points_unknown_student(app_client: TestClient):
    response = add_points(app_client, 9999, 5)
    assert response.status_code == 404
    assert response.json()["detail"]["error"] == "foreign_key_violation"
    assert app_client.get("/points").json() == []


def test_add_points_requires_reason_and_operator(app_client: TestClient):
    student = add_student(app_client, "Alice")

    response = add_points(app_client, student["id"], 5, reason="   ")
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "validation_error"

    response = add_points(app_client, student["id"], 5, operator="")
    assert response.status_code == 422
    assert app_client.get("/points").json() == []


def test_malformed_request_uses_uniform_error(app_client: TestClient):
    response = app_client.post("/points", json={"student_id": "abc", "points": 1})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error"] == "validation_error"
    assert "student_id" in detail["fields"]


def test_add_student_validation(app_client: TestClient):
    response = app_client.post("/students", json={"name": "", "class": "1A"})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "validation_error"

    response = app_client.post("/students", json={"name": "Alice", "class": " "})
    assert response.status_code == 422
    assert app_client.get("/students").json() == []


def test_update_student(app_client: TestClient):
    student = add_student(app_client, "Alice", "1A")
    add_points(app_client, student["id"], 7)

    response = app_client.put(f"/students/{student['id']}", json={"name": "Alicia", "class": "2B"})
    assert response.status_code == 200, response.text
    updated = response.json()
    assert updated["name"] == "Alicia"
    assert updated["class"] == "2B"
    assert updated["total_points"] == 7
    assert datetime.fromisoformat(updated["updated_at"]) >= datetime.fromisoformat(student["updated_at"])


def test_update_missing_student(app_client: TestClient):
    response = app_client.put("/students/4242", json={"name": "Ghost", "class": "0"})
    assert response.status_code == 404
    assert response.json()["detail"]["error"] == "not_found"


def test_delete_student_cascades(app_client: TestClient):
    alice = add_student(app_client, "Alice")
    bob = add_student(app_client, "Bob")
    add_points(app_client, alice["id"], 5)
    add_points(app_client, alice["id"], 2)
    add_points(app_client, bob["id"], 1)

    response = app_client.delete(f"/students/{alice['id']}")
    assert response.status_code == 200
    assert response.json()["ok"] is True

    assert app_client.get("/points", params={"student_id": alice["id"]}).json() == []
    ids = [item["id"] for item in app_client.get("/students").json()]
    assert alice["id"] not in ids
    assert len(app_client.get("/points").json()) == 1


def test_delete_missing_student(app_client: TestClient):
    response = app_client.delete("/students/4242")
    assert response.status_code == 404
    assert response.json()["detail"]["error"] == "not_found"


def test_ranking_endpoint(app_client: TestClient):
    alice = add_student(app_client, "Alice")
    bob = add_student(app_client, "Bob")
    add_points(app_client, alice["id"], 3)
    add_points(app_client, bob["id"], 8)

    response = app_client.get("/ranking", params={"time_range": "all"})
    assert response.status_code == 200
    items = response.json()
    assert [(item["rank"], item["name"], item["total_points"]) for item in items] == [(1, "Bob", 8), (2, "Alice", 3)]
    assert items[0]["today_change"] == 8
    assert items[0]["class"] == "1A"


def test_ranking_rejects_unknown_range(app_client: TestClient):
    response = app_client.get("/ranking", params={"time_range": "year"})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "validation_error"


def test_settings_default_and_persisted(app_client: TestClient):
    response = app_client.get("/settings")
    assert response.status_code == 200
    assert response.json() == {"theme": "light", "custom_background": "#ffffff"}

    response = app_client.put("/settings", json={"theme": "dark", "custom_background": "#1F2937"})
    assert response.status_code == 200
    assert response.json() == {"theme": "dark", "custom_background": "#1f2937"}

    assert app_client.get("/settings").json() == {"theme": "dark", "custom_background": "#1f2937"}


def test_settings_validation(app_client: TestClient):
    response = app_client.put("/settings", json={"theme": "neon", "custom_background": "#fff"})
    assert response.status_code == 422
    response = app_client.put("/settings", json={"theme": "light", "custom_background": "blue"})
    assert response.status_code == 422
    assert app_client.get("/settings").json()["theme"] == "light"


def test_backup_and_restore_not_implemented(app_client: TestClient):
    response = app_client.post("/data/backup")
    assert response.status_code == 501
    assert response.json()["detail"]["error"] == "not_implemented"

    response = app_client.post("/data/restore", json={"backup_path": "/tmp/backup.json"})
    assert response.status_code == 501

    response = app_client.post("/data/restore", json={"backup_path": ""})
    assert response.status_code == 422


def test_timestamps_rendered_in_display_zone(app_client: TestClient, monkeypatch):
    from classpoints.core.config import clear_settings_cache

    monkeypatch.setenv("DISPLAY_TIMEZONE", "Asia/Shanghai")
    clear_settings_cache()

    student = add_student(app_client, "Alice")
    add_points(app_client, student["id"], 2)

    record = app_client.get("/points").json()[0]
    assert record["timestamp"].endswith("+08:00")
    assert app_client.get("/students").json()[0]["created_at"].endswith("+08:00")


def test_system_info_counts(app_client: TestClient):
    student = add_student(app_client, "Alice")
    add_points(app_client, student["id"], 2)

    response = app_client.get("/system/info")
    assert response.status_code == 200
    info = response.json()
    assert info["students"] == 1
    assert info["point_records"] == 1
    assert info["app_version"]
