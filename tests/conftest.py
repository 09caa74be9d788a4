from pathlib import Path

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def configured_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_file.as_posix()}")
    monkeypatch.setenv("SEED_SAMPLE_STUDENTS", "false")
    monkeypatch.setenv("DISPLAY_TIMEZONE", "UTC")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    from classpoints.core.config import clear_settings_cache

    clear_settings_cache()
    yield db_file
    clear_settings_cache()


@pytest.fixture()
def session_factory(configured_env: Path):
    from classpoints.core.config import get_settings
    from classpoints.db.init_db import create_schema
    from classpoints.db.session import create_db_engine, create_session_factory

    engine = create_db_engine(get_settings())
    create_schema(engine)
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture()
def app_client(configured_env: Path):
    from classpoints.main import create_app

    app = create_app()
    with TestClient(app) as client:
        yield client


def add_student(client: TestClient, name: str, class_name: str = "1A") -> dict:
    response = client.post("/students", json={"name": name, "class": class_name})
    assert response.status_code == 201, response.text
    return response.json()


def add_points(client: TestClient, student_id: int, points: int, reason: str = "homework", operator: str = "teacher1"):
    return client.post(
        "/points",
        json={"student_id": student_id, "points": points, "reason": reason, "operator": operator},
    )
