from sqlalchemy import func, inspect, select

from classpoints.db.init_db import SAMPLE_STUDENTS, init_db
from classpoints.db.session import create_db_engine, create_session_factory
from classpoints.models.setting import Setting
from classpoints.models.student import Student


def test_init_db_is_idempotent(configured_env):
    from classpoints.core.config import get_settings

    engine = create_db_engine(get_settings())
    session_factory = create_session_factory(engine)
    try:
        first = init_db(engine, session_factory, seed_sample_students=True)
        second = init_db(engine, session_factory, seed_sample_students=True)

        assert first == {"settings": 1, "students": len(SAMPLE_STUDENTS)}
        assert second == {"settings": 0, "students": 0}
        assert set(inspect(engine).get_table_names()) >= {"students", "point_records", "settings", "backups"}

        with session_factory() as db:
            assert db.scalar(select(func.count()).select_from(Student)) == len(SAMPLE_STUDENTS)
            assert db.scalar(select(func.count()).select_from(Setting).where(Setting.key == "theme")) == 1
            assert db.get(Setting, "theme").value == "light"
    finally:
        engine.dispose()


def test_init_db_survives_restart(configured_env):
    from classpoints.core.config import get_settings

    for _ in range(2):
        engine = create_db_engine(get_settings())
        init_db(engine, create_session_factory(engine), seed_sample_students=True)
        engine.dispose()

    engine = create_db_engine(get_settings())
    with create_session_factory(engine)() as db:
        assert db.scalar(select(func.count()).select_from(Student)) == len(SAMPLE_STUDENTS)
    engine.dispose()


def test_sample_students_not_seeded_into_existing_roster(configured_env):
    from classpoints.core.config import get_settings
    from classpoints.db.init_db import create_schema

    engine = create_db_engine(get_settings())
    session_factory = create_session_factory(engine)
    create_schema(engine)
    with session_factory() as db:
        db.add(Student(name="Alice", class_name="1A"))
        db.commit()

    inserted = init_db(engine, session_factory, seed_sample_students=True)
    assert inserted["students"] == 0
    engine.dispose()
