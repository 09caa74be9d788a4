import logging

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from classpoints import models  # noqa: F401
from classpoints.db.base import Base
from classpoints.models.setting import Setting
from classpoints.models.student import Student

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = (("theme", "light"),)

SAMPLE_STUDENTS = (
    ("张三", "一年级1班"),
    ("李四", "一年级1班"),
    ("王五", "一年级2班"),
    ("赵六", "一年级2班"),
    ("孙七", "一年级3班"),
)


def create_schema(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine, checkfirst=True)


def seed_defaults(db: Session, seed_sample_students: bool = True) -> dict[str, int]:
    """Insert default rows that are missing. Safe to call on every startup."""
    inserted = {"settings": 0, "students": 0}

    for key, value in DEFAULT_SETTINGS:
        if db.get(Setting, key) is None:
            db.add(Setting(key=key, value=value))
            inserted["settings"] += 1
            logger.info("Set default %s to %s", key, value)

    if seed_sample_students:
        student_count = db.scalar(select(func.count()).select_from(Student)) or 0
        if student_count == 0:
            for name, class_name in SAMPLE_STUDENTS:
                db.add(Student(name=name, class_name=class_name, total_points=0))
            inserted["students"] = len(SAMPLE_STUDENTS)
            logger.info("Added %d sample students", len(SAMPLE_STUDENTS))

    db.commit()
    return inserted


def init_db(engine: Engine, session_factory: sessionmaker[Session], seed_sample_students: bool = True) -> dict[str, int]:
    create_schema(engine)
    with session_factory() as db:
        return seed_defaults(db, seed_sample_students=seed_sample_students)
