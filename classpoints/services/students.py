import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from classpoints.core.exceptions import NotFound, StorageError, require_text
from classpoints.db.session import atomic
from classpoints.models.common import utcnow
from classpoints.models.point_record import PointRecord
from classpoints.models.student import Student

logger = logging.getLogger(__name__)


def list_students(db: Session) -> list[Student]:
    return list(db.scalars(select(Student).order_by(Student.name.asc(), Student.id.asc())).all())


def get_student(db: Session, student_id: int) -> Student:
    student = db.get(Student, student_id)
    if student is None:
        raise NotFound(f"Student {student_id} not found")
    return student


def add_student(db: Session, name: str, class_name: str) -> Student:
    student = Student(
        name=require_text(name, "name"),
        class_name=require_text(class_name, "class"),
        total_points=0,
    )
    with atomic(db, "add student", failure=StorageError):
        db.add(student)
    db.refresh(student)
    logger.info("Added student %s (%s, %s)", student.id, student.name, student.class_name)
    return student


def update_student(db: Session, student_id: int, name: str, class_name: str) -> Student:
    name = require_text(name, "name")
    class_name = require_text(class_name, "class")

    with atomic(db, "update student", failure=StorageError):
        student = get_student(db, student_id)
        student.name = name
        student.class_name = class_name
        student.updated_at = utcnow()
    db.refresh(student)
    logger.info("Updated student %s", student_id)
    return student


def delete_student(db: Session, student_id: int) -> None:
    """Remove the student together with every point record it owns."""
    with atomic(db, "delete student"):
        removed_records = db.execute(delete(PointRecord).where(PointRecord.student_id == student_id)).rowcount
        result = db.execute(delete(Student).where(Student.id == student_id))
        if result.rowcount != 1:
            raise NotFound(f"Student {student_id} not found")
    logger.info("Deleted student %s and %d point records", student_id, removed_records)
