from sqlalchemy import select
from sqlalchemy.orm import Session

from classpoints.models.point_record import PointRecord


def list_point_records(db: Session, student_id: int | None = None) -> list[PointRecord]:
    """Newest first; ``student_id`` narrows the listing to one student."""
    stmt = select(PointRecord).order_by(PointRecord.timestamp.desc(), PointRecord.id.desc())
    if student_id is not None:
        stmt = stmt.where(PointRecord.student_id == student_id)
    return list(db.scalars(stmt).all())
