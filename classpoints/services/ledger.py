"""Point ledger: the only code path that changes a student's total.

Every award is written as a ``point_records`` row and, in the same
transaction, folded into ``students.total_points`` with a single
``total_points = total_points + :points`` statement. The increment is done
by the database so concurrent awards for one student serialize on the row
instead of racing through a read-modify-write in Python.
"""

import logging

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from classpoints.core.exceptions import ForeignKeyViolation, require_text
from classpoints.db.session import atomic
from classpoints.models.common import utcnow
from classpoints.models.point_record import PointRecord
from classpoints.models.student import Student

logger = logging.getLogger(__name__)


def add_point_record(db: Session, student_id: int, points: int, reason: str, operator: str) -> PointRecord:
    reason = require_text(reason, "reason")
    operator = require_text(operator, "operator")

    record = PointRecord(student_id=student_id, points=points, reason=reason, operator=operator)
    with atomic(db, "add point record"):
        db.add(record)
        try:
            db.flush()
        except IntegrityError as exc:
            raise ForeignKeyViolation(f"Student {student_id} not found") from exc

        result = db.execute(
            update(Student)
            .where(Student.id == student_id)
            .values(total_points=Student.total_points + points, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise ForeignKeyViolation(f"Student {student_id} not found")

    db.refresh(record)
    logger.info(
        "Recorded %+d points for student %s by %s (record %s)", points, student_id, operator, record.id
    )
    return record
