from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from classpoints.db.session import get_db
from classpoints.schemas.points import PointRecordCreateRequest, PointRecordOut
from classpoints.services import ledger
from classpoints.services.records import list_point_records

router = APIRouter(prefix="/points", tags=["points"])


@router.post("", response_model=PointRecordOut, status_code=status.HTTP_201_CREATED)
def add_point_record(payload: PointRecordCreateRequest, db: Session = Depends(get_db)):
    return ledger.add_point_record(
        db,
        student_id=payload.student_id,
        points=payload.points,
        reason=payload.reason,
        operator=payload.operator,
    )


@router.get("", response_model=list[PointRecordOut])
def get_point_records(
    student_id: int | None = Query(default=None),
    db: Session = Depends(get_db),
):
    return list_point_records(db, student_id=student_id)
