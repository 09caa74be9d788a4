from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from classpoints.db.session import get_db
from classpoints.schemas.common import OkResponse
from classpoints.schemas.students import StudentOut, StudentWriteRequest
from classpoints.services import students as student_service

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=list[StudentOut])
def list_students(db: Session = Depends(get_db)):
    return student_service.list_students(db)


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def add_student(payload: StudentWriteRequest, db: Session = Depends(get_db)):
    return student_service.add_student(db, payload.name, payload.class_name)


@router.put("/{student_id}", response_model=StudentOut)
def update_student(student_id: int, payload: StudentWriteRequest, db: Session = Depends(get_db)):
    return student_service.update_student(db, student_id, payload.name, payload.class_name)


@router.delete("/{student_id}", response_model=OkResponse)
def delete_student(student_id: int, db: Session = Depends(get_db)):
    student_service.delete_student(db, student_id)
    return OkResponse(ok=True)
