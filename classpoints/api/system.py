from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from classpoints.core.config import get_settings
from classpoints.db.session import get_db
from classpoints.models.point_record import PointRecord
from classpoints.models.student import Student

router = APIRouter(tags=["system"])


@router.get("/health")
def health():
    settings = get_settings()
    return {"status": "ok", "version": settings.app_version}


@router.get("/system/info")
def system_info(db: Session = Depends(get_db)):
    settings = get_settings()
    return {
        "app_name": settings.app_name,
        "app_env": settings.app_env,
        "app_version": settings.app_version,
        "students": db.scalar(select(func.count()).select_from(Student)) or 0,
        "point_records": db.scalar(select(func.count()).select_from(PointRecord)) or 0,
    }
