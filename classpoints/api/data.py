from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from classpoints.db.session import get_db
from classpoints.schemas.backups import BackupResponse, RestoreRequest
from classpoints.schemas.common import OkResponse
from classpoints.services.backups import BackupCapability, get_backup_capability

router = APIRouter(prefix="/data", tags=["data"])


@router.post("/backup", response_model=BackupResponse)
def backup_data(
    db: Session = Depends(get_db),
    backups: BackupCapability = Depends(get_backup_capability),
):
    return BackupResponse(backup_path=backups.backup(db))


@router.post("/restore", response_model=OkResponse)
def restore_data(
    payload: RestoreRequest,
    db: Session = Depends(get_db),
    backups: BackupCapability = Depends(get_backup_capability),
):
    backups.restore(db, payload.backup_path)
    return OkResponse(ok=True)
