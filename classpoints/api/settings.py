from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from classpoints.db.session import get_db
from classpoints.schemas.settings import DisplaySettings, DisplaySettingsUpdateRequest
from classpoints.services.display_settings import get_display_settings, update_display_settings

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=DisplaySettings)
def read_settings(db: Session = Depends(get_db)):
    return get_display_settings(db)


@router.put("", response_model=DisplaySettings)
def write_settings(payload: DisplaySettingsUpdateRequest, db: Session = Depends(get_db)):
    return update_display_settings(db, payload.theme, payload.custom_background)
