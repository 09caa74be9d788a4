import logging
import re

from sqlalchemy import select
from sqlalchemy.orm import Session

from classpoints.core.exceptions import InputValidationError, StorageError, require_text
from classpoints.db.session import atomic
from classpoints.models.setting import Setting
from classpoints.schemas.settings import DisplaySettings

logger = logging.getLogger(__name__)

THEMES = ("light", "dark", "eye-protection")
DEFAULTS = {"theme": "light", "custom_background": "#ffffff"}

_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def get_display_settings(db: Session) -> DisplaySettings:
    rows = db.scalars(select(Setting).where(Setting.key.in_(tuple(DEFAULTS)))).all()
    stored = {row.key: row.value for row in rows}
    return DisplaySettings(**{key: stored.get(key, default) for key, default in DEFAULTS.items()})


def update_display_settings(db: Session, theme: str, custom_background: str) -> DisplaySettings:
    theme = require_text(theme, "theme")
    custom_background = require_text(custom_background, "custom_background")
    if theme not in THEMES:
        raise InputValidationError(f"theme must be one of {', '.join(THEMES)}")
    if not _COLOR_RE.match(custom_background):
        raise InputValidationError("custom_background must be a #rgb or #rrggbb colour")

    values = {"theme": theme, "custom_background": custom_background.lower()}
    with atomic(db, "update settings", failure=StorageError):
        for key, value in values.items():
            row = db.get(Setting, key)
            if row is None:
                db.add(Setting(key=key, value=value))
            else:
                row.value = value
    logger.info("Display settings updated: theme=%s background=%s", theme, values["custom_background"])
    return DisplaySettings(**values)
