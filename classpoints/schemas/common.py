from datetime import UTC, datetime, tzinfo
from typing import Annotated
from zoneinfo import ZoneInfo

from pydantic import BaseModel, PlainSerializer
from tzlocal import get_localzone

from classpoints.core.config import get_settings


def display_zone() -> tzinfo:
    zone_name = get_settings().display_timezone
    if zone_name:
        return ZoneInfo(zone_name)
    return get_localzone()


def to_local(value: datetime) -> datetime:
    # SQLite hands back naive values; they are stored as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(display_zone())


LocalDateTime = Annotated[
    datetime,
    PlainSerializer(lambda value: to_local(value).isoformat(), return_type=str, when_used="json"),
]


class OkResponse(BaseModel):
    ok: bool
