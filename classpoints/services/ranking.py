from datetime import UTC, datetime, timedelta
from typing import Literal, get_args

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from classpoints.core.exceptions import InputValidationError
from classpoints.models.point_record import PointRecord
from classpoints.models.student import Student
from classpoints.schemas.common import display_zone
from classpoints.schemas.ranking import RankingItem

TimeRange = Literal["today", "week", "month", "all"]
TIME_RANGES: tuple[str, ...] = get_args(TimeRange)


def _local_midnight(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def window_start(time_range: str, now: datetime) -> datetime | None:
    """Start of the ranking window in UTC, ``None`` for all time.

    Windows follow the display zone's calendar: today starts at local
    midnight, a week on Monday, a month on its first day.
    """
    local_now = now.astimezone(display_zone())
    if time_range == "today":
        start = _local_midnight(local_now)
    elif time_range == "week":
        start = _local_midnight(local_now) - timedelta(days=local_now.weekday())
    elif time_range == "month":
        start = _local_midnight(local_now).replace(day=1)
    elif time_range == "all":
        return None
    else:
        raise InputValidationError(f"time_range must be one of {', '.join(TIME_RANGES)}")
    return start.astimezone(UTC)


def _points_since(since: datetime):
    return (
        select(PointRecord.student_id, func.sum(PointRecord.points).label("points"))
        .where(PointRecord.timestamp >= since)
        .group_by(PointRecord.student_id)
        .subquery()
    )


def get_ranking(db: Session, time_range: str = "all", now: datetime | None = None) -> list[RankingItem]:
    now = now or datetime.now(UTC)
    start = window_start(time_range, now)

    today = _points_since(window_start("today", now))
    today_change = func.coalesce(today.c.points, 0)
    stmt = select(Student, today_change.label("today_change")).outerjoin(
        today, today.c.student_id == Student.id
    )

    if start is None:
        stmt = stmt.order_by(Student.total_points.desc(), Student.name.asc(), Student.id.asc())
    else:
        window = _points_since(start)
        stmt = stmt.outerjoin(window, window.c.student_id == Student.id).order_by(
            func.coalesce(window.c.points, 0).desc(),
            Student.total_points.desc(),
            Student.name.asc(),
            Student.id.asc(),
        )

    return [
        RankingItem(
            rank=position,
            student_id=student.id,
            name=student.name,
            class_name=student.class_name,
            total_points=student.total_points,
            today_change=int(change),
        )
        for position, (student, change) in enumerate(db.execute(stmt).all(), start=1)
    ]
