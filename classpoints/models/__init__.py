from classpoints.models.backup import Backup
from classpoints.models.point_record import PointRecord
from classpoints.models.setting import Setting
from classpoints.models.student import Student

__all__ = [
    "Student",
    "PointRecord",
    "Setting",
    "Backup",
]
