from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from classpoints.db.base import Base
from classpoints.models.common import TimestampMixin


class Student(TimestampMixin, Base):
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    class_name: Mapped[str] = mapped_column("class", String(128), nullable=False)
    # Cached sum of point_records.points; only the ledger writes it.
    total_points: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    point_records = relationship("PointRecord", back_populates="student", passive_deletes=True)
