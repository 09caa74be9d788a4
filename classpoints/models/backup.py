from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from classpoints.db.base import Base
from classpoints.models.common import CreatedAtMixin


class Backup(CreatedAtMixin, Base):
    __tablename__ = "backups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    filename: Mapped[str] = mapped_column(String(512), nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False)
    hash: Mapped[str] = mapped_column(String(128), nullable=False)
