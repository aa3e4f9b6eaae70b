"""Title ORM - honorific reference data (MR, MRS, DR, ...)."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from masterdata.db.base import AuditMixin, Base


class Title(AuditMixin, Base):
    """Title reference entity."""
    __tablename__ = "title"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(5), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
