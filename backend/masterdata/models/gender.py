"""Gender ORM - single-letter gender reference data."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from masterdata.db.base import AuditMixin, Base


class Gender(AuditMixin, Base):
    """Gender reference entity."""
    __tablename__ = "gender"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(1), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
