"""Country ORM - ISO-style country reference data.

Invariants:
    - code is exactly 2 uppercase letters, unique
    - name is unique
    - year and cctld are optional free text
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from masterdata.db.base import AuditMixin, Base


class Country(AuditMixin, Base):
    """Country reference entity."""
    __tablename__ = "country"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(2), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    year: Mapped[str | None] = mapped_column(Text, nullable=True)
    cctld: Mapped[str | None] = mapped_column(Text, nullable=True)
