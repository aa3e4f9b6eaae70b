"""SQLAlchemy Declarative Base - shared base class and audit columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - AuditMixin: created_by/created_at stamped at construction,
      updated_by/updated_at stay NULL until the first update
    - created_by has no default: a row written without an actor is rejected
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all master-data ORM models."""
    pass


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AuditMixin:
    """Who/when columns shared by every administered entity."""

    created_by: Mapped[str] = mapped_column(
        String(100), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    def stamp_update(self, actor: str) -> None:
        self.updated_by = actor
        self.updated_at = utc_now()
