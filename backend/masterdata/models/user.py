"""User & Role ORM - login accounts with role-based grants.

Invariants:
    - username is unique; only a password hash is ever stored
    - A user optionally links to one Person
    - Roles are many-to-many through user_role; role names are unique
    - Relationships load with selectin so async access never lazy-loads
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from masterdata.db.base import AuditMixin, Base
from masterdata.models.person import Person

user_role = Table(
    "user_role",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("user_login.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
)


class Role(AuditMixin, Base):
    """Role granted to users (ROLE_USER, ROLE_ADMIN, ...)."""
    __tablename__ = "role"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, unique=True)


class User(AuditMixin, Base):
    """Login account."""
    __tablename__ = "user_login"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    last_login: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    person_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("person.id"), nullable=True,
    )

    person: Mapped[Person | None] = relationship(Person, lazy="selectin")
    roles: Mapped[list[Role]] = relationship(
        Role, secondary=user_role, lazy="selectin",
    )

    @property
    def role_names(self) -> list[str]:
        return sorted(role.name for role in self.roles)

    def has_role(self, role_name: str) -> bool:
        return any(role.name == role_name for role in self.roles)
