"""Person ORM - an individual with optional title, gender and identity document.

Invariants:
    - last_name is non-nullable; email is unique when present
    - Title/Gender/IdType are optional many-to-one references
    - Relationships load with selectin so async access never lazy-loads

Design Decisions:
    - No ORM cascade towards reference data: deleting a referenced row is left
      to the foreign key
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from masterdata.db.base import AuditMixin, Base
from masterdata.models.gender import Gender
from masterdata.models.id_type import IdType
from masterdata.models.title import Title


class Person(AuditMixin, Base):
    """Person entity."""
    __tablename__ = "person"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, unique=True)
    id_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    title_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("title.id"), nullable=True,
    )
    gender_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("gender.id"), nullable=True,
    )
    id_type_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("id_type.id"), nullable=True,
    )

    title: Mapped[Title | None] = relationship(Title, lazy="selectin")
    gender: Mapped[Gender | None] = relationship(Gender, lazy="selectin")
    id_type: Mapped[IdType | None] = relationship(IdType, lazy="selectin")

    @property
    def full_name(self) -> str:
        if self.first_name:
            return f"{self.first_name} {self.last_name}"
        return self.last_name

    @property
    def display_name(self) -> str:
        if self.title is not None:
            return f"{self.title.description} {self.full_name}"
        return self.full_name
