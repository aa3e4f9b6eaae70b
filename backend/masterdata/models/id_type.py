"""IdType ORM - kinds of identity document a Person can carry.

Invariants:
    - The IdType whose code equals settings.national_id_type_code switches on
      national identity-number validation for persons that reference it
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from masterdata.db.base import AuditMixin, Base


class IdType(AuditMixin, Base):
    """Identity document type reference entity."""
    __tablename__ = "id_type"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(5), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
