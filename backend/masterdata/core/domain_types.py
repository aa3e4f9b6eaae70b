"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - EntityId wraps the integer surrogate key; Actor wraps the audit identity
    - Every entity type and operation is an Enum member, never a raw string
    - EntityType.value is the display name used in error messages and logs

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", int)
Actor = NewType("Actor", str)


# ─── Enums ───────────────────────────────────────────────────────

class EntityType(str, Enum):
    """Every entity the pipeline administers."""
    COUNTRY = "Country"
    GENDER = "Gender"
    TITLE = "Title"
    ID_TYPE = "IdType"
    PERSON = "Person"
    USER = "User"
    ROLE = "Role"

    @property
    def label(self) -> str:
        """Lower-case noun for user-facing sentences ("id type", "person")."""
        if self is EntityType.ID_TYPE:
            return "id type"
        return self.value.lower()


class Operation(str, Enum):
    """Write operation in progress; selects validation mode and duplicate wording."""
    CREATE = "create"
    UPDATE = "update"


class FieldKind(str, Enum):
    """Normalization family of a text field."""
    TEXT = "text"      # trim
    CODE = "code"      # trim + uppercase
    EMAIL = "email"    # trim + lowercase


class Sex(str, Enum):
    """Sex decoded from a national identity number."""
    FEMALE = "female"
    MALE = "male"
    UNKNOWN = "unknown"
