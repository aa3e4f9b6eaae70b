"""Error Hierarchy - the closed taxonomy raised by the create/update/delete pipeline.

Invariants:
    - Every error has a code (str) and a kind (ErrorKind)
    - The domain taxonomy is exactly three kinds: VALIDATION, DUPLICATE, NOT_FOUND
    - Errors carry no HTTP status; error_translation.translate() is the only
      mapping from an error to a status and message
    - ConstraintConflict is the repository contract for a late unique violation;
      services translate it to DuplicateError before it reaches a transport

Design Decisions:
    - Single hierarchy with MasterDataError base: one FastAPI handler catches all
    - ErrorKind tag on every instance: the translator matches on the tag, not on isinstance
"""

from enum import Enum
from typing import Any

from masterdata.core.domain_types import EntityType, Operation


class ErrorKind(str, Enum):
    """Closed set of domain error variants. Adding a member forces a translator case."""
    VALIDATION = "validation"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    INFRASTRUCTURE = "infrastructure"


class MasterDataError(Exception):
    """Base exception for all master-data errors."""

    kind: ErrorKind = ErrorKind.INFRASTRUCTURE

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code

    def details(self) -> dict[str, Any]:
        """Variant-specific fields surfaced to callers."""
        return {}


# ─── Domain Errors ──────────────────────────────────────────────

class ValidationError(MasterDataError):
    """Caller-supplied data violates a structural or business rule."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field

    def details(self) -> dict[str, Any]:
        return {"field": self.field, "errors": {self.field: self.message}}


class DuplicateError(MasterDataError):
    """A uniqueness rule is violated (pre-check or commit-time backstop)."""

    kind = ErrorKind.DUPLICATE

    def __init__(
        self,
        entity_type: EntityType,
        field: str,
        value: Any,
        operation: Operation = Operation.CREATE,
    ):
        super().__init__(
            f"{entity_type.value} with {field} '{value}' already exists",
            "DUPLICATE_ENTITY",
        )
        self.entity_type = entity_type
        self.field = field
        self.value = value
        self.operation = operation

    def details(self) -> dict[str, Any]:
        return {
            "entity_type": self.entity_type.value,
            "field": self.field,
            "value": self.value,
            "operation": self.operation.value,
        }


class NotFoundError(MasterDataError):
    """The target of an update/delete/reference resolution does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: EntityType, entity_id: Any):
        super().__init__(
            f"{entity_type.value} not found with id: {entity_id}",
            "ENTITY_NOT_FOUND",
        )
        self.entity_type = entity_type
        self.entity_id = entity_id

    def details(self) -> dict[str, Any]:
        return {"entity_type": self.entity_type.value, "id": self.entity_id}


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(MasterDataError):
    """Database operation failed."""

    kind = ErrorKind.INFRASTRUCTURE

    def __init__(self, message: str, operation: str):
        super().__init__(f"Database {operation} failed: {message}", "DATABASE_ERROR")
        self.operation = operation


class ConstraintConflict(Exception):
    """Raised by a repository when the store rejects a write on a unique constraint."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail
