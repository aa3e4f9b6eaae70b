"""Error Translation - the single mapping from errors to caller-facing outcomes.

Invariants:
    - translate() is TOTAL: every exception yields an ErrorOutcome
    - Domain kinds map to fixed statuses: VALIDATION 400, DUPLICATE 409, NOT_FOUND 404
    - Anything else (including infrastructure errors) is UNEXPECTED: status 500,
      opaque message, no internal detail in the outcome
    - The JSON handlers and the HTML fragment routes both call translate();
      neither holds its own status table
"""

from dataclasses import dataclass, field
from typing import Any

from masterdata.core.domain_types import Operation
from masterdata.core.errors import (
    DuplicateError,
    ErrorKind,
    MasterDataError,
    NotFoundError,
    ValidationError,
)

UNEXPECTED_MESSAGE = (
    "An unexpected error occurred. Please try again "
    "or contact support if the problem persists."
)


@dataclass(frozen=True)
class ErrorOutcome:
    """Transport-neutral result of translating an error."""
    status: int
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)
    expected: bool = True

    def to_response(self) -> dict:
        """JSON envelope shared by every API error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "status": self.status,
                **self.details,
            }
        }


def translate(exc: BaseException) -> ErrorOutcome:
    """Map any exception to its outcome."""
    if not isinstance(exc, MasterDataError):
        return _unexpected()

    match exc.kind:
        case ErrorKind.VALIDATION:
            return _validation_outcome(exc)
        case ErrorKind.DUPLICATE:
            return _duplicate_outcome(exc)
        case ErrorKind.NOT_FOUND:
            return _not_found_outcome(exc)
        case ErrorKind.INFRASTRUCTURE:
            return _unexpected()
        case _:
            return _unexpected()


def _validation_outcome(exc: ValidationError) -> ErrorOutcome:
    return ErrorOutcome(
        status=400, code="VALIDATION_ERROR", message=exc.message,
        details=exc.details(),
    )


def _duplicate_outcome(exc: DuplicateError) -> ErrorOutcome:
    noun = exc.entity_type.label
    if exc.operation is Operation.UPDATE:
        message = (
            f"Another {noun} already has this {exc.field} ({exc.value}). "
            "Please use a different value."
        )
    else:
        article = "An" if noun[0] in "aeiou" else "A"
        message = (
            f"{article} {noun} with {exc.field} '{exc.value}' already exists. "
            "Please use a different value."
        )
    return ErrorOutcome(
        status=409, code="DUPLICATE_ENTITY", message=message,
        details=exc.details(),
    )


def _not_found_outcome(exc: NotFoundError) -> ErrorOutcome:
    return ErrorOutcome(
        status=404, code="ENTITY_NOT_FOUND",
        message=f"The requested {exc.entity_type.label} was not found.",
        details=exc.details(),
    )


def _unexpected() -> ErrorOutcome:
    return ErrorOutcome(
        status=500, code="INTERNAL_ERROR", message=UNEXPECTED_MESSAGE,
        expected=False,
    )
