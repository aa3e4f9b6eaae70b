"""Error Translation - total mapping from errors to outcomes.

Tests:
    - Every domain ErrorKind maps to a non-500 status
    - Unknown and infrastructure errors map to an opaque 500
    - Duplicate wording depends on the operation in progress
"""

import pytest

from masterdata.core.domain_types import EntityType, Operation
from masterdata.core.error_translation import UNEXPECTED_MESSAGE, translate
from masterdata.core.errors import (
    DatabaseError, DuplicateError, ErrorKind, NotFoundError, ValidationError,
)

DOMAIN_ERRORS = {
    ErrorKind.VALIDATION: ValidationError("code", "Country code is required"),
    ErrorKind.DUPLICATE: DuplicateError(EntityType.COUNTRY, "code", "US"),
    ErrorKind.NOT_FOUND: NotFoundError(EntityType.COUNTRY, 99999),
}


def test_every_domain_kind_is_covered():
    assert set(DOMAIN_ERRORS) | {ErrorKind.INFRASTRUCTURE} == set(ErrorKind)


@pytest.mark.parametrize("kind", list(DOMAIN_ERRORS))
def test_domain_kinds_are_not_500(kind):
    outcome = translate(DOMAIN_ERRORS[kind])
    assert outcome.status != 500
    assert outcome.expected


def test_validation_outcome():
    outcome = translate(DOMAIN_ERRORS[ErrorKind.VALIDATION])
    assert (outcome.status, outcome.code) == (400, "VALIDATION_ERROR")
    assert outcome.message == "Country code is required"
    assert outcome.details["field"] == "code"


def test_duplicate_on_create_message():
    outcome = translate(DuplicateError(EntityType.COUNTRY, "code", "US", Operation.CREATE))
    assert (outcome.status, outcome.code) == (409, "DUPLICATE_ENTITY")
    assert outcome.message == (
        "A country with code 'US' already exists. Please use a different value."
    )


def test_duplicate_on_update_message():
    outcome = translate(DuplicateError(EntityType.COUNTRY, "code", "GB", Operation.UPDATE))
    assert outcome.message == (
        "Another country already has this code (GB). Please use a different value."
    )


def test_duplicate_article_before_vowel():
    outcome = translate(DuplicateError(EntityType.ID_TYPE, "code", "ID"))
    assert outcome.message.startswith("An id type with code 'ID'")


def test_not_found_outcome():
    outcome = translate(NotFoundError(EntityType.COUNTRY, 99999))
    assert (outcome.status, outcome.code) == (404, "ENTITY_NOT_FOUND")
    assert outcome.message == "The requested country was not found."


@pytest.mark.parametrize("exc", [
    RuntimeError("connection string postgres://secret"),
    KeyError("internal"),
    DatabaseError("deadlock detected", "commit"),
])
def test_unexpected_errors_are_opaque(exc):
    outcome = translate(exc)
    assert outcome.status == 500
    assert outcome.code == "INTERNAL_ERROR"
    assert outcome.message == UNEXPECTED_MESSAGE
    assert outcome.details == {}
    assert not outcome.expected


def test_outcome_envelope():
    body = translate(NotFoundError(EntityType.PERSON, 7)).to_response()
    assert body["error"]["code"] == "ENTITY_NOT_FOUND"
    assert body["error"]["status"] == 404
    assert body["error"]["id"] == 7
