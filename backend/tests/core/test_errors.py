"""Error Hierarchy - codes, kinds and details of the taxonomy."""

from masterdata.core.domain_types import EntityType, Operation
from masterdata.core.error_translation import translate
from masterdata.core.errors import (
    DatabaseError, DuplicateError, ErrorKind, MasterDataError, NotFoundError,
    ValidationError,
)


def test_taxonomy_shares_base():
    for exc in (
        ValidationError("code", "bad"),
        DuplicateError(EntityType.TITLE, "code", "MR"),
        NotFoundError(EntityType.TITLE, 1),
    ):
        assert isinstance(exc, MasterDataError)


def test_validation_error_fields():
    exc = ValidationError("code", "Country code is required")
    assert exc.kind is ErrorKind.VALIDATION
    assert exc.code == "VALIDATION_ERROR"
    assert exc.field == "code"
    assert exc.message == "Country code is required"


def test_duplicate_error_defaults_to_create():
    exc = DuplicateError(EntityType.COUNTRY, "code", "US")
    assert exc.operation is Operation.CREATE
    assert exc.code == "DUPLICATE_ENTITY"
    assert str(exc) == "Country with code 'US' already exists"


def test_duplicate_details():
    details = DuplicateError(EntityType.COUNTRY, "code", "US", Operation.UPDATE).details()
    assert details == {
        "entity_type": "Country",
        "field": "code",
        "value": "US",
        "operation": "update",
    }


def test_not_found_message():
    exc = NotFoundError(EntityType.COUNTRY, 99999)
    assert exc.kind is ErrorKind.NOT_FOUND
    assert str(exc) == "Country not found with id: 99999"


def test_errors_carry_no_status_of_their_own():
    """Statuses live only in translate(); a database failure is an opaque 500."""
    exc = DatabaseError("deadlock detected", "commit")
    assert not hasattr(exc, "http_status")
    assert not hasattr(exc, "to_response")
    outcome = translate(exc)
    assert outcome.status == 500
    assert "deadlock" not in outcome.message
