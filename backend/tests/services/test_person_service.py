"""Person Service - references, the national ID-number rule, email uniqueness.

Tests:
    - References resolve by id; an unknown id -> NotFoundError for the related type
    - National ID typed numbers must pass the codec; other types accept any text
    - The ID rule is evaluated on the merged state during update
    - Email is normalized to lower case, syntax-checked and unique when present
    - Updating email to its own value (any case) never conflicts; another
      person's email -> DuplicateError(operation=update)
"""

import pytest

from masterdata.core.domain_types import EntityType, Operation
from masterdata.core.errors import DuplicateError, NotFoundError, ValidationError

VALID_ID = "8001015009087"


async def test_create_with_references(person_service, seed_reference):
    person = await person_service.create(
        {
            "first_name": "John",
            "last_name": "Doe",
            "email": " John.Doe@Example.COM ",
            "title_id": seed_reference["mr"].id,
            "gender_id": seed_reference["male"].id,
            "id_type_id": seed_reference["national_id"].id,
            "id_number": VALID_ID,
        },
        actor="clerk",
    )
    assert person.email == "john.doe@example.com"
    assert person.title.code == "MR"
    assert person.gender.code == "M"
    assert person.id_type.code == "ID"
    assert person.is_active is True
    assert person.display_name == "Mister John Doe"
    assert person.created_by == "clerk"


async def test_unknown_reference_reports_related_type(person_service, seed_reference):
    with pytest.raises(NotFoundError) as exc:
        await person_service.create({"last_name": "Doe", "gender_id": 9999}, "clerk")
    assert exc.value.entity_type is EntityType.GENDER
    assert exc.value.entity_id == 9999


async def test_invalid_national_id_rejected(person_service, seed_reference):
    with pytest.raises(ValidationError) as exc:
        await person_service.create(
            {
                "last_name": "Doe",
                "id_type_id": seed_reference["national_id"].id,
                "id_number": "8001015009088",
            },
            "clerk",
        )
    assert exc.value.field == "id_number"


async def test_other_id_types_accept_any_number(person_service, seed_reference):
    person = await person_service.create(
        {
            "last_name": "Doe",
            "id_type_id": seed_reference["passport"].id,
            "id_number": "A1234567",
        },
        "clerk",
    )
    assert person.id_number == "A1234567"


async def test_switching_to_national_type_checks_stored_number(person_service, seed_reference):
    person = await person_service.create(
        {
            "last_name": "Doe",
            "id_type_id": seed_reference["passport"].id,
            "id_number": "A1234567",
        },
        "clerk",
    )
    with pytest.raises(ValidationError) as exc:
        await person_service.update(
            person.id, {"id_type_id": seed_reference["national_id"].id}, "clerk",
        )
    assert exc.value.field == "id_number"


async def test_update_keeps_references_when_omitted(person_service, seed_reference):
    person = await person_service.create(
        {"last_name": "Doe", "title_id": seed_reference["mr"].id}, "clerk",
    )
    updated = await person_service.update(
        person.id, {"first_name": "Jane", "is_active": False}, "editor",
    )
    assert updated.title.code == "MR"
    assert updated.first_name == "Jane"
    assert updated.is_active is False
    assert updated.updated_by == "editor"


async def test_duplicate_email(person_service):
    await person_service.create({"last_name": "Doe", "email": "jd@example.com"}, "clerk")
    with pytest.raises(DuplicateError) as exc:
        await person_service.create({"last_name": "Roe", "email": "JD@example.com"}, "clerk")
    assert exc.value.field == "email"
    assert exc.value.value == "jd@example.com"


async def test_people_without_email_do_not_conflict(person_service):
    await person_service.create({"last_name": "Doe"}, "clerk")
    second = await person_service.create({"last_name": "Roe"}, "clerk")
    assert second.email is None


async def test_list_sorted_by_last_then_first_name(person_service):
    await person_service.create({"first_name": "Zoe", "last_name": "Adams"}, "clerk")
    await person_service.create({"first_name": "Amy", "last_name": "Baker"}, "clerk")
    await person_service.create({"first_name": "Abe", "last_name": "Adams"}, "clerk")
    names = [p.full_name for p in await person_service.list_sorted()]
    assert names == ["Abe Adams", "Zoe Adams", "Amy Baker"]


async def test_update_email_to_own_value_in_other_case(person_service):
    person = await person_service.create({"last_name": "Doe", "email": "jd@example.com"}, "clerk")
    updated = await person_service.update(person.id, {"email": "  JD@Example.COM "}, "clerk")
    assert updated.email == "jd@example.com"


async def test_update_email_to_another_persons_email(person_service):
    await person_service.create({"last_name": "Doe", "email": "a@x.com"}, "clerk")
    roe = await person_service.create({"last_name": "Roe", "email": "b@x.com"}, "clerk")
    with pytest.raises(DuplicateError) as exc:
        await person_service.update(roe.id, {"email": "A@X.COM"}, "clerk")
    assert exc.value.field == "email"
    assert exc.value.value == "a@x.com"
    assert exc.value.operation is Operation.UPDATE


@pytest.mark.parametrize("email", ["jd@example..com", "jd@.example.com", "jd@-bad-.com"])
async def test_malformed_email_is_not_stored(person_service, email):
    with pytest.raises(ValidationError) as exc:
        await person_service.create({"last_name": "Doe", "email": email}, "clerk")
    assert exc.value.field == "email"
    assert await person_service.list_sorted() == []
