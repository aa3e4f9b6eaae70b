"""Entity Validation - create/update modes, short-circuit order, cross-field rule.

Tests:
    - CREATE checks trimmed raw values, so lowercase codes are rejected
    - UPDATE normalizes first, so lowercase codes are accepted
    - First violated rule wins (field order, then required -> length -> pattern)
    - Supplied ids are rejected on create
    - National ID numbers are checked only for the national ID type
    - Email addresses must be syntactically valid
"""

import pytest

from masterdata.core.domain_types import Operation
from masterdata.core.field_rules import COUNTRY_RULES, PERSON_RULES, ROLE_RULES
from masterdata.core.validate import (
    check_national_id_number, check_patch_field, validate, validate_entity,
)


def test_valid_country_passes():
    assert validate_entity(COUNTRY_RULES, {"code": "US", "name": "United States"}) is None


def test_missing_required_field():
    error = validate_entity(COUNTRY_RULES, {"code": "US", "name": "   "})
    assert error.field == "name"
    assert error.message == "Country name is required"


def test_length_checked_before_pattern():
    error = validate_entity(COUNTRY_RULES, {"code": "usa", "name": "United States"})
    assert error.field == "code"
    assert error.message == "Country code must be exactly 2 characters"


def test_lowercase_code_rejected_on_create():
    error = validate_entity(COUNTRY_RULES, {"code": "us", "name": "United States"})
    assert error.field == "code"
    assert "uppercase" in error.message


def test_first_field_in_table_order_wins():
    error = validate_entity(COUNTRY_RULES, {"code": None, "name": None})
    assert error.field == "code"


def test_code_padded_with_whitespace_is_accepted_on_create():
    assert validate_entity(COUNTRY_RULES, {"code": " US ", "name": "X"}) is None


def test_non_text_value_rejected():
    error = validate_entity(COUNTRY_RULES, {"code": 12, "name": "X"})
    assert error.field == "code"
    assert error.message == "Country code must be text"


def test_identifier_rejected_on_create():
    error = validate(COUNTRY_RULES, {"id": 5, "code": "US", "name": "X"}, Operation.CREATE)
    assert error.field == "id"
    assert error.message == "ID must not be included in a create request"


def test_update_ignores_absent_and_null_fields():
    assert validate(COUNTRY_RULES, {"name": None}, Operation.UPDATE) is None
    assert validate(COUNTRY_RULES, {}, Operation.UPDATE) is None


def test_update_accepts_lowercase_code():
    value, error = check_patch_field(COUNTRY_RULES.field("code"), " gb ")
    assert error is None
    assert value == "GB"


def test_update_blank_required_field_fails():
    error = validate(COUNTRY_RULES, {"name": "  "}, Operation.UPDATE)
    assert error.field == "name"


def test_update_blank_optional_field_clears():
    value, error = check_patch_field(COUNTRY_RULES.field("year"), "  ")
    assert error is None
    assert value is None


@pytest.mark.parametrize("email", [
    "not-an-email",
    "jd@example..com",
    "jd@.example.com",
    "jd@-bad-.com",
    "jd@@example.com",
    "jd@localhost",
])
def test_malformed_email_rejected(email):
    error = validate_entity(PERSON_RULES, {"last_name": "Doe", "email": email})
    assert error.field == "email"
    assert error.message.startswith("Email must be valid")


def test_valid_email_accepted_in_any_case():
    assert validate_entity(PERSON_RULES, {"last_name": "Doe", "email": "jd@example.com"}) is None
    assert validate_entity(PERSON_RULES, {"last_name": "Doe", "email": " JD@Example.COM "}) is None


def test_malformed_email_rejected_on_update():
    value, error = check_patch_field(PERSON_RULES.field("email"), "JD@example..com")
    assert value == "jd@example..com"
    assert error.field == "email"


def test_role_name_pattern():
    error = validate_entity(ROLE_RULES, {"name": "ROLE-X", "description": "x"})
    assert error.field == "name"


def test_national_id_rule_applies_only_to_national_type():
    assert check_national_id_number("12345", is_national_type=False) is None
    assert check_national_id_number(None, is_national_type=True) is None
    assert check_national_id_number("8001015009087", is_national_type=True) is None
    error = check_national_id_number("8001015009088", is_national_type=True)
    assert error.field == "id_number"
