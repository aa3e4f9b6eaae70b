"""Service test fixtures - services bound to the test session.

Design Decisions:
    - Real SqlAlchemyRepository over in-memory SQLite: the pipeline is exercised
      together with the unique constraints that back it
    - A cheap pbkdf2 configuration keeps password hashing fast in tests
"""

import pytest

from masterdata.api.dependencies import build_person_service, build_reference_service
from masterdata.core.domain_types import EntityType
from masterdata.core.field_rules import ROLE_RULES, USER_RULES
from masterdata.infrastructure.repositories import (
    SqlAlchemyReferenceResolver, SqlAlchemyRepository,
)
from masterdata.infrastructure.security import WerkzeugSecretHasher
from masterdata.models import Role, User
from masterdata.services.user_service import UserService


@pytest.fixture
def country_service(test_db):
    return build_reference_service(test_db, EntityType.COUNTRY)


@pytest.fixture
def person_service(test_db):
    return build_person_service(test_db)


@pytest.fixture
def fast_hasher():
    return WerkzeugSecretHasher(method="pbkdf2:sha256:1000")


@pytest.fixture
def user_service(test_db, fast_hasher):
    return UserService(
        SqlAlchemyRepository(test_db, User, USER_RULES.sort_by),
        SqlAlchemyRepository(test_db, Role, ROLE_RULES.sort_by),
        SqlAlchemyReferenceResolver(test_db),
        fast_hasher,
        default_role="ROLE_USER",
    )
