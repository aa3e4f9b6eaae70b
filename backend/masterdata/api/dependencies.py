"""API Dependencies - per-request service construction and the audit actor.

Invariants:
    - Services and repositories live for one request and share its AsyncSession
    - The actor comes from the configured header; blank or missing falls back
      to the configured default actor
"""

from typing import Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from masterdata.config import get_settings
from masterdata.core.domain_types import Actor, EntityType
from masterdata.core.field_rules import (
    COUNTRY_RULES, GENDER_RULES, ID_TYPE_RULES, PERSON_RULES, ROLE_RULES,
    TITLE_RULES, USER_RULES, EntityRules,
)
from masterdata.infrastructure.database import get_db
from masterdata.infrastructure.repositories import (
    MODELS_BY_TYPE, SqlAlchemyReferenceResolver, SqlAlchemyRepository,
)
from masterdata.infrastructure.security import WerkzeugSecretHasher
from masterdata.models import Person, Role, User
from masterdata.services.person_service import PersonService
from masterdata.services.reference_data import ReferenceDataService
from masterdata.services.user_service import UserService

REFERENCE_RULES: dict[EntityType, EntityRules] = {
    EntityType.COUNTRY: COUNTRY_RULES,
    EntityType.GENDER: GENDER_RULES,
    EntityType.TITLE: TITLE_RULES,
    EntityType.ID_TYPE: ID_TYPE_RULES,
}

_hasher = WerkzeugSecretHasher()


def get_actor(request: Request) -> Actor:
    settings = get_settings()
    actor = request.headers.get(settings.actor_header, "").strip()
    return Actor(actor or settings.default_actor)


def build_reference_service(
    db: AsyncSession, entity_type: EntityType,
) -> ReferenceDataService:
    rules = REFERENCE_RULES[entity_type]
    model = MODELS_BY_TYPE[entity_type]
    return ReferenceDataService(
        rules, model, SqlAlchemyRepository(db, model, rules.sort_by),
    )


def reference_service(entity_type: EntityType) -> Callable[..., ReferenceDataService]:
    """Dependency factory: one provider per reference entity type."""

    def provide(db: AsyncSession = Depends(get_db)) -> ReferenceDataService:
        return build_reference_service(db, entity_type)

    return provide


def build_person_service(db: AsyncSession) -> PersonService:
    return PersonService(
        SqlAlchemyRepository(db, Person, PERSON_RULES.sort_by),
        SqlAlchemyReferenceResolver(db),
        national_id_type_code=get_settings().national_id_type_code,
    )


def build_user_service(db: AsyncSession) -> UserService:
    return UserService(
        SqlAlchemyRepository(db, User, USER_RULES.sort_by),
        SqlAlchemyRepository(db, Role, ROLE_RULES.sort_by),
        SqlAlchemyReferenceResolver(db),
        _hasher,
        default_role=get_settings().default_role,
    )


def get_person_service(db: AsyncSession = Depends(get_db)) -> PersonService:
    return build_person_service(db)


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return build_user_service(db)
