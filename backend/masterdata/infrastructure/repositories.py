"""SQLAlchemy Repositories - EntityRepository and ReferenceResolver over AsyncSession.

Invariants:
    - One repository instance per (request session, model class)
    - find_by_field with exclude_id never returns the excluded row
    - save() commits; a unique violation rolls back and raises ConstraintConflict
    - Only attribute names present on the model are queried (no raw SQL fragments)

Design Decisions:
    - Generic over the model class: every entity shares the same five queries,
      the sort order comes from the entity's rule table
"""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from masterdata.core.domain_types import EntityId, EntityType
from masterdata.core.errors import ConstraintConflict
from masterdata.db.base import Base
from masterdata.models import Country, Gender, IdType, Person, Role, Title, User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

MODELS_BY_TYPE: dict[EntityType, type[Base]] = {
    EntityType.COUNTRY: Country,
    EntityType.GENDER: Gender,
    EntityType.TITLE: Title,
    EntityType.ID_TYPE: IdType,
    EntityType.PERSON: Person,
    EntityType.USER: User,
    EntityType.ROLE: Role,
}


class SqlAlchemyRepository(Generic[ModelT]):
    """EntityRepository implementation for one ORM model."""

    def __init__(
        self, db: AsyncSession, model: type[ModelT], sort_by: tuple[str, ...] = ("id",),
    ):
        self.db = db
        self.model = model
        self.sort_by = sort_by

    async def get_by_id(self, entity_id: EntityId) -> ModelT | None:
        result = await self.db.execute(
            select(self.model).where(self.model.id == entity_id),
        )
        return result.scalar_one_or_none()

    async def find_by_field(
        self, field: str, value: Any, exclude_id: EntityId | None = None,
    ) -> ModelT | None:
        column = getattr(self.model, field)
        query = select(self.model).where(column == value)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def list_sorted(self) -> list[ModelT]:
        order = [getattr(self.model, name) for name in self.sort_by]
        result = await self.db.execute(select(self.model).order_by(*order))
        return list(result.scalars().all())

    async def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            detail = str(e.orig) if e.orig is not None else str(e)
            logger.warning(
                f"Unique constraint rejected {self.model.__name__} write: {detail}",
            )
            raise ConstraintConflict(detail) from e
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self.db.delete(entity)
        await self.db.commit()


class SqlAlchemyReferenceResolver:
    """ReferenceResolver implementation: primary-key lookup per entity type."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def resolve(self, entity_type: EntityType, entity_id: EntityId) -> Base | None:
        model = MODELS_BY_TYPE[entity_type]
        return await self.db.get(model, entity_id)
