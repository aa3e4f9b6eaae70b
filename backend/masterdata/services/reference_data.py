"""Reference Data Service - the generic validate -> normalize -> check -> persist pipeline.

Invariants:
    - create: identifier check -> validation -> normalization -> wiring ->
      uniqueness -> persist; the first failure aborts and nothing is written
    - update: lookup -> per supplied field (normalize, validate, uniqueness
      excluding self) -> wiring -> assign -> audit stamp -> persist
    - Absent and null patch fields are left untouched
    - Only fields named in the rule table are assigned from caller input
    - A store-level unique violation surfaces as DuplicateError, never as a
      generic failure

Design Decisions:
    - One class parameterized by an EntityRules table serves Country, Gender,
      Title and IdType; Person and User subclass it and override _wire()
    - Errors are raised (not returned) at this layer: the transports catch
      them at one boundary through the error translator
"""

import logging
from typing import Any, Generic, TypeVar

from masterdata.core.domain_types import Actor, EntityId, Operation
from masterdata.core.errors import ConstraintConflict, DuplicateError, NotFoundError
from masterdata.core.field_rules import EntityRules
from masterdata.core.normalize import normalize, normalize_values
from masterdata.core.repository_protocols import EntityRepository
from masterdata.core.validate import check_patch_field, validate
from masterdata.services.uniqueness import UniquenessOracle, duplicate_from_conflict

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class ReferenceDataService(Generic[ModelT]):
    """CRUD pipeline for one administered entity type."""

    def __init__(
        self,
        rules: EntityRules,
        model: type[ModelT],
        repository: EntityRepository[ModelT],
    ):
        self.rules = rules
        self.model = model
        self.repository = repository
        self.uniqueness = UniquenessOracle(rules, repository)

    @property
    def entity_type(self):
        return self.rules.entity_type

    # ─── Reads ──────────────────────────────────────────────────

    async def get(self, entity_id: EntityId) -> ModelT:
        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_type, entity_id)
        return entity

    async def list_sorted(self) -> list[ModelT]:
        return await self.repository.list_sorted()

    async def find_by(self, field: str, value: Any) -> ModelT:
        """Lookup by a field value, normalized the way it was stored."""
        rule = self.rules.field(field)
        lookup = normalize(rule, value) if rule else value
        entity = await self.repository.find_by_field(field, lookup)
        if entity is None:
            raise NotFoundError(self.entity_type, value)
        return entity

    async def find_by_lookup(self, value: Any) -> ModelT:
        """Lookup by the entity's natural key, e.g. a country code or a person email."""
        return await self.find_by(self.rules.lookup_field, value)

    # ─── Writes ─────────────────────────────────────────────────

    async def create(self, input_data: dict[str, Any], actor: Actor) -> ModelT:
        error = validate(self.rules, input_data, Operation.CREATE)
        if error:
            raise error

        values = {
            name: value
            for name, value in normalize_values(self.rules, input_data).items()
            if name in self.rules.field_names
        }
        entity = self.model(**values)
        entity.created_by = actor
        await self._wire(entity, input_data, values, Operation.CREATE)
        await self.uniqueness.ensure_unique(values, Operation.CREATE)

        saved = await self._persist(entity, values, Operation.CREATE)
        logger.info(
            f"Created {self.entity_type.value} {saved.id}",
            extra={
                "entity_type": self.entity_type.value,
                "entity_id": saved.id,
                "actor": actor,
                "operation": Operation.CREATE.value,
            },
        )
        return saved

    async def update(
        self, entity_id: EntityId, patch: dict[str, Any], actor: Actor,
    ) -> ModelT:
        entity = await self.get(entity_id)
        supplied = {name: value for name, value in patch.items() if value is not None}

        changes: dict[str, Any] = {}
        for rule in self.rules.fields:
            if rule.name not in supplied:
                continue
            value, error = check_patch_field(rule, supplied[rule.name])
            if error:
                raise error
            if rule.unique and await self.uniqueness.exists_other_than(
                rule.name, value, entity.id,
            ):
                raise DuplicateError(self.entity_type, rule.name, value, Operation.UPDATE)
            changes[rule.name] = value

        await self._wire(entity, supplied, changes, Operation.UPDATE)
        for name, value in changes.items():
            setattr(entity, name, value)
        entity.stamp_update(actor)

        current = {name: getattr(entity, name) for name in self.rules.field_names}
        saved = await self._persist(entity, current, Operation.UPDATE)
        logger.info(
            f"Updated {self.entity_type.value} {saved.id}: {sorted(changes)}",
            extra={
                "entity_type": self.entity_type.value,
                "entity_id": saved.id,
                "actor": actor,
                "operation": Operation.UPDATE.value,
            },
        )
        return saved

    async def delete(self, entity_id: EntityId) -> None:
        entity = await self.get(entity_id)
        await self.repository.delete(entity)
        logger.info(
            f"Deleted {self.entity_type.value} {entity_id}",
            extra={"entity_type": self.entity_type.value, "entity_id": entity_id},
        )

    # ─── Hooks ──────────────────────────────────────────────────

    async def _wire(
        self,
        entity: ModelT,
        input_data: dict[str, Any],
        values: dict[str, Any],
        operation: Operation,
    ) -> None:
        """Relationship and cross-field work beyond the rule table. No-op here."""
        return None

    async def _persist(
        self, entity: ModelT, values: dict[str, Any], operation: Operation,
    ) -> ModelT:
        try:
            return await self.repository.save(entity)
        except ConstraintConflict as e:
            raise duplicate_from_conflict(self.rules, values, e.detail, operation) from e
