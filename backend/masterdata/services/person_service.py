"""Person Service - reference pipeline plus relationship wiring and the ID-number rule.

Invariants:
    - title_id / gender_id / id_type_id that do not resolve -> NotFoundError
      for the related type, before uniqueness is checked
    - A null reference id means "unset" on create and "unchanged" on update
    - The national ID-number rule runs on the merged state (stored values
      overlaid with the patch) once references are resolved
    - is_active is patchable; omitted on create it defaults to True
"""

import logging
from typing import Any

from masterdata.core.domain_types import EntityType, Operation
from masterdata.core.errors import NotFoundError
from masterdata.core.field_rules import PERSON_RULES
from masterdata.core.repository_protocols import EntityRepository, ReferenceResolver
from masterdata.core.validate import check_national_id_number
from masterdata.models.person import Person
from masterdata.services.reference_data import ReferenceDataService

logger = logging.getLogger(__name__)

# input key -> (relationship attribute, related entity type)
PERSON_REFERENCES: dict[str, tuple[str, EntityType]] = {
    "title_id": ("title", EntityType.TITLE),
    "gender_id": ("gender", EntityType.GENDER),
    "id_type_id": ("id_type", EntityType.ID_TYPE),
}


class PersonService(ReferenceDataService[Person]):
    """Person CRUD with Title/Gender/IdType references."""

    def __init__(
        self,
        repository: EntityRepository[Person],
        resolver: ReferenceResolver,
        national_id_type_code: str = "ID",
    ):
        super().__init__(PERSON_RULES, Person, repository)
        self.resolver = resolver
        self.national_id_type_code = national_id_type_code

    async def _wire(
        self,
        entity: Person,
        input_data: dict[str, Any],
        values: dict[str, Any],
        operation: Operation,
    ) -> None:
        creating = operation is Operation.CREATE
        resolved = await self._resolve_references(input_data)

        if "id_type" in resolved:
            id_type = resolved["id_type"]
        else:
            id_type = None if creating else entity.id_type
        if "id_number" in values:
            number = values["id_number"]
        else:
            number = None if creating else entity.id_number

        error = check_national_id_number(number, self._is_national(id_type))
        if error:
            raise error

        for attribute, _ in PERSON_REFERENCES.values():
            if attribute in resolved:
                setattr(entity, attribute, resolved[attribute])
            elif creating:
                setattr(entity, attribute, None)

        is_active = input_data.get("is_active")
        if is_active is not None:
            entity.is_active = bool(is_active)
        elif creating:
            entity.is_active = True

    async def _resolve_references(self, input_data: dict[str, Any]) -> dict[str, Any]:
        resolved = {}
        for key, (attribute, entity_type) in PERSON_REFERENCES.items():
            reference_id = input_data.get(key)
            if reference_id is None:
                continue
            related = await self.resolver.resolve(entity_type, reference_id)
            if related is None:
                raise NotFoundError(entity_type, reference_id)
            resolved[attribute] = related
        return resolved

    def _is_national(self, id_type) -> bool:
        return id_type is not None and id_type.code == self.national_id_type_code
