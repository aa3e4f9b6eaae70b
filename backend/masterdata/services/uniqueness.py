"""Uniqueness Oracle - courtesy pre-check for unique fields before commit.

Invariants:
    - Always queried with NORMALIZED values, never raw input
    - Create: no exclude_id, any row with the value conflicts
    - Update: exclude_id is the entity's own id, so the entity never conflicts with itself
    - None never conflicts (absent optional unique fields, e.g. Person.email)
    - The database unique constraint stays the source of truth; a conflict it
      reports at commit is mapped by duplicate_from_conflict()
"""

import re
from typing import Any

from masterdata.core.domain_types import EntityId, Operation
from masterdata.core.errors import DuplicateError
from masterdata.core.field_rules import EntityRules, FieldRule
from masterdata.core.repository_protocols import EntityRepository


class UniquenessOracle:
    """Answers "does another row already hold this value?" for one entity type."""

    def __init__(self, rules: EntityRules, repository: EntityRepository):
        self.rules = rules
        self.repository = repository

    async def exists_other_than(
        self, field: str, value: Any, exclude_id: EntityId | None = None,
    ) -> bool:
        if value is None:
            return False
        existing = await self.repository.find_by_field(field, value, exclude_id)
        return existing is not None

    async def first_conflict(
        self, values: dict[str, Any], exclude_id: EntityId | None = None,
    ) -> FieldRule | None:
        """First unique field (rule-table order) whose value is already taken."""
        for rule in self.rules.unique_fields:
            if rule.name not in values:
                continue
            if await self.exists_other_than(rule.name, values[rule.name], exclude_id):
                return rule
        return None

    async def ensure_unique(
        self,
        values: dict[str, Any],
        operation: Operation,
        exclude_id: EntityId | None = None,
    ) -> None:
        """Raise DuplicateError for the first conflicting unique field."""
        rule = await self.first_conflict(values, exclude_id)
        if rule is not None:
            raise DuplicateError(
                self.rules.entity_type, rule.name, values[rule.name], operation,
            )


def duplicate_from_conflict(
    rules: EntityRules, values: dict[str, Any], detail: str, operation: Operation,
) -> DuplicateError:
    """Translate a commit-time constraint violation into a DuplicateError.

    The field is the unique field named in the driver's detail text
    (SQLite: "UNIQUE constraint failed: country.code", PostgreSQL:
    "Key (code)=(US) already exists"); otherwise the first unique field.
    """
    unique_fields = rules.unique_fields
    chosen = unique_fields[0] if unique_fields else None
    for rule in unique_fields:
        if re.search(rf"\b{re.escape(rule.name)}\b", detail):
            chosen = rule
            break
    field = chosen.name if chosen else "id"
    return DuplicateError(rules.entity_type, field, values.get(field), operation)
