"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - EntityRepository.save raises ConstraintConflict (core/errors.py) when the
      store's unique constraint rejects the write

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - Async in Protocol: implementations do IO; the pure checks that consume
      their results are never async themselves
"""

from typing import Any, Protocol, TypeVar

from masterdata.core.domain_types import EntityId, EntityType

EntityT = TypeVar("EntityT")


class EntityRepository(Protocol[EntityT]):
    """Contract for single-entity persistence - implemented by shell."""
    async def get_by_id(self, entity_id: EntityId) -> EntityT | None: ...
    async def find_by_field(
        self, field: str, value: Any, exclude_id: EntityId | None = None,
    ) -> EntityT | None: ...
    async def list_sorted(self) -> list[EntityT]: ...
    async def save(self, entity: EntityT) -> EntityT: ...
    async def delete(self, entity: EntityT) -> None: ...


class ReferenceResolver(Protocol):
    """Contract for resolving related entities by id - implemented by shell."""
    async def resolve(self, entity_type: EntityType, entity_id: EntityId) -> Any | None: ...


class SecretHasher(Protocol):
    """Contract for one-way secret hashing - implemented by shell."""
    def hash_secret(self, plaintext: str) -> str: ...
    def verify_secret(self, plaintext: str, hashed: str) -> bool: ...
