"""User Service - login accounts: password hashing, person link and role grants.

Invariants:
    - Passwords are hashed through SecretHasher before they touch an entity;
      the plaintext is never stored or logged
    - Create requires a non-blank password; on update a blank password
      leaves the stored hash unchanged
    - Role names are normalized like any CODE field before lookup; an unknown
      name -> NotFoundError(Role, name)
    - A user created without roles gets the configured default role when it
      exists in the store
"""

import logging
from typing import Any

from masterdata.core.domain_types import Actor, EntityId, EntityType, Operation
from masterdata.core.errors import NotFoundError, ValidationError
from masterdata.core.field_rules import ROLE_RULES, USER_RULES
from masterdata.core.normalize import normalize
from masterdata.core.repository_protocols import (
    EntityRepository, ReferenceResolver, SecretHasher,
)
from masterdata.db.base import utc_now
from masterdata.models.user import Role, User
from masterdata.services.reference_data import ReferenceDataService

logger = logging.getLogger(__name__)


class UserService(ReferenceDataService[User]):
    """User CRUD plus role management and credential checks."""

    def __init__(
        self,
        repository: EntityRepository[User],
        roles: EntityRepository[Role],
        resolver: ReferenceResolver,
        hasher: SecretHasher,
        default_role: str | None = "ROLE_USER",
    ):
        super().__init__(USER_RULES, User, repository)
        self.roles = roles
        self.resolver = resolver
        self.hasher = hasher
        self.default_role = default_role

    async def _wire(
        self,
        entity: User,
        input_data: dict[str, Any],
        values: dict[str, Any],
        operation: Operation,
    ) -> None:
        creating = operation is Operation.CREATE
        password = input_data.get("password")
        has_password = isinstance(password, str) and password.strip() != ""
        if creating and not has_password:
            raise ValidationError("password", "Password is required")
        if has_password:
            entity.password_hash = self.hasher.hash_secret(password)

        person_id = input_data.get("person_id")
        if person_id is not None:
            person = await self.resolver.resolve(EntityType.PERSON, person_id)
            if person is None:
                raise NotFoundError(EntityType.PERSON, person_id)
            entity.person = person
        elif creating:
            entity.person = None

        if creating:
            entity.roles = await self._initial_roles(input_data.get("roles"))

    async def _initial_roles(self, names: list[str] | None) -> list[Role]:
        if names:
            return [await self._role(name) for name in names]
        if not self.default_role:
            return []
        role = await self.roles.find_by_field("name", self.default_role)
        if role is None:
            logger.warning(
                f"Default role {self.default_role} not found; user created without roles",
                extra={"entity_type": EntityType.ROLE.value},
            )
            return []
        return [role]

    async def _role(self, name: str) -> Role:
        normalized = normalize(ROLE_RULES.field("name"), name)
        role = await self.roles.find_by_field("name", normalized)
        if role is None:
            raise NotFoundError(EntityType.ROLE, name)
        return role

    # ─── Role grants ────────────────────────────────────────────

    async def add_role(self, user_id: EntityId, role_name: str, actor: Actor) -> User:
        user = await self.get(user_id)
        role = await self._role(role_name)
        if not user.has_role(role.name):
            user.roles.append(role)
            user.stamp_update(actor)
            await self.repository.save(user)
            logger.info(
                f"Granted {role.name} to user {user.id}",
                extra={"entity_type": self.entity_type.value, "entity_id": user.id, "actor": actor},
            )
        return user

    async def remove_role(self, user_id: EntityId, role_name: str, actor: Actor) -> User:
        user = await self.get(user_id)
        role = await self._role(role_name)
        if user.has_role(role.name):
            user.roles = [granted for granted in user.roles if granted.name != role.name]
            user.stamp_update(actor)
            await self.repository.save(user)
            logger.info(
                f"Revoked {role.name} from user {user.id}",
                extra={"entity_type": self.entity_type.value, "entity_id": user.id, "actor": actor},
            )
        return user

    # ─── Credentials ────────────────────────────────────────────

    async def verify_password(self, username: str, password: str) -> bool:
        """True iff the user exists and the password matches its stored hash."""
        try:
            user = await self.find_by_lookup(username)
        except NotFoundError:
            return False
        return self.hasher.verify_secret(password, user.password_hash)

    async def record_login(self, user_id: EntityId) -> User:
        user = await self.get(user_id)
        user.last_login = utc_now()
        return await self.repository.save(user)
