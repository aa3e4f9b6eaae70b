"""User Schemas - account requests and the hash-free account response.

Invariants:
    - password is write-only: accepted on create/update, never serialized
    - roles are exchanged as role names, not ids
"""

from datetime import datetime

from pydantic import BaseModel

from masterdata.schemas.reference_data import AuditedResponse


class UserUpdate(BaseModel):
    username: str | None = None
    password: str | None = None
    person_id: int | None = None


class UserCreate(UserUpdate):
    id: int | None = None
    roles: list[str] | None = None


class UserResponse(AuditedResponse):
    username: str
    person_id: int | None = None
    last_login: datetime | None = None
    role_names: list[str]
