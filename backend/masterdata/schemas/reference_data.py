"""Reference Data Schemas - Country, Gender, Title and IdType request/response models.

Invariants:
    - Every request field is optional at this layer: "required", length and
      pattern are enforced by the rule tables, not by Pydantic
    - Create models accept an id only so the pipeline can reject it
    - Update models: an omitted or null field means "leave unchanged"
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AuditedResponse(BaseModel):
    """Identifier and audit columns shared by every response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_by: str
    created_at: datetime
    updated_by: str | None = None
    updated_at: datetime | None = None


# ─── Country ────────────────────────────────────────────────────

class CountryUpdate(BaseModel):
    code: str | None = None
    name: str | None = None
    year: str | None = None
    cctld: str | None = None


class CountryCreate(CountryUpdate):
    id: int | None = None


class CountryResponse(AuditedResponse):
    code: str
    name: str
    year: str | None = None
    cctld: str | None = None


# ─── Code + description entities ───────────────────────────────

class CodedUpdate(BaseModel):
    """Gender, Title and IdType share the code/description shape."""
    code: str | None = None
    description: str | None = None


class CodedCreate(CodedUpdate):
    id: int | None = None


class CodedResponse(AuditedResponse):
    code: str
    description: str
