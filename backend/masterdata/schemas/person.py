"""Person Schemas - request/response models with nested reference summaries."""

from pydantic import BaseModel

from masterdata.schemas.reference_data import AuditedResponse, CodedResponse


class PersonUpdate(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    id_number: str | None = None
    title_id: int | None = None
    gender_id: int | None = None
    id_type_id: int | None = None
    is_active: bool | None = None


class PersonCreate(PersonUpdate):
    id: int | None = None


class PersonResponse(AuditedResponse):
    first_name: str | None = None
    last_name: str
    email: str | None = None
    id_number: str | None = None
    is_active: bool
    full_name: str
    title: CodedResponse | None = None
    gender: CodedResponse | None = None
    id_type: CodedResponse | None = None
