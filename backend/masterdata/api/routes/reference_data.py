"""Reference Data Routes - JSON CRUD for Country, Gender, Title and IdType.

Invariants:
    - Same six endpoints per entity: list, get, get-by-code, create (201),
      partial update, delete (204)
    - Taxonomy errors propagate to the global handlers; routes never map statuses

Design Decisions:
    - One router factory parameterized by entity type, mirroring the single
      generic service behind it
"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from masterdata.api.dependencies import get_actor, reference_service
from masterdata.core.domain_types import EntityType
from masterdata.schemas.reference_data import (
    CodedCreate, CodedResponse, CodedUpdate,
    CountryCreate, CountryResponse, CountryUpdate,
)
from masterdata.services.reference_data import ReferenceDataService


def build_router(
    entity_type: EntityType,
    prefix: str,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
) -> APIRouter:
    router = APIRouter(prefix=f"/api/{prefix}", tags=[prefix])
    provide = reference_service(entity_type)

    @router.get("/", response_model=list[response_schema])
    async def list_entities(service: ReferenceDataService = Depends(provide)):
        return await service.list_sorted()

    @router.get("/code/{code}", response_model=response_schema)
    async def get_by_code(code: str, service: ReferenceDataService = Depends(provide)):
        return await service.find_by_lookup(code)

    @router.get("/{entity_id}", response_model=response_schema)
    async def get_entity(entity_id: int, service: ReferenceDataService = Depends(provide)):
        return await service.get(entity_id)

    @router.post("/", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_entity(
        body: create_schema,
        service: ReferenceDataService = Depends(provide),
        actor: str = Depends(get_actor),
    ):
        return await service.create(body.model_dump(), actor)

    @router.put("/{entity_id}", response_model=response_schema)
    async def update_entity(
        entity_id: int,
        body: update_schema,
        service: ReferenceDataService = Depends(provide),
        actor: str = Depends(get_actor),
    ):
        return await service.update(entity_id, body.model_dump(exclude_unset=True), actor)

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_entity(entity_id: int, service: ReferenceDataService = Depends(provide)):
        await service.delete(entity_id)

    return router


countries = build_router(
    EntityType.COUNTRY, "countries", CountryCreate, CountryUpdate, CountryResponse,
)
genders = build_router(EntityType.GENDER, "genders", CodedCreate, CodedUpdate, CodedResponse)
titles = build_router(EntityType.TITLE, "titles", CodedCreate, CodedUpdate, CodedResponse)
id_types = build_router(EntityType.ID_TYPE, "id-types", CodedCreate, CodedUpdate, CodedResponse)
