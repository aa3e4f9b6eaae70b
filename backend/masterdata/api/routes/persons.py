"""Person Routes - JSON CRUD for people, with lookup by email."""

from fastapi import APIRouter, Depends, status

from masterdata.api.dependencies import get_actor, get_person_service
from masterdata.schemas.person import PersonCreate, PersonResponse, PersonUpdate
from masterdata.services.person_service import PersonService

router = APIRouter(prefix="/api/persons", tags=["persons"])


@router.get("/", response_model=list[PersonResponse])
async def list_persons(service: PersonService = Depends(get_person_service)):
    return await service.list_sorted()


@router.get("/email/{email}", response_model=PersonResponse)
async def get_person_by_email(
    email: str, service: PersonService = Depends(get_person_service),
):
    return await service.find_by_lookup(email)


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(person_id: int, service: PersonService = Depends(get_person_service)):
    return await service.get(person_id)


@router.post("/", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
async def create_person(
    body: PersonCreate,
    service: PersonService = Depends(get_person_service),
    actor: str = Depends(get_actor),
):
    return await service.create(body.model_dump(), actor)


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: int,
    body: PersonUpdate,
    service: PersonService = Depends(get_person_service),
    actor: str = Depends(get_actor),
):
    return await service.update(person_id, body.model_dump(exclude_unset=True), actor)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(person_id: int, service: PersonService = Depends(get_person_service)):
    await service.delete(person_id)
