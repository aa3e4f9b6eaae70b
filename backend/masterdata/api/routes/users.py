"""User Routes - JSON CRUD for login accounts and their role grants.

Invariants:
    - Responses use UserResponse: role names, never the password hash
    - Granting a role the user already has (or revoking one it lacks) is a no-op
"""

from fastapi import APIRouter, Depends, status

from masterdata.api.dependencies import get_actor, get_user_service
from masterdata.schemas.user import UserCreate, UserResponse, UserUpdate
from masterdata.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_sorted()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return await service.get(user_id)


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate,
    service: UserService = Depends(get_user_service),
    actor: str = Depends(get_actor),
):
    return await service.create(body.model_dump(), actor)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
    actor: str = Depends(get_actor),
):
    return await service.update(user_id, body.model_dump(exclude_unset=True), actor)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    await service.delete(user_id)


@router.post("/{user_id}/roles/{role_name}", response_model=UserResponse)
async def grant_role(
    user_id: int,
    role_name: str,
    service: UserService = Depends(get_user_service),
    actor: str = Depends(get_actor),
):
    return await service.add_role(user_id, role_name, actor)


@router.delete("/{user_id}/roles/{role_name}", response_model=UserResponse)
async def revoke_role(
    user_id: int,
    role_name: str,
    service: UserService = Depends(get_user_service),
    actor: str = Depends(get_actor),
):
    return await service.remove_role(user_id, role_name, actor)
