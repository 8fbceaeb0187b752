"""
User endpoints for API v1.

Registration stores the caller's principal on the new user, and
``GET /users/owner`` returns the user registered by the caller.
Domain errors raised by ``UserService`` are turned into responses by
the application's exception handler.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from pet_adoption_api.app.core.security import Identity, get_caller_identity
from pet_adoption_api.app.schemas.user import UserCreate, UserRead
from pet_adoption_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def add_user(
    user: UserCreate,
    caller: Identity = Depends(get_caller_identity),
) -> UserRead:
    """Register a new user owned by the calling principal."""
    return await UserService.create_user(user, caller)


@router.get("/", response_model=List[UserRead])
async def get_users() -> List[UserRead]:
    return await UserService.list_users()


@router.get("/owner", response_model=UserRead)
async def get_user_owner(caller: Identity = Depends(get_caller_identity)) -> UserRead:
    """Return the user registered by the calling principal (404 if none)."""
    return await UserService.get_user_owner(caller)


@router.get("/{user_id}", response_model=Optional[UserRead])
async def get_user(user_id: str) -> Optional[UserRead]:
    """Return a user, or ``null`` if the id is unknown."""
    return await UserService.get_user(user_id)


@router.delete("/{user_id}", response_model=str)
async def delete_user(user_id: str) -> str:
    return await UserService.delete_user(user_id)
