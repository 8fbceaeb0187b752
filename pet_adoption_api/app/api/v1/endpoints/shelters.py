"""Shelter endpoints for API v1."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from pet_adoption_api.app.core.security import Identity, get_caller_identity
from pet_adoption_api.app.schemas.shelter import ShelterCreate, ShelterInfoUpdate, ShelterRead
from pet_adoption_api.app.services.shelter_service import ShelterService

router = APIRouter()


@router.post("/", response_model=ShelterRead, status_code=status.HTTP_201_CREATED)
async def create_shelter(
    shelter: ShelterCreate,
    caller: Identity = Depends(get_caller_identity),
) -> ShelterRead:
    return await ShelterService.create_shelter(shelter, caller)


@router.get("/", response_model=List[ShelterRead])
async def get_shelters() -> List[ShelterRead]:
    return await ShelterService.list_shelters()


@router.get("/owner", response_model=ShelterRead)
async def get_shelter_owner(caller: Identity = Depends(get_caller_identity)) -> ShelterRead:
    """Return the shelter created by the calling principal (404 if none)."""
    return await ShelterService.get_shelter_owner(caller)


@router.get("/{shelter_id}", response_model=Optional[ShelterRead])
async def get_shelter(shelter_id: str) -> Optional[ShelterRead]:
    return await ShelterService.get_shelter(shelter_id)


@router.put("/{shelter_id}", response_model=ShelterRead)
async def update_shelter_info(shelter_id: str, info: ShelterInfoUpdate) -> ShelterRead:
    """Update the phone number and e-mail of a shelter."""
    return await ShelterService.update_shelter_info(shelter_id, info)


@router.delete("/{shelter_id}", response_model=str)
async def delete_shelter(shelter_id: str) -> str:
    return await ShelterService.delete_shelter(shelter_id)
