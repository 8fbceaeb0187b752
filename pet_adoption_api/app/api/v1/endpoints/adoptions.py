"""
Adoption endpoints for API v1.

An application is filed with ``POST /adoptions/`` and then resolved
with ``POST /adoptions/{id}/complete`` or ``POST /adoptions/{id}/fail``.
Resolving an application that is no longer pending answers 409.
"""

from typing import List, Optional

from fastapi import APIRouter, status

from pet_adoption_api.app.schemas.adoption import AdoptionCreate, AdoptionRead, AdoptionUpdate
from pet_adoption_api.app.services.adoption_service import AdoptionService

router = APIRouter()


@router.post("/", response_model=AdoptionRead, status_code=status.HTTP_201_CREATED)
async def file_for_adoption(application: AdoptionCreate) -> AdoptionRead:
    return await AdoptionService.file_for_adoption(application)


@router.get("/", response_model=List[AdoptionRead])
async def get_adoption_records() -> List[AdoptionRead]:
    return await AdoptionService.list_adoption_records()


@router.get("/{adoption_id}", response_model=Optional[AdoptionRead])
async def get_adoption_record(adoption_id: str) -> Optional[AdoptionRead]:
    return await AdoptionService.get_adoption_record(adoption_id)


@router.put("/{adoption_id}", response_model=AdoptionRead)
async def update_adoption_record(adoption_id: str, update: AdoptionUpdate) -> AdoptionRead:
    return await AdoptionService.update_adoption_record(adoption_id, update)


@router.post("/{adoption_id}/complete", response_model=AdoptionRead)
async def complete_adoption(adoption_id: str) -> AdoptionRead:
    """Complete a pending application and mark its pet as adopted."""
    return await AdoptionService.complete_adoption(adoption_id)


@router.post("/{adoption_id}/fail", response_model=AdoptionRead)
async def fail_adoption(adoption_id: str) -> AdoptionRead:
    return await AdoptionService.fail_adoption(adoption_id)
