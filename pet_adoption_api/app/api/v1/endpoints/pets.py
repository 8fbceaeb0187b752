"""
Pet endpoints for API v1.

Besides plain CRUD these routes offer the list of pets still available
for adoption and a case-insensitive search by species.  Fixed paths
(``/image``, ``/not-adopted``, ``/search``) are declared before the
``/{pet_id}`` routes so they are not captured as ids.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from pet_adoption_api.app.schemas.pet import PetCreate, PetImage, PetInfoUpdate, PetRead
from pet_adoption_api.app.services.pet_service import PetService

router = APIRouter()


@router.post("/", response_model=PetRead, status_code=status.HTTP_201_CREATED)
async def add_pet(pet: PetCreate) -> PetRead:
    return await PetService.add_pet(pet)


@router.post("/image", response_model=PetImage)
async def add_pet_image(image: PetImage) -> PetImage:
    """Store an image for a pet.

    Note that the image payload replaces the whole pet row; see
    ``PetService.add_pet_image``.
    """
    return await PetService.add_pet_image(image)


@router.get("/", response_model=List[PetRead])
async def get_pets() -> List[PetRead]:
    return await PetService.list_pets()


@router.get("/not-adopted", response_model=List[PetRead])
async def get_pets_not_adopted() -> List[PetRead]:
    return await PetService.list_pets_not_adopted()


@router.get("/search", response_model=List[PetRead])
async def search_pets_by_species(species: str = Query(..., examples=["dog"])) -> List[PetRead]:
    """Return pets of the given species, compared case-insensitively."""
    return await PetService.search_pets_by_species(species)


@router.get("/{pet_id}", response_model=Optional[PetRead])
async def get_pet(pet_id: str) -> Optional[PetRead]:
    return await PetService.get_pet(pet_id)


@router.put("/{pet_id}", response_model=PetRead)
async def update_pet_info(pet_id: str, info: PetInfoUpdate) -> PetRead:
    """Update the health status and age of a pet; other fields are kept."""
    return await PetService.update_pet_info(pet_id, info)


@router.delete("/{pet_id}", response_model=str)
async def delete_pet(pet_id: str) -> str:
    return await PetService.delete_pet(pet_id)
