"""
Business logic for pets.

Pets are listed by shelters and move from ``notAdopted`` to
``adopted`` only when an adoption is completed
(``AdoptionService.complete_adoption``).  Apart from that, only the
health status and age of a pet can be updated.

``add_pet_image`` stores the image payload *as the whole pet row*,
discarding the other fields of the pet.  Clients that only want to
change the picture must not rely on it until the intended behaviour has
been confirmed.
"""

import logging
from typing import List, Optional

from pet_adoption_api.app.core import ids, store
from pet_adoption_api.app.core.db import get_cursor
from pet_adoption_api.app.core.errors import NotFound
from pet_adoption_api.app.core.validation import validate_payload
from pet_adoption_api.app.schemas.pet import (
    NOT_ADOPTED,
    PetCreate,
    PetImage,
    PetInfoUpdate,
    PetRead,
)

REQUIRED_FIELDS = (
    "name",
    "species",
    "breed",
    "gender",
    "age",
    "petImage",
    "description",
    "healthStatus",
    "shelterId",
)
IMAGE_REQUIRED_FIELDS = ("petId", "petImage")


class PetService:
    """Service for pet listings."""

    @classmethod
    async def add_pet(cls, data: PetCreate) -> PetRead:
        logger = logging.getLogger(__name__)
        validate_payload(data.model_dump(by_alias=True), REQUIRED_FIELDS)
        with get_cursor() as cursor:
            pet_id = ids.next_id(cursor, ids.PET)
            record = {"id": pet_id, "status": NOT_ADOPTED, **data.model_dump()}
            store.pets.insert(cursor, pet_id, record)
        logger.info("Created pet %s in shelter %s", pet_id, data.shelter_id)
        return PetRead(**record)

    @classmethod
    async def add_pet_image(cls, data: PetImage) -> PetImage:
        """Store ``data`` under ``data.pet_id``, replacing the pet row."""
        logger = logging.getLogger(__name__)
        validate_payload(data.model_dump(by_alias=True), IMAGE_REQUIRED_FIELDS)
        with get_cursor() as cursor:
            previous = store.pets.insert(cursor, data.pet_id, data.model_dump())
        if previous is not None:
            logger.warning("Pet %s row replaced by image payload", data.pet_id)
        return data

    @classmethod
    async def get_pet(cls, pet_id: str) -> Optional[PetRead]:
        with get_cursor() as cursor:
            record = store.pets.get(cursor, pet_id)
        return PetRead(**record) if record else None

    @classmethod
    async def list_pets(cls) -> List[PetRead]:
        with get_cursor() as cursor:
            records = store.pets.values(cursor)
        return [PetRead(**record) for record in records]

    @classmethod
    async def list_pets_not_adopted(cls) -> List[PetRead]:
        pets = await cls.list_pets()
        return [pet for pet in pets if pet.status == NOT_ADOPTED]

    @classmethod
    async def search_pets_by_species(cls, species: str) -> List[PetRead]:
        """Return pets whose species equals ``species``, ignoring case."""
        wanted = species.lower()
        pets = await cls.list_pets()
        return [pet for pet in pets if (pet.species or "").lower() == wanted]

    @classmethod
    async def update_pet_info(cls, pet_id: str, data: PetInfoUpdate) -> PetRead:
        logger = logging.getLogger(__name__)
        with get_cursor() as cursor:
            record = store.pets.get(cursor, pet_id)
            if record is None:
                raise NotFound("Pet not found")
            record.update(health_status=data.health_status, age=data.age)
            store.pets.insert(cursor, pet_id, record)
        logger.info("Updated pet %s", pet_id)
        return PetRead(**record)

    @classmethod
    async def delete_pet(cls, pet_id: str) -> str:
        logger = logging.getLogger(__name__)
        with get_cursor() as cursor:
            if not store.pets.remove(cursor, pet_id):
                logger.warning("Delete of unknown pet %s", pet_id)
                raise NotFound(f"Pet with ID {pet_id} not found")
        logger.info("Deleted pet %s", pet_id)
        return f"Pet with ID {pet_id} deleted successfully"
