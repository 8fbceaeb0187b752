"""
Business logic for shelters.

Shelters mirror users: they are owned by the principal that created
them and can be looked up by that principal.  Only the contact details
of a shelter can be updated.
"""

import logging
from typing import List, Optional

from pet_adoption_api.app.core import ids, store
from pet_adoption_api.app.core.db import get_cursor
from pet_adoption_api.app.core.errors import NotFound
from pet_adoption_api.app.core.security import Identity
from pet_adoption_api.app.core.validation import validate_payload
from pet_adoption_api.app.schemas.shelter import ShelterCreate, ShelterInfoUpdate, ShelterRead

REQUIRED_FIELDS = ("name", "location", "phoneNumber", "email")


class ShelterService:
    """Service for shelters."""

    @classmethod
    async def create_shelter(cls, data: ShelterCreate, caller: Identity) -> ShelterRead:
        logger = logging.getLogger(__name__)
        validate_payload(data.model_dump(by_alias=True), REQUIRED_FIELDS)
        with get_cursor() as cursor:
            shelter_id = ids.next_id(cursor, ids.SHELTER)
            record = {
                "id": shelter_id,
                "principal": caller.principal,
                "pets": [],
                **data.model_dump(),
            }
            store.shelters.insert(cursor, shelter_id, record)
        logger.info("Created shelter %s for principal %s", shelter_id, caller)
        return ShelterRead(**record)

    @classmethod
    async def get_shelter(cls, shelter_id: str) -> Optional[ShelterRead]:
        with get_cursor() as cursor:
            record = store.shelters.get(cursor, shelter_id)
        return ShelterRead(**record) if record else None

    @classmethod
    async def list_shelters(cls) -> List[ShelterRead]:
        with get_cursor() as cursor:
            records = store.shelters.values(cursor)
        return [ShelterRead(**record) for record in records]

    @classmethod
    async def get_shelter_owner(cls, caller: Identity) -> ShelterRead:
        with get_cursor() as cursor:
            records = store.shelters.values(cursor)
        for record in records:
            if Identity(record["principal"]) == caller:
                return ShelterRead(**record)
        raise NotFound(f"Shelter with principal={caller} not found")

    @classmethod
    async def update_shelter_info(cls, shelter_id: str, data: ShelterInfoUpdate) -> ShelterRead:
        logger = logging.getLogger(__name__)
        with get_cursor() as cursor:
            record = store.shelters.get(cursor, shelter_id)
            if record is None:
                raise NotFound("Shelter not found")
            record.update(phone_number=data.phone_number, email=data.email)
            store.shelters.insert(cursor, shelter_id, record)
        logger.info("Updated shelter %s", shelter_id)
        return ShelterRead(**record)

    @classmethod
    async def delete_shelter(cls, shelter_id: str) -> str:
        """Remove a shelter.  Pets listing the shelter keep their ``shelterId``."""
        logger = logging.getLogger(__name__)
        with get_cursor() as cursor:
            if not store.shelters.remove(cursor, shelter_id):
                logger.warning("Delete of unknown shelter %s", shelter_id)
                raise NotFound(f"Shelter with ID {shelter_id} not found")
        logger.info("Deleted shelter %s", shelter_id)
        return f"Shelter with ID {shelter_id} deleted successfully"
