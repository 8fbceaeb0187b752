"""
Business logic for adoption applications.

Filing an application checks that the user and pet exist, snapshots
their current details into a ``pending`` record and appends the new
record id to the user's ``application`` list.  An application is then
either completed, which also marks the pet as adopted, or failed.
Once an application has left ``pending`` its status can no longer
change; both transitions reject such records with ``InvalidPayload``.

References are only checked when filing.  Deleting the user or pet
afterwards leaves the record in place, still pointing at the old ids.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from pet_adoption_api.app.core import ids, store
from pet_adoption_api.app.core.db import get_cursor
from pet_adoption_api.app.core.errors import InvalidPayload, NotFound
from pet_adoption_api.app.core.validation import validate_payload
from pet_adoption_api.app.schemas.adoption import (
    COMPLETED,
    FAILED,
    PENDING,
    AdoptionCreate,
    AdoptionRead,
    AdoptionUpdate,
)
from pet_adoption_api.app.schemas.pet import ADOPTED

REQUIRED_FIELDS = ("userId", "petId", "reasonForAdoption")


def _utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with milliseconds, e.g. ``2024-05-01T09:30:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AdoptionService:
    """Service for adoption applications."""

    @classmethod
    async def file_for_adoption(cls, data: AdoptionCreate) -> AdoptionRead:
        """File a new ``pending`` application for ``data.pet_id`` by ``data.user_id``.

        The record, its id and the user's updated ``application`` list are
        written in one transaction.
        """
        logger = logging.getLogger(__name__)
        validate_payload(data.model_dump(by_alias=True), REQUIRED_FIELDS)
        with get_cursor() as cursor:
            user = store.users.get(cursor, data.user_id)
            if user is None:
                logger.warning("Adoption filed for unknown user %s", data.user_id)
                raise NotFound(f"User with ID {data.user_id} not found")
            pet = store.pets.get(cursor, data.pet_id)
            if pet is None:
                logger.warning("Adoption filed for unknown pet %s", data.pet_id)
                raise NotFound(f"Pet with ID {data.pet_id} not found")

            adoption_id = ids.next_id(cursor, ids.ADOPTION)
            record = {
                "adoption_id": adoption_id,
                "user_id": data.user_id,
                "pet_id": data.pet_id,
                "pet_name": pet.get("name"),
                "user_name": user["name"],
                "user_phone_number": user["phone_number"],
                "address": user["address"],
                "reason_for_adoption": data.reason_for_adoption,
                "date_of_adoption": _utc_timestamp(),
                "status": PENDING,
            }
            user.setdefault("application", []).append(adoption_id)
            store.users.insert(cursor, data.user_id, user)
            store.adoption_records.insert(cursor, adoption_id, record)
        logger.info(
            "Filed adoption %s: user %s for pet %s", adoption_id, data.user_id, data.pet_id
        )
        return AdoptionRead(**record)

    @classmethod
    async def list_adoption_records(cls) -> List[AdoptionRead]:
        with get_cursor() as cursor:
            records = store.adoption_records.values(cursor)
        return [AdoptionRead(**record) for record in records]

    @classmethod
    async def get_adoption_record(cls, adoption_id: str) -> Optional[AdoptionRead]:
        with get_cursor() as cursor:
            record = store.adoption_records.get(cursor, adoption_id)
        return AdoptionRead(**record) if record else None

    @classmethod
    async def update_adoption_record(cls, adoption_id: str, data: AdoptionUpdate) -> AdoptionRead:
        """Overwrite the applicant details of a record; the status is unchanged."""
        logger = logging.getLogger(__name__)
        with get_cursor() as cursor:
            record = store.adoption_records.get(cursor, adoption_id)
            if record is None:
                raise NotFound("Adoption not found")
            record.update(data.model_dump())
            store.adoption_records.insert(cursor, adoption_id, record)
        logger.info("Updated adoption %s", adoption_id)
        return AdoptionRead(**record)

    @classmethod
    async def complete_adoption(cls, adoption_id: str) -> AdoptionRead:
        """Mark the application ``completed`` and its pet ``adopted``.

        Both rows are written in the same transaction, so a failure
        leaves neither changed.
        """
        logger = logging.getLogger(__name__)
        with get_cursor() as cursor:
            record = cls._get_pending(cursor, adoption_id)
            pet = store.pets.get(cursor, record["pet_id"])
            if pet is None:
                raise NotFound("Pet not found")
            record["status"] = COMPLETED
            pet["status"] = ADOPTED
            store.pets.insert(cursor, record["pet_id"], pet)
            store.adoption_records.insert(cursor, adoption_id, record)
        logger.info("Completed adoption %s, pet %s adopted", adoption_id, record["pet_id"])
        return AdoptionRead(**record)

    @classmethod
    async def fail_adoption(cls, adoption_id: str) -> AdoptionRead:
        logger = logging.getLogger(__name__)
        with get_cursor() as cursor:
            record = cls._get_pending(cursor, adoption_id)
            record["status"] = FAILED
            store.adoption_records.insert(cursor, adoption_id, record)
        logger.info("Failed adoption %s", adoption_id)
        return AdoptionRead(**record)

    @staticmethod
    def _get_pending(cursor, adoption_id: str) -> dict:
        record = store.adoption_records.get(cursor, adoption_id)
        if record is None:
            raise NotFound("Adoption not found")
        if record["status"] != PENDING:
            logging.getLogger(__name__).warning(
                "Adoption %s is already %s", adoption_id, record["status"]
            )
            raise InvalidPayload(f"Adoption {adoption_id} is already {record['status']}")
        return record
