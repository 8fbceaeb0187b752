"""
Business logic for users.

A user is created on behalf of the calling principal and remembers
it, which lets ``get_user_owner`` answer "which user am I?".  Users
also collect the ids of the adoption applications they file (see
``AdoptionService.file_for_adoption``).
"""

import logging
from typing import List, Optional

from pet_adoption_api.app.core import ids, store
from pet_adoption_api.app.core.db import get_cursor
from pet_adoption_api.app.core.errors import NotFound
from pet_adoption_api.app.core.security import Identity
from pet_adoption_api.app.core.validation import validate_payload
from pet_adoption_api.app.schemas.user import UserCreate, UserRead

REQUIRED_FIELDS = ("name", "phoneNumber", "email", "address")


class UserService:
    """Service for adopter accounts."""

    @classmethod
    async def create_user(cls, data: UserCreate, caller: Identity) -> UserRead:
        """Validate and store a new user owned by ``caller``."""
        logger = logging.getLogger(__name__)
        validate_payload(data.model_dump(by_alias=True), REQUIRED_FIELDS)
        with get_cursor() as cursor:
            user_id = ids.next_id(cursor, ids.USER)
            record = {
                "id": user_id,
                "principal": caller.principal,
                "application": [],
                **data.model_dump(),
            }
            store.users.insert(cursor, user_id, record)
        logger.info("Created user %s for principal %s", user_id, caller)
        return UserRead(**record)

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        with get_cursor() as cursor:
            records = store.users.values(cursor)
        return [UserRead(**record) for record in records]

    @classmethod
    async def get_user(cls, user_id: str) -> Optional[UserRead]:
        with get_cursor() as cursor:
            record = store.users.get(cursor, user_id)
        return UserRead(**record) if record else None

    @classmethod
    async def get_user_owner(cls, caller: Identity) -> UserRead:
        """Return the first user created by ``caller``.

        Raises ``NotFound`` if the caller has not registered a user.
        """
        with get_cursor() as cursor:
            records = store.users.values(cursor)
        for record in records:
            if Identity(record["principal"]) == caller:
                return UserRead(**record)
        raise NotFound(f"User with principal={caller} not found")

    @classmethod
    async def delete_user(cls, user_id: str) -> str:
        """Remove a user.

        Adoption records filed by the user are left untouched.
        """
        logger = logging.getLogger(__name__)
        with get_cursor() as cursor:
            if not store.users.remove(cursor, user_id):
                logger.warning("Delete of unknown user %s", user_id)
                raise NotFound(f"User with ID {user_id} not found")
        logger.info("Deleted user %s", user_id)
        return f"User with ID {user_id} deleted successfully"
