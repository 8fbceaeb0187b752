"""
Pydantic models for adopter accounts.

Field names are snake_case in Python and camelCase on the wire
(``phoneNumber``); both spellings are accepted on input.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Payload for registering a user.

    Every field is required, but the check is done by the service so
    that a missing field is reported as ``EmptyField`` rather than as a
    schema error.
    """

    name: Optional[str] = Field(None, examples=["Jane Doe"])
    phone_number: Optional[str] = Field(None, alias="phoneNumber", examples=["+1 555 0100"])
    email: Optional[str] = Field(None, examples=["jane@example.com"])
    address: Optional[str] = Field(None, examples=["12 Elm Street"])

    model_config = {"populate_by_name": True}


class UserRead(BaseModel):
    """A stored user."""

    id: str
    principal: str
    name: str
    phone_number: str = Field(alias="phoneNumber")
    email: str
    address: str
    # Adoption record ids filed by this user, oldest first.
    application: List[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
