"""Pydantic models for shelters."""

from typing import List, Optional

from pydantic import BaseModel, Field


class ShelterCreate(BaseModel):
    name: Optional[str] = Field(None, examples=["Happy Paws"])
    location: Optional[str] = Field(None, examples=["Springfield"])
    phone_number: Optional[str] = Field(None, alias="phoneNumber", examples=["+1 555 0199"])
    email: Optional[str] = Field(None, examples=["hello@happypaws.org"])

    model_config = {"populate_by_name": True}


class ShelterInfoUpdate(BaseModel):
    """Contact details of a shelter; the only fields that can be updated."""

    phone_number: str = Field(alias="phoneNumber")
    email: str

    model_config = {"populate_by_name": True}


class ShelterRead(BaseModel):
    id: str
    principal: str
    name: str
    location: str
    phone_number: str = Field(alias="phoneNumber")
    email: str
    # Declared for clients, not maintained by the service.
    pets: List[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
