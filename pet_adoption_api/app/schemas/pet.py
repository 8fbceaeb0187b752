"""
Pydantic models for pets.

``PetRead`` declares every field optional: ``POST /pets/image``
replaces a pet row with the image payload alone, and such rows must
still be readable through the regular pet routes.
"""

from typing import Optional

from pydantic import BaseModel, Field

NOT_ADOPTED = "notAdopted"
ADOPTED = "adopted"


class PetCreate(BaseModel):
    """Payload for listing a pet.  All fields are required by the service."""

    name: Optional[str] = Field(None, examples=["Rex"])
    species: Optional[str] = Field(None, examples=["Dog"])
    breed: Optional[str] = Field(None, examples=["Labrador"])
    gender: Optional[str] = Field(None, examples=["male"])
    age: Optional[str] = Field(None, examples=["3"])
    pet_image: Optional[str] = Field(None, alias="petImage", examples=["https://example.com/rex.png"])
    description: Optional[str] = Field(None, examples=["Friendly and house trained"])
    health_status: Optional[str] = Field(None, alias="healthStatus", examples=["vaccinated"])
    shelter_id: Optional[str] = Field(None, alias="shelterId", examples=["ID-1"])

    model_config = {"populate_by_name": True}


class PetImage(BaseModel):
    """Image payload for ``POST /pets/image``."""

    pet_id: Optional[str] = Field(None, alias="petId", examples=["ID-1"])
    pet_image: Optional[str] = Field(None, alias="petImage", examples=["https://example.com/rex.png"])

    model_config = {"populate_by_name": True}


class PetInfoUpdate(BaseModel):
    """Fields of a pet that may change after it has been listed."""

    health_status: str = Field(alias="healthStatus")
    age: str

    model_config = {"populate_by_name": True}


class PetRead(BaseModel):
    """A stored pet."""

    id: Optional[str] = None
    name: Optional[str] = None
    species: Optional[str] = None
    breed: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[str] = None
    pet_image: Optional[str] = Field(None, alias="petImage")
    description: Optional[str] = None
    health_status: Optional[str] = Field(None, alias="healthStatus")
    shelter_id: Optional[str] = Field(None, alias="shelterId")
    status: Optional[str] = None

    model_config = {"populate_by_name": True}
