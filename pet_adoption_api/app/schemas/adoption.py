"""
Pydantic models for adoption applications.

An ``AdoptionRead`` is a snapshot: the user's name and contact details
and the pet's name are copied in when the application is filed and are
not refreshed when the user or pet changes later.
"""

from typing import Optional

from pydantic import BaseModel, Field

PENDING = "pending"
COMPLETED = "completed"
FAILED = "failed"


class AdoptionCreate(BaseModel):
    """Payload for filing an application.

    ``userPhoneNumber`` and ``address`` are accepted for compatibility
    with older clients but ignored; the record takes both from the
    stored user.
    """

    user_id: Optional[str] = Field(None, alias="userId", examples=["ID-1"])
    pet_id: Optional[str] = Field(None, alias="petId", examples=["ID-1"])
    user_phone_number: Optional[str] = Field(None, alias="userPhoneNumber")
    address: Optional[str] = None
    reason_for_adoption: Optional[str] = Field(
        None, alias="reasonForAdoption", examples=["We have a big garden"]
    )

    model_config = {"populate_by_name": True}


class AdoptionUpdate(BaseModel):
    user_name: str = Field(alias="userName")
    user_phone_number: str = Field(alias="userPhoneNumber")
    address: str
    reason_for_adoption: str = Field(alias="reasonForAdoption")

    model_config = {"populate_by_name": True}


class AdoptionRead(BaseModel):
    adoption_id: str = Field(alias="adoptionId")
    user_id: str = Field(alias="userId")
    pet_id: str = Field(alias="petId")
    pet_name: Optional[str] = Field(None, alias="petName")
    user_name: str = Field(alias="userName")
    user_phone_number: str = Field(alias="userPhoneNumber")
    address: str
    reason_for_adoption: str = Field(alias="reasonForAdoption")
    date_of_adoption: str = Field(alias="dateOfAdoption")
    status: str

    model_config = {"populate_by_name": True}
