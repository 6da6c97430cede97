"""
Pydantic models for person data.

``PersonCreate`` and ``PersonUpdate`` describe request bodies and
``PersonRead`` is the entity returned by the API.  Python attributes are
snake_case while the JSON payloads keep the camelCase ``birthDate`` key,
which is also the key stored in MongoDB documents.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PersonBase(BaseModel):
    firstname: str = Field(..., min_length=1, examples=["Jane"])
    lastname: str = Field(..., min_length=1, examples=["Doe"])

    model_config = {
        "populate_by_name": True,
    }


class PersonCreate(PersonBase):
    """Schema for creating a person.

    ``birthDate`` and ``photo`` are accepted but replaced by placeholder
    values when the person is stored.
    """

    birth_date: Optional[datetime] = Field(None, alias="birthDate")
    photo: Optional[str] = Field(None, examples=["https://randomuser.me/api/portraits/lego/6.jpg"])


class PersonUpdate(BaseModel):
    """Schema for updating a person.

    All fields are optional; only the fields present in the request are
    merged into the stored record.
    """

    firstname: Optional[str] = Field(None, min_length=1)
    lastname: Optional[str] = Field(None, min_length=1)
    birth_date: Optional[datetime] = Field(None, alias="birthDate")
    photo: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }

    def changes(self) -> dict:
        """Non-null fields sent by the client, keyed by their stored name."""
        return self.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)


class PersonRead(PersonBase):
    """Entity returned by the API for a stored person."""

    id: str
    birth_date: datetime = Field(..., alias="birthDate")
    photo: str

    model_config = {
        "populate_by_name": True,
    }
