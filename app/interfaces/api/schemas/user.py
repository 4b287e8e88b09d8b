"""Participant schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

PHONE_PATTERN = r"^\+\d{10,15}$"


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class WishCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    info_link: str | None = Field(default=None, max_length=500)


class WishRead(CamelModel):
    name: str
    info_link: str | None = None


class UserCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=40)
    last_name: str = Field(..., min_length=1, max_length=40)
    phone: str = Field(..., pattern=PHONE_PATTERN)
    email: EmailStr | None = None
    delivery_info: str = Field(..., min_length=1, max_length=200)
    want_surprise: bool
    interests: str | None = Field(default=None, max_length=1000)
    wishes: list[WishCreate] = Field(default_factory=list, max_length=5)

    model_config = ConfigDict(extra="forbid")


class UserRead(CamelModel):
    """Participant as seen by another member of the room.

    Contact details, wishes and the authorization code are only filled in for
    the admin or for the participant themselves.
    """

    id: int
    room_id: int
    is_admin: bool
    first_name: str
    last_name: str
    created_on: datetime | None = None
    modified_on: datetime | None = None
    user_code: str | None = None
    phone: str | None = None
    email: str | None = None
    delivery_info: str | None = None
    want_surprise: bool | None = None
    interests: str | None = None
    wishes: list[WishRead] | None = None
    gift_recipient_user_id: int | None = None
