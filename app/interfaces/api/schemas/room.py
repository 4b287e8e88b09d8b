"""Room schemas."""

from datetime import date, datetime

from pydantic import ConfigDict, Field

from .user import CamelModel, UserCreate


class RoomCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=40)
    description: str = Field(..., min_length=1, max_length=200)
    gift_exchange_date: date
    gift_maximum_budget: int = Field(..., ge=0)

    model_config = ConfigDict(extra="forbid")


class RoomCreationRequest(CamelModel):
    room: RoomCreate
    admin_user: UserCreate


class RoomRead(CamelModel):
    id: int
    name: str
    description: str
    invitation_code: str
    gift_exchange_date: date
    gift_maximum_budget: int
    admin_id: int | None
    closed_on: datetime | None
    created_on: datetime | None
    modified_on: datetime | None
    is_closed: bool


class RoomCreationResponse(CamelModel):
    room: RoomRead
    user_code: str
