"""Domain entity representing a room participant."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from .wish import Wish

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .room import Room


@dataclass
class User:
    """A participant of a room, identified by its authorization code."""

    id: int | None
    room_id: int | None
    authorization_code: str
    is_admin: bool
    first_name: str
    last_name: str
    phone: str
    email: str | None
    delivery_info: str
    want_surprise: bool
    interests: str | None
    gift_recipient_user_id: int | None
    created_on: datetime | None
    modified_on: datetime | None
    wishes: list[Wish] = field(default_factory=list)
    room: Room | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def belongs_to_same_room(self, other: User) -> bool:
        """Return ``True`` when both participants share the same room."""

        return self.room_id is not None and self.room_id == other.room_id


__all__ = ["User"]
