"""Domain entity representing a gift exchange room."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from .user import User


@dataclass
class Room:
    """Aggregate root owning the participants of one gift exchange.

    Once ``closed_on`` is set the room has been drawn and its roster is frozen.
    ``removed_user_ids`` tracks participants removed since the room was loaded;
    participants stored after the load are not part of ``users`` and must survive
    a save.
    """

    id: int | None
    name: str
    description: str
    invitation_code: str
    gift_exchange_date: date
    gift_maximum_budget: int
    admin_id: int | None
    closed_on: datetime | None
    created_on: datetime | None
    modified_on: datetime | None
    users: list[User] = field(default_factory=list)
    removed_user_ids: set[int] = field(default_factory=set, repr=False, compare=False)

    @property
    def is_closed(self) -> bool:
        return self.closed_on is not None

    @property
    def admin(self) -> User | None:
        """Return the admin participant when the roster is loaded."""

        return next((user for user in self.users if user.is_admin), None)

    def get_user(self, user_id: int) -> User | None:
        return next((user for user in self.users if user.id == user_id), None)

    def remove_user(self, user_id: int) -> bool:
        """Remove the participant with ``user_id``; return whether one was removed."""

        user = self.get_user(user_id)
        if user is None:
            return False
        self.users.remove(user)
        self.removed_user_ids.add(user_id)
        return True


__all__ = ["Room"]
