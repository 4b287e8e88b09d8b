"""Repository contracts the use cases depend on.

Implementations live in :mod:`app.infrastructure.repositories`; tests provide
in-memory doubles. Every method is a coroutine because implementations do IO.
"""

from __future__ import annotations

from typing import Protocol

from .entities import Room, User
from .results import DomainError, Result


class UserReadRepository(Protocol):
    """Read access to participants."""

    async def get_by_code(
        self, code: str, *, include_room: bool = False, include_wishes: bool = False
    ) -> Result[User, DomainError]: ...

    async def get_by_id(
        self, user_id: int, *, include_room: bool = False, include_wishes: bool = False
    ) -> Result[User, DomainError]: ...

    async def list_by_room_id(
        self, room_id: int, *, include_wishes: bool = False
    ) -> list[User]: ...


class UserRepository(UserReadRepository, Protocol):
    """Read/write access to participants."""

    async def add(self, user: User) -> Result[User, str]: ...


class RoomRepository(Protocol):
    """Access to the room aggregate and its roster."""

    async def get_by_user_code(self, code: str) -> Result[Room, DomainError]: ...

    async def get_by_invitation_code(self, code: str) -> Result[Room, DomainError]: ...

    async def add(self, room: Room) -> Result[Room, str]: ...

    async def update(self, room: Room) -> Result[None, str]: ...


__all__ = ["RoomRepository", "UserReadRepository", "UserRepository"]
