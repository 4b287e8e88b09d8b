"""Use case for listing the participants of a room."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities import User
from app.domain.repositories import UserReadRepository
from app.domain.results import DomainError, Result


@dataclass(frozen=True)
class RoomUsers:
    caller: User
    users: list[User]


async def list_users(
    *, user_repository: UserReadRepository, user_code: str
) -> Result[RoomUsers, DomainError]:
    """Return every participant of the caller's room, ordered by id."""

    caller_result = await user_repository.get_by_code(user_code)
    if caller_result.is_failure:
        return Result.failure(caller_result.error)

    caller = caller_result.value
    users = await user_repository.list_by_room_id(caller.room_id, include_wishes=True)
    return Result.success(RoomUsers(caller=caller, users=users))
