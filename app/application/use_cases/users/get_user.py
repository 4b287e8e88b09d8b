"""Use case for retrieving a single participant."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities import User
from app.domain.repositories import UserReadRepository
from app.domain.results import DomainError, Result


@dataclass(frozen=True)
class UserLookup:
    """The requested participant together with whoever asked for it."""

    caller: User
    user: User

    @property
    def can_see_details(self) -> bool:
        return self.caller.is_admin or self.caller.id == self.user.id


async def get_user(
    *, user_repository: UserReadRepository, user_code: str, user_id: int
) -> Result[UserLookup, DomainError]:
    """Return the participant ``user_id`` if the caller shares its room."""

    caller_result = await user_repository.get_by_code(user_code)
    if caller_result.is_failure:
        return Result.failure(caller_result.error)

    user_result = await user_repository.get_by_id(user_id, include_wishes=True)
    if user_result.is_failure:
        return Result.failure(user_result.error)

    caller, user = caller_result.value, user_result.value
    if not caller.belongs_to_same_room(user):
        return Result.failure(
            DomainError.forbidden(
                "id", "User with userCode and user with id belong to different rooms"
            )
        )
    return Result.success(UserLookup(caller=caller, user=user))
