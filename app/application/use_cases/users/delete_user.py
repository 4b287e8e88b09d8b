"""Use case for removing a participant from a room."""

from __future__ import annotations

import logging

from app.domain.repositories import RoomRepository, UserReadRepository
from app.domain.results import DomainError, Result

logger = logging.getLogger(__name__)


async def delete_user(
    *,
    user_repository: UserReadRepository,
    room_repository: RoomRepository,
    user_code: str,
    user_id: int,
) -> Result[None, DomainError]:
    """Remove the participant ``user_id`` from the room administered by ``user_code``.

    Checks run in a fixed order and the first failure is returned. Nothing is
    written unless every check passes, and then the room is saved exactly once.
    """

    admin_result = await user_repository.get_by_code(
        user_code, include_room=True, include_wishes=False
    )
    if admin_result.is_failure:
        return Result.failure(
            DomainError.not_found("userCode", "User with such code not found")
        )
    admin = admin_result.value

    if not admin.is_admin:
        logger.info("User %s tried to delete user %s without admin rights", admin.id, user_id)
        return Result.failure(
            DomainError.forbidden("userCode", "Only admin can delete users from the room")
        )

    target_result = await user_repository.get_by_id(
        user_id, include_room=False, include_wishes=False
    )
    if target_result.is_failure:
        return Result.failure(DomainError.not_found("id", "User with such id not found"))
    target = target_result.value

    if admin.room_id != target.room_id:
        return Result.failure(
            DomainError.forbidden(
                "id", "User with userCode and user with id belong to different rooms"
            )
        )

    if admin.id == target.id:
        return Result.failure(DomainError.bad_request("id", "Admin cannot delete himself"))

    room_result = await room_repository.get_by_user_code(user_code)
    if room_result.is_failure:
        return Result.failure(room_result.error)
    room = room_result.value

    if room.is_closed:
        return Result.failure(
            DomainError.bad_request("room", "Cannot delete user from a closed room")
        )

    # The participant may have vanished between the lookups above; not an error.
    room.remove_user(user_id)

    update_result = await room_repository.update(room)
    if update_result.is_failure:
        logger.warning(
            "Failed to remove user %s from room %s: %s", user_id, room.id, update_result.error
        )
        return Result.failure(DomainError.bad_request("", update_result.error))

    logger.info("User %s removed from room %s by admin %s", user_id, room.id, admin.id)
    return Result.success()
