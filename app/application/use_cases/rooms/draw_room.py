"""Use case for drawing gift recipients and closing a room."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from app.domain.entities import Room, User
from app.domain.repositories import RoomRepository, UserReadRepository
from app.domain.results import DomainError, Result
from app.utils import utc_now_naive

logger = logging.getLogger(__name__)


async def draw_room(
    *,
    user_repository: UserReadRepository,
    room_repository: RoomRepository,
    user_code: str,
    min_participants: int = 3,
    rng: random.Random | None = None,
) -> Result[Room, DomainError]:
    """Assign every participant a gift recipient and close the room.

    Only the admin may draw, and only once. Recipients form a single cycle so
    nobody is assigned to themselves and every participant receives a gift.
    """

    caller_result = await user_repository.get_by_code(user_code)
    if caller_result.is_failure:
        return Result.failure(
            DomainError.not_found("userCode", "User with such code not found")
        )
    caller = caller_result.value

    if not caller.is_admin:
        return Result.failure(
            DomainError.forbidden("userCode", "Only admin can draw the room")
        )

    room_result = await room_repository.get_by_user_code(user_code)
    if room_result.is_failure:
        return Result.failure(room_result.error)
    room = room_result.value

    if room.is_closed:
        return Result.failure(DomainError.bad_request("room", "Room is already closed"))

    if len(room.users) < min_participants:
        return Result.failure(
            DomainError.bad_request(
                "room",
                f"Room must have at least {min_participants} participants to draw",
            )
        )

    assign_gift_recipients(room.users, rng or random.SystemRandom())
    room.closed_on = utc_now_naive()

    update_result = await room_repository.update(room)
    if update_result.is_failure:
        logger.warning("Failed to save draw for room %s: %s", room.id, update_result.error)
        return Result.failure(DomainError.bad_request("", update_result.error))

    logger.info("Room %s drawn with %d participants", room.id, len(room.users))
    return Result.success(room)


def assign_gift_recipients(users: Sequence[User], rng: random.Random) -> None:
    """Link ``users`` into one random cycle of giver -> recipient."""

    order = list(users)
    rng.shuffle(order)
    for index, giver in enumerate(order):
        giver.gift_recipient_user_id = order[(index + 1) % len(order)].id
