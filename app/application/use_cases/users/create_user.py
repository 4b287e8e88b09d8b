"""Use case for joining a room with its invitation code."""

from __future__ import annotations

import logging
from collections.abc import Callable

from app.domain.entities import User
from app.domain.repositories import RoomRepository, UserRepository
from app.domain.results import DomainError, Result
from app.infrastructure.security import generate_authorization_code

from .details import ParticipantDetails
from .validators import validate_participant_details

logger = logging.getLogger(__name__)


async def create_user(
    *,
    room_repository: RoomRepository,
    user_repository: UserRepository,
    room_code: str,
    details: ParticipantDetails,
    max_participants: int,
    code_factory: Callable[[], str] = generate_authorization_code,
) -> Result[User, DomainError]:
    """Add a regular participant to the room identified by ``room_code``."""

    room_result = await room_repository.get_by_invitation_code(room_code)
    if room_result.is_failure:
        return Result.failure(room_result.error)
    room = room_result.value

    if room.is_closed:
        return Result.failure(DomainError.bad_request("room", "Cannot join a closed room"))

    if len(room.users) >= max_participants:
        return Result.failure(
            DomainError.bad_request(
                "room", "Room has reached the maximum number of participants"
            )
        )

    details_error = validate_participant_details(details)
    if details_error is not None:
        return Result.failure(details_error)

    user = details.to_user(
        room_id=room.id, authorization_code=code_factory(), is_admin=False
    )
    saved = await user_repository.add(user)
    if saved.is_failure:
        return Result.failure(DomainError.bad_request("", saved.error))

    logger.info("User %s joined room %s", saved.value.id, room.id)
    return Result.success(saved.value)
