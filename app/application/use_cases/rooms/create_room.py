"""Use case for creating a room together with its admin."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from app.application.use_cases.users.details import ParticipantDetails
from app.application.use_cases.users.validators import validate_participant_details
from app.domain.entities import Room
from app.domain.repositories import RoomRepository
from app.domain.results import DomainError, Result
from app.infrastructure.security import (
    generate_authorization_code,
    generate_invitation_code,
)
from app.utils import today_in_app_timezone

logger = logging.getLogger(__name__)


async def create_room(
    *,
    room_repository: RoomRepository,
    name: str,
    description: str,
    gift_exchange_date: date,
    gift_maximum_budget: int,
    admin: ParticipantDetails,
    today: date | None = None,
    invitation_code_factory: Callable[[], str] = generate_invitation_code,
    authorization_code_factory: Callable[[], str] = generate_authorization_code,
) -> Result[Room, DomainError]:
    """Create an open room whose only participant is its admin.

    The admin's authorization code is available on ``result.value.admin``.
    """

    current_day = today or today_in_app_timezone()
    if gift_exchange_date < current_day:
        return Result.failure(
            DomainError.bad_request(
                "giftExchangeDate", "Gift exchange date cannot be in the past"
            )
        )

    details_error = validate_participant_details(admin)
    if details_error is not None:
        return Result.failure(details_error)

    admin_user = admin.to_user(
        room_id=None, authorization_code=authorization_code_factory(), is_admin=True
    )
    room = Room(
        id=None,
        name=name,
        description=description,
        invitation_code=invitation_code_factory(),
        gift_exchange_date=gift_exchange_date,
        gift_maximum_budget=gift_maximum_budget,
        admin_id=None,
        closed_on=None,
        created_on=None,
        modified_on=None,
        users=[admin_user],
    )

    saved = await room_repository.add(room)
    if saved.is_failure:
        return Result.failure(DomainError.bad_request("", saved.error))

    logger.info("Room %s created with admin %s", saved.value.id, saved.value.admin_id)
    return Result.success(saved.value)
